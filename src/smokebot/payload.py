"""Resolve an event payload that is either JSON text or base64+compressed JSON."""

from __future__ import annotations

import base64
import binascii
import json
import logging
import re
from typing import Any

from .decoding import decode
from .errors import DecodeError, InputError

logger = logging.getLogger(__name__)

_NON_BASE64_RE = re.compile(r"[^A-Za-z0-9+/]")


def _b64decode(value: str) -> bytes:
    """Decode base64 the forgiving way a browser would.

    Accepts the URL-safe alphabet, ignores whitespace and stray characters,
    stops at the first padding character and tolerates missing padding.
    """
    text = value.replace("-", "+").replace("_", "/").split("=", 1)[0]
    text = _NON_BASE64_RE.sub("", text)
    if len(text) % 4 == 1:
        # A lone trailing sextet can't form a byte
        text = text[:-1]
    return base64.b64decode(text + "=" * (-len(text) % 4))


def resolve_payload(value: Any, label: str) -> Any:
    """Parse ``value`` as JSON, falling back to base64-encoded compressed JSON.

    Args:
        value: The raw input. Must be a non-blank string.
        label: Human-readable name of the input, used in error messages.

    Returns:
        The parsed JSON value.

    Raises:
        InputError: if ``value`` is blank, or neither path yields valid JSON.
    """
    if not isinstance(value, str) or not value.strip():
        raise InputError(f"Missing or empty {label}")

    try:
        return json.loads(value)
    except (json.JSONDecodeError, RecursionError):
        logger.info("%s is not plain JSON, trying base64+compressed", label)

    try:
        text = decode(_b64decode(value)).decode("utf-8", errors="replace")
    except (binascii.Error, DecodeError) as e:
        raise InputError(
            f"Failed to parse {label} as JSON or base64+compressed JSON: {e}"
        ) from e

    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise InputError(f"Failed to parse {label} after decompression as JSON: {e}") from e
