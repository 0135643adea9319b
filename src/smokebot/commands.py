"""Command name extraction and /smoke trigger detection."""

from __future__ import annotations

import json
import re
import string
from collections.abc import Mapping
from typing import Any, Optional

TRIGGER_KEYWORD = "smoke"

_TRIGGER_RE = re.compile(r"(^|\s)/" + TRIGGER_KEYWORD + r"(\s|$)", re.IGNORECASE)

# Leading slashes, plus any whitespace sitting between them and the name.
# "/ smoke" becomes "smoke", so normalizing an already normalized name is a no-op.
_LEADING_CHARS = "/" + string.whitespace


def normalize_command(text: str) -> str:
    """Canonicalize a command name: trim, drop leading slashes, lowercase."""
    return text.strip().lstrip(_LEADING_CHARS).lower()


def _name_of(raw: Any) -> Optional[str]:
    if isinstance(raw, Mapping):
        name = raw.get("name")
    else:
        name = getattr(raw, "name", None)
    return name if isinstance(name, str) else None


def _stringify(raw: Any) -> str:
    """Render a non-command value as text; sequences join their items with commas."""
    if raw is None:
        return ""
    if isinstance(raw, (list, tuple)):
        return ",".join(_stringify(item) for item in raw)
    return str(raw)


def extract_command_name(raw: Any) -> str:
    """Return the canonical command name carried by ``raw``.

    ``raw`` may be None, a plain command string, a JSON string describing the
    command (``{"name": "/smoke"}``), a mapping or object with a ``name``, or
    anything else, which is stringified. Returns "" when there is no command.
    """
    if raw is None:
        return ""

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return ""
        try:
            parsed = json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            return normalize_command(text)
        name = _name_of(parsed) if isinstance(parsed, Mapping) else None
        return normalize_command(name if name is not None else text)

    name = _name_of(raw)
    if name is not None:
        return normalize_command(name)

    return normalize_command(_stringify(raw))


def is_triggered(command: str, comment_body: str) -> bool:
    """True if the command is ``smoke`` or the comment mentions ``/smoke`` as a word."""
    if command == TRIGGER_KEYWORD:
        return True
    return bool(_TRIGGER_RE.search(comment_body or ""))
