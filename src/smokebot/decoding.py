"""Trial decompression of payload bytes against a fixed list of codecs."""

from __future__ import annotations

import gzip
import logging
import zlib
from typing import Callable

import brotli

from .errors import DecodeError

logger = logging.getLogger(__name__)

Codec = tuple[str, Callable[[bytes], bytes]]


def _unbrotli(data: bytes) -> bytes:
    if not data:
        raise EOFError("unexpected end of file")
    return brotli.decompress(data)


def _gunzip(data: bytes) -> bytes:
    # gzip.decompress(b"") returns b"" instead of failing
    if not data:
        raise EOFError("unexpected end of file")
    return gzip.decompress(data)


def _inflate(data: bytes) -> bytes:
    return zlib.decompress(data)


def _inflate_raw(data: bytes) -> bytes:
    return zlib.decompress(data, -zlib.MAX_WBITS)


# Order matters: none of these sniff magic bytes, each codec is expected to
# reject input that isn't its own format.
CODECS: tuple[Codec, ...] = (
    ("brotli", _unbrotli),
    ("gzip", _gunzip),
    ("deflate", _inflate),
    ("deflate-raw", _inflate_raw),
)


def decode(data: bytes, codecs: tuple[Codec, ...] = CODECS) -> bytes:
    """Decompress ``data`` with the first codec that accepts it.

    Raises:
        DecodeError: if every codec fails. The message lists each codec
            together with the error it produced.
    """
    attempts: list[tuple[str, str]] = []
    for name, fn in codecs:
        try:
            result = fn(data)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.debug("Codec %s rejected input: %s", name, message)
            attempts.append((name, message))
            continue
        logger.debug("Decompressed %d bytes with %s", len(data), name)
        return result

    tried = ", ".join(name for name, _ in codecs)
    details = " | ".join(f"{name}: {message}" for name, message in attempts)
    raise DecodeError(f"Unable to decompress input (tried {tried}): {details}", attempts)
