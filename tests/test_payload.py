"""Tests for resolving plain or base64+compressed JSON payloads."""

import base64
import gzip
import json
import zlib
from unittest.mock import patch

import brotli
import pytest

from smokebot.errors import InputError
from smokebot.payload import resolve_payload

DOC = {
    "comment": {"body": "please run /smoke now", "id": 991},
    "issue": {"number": 12},
    "repository": {"full_name": "acme/widgets"},
}


def _encode(compress) -> str:
    return base64.b64encode(compress(json.dumps(DOC).encode("utf-8"))).decode("ascii")


def _raw_deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def test_plain_json_skips_decompression():
    with patch("smokebot.payload.decode") as mock_decode:
        assert resolve_payload('{"a":1}', "x") == {"a": 1}
    mock_decode.assert_not_called()


@pytest.mark.parametrize(
    "compress",
    [brotli.compress, gzip.compress, zlib.compress, _raw_deflate],
    ids=["brotli", "gzip", "deflate", "deflate-raw"],
)
def test_compressed_payload_round_trips(compress):
    assert resolve_payload(_encode(compress), "inputs.eventPayload") == DOC


def test_urlsafe_base64_without_padding():
    encoded = base64.urlsafe_b64encode(gzip.compress(json.dumps(DOC).encode())).decode()
    assert resolve_payload(encoded.rstrip("="), "x") == DOC


def test_base64_with_line_breaks():
    encoded = _encode(gzip.compress)
    wrapped = "\n".join(encoded[i:i + 20] for i in range(0, len(encoded), 20))
    assert resolve_payload(wrapped, "x") == DOC


@pytest.mark.parametrize("value", [None, "", "   ", 42, {"a": 1}])
def test_missing_or_blank_value(value):
    with pytest.raises(InputError, match="Missing or empty inputs.eventPayload"):
        resolve_payload(value, "inputs.eventPayload")


@pytest.mark.parametrize(
    "value",
    ["not json, not base64-json-garbage", "!!!!", "{", "=abc", "a"],
)
def test_garbage_reports_label_and_every_codec(value):
    with pytest.raises(InputError) as exc_info:
        resolve_payload(value, "x")

    message = str(exc_info.value)
    assert "x" in message
    assert "as JSON or base64+compressed JSON" in message
    for codec in ("brotli", "gzip", "deflate", "deflate-raw"):
        assert codec in message


def test_decompressed_text_that_is_not_json():
    encoded = base64.b64encode(gzip.compress(b"this is not json")).decode()
    with pytest.raises(InputError, match="Failed to parse payload after decompression as JSON"):
        resolve_payload(encoded, "payload")


def test_deeply_nested_plain_text_is_input_error():
    with pytest.raises(InputError, match="as JSON or base64\\+compressed JSON"):
        resolve_payload("[" * 100000, "x")


def test_deeply_nested_decompressed_text_is_input_error():
    encoded = base64.b64encode(gzip.compress(b"[" * 100000)).decode()
    with pytest.raises(InputError, match="after decompression as JSON"):
        resolve_payload(encoded, "x")
