"""Tests for the owning convenience wrappers."""

from __future__ import annotations

import websafe64


def test_encode() -> None:
    """Test encoding of bytes and UTF-8 strings."""
    assert websafe64.encode(b"abc") == "YWJj"
    assert websafe64.encode("a") == "YQ.."
    assert websafe64.encode("é") == "w6k."
    assert websafe64.encode("ab", padding=False) == "YWI"
    assert websafe64.encode("") == ""


def test_decode_returns_empty_on_failure() -> None:
    """Test that invalid input yields an empty result instead of raising."""
    assert websafe64.decode("YWJj") == b"abc"
    assert websafe64.decode("YW+j") == b""
    assert websafe64.decode("YWJjY") == b""
    assert websafe64.decode("") == b""


def test_encode_inplace() -> None:
    """Test that the buffer is replaced with its encoding."""
    buffer = bytearray(b"ab")
    result = websafe64.encode_inplace(buffer)
    assert result is buffer
    assert buffer == bytearray(b"YWI.")

    buffer = bytearray(b"ab")
    websafe64.encode_inplace(buffer, padding=False)
    assert buffer == bytearray(b"YWI")


def test_decode_inplace() -> None:
    """Test that the buffer is replaced with its decoding, or cleared."""
    buffer = bytearray(b"YWJj")
    result = websafe64.decode_inplace(buffer)
    assert result is buffer
    assert buffer == bytearray(b"abc")

    buffer = bytearray(b"YW Jj")
    result = websafe64.decode_inplace(buffer)
    assert result is buffer
    assert buffer == bytearray()
