"""Owning convenience wrappers.

These allocate their own buffers and follow the empty-result convention:
decoding failures produce an empty result instead of an exception. Use
``WebSafeBase64`` or ``decode_into`` when the failure needs to be told apart
from an empty input.
"""

from __future__ import annotations

from typing import Union

from websafe64.codec import CodecConfig, WebSafeBase64
from websafe64.exceptions import InvalidEncodingError

_PADDED = WebSafeBase64(CodecConfig(padding=True))
_UNPADDED = WebSafeBase64(CodecConfig(padding=False))


def _codec(padding: bool) -> WebSafeBase64:
    return _PADDED if padding else _UNPADDED


def encode(data: Union[bytes, bytearray, str], padding: bool = True) -> str:
    """Encode bytes, or a string as UTF-8, into web-safe base64 text."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return _codec(padding).encode(data)


def decode(text: Union[str, bytes, bytearray]) -> bytes:
    """Decode web-safe base64 text, returning ``b""`` if it is invalid."""
    try:
        return _PADDED.decode(text)
    except InvalidEncodingError:
        return b""


def encode_inplace(buffer: bytearray, padding: bool = True) -> bytearray:
    """Replace the contents of ``buffer`` with their encoding.

    Returns:
        The same buffer object.
    """
    buffer[:] = _codec(padding).encode(bytes(buffer)).encode("ascii")
    return buffer


def decode_inplace(buffer: bytearray) -> bytearray:
    """Replace the contents of ``buffer`` with their decoding, or clear it on failure.

    Returns:
        The same buffer object.
    """
    buffer[:] = decode(bytes(buffer))
    return buffer
