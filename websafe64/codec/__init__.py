"""Web-safe base64 codec.

This package holds the lookup tables, the sizing functions, the encode and
decode primitives that write into caller-provided buffers, and ``WebSafeBase64``,
an ``IBinaryEncoder`` that sizes the buffers itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from websafe64.interfaces.encoding import IBinaryEncoder

from .decoder import decode_into, decoded_length
from .encoder import encode_into
from .lengths import decode_capacity, encode_capacity, encode_strlen
from .tables import ALPHABET, BADCHAR, PAD, REVERSE


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the codec.

    Attributes:
        padding: Pad encoded text with ``.`` to a multiple of four characters.
            Decoding accepts padded and unpadded text either way.
    """

    padding: bool = True


@dataclass
class WebSafeBase64(IBinaryEncoder):
    """Web-safe base64 codec.

    Encodes with the alphabet ``A-Z a-z 0-9 - _`` and ``.`` padding.

    Example:
        >>> codec = WebSafeBase64()
        >>> codec.encode(b"ab")
        'YWI.'
        >>> WebSafeBase64(CodecConfig(padding=False)).encode(b"ab")
        'YWI'
        >>> codec.decode("YWI")
        b'ab'
    """

    config: CodecConfig = field(default_factory=CodecConfig)

    def encode(self, data: bytes) -> str:
        """Encode bytes into web-safe base64 text.

        Args:
            data: Any bytes-like object.

        Returns:
            The encoded text.
        """
        dest = bytearray(encode_capacity(len(memoryview(data).cast("B"))))
        written = encode_into(dest, data, padding=self.config.padding)
        return dest[:written].decode("ascii")

    def decode(self, text: Union[str, bytes, bytearray, memoryview]) -> bytes:
        """Decode web-safe base64 text into bytes.

        Args:
            text: The encoded text, padded or not.

        Returns:
            The decoded bytes.

        Raises:
            InvalidEncodingError: If the text is not valid web-safe base64.
        """
        if isinstance(text, str):
            size = len(text)
        else:
            size = len(memoryview(text).cast("B"))
        dest = bytearray(decode_capacity(size))
        written = decode_into(dest, text)
        return bytes(dest[:written])


__all__ = [
    "ALPHABET",
    "BADCHAR",
    "PAD",
    "REVERSE",
    "CodecConfig",
    "WebSafeBase64",
    "decode_capacity",
    "decode_into",
    "decoded_length",
    "encode_capacity",
    "encode_into",
    "encode_strlen",
]
