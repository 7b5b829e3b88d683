"""Web-safe base64 for Python.

This package encodes binary data as base64 text that can be used unescaped in
URLs and filenames: ``+``, ``/`` and ``=`` are replaced by ``-``, ``_`` and ``.``.
Decoding is strict; any character outside the alphabet rejects the input.

Main Components:
    - WebSafeBase64: Codec object with configurable padding
    - encode_into / decode_into: Primitives writing into caller buffers
    - encode_capacity / decode_capacity / encode_strlen: Buffer sizing
    - convenience: Owning wrappers that return empty results on failure

Example:
    >>> from websafe64 import WebSafeBase64
    >>> WebSafeBase64().encode(b"a")
    'YQ..'
"""

from websafe64.codec import (
    CodecConfig,
    WebSafeBase64,
    decode_capacity,
    decode_into,
    decoded_length,
    encode_capacity,
    encode_into,
    encode_strlen,
)
from websafe64.convenience import decode, decode_inplace, encode, encode_inplace
from websafe64.exceptions import InvalidEncodingError, Websafe64Error

__version__ = "0.1.0"

__all__ = [
    # Codec
    "CodecConfig",
    "WebSafeBase64",
    "decode_into",
    "decoded_length",
    "encode_into",
    # Sizing
    "decode_capacity",
    "encode_capacity",
    "encode_strlen",
    # Convenience
    "decode",
    "decode_inplace",
    "encode",
    "encode_inplace",
    # Exceptions
    "Websafe64Error",
    "InvalidEncodingError",
]
