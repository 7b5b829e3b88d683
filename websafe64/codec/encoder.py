"""Web-safe base64 encoder.

Input is consumed in groups of three bytes, each packed into 24 bits and split
into four 6-bit indices into ``ALPHABET``. A final group of one or two bytes is
zero-filled and emits two or three characters, followed by ``.`` padding when
padding is enabled.
"""

from __future__ import annotations

from typing import Optional, Union

from .lengths import encode_strlen
from .tables import ALPHABET, PAD


def _source_view(src: Union[bytes, bytearray, memoryview], length: Optional[int]) -> memoryview:
    view = memoryview(src).cast("B")
    if length is None:
        return view
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"length must be an integer, got {type(length).__name__}")
    if not 0 <= length <= len(view):
        raise ValueError(f"length {length} out of range for a {len(view)} byte source")
    return view[:length]


def encode_into(
    dest: bytearray,
    src: Union[bytes, bytearray, memoryview],
    length: Optional[int] = None,
    *,
    padding: bool = True,
    terminate: bool = False,
) -> int:
    """Encode binary data into a caller-provided buffer.

    Args:
        dest: Destination buffer, written from offset 0.
        src: Any bytes-like object.
        length: Number of leading bytes of ``src`` to encode. Defaults to all.
        padding: Pad the output with ``.`` to a multiple of four characters.
        terminate: Append a NUL byte after the encoded text.

    Returns:
        The number of characters written, not counting the terminator.

    Raises:
        TypeError: If src is not bytes-like.
        ValueError: If length is out of range or dest is too small.

    Example:
        >>> dest = bytearray(4)
        >>> encode_into(dest, b"a")
        4
        >>> bytes(dest)
        b'YQ..'
    """
    data = _source_view(src, length)
    n = len(data)
    written = encode_strlen(n, padding)
    needed = written + (1 if terminate else 0)
    if len(dest) < needed:
        raise ValueError(f"destination holds {len(dest)} bytes, {needed} required")

    alphabet = ALPHABET
    i = 0
    j = 0
    full = n - n % 3
    while i < full:
        t = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        dest[j] = alphabet[t >> 18]
        dest[j + 1] = alphabet[(t >> 12) & 0x3F]
        dest[j + 2] = alphabet[(t >> 6) & 0x3F]
        dest[j + 3] = alphabet[t & 0x3F]
        i += 3
        j += 4

    remainder = n - full
    if remainder == 1:
        t = data[i] << 16
        dest[j] = alphabet[t >> 18]
        dest[j + 1] = alphabet[(t >> 12) & 0x3F]
        j += 2
        if padding:
            dest[j] = PAD
            dest[j + 1] = PAD
            j += 2
    elif remainder == 2:
        t = (data[i] << 16) | (data[i + 1] << 8)
        dest[j] = alphabet[t >> 18]
        dest[j + 1] = alphabet[(t >> 12) & 0x3F]
        dest[j + 2] = alphabet[(t >> 6) & 0x3F]
        j += 3
        if padding:
            dest[j] = PAD
            j += 1

    if terminate:
        dest[j] = 0
    return j
