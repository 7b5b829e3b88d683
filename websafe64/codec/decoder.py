"""Web-safe base64 decoder.

Decoding is strict and all-or-nothing: any character outside the alphabet,
misplaced padding or an impossible length rejects the whole input.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from websafe64.exceptions import InvalidEncodingError

from .tables import BADCHAR, PAD, REVERSE

logger = logging.getLogger(__name__)


def _text_view(src: Union[str, bytes, bytearray, memoryview], length: Optional[int]) -> memoryview:
    if isinstance(src, str):
        # Non-ASCII characters become "?", which the reverse table rejects.
        src = src.encode("ascii", "replace")
    view = memoryview(src).cast("B")
    if length is None:
        return view
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"length must be an integer, got {type(length).__name__}")
    if not 0 <= length <= len(view):
        raise ValueError(f"length {length} out of range for a {len(view)} character source")
    return view[:length]


def _split_padding(data: memoryview) -> Tuple[int, int]:
    """Return the body length and the number of trailing pad markers (at most two)."""
    n = len(data)
    pads = 0
    while pads < 2 and n > 0 and data[n - 1] == PAD:
        n -= 1
        pads += 1
    return n, pads


def decoded_length(src: Union[str, bytes, bytearray, memoryview], length: Optional[int] = None) -> int:
    """Return the exact number of bytes ``src`` decodes to.

    Only the length and padding are checked; characters are validated by
    ``decode_into``.

    Raises:
        InvalidEncodingError: If the length or padding is malformed.
    """
    return _output_length(_text_view(src, length))


def _output_length(data: memoryview) -> int:
    body, pads = _split_padding(data)
    remainder = body % 4
    if remainder == 1:
        logger.debug("rejecting input with %d data characters", body)
        raise InvalidEncodingError(f"invalid length: {body} characters before padding")
    if pads and (remainder == 0 or remainder + pads > 4):
        logger.debug("rejecting %d pad markers after %d data characters", pads, body)
        raise InvalidEncodingError(f"invalid padding: {pads} pad markers after {body} characters")
    return body // 4 * 3 + (remainder - 1 if remainder else 0)


def _reject_group(data: memoryview, start: int, end: int) -> None:
    for position in range(start, end):
        if REVERSE[data[position]] == BADCHAR:
            char = chr(data[position])
            logger.debug("rejecting character %r at offset %d", char, position)
            raise InvalidEncodingError(f"invalid character {char!r} at position {position}", position)


def decode_into(
    dest: bytearray,
    src: Union[str, bytes, bytearray, memoryview],
    length: Optional[int] = None,
) -> int:
    """Decode web-safe base64 text into a caller-provided buffer.

    Padding is optional: ``YQ..``, ``YQ.`` and ``YQ`` all decode to ``b"a"``.

    Args:
        dest: Destination buffer, written from offset 0.
        src: The encoded text, as ``str`` or any bytes-like object.
        length: Number of leading characters of ``src`` to decode. Defaults to all.

    Returns:
        The number of bytes written.

    Raises:
        InvalidEncodingError: If src is not valid web-safe base64. The
            contents of dest are unspecified afterwards.
        ValueError: If length is out of range or dest is too small.
    """
    data = _text_view(src, length)
    written = _output_length(data)
    if len(dest) < written:
        raise ValueError(f"destination holds {len(dest)} bytes, {written} required")

    reverse = REVERSE
    body = len(data) - _split_padding(data)[1]
    full = body - body % 4
    i = 0
    j = 0
    while i < full:
        a = reverse[data[i]]
        b = reverse[data[i + 1]]
        c = reverse[data[i + 2]]
        d = reverse[data[i + 3]]
        if (a | b | c | d) & 0xC0:
            _reject_group(data, i, i + 4)
        t = (a << 18) | (b << 12) | (c << 6) | d
        dest[j] = t >> 16
        dest[j + 1] = (t >> 8) & 0xFF
        dest[j + 2] = t & 0xFF
        i += 4
        j += 3

    remainder = body - full
    if remainder:
        values = [reverse[data[k]] for k in range(i, body)]
        if any(v & 0xC0 for v in values):
            _reject_group(data, i, body)
        t = 0
        for v in values:
            t = (t << 6) | v
        t <<= 6 * (4 - remainder)
        dest[j] = t >> 16
        j += 1
        if remainder == 3:
            dest[j] = (t >> 8) & 0xFF
            j += 1

    return j
