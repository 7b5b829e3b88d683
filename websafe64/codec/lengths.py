"""Buffer sizing functions.

Other code pre-sizes buffers with these, so the formulas are fixed:

- ``encode_capacity``: ``ceil(n / 3) * 4``, plus one for an optional terminator
- ``decode_capacity``: ``floor(n / 4) * 3 + 2``, deliberately generous
- ``encode_strlen``: exact length of the encoded text
"""

from __future__ import annotations

# Characters emitted for a final group of 0, 1 or 2 bytes without padding.
_TAIL_CHARS = (0, 2, 3)


def _check_length(length: int) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return length


def encode_capacity(length: int, terminated: bool = False) -> int:
    """Return the buffer size needed to encode ``length`` bytes.

    Args:
        length: Number of bytes to encode.
        terminated: Reserve room for a trailing NUL byte.

    Returns:
        The required capacity in characters.

    Raises:
        ValueError: If length is negative or not an integer.
    """
    length = _check_length(length)
    return (length + 2) // 3 * 4 + (1 if terminated else 0)


def decode_capacity(length: int) -> int:
    """Return an upper bound on the bytes produced by decoding ``length`` characters.

    The bound carries two bytes of slack; the decoder always reports the exact
    number of bytes it wrote.

    Raises:
        ValueError: If length is negative or not an integer.
    """
    length = _check_length(length)
    return length // 4 * 3 + 2


def encode_strlen(length: int, padding: bool = True) -> int:
    """Return the exact length of the text produced by encoding ``length`` bytes.

    Useful for rejecting encoded records of the wrong size before decoding.

    Args:
        length: Number of bytes to encode.
        padding: Whether the text is padded to a multiple of four characters.

    Returns:
        The encoded length, not counting any terminator.

    Raises:
        ValueError: If length is negative or not an integer.
    """
    length = _check_length(length)
    if padding:
        return (length + 2) // 3 * 4
    return length // 3 * 4 + _TAIL_CHARS[length % 3]
