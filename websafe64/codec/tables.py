"""Lookup tables shared by the encoder and decoder.

Both tables are immutable and built once at import time.
"""

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

PAD = ord(".")

# Marks bytes that are not part of the alphabet.
BADCHAR = 0xFF


def _build_reverse(alphabet: bytes) -> bytes:
    table = bytearray([BADCHAR]) * 256
    for value, char in enumerate(alphabet):
        table[char] = value
    return bytes(table)


REVERSE = _build_reverse(ALPHABET)
