"""Tests for the buffer sizing functions."""

from __future__ import annotations

import pytest

from websafe64 import CodecConfig, WebSafeBase64, decode_capacity, encode_capacity, encode_strlen


@pytest.mark.parametrize(
    "length,capacity,terminated",
    [(0, 0, 1), (1, 4, 5), (2, 4, 5), (3, 4, 5), (4, 8, 9), (6, 8, 9), (7, 12, 13)],
)
def test_encode_capacity(length: int, capacity: int, terminated: int) -> None:
    """Test ceil(n / 3) * 4 with and without room for a terminator."""
    assert encode_capacity(length) == capacity
    assert encode_capacity(length, terminated=True) == terminated


@pytest.mark.parametrize(
    "length,capacity",
    [(0, 2), (1, 2), (3, 2), (4, 5), (7, 5), (8, 8), (16, 14)],
)
def test_decode_capacity(length: int, capacity: int) -> None:
    """Test floor(n / 4) * 3 + 2."""
    assert decode_capacity(length) == capacity


@pytest.mark.parametrize(
    "length,padded,bare",
    [(0, 0, 0), (1, 4, 2), (2, 4, 3), (3, 4, 4), (4, 8, 6), (5, 8, 7), (6, 8, 8)],
)
def test_encode_strlen(length: int, padded: int, bare: int) -> None:
    """Test the exact encoded length with and without padding."""
    assert encode_strlen(length) == padded
    assert encode_strlen(length, padding=False) == bare


def test_lengths_bound_actual_output() -> None:
    """Test that the sizing functions agree with what the codec produces."""
    padded = WebSafeBase64()
    bare = WebSafeBase64(CodecConfig(padding=False))
    for n in range(200):
        data = bytes(n)
        text = padded.encode(data)
        assert len(text) == encode_strlen(n) <= encode_capacity(n)
        assert len(bare.encode(data)) == encode_strlen(n, padding=False)
        assert n <= decode_capacity(len(text))


def test_lengths_are_pure() -> None:
    """Test that results do not depend on call order."""
    first = [(encode_capacity(n), decode_capacity(n), encode_strlen(n)) for n in range(50)]
    second = [(encode_capacity(n), decode_capacity(n), encode_strlen(n)) for n in reversed(range(50))]
    assert first == list(reversed(second))


@pytest.mark.parametrize("bad", [-1, 1.5, "3", None, True])
def test_invalid_lengths(bad: object) -> None:
    """Test that negative and non-integer lengths are rejected."""
    with pytest.raises(ValueError):
        encode_capacity(bad)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        decode_capacity(bad)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        encode_strlen(bad)  # type: ignore[arg-type]
