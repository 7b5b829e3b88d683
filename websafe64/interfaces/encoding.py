"""Encoding interfaces for websafe64.

This module defines the protocol implemented by binary-to-text codecs.
"""

from __future__ import annotations

from typing import Protocol, Union


class IBinaryEncoder(Protocol):
    """Interface for binary-to-text encoding and decoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: Union[str, bytes]) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text is not a valid encoding.
        """
        ...
