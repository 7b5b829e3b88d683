"""Exception classes for websafe64.

This module defines the exception types raised by the codec.
"""

from __future__ import annotations

from typing import Optional


class Websafe64Error(Exception):
    """Base exception class for all websafe64 errors."""

    pass


class InvalidEncodingError(Websafe64Error):
    """Exception raised when text cannot be decoded as web-safe base64.

    Attributes:
        position: Offset of the offending character in the input, or None
            when the input was rejected because of its length.
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        """Initialize the error.

        Args:
            message: Human readable description of the failure.
            position: Offset of the offending character, if any.
        """
        super().__init__(message)
        self.position = position
