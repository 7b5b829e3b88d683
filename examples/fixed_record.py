"""Fixed-size record round-tripping.

This module embeds packed ``struct`` records in web-safe base64 text, for
example as a URL path segment, and checks the encoded length before decoding.
"""

from __future__ import annotations

import struct
from typing import Any, Optional, Tuple

from websafe64 import CodecConfig, InvalidEncodingError, WebSafeBase64, encode_strlen
from websafe64.interfaces import IBinaryEncoder


class FixedRecord:
    """Codec for records with a fixed binary layout.

    Attributes:
        layout: The struct describing the record.
        encoder: The binary-to-text codec used for the record bytes.
        padding: Whether the encoder pads its output.
    """

    def __init__(
        self,
        fmt: str,
        encoder: Optional[IBinaryEncoder] = None,
        padding: bool = True,
    ) -> None:
        """Initialize a record codec.

        Args:
            fmt: A ``struct`` format string, e.g. ``"!IH"``.
            encoder: Codec to use. Defaults to ``WebSafeBase64`` with the given padding.
            padding: Whether encoded records carry padding.
        """
        self.layout = struct.Struct(fmt)
        self.padding = padding
        self.encoder = encoder or WebSafeBase64(CodecConfig(padding=padding))

    @property
    def encoded_length(self) -> int:
        """The length every encoded record has."""
        return encode_strlen(self.layout.size, self.padding)

    def dumps(self, *values: Any) -> str:
        """Pack the values and encode them.

        Raises:
            struct.error: If the values do not match the layout.
        """
        return self.encoder.encode(self.layout.pack(*values))

    def loads(self, text: str) -> Tuple[Any, ...]:
        """Decode an encoded record and unpack it.

        Args:
            text: The encoded record.

        Returns:
            The unpacked values.

        Raises:
            InvalidEncodingError: If the text has the wrong length, does not
                decode to a full record, or is not valid web-safe base64.
        """
        if len(text) != self.encoded_length:
            raise InvalidEncodingError(
                f"record must be {self.encoded_length} characters, got {len(text)}"
            )
        payload = self.encoder.decode(text)
        if len(payload) != self.layout.size:
            raise InvalidEncodingError(
                f"record must decode to {self.layout.size} bytes, got {len(payload)}"
            )
        return self.layout.unpack(payload)
