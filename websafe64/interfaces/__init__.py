"""websafe64 interfaces package.

This package provides protocol definitions for codecs.
"""

from .encoding import IBinaryEncoder

__all__ = [
    "IBinaryEncoder",
]
