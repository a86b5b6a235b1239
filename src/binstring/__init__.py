"""
binstring: store arbitrary binary data behind string-shaped ergonomics.

``BinString`` keeps one byte buffer and offers two views of it: the byte
view, always valid, and an unchecked text view that is only meaningful
when the bytes happen to be valid UTF-8.
"""

from .config import DEFAULT_SETTINGS, Settings
from .model import BinString
from .ranges import ByteRange, SliceRangeError

__all__ = [
    "BinString",
    "ByteRange",
    "SliceRangeError",
    "Settings",
    "DEFAULT_SETTINGS",
]
