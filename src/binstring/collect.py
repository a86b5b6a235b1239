"""Helpers that build byte buffers from sequences of characters or text fragments."""

from typing import Iterable, Iterator

from .logging import get_logger
from .textview import encode_text

logger = get_logger(__name__)


def iter_encoded(items: Iterable[str]) -> Iterator[bytes]:
    """
    Lazily encode each character or fragment of ``items``, in order.

    Raises:
        TypeError: If an element is not a str.
    """
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise TypeError(
                f"expected str elements, got {type(item).__name__} at position {index}"
            )
        yield encode_text(item)


def concat_fragments(items: Iterable[str]) -> bytes:
    """Concatenate every element of ``items`` into one buffer, preserving order."""
    parts = list(iter_encoded(items))
    buffer = b"".join(parts)
    logger.debug(f"Collected {len(parts)} fragments into {len(buffer)} bytes")
    return buffer
