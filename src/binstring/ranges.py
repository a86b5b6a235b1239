"""Byte offset ranges for slicing a BinString."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .logging import get_logger

logger = get_logger(__name__)


class SliceRangeError(IndexError):
    """Raised when a byte range does not fit the buffer it is applied to."""

    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"byte range [{start}, {end}) is invalid for a buffer of length {length}"
        )


@dataclass(frozen=True)
class ByteRange:
    """
    Bounds of a byte slice.

    Either endpoint may be None, meaning unbounded on that side. With
    ``inclusive=True`` the end offset is part of the range, so
    ``ByteRange(0, 2, inclusive=True)`` covers three bytes.
    """
    start: Optional[int] = None
    end: Optional[int] = None
    inclusive: bool = False

    @classmethod
    def closed(cls, start: int, end: int) -> "ByteRange":
        return cls(start, end, inclusive=True)

    @classmethod
    def from_slice(cls, key: slice) -> "ByteRange":
        if key.step is not None and key.step != 1:
            raise ValueError("BinString slices do not support a step")
        return cls(key.start, key.stop)

    def resolve(self, length: int) -> Tuple[int, int]:
        """
        Turn the bounds into concrete half-open offsets for ``length`` bytes.

        Endpoints are checked as given, before an inclusive end is widened,
        so ``ByteRange.closed(0, -1)`` is rejected rather than read as empty.

        Raises:
            SliceRangeError: If start > end, end > length, or an endpoint
                is negative. Offsets are never clamped.
        """
        start = 0 if self.start is None else self.start
        end = length if self.end is None else self.end
        if start < 0 or end < 0:
            self._reject(start, end, length)

        if self.inclusive and self.end is not None:
            end += 1
        if start > end or end > length:
            self._reject(start, end, length)
        return start, end

    @staticmethod
    def _reject(start: int, end: int, length: int) -> None:
        logger.debug(f"Rejected byte range start={start} end={end} length={length}")
        raise SliceRangeError(start, end, length)
