"""
BinString: a byte buffer with both a byte view and an unchecked text view.

The buffer may hold anything, including invalid UTF-8. Construction and
every byte-level operation are defined for all content. Text-view
operations (``as_text_unchecked``, ``into_text``, ``trim*``) assume the
buffer is valid UTF-8 and never check it; on other content their result
is unspecified as text, although it stays lossless at the byte level.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from .collect import concat_fragments
from .config import DEFAULT_SETTINGS, Settings
from .ranges import ByteRange
from .textview import encode_text, reinterpret, strip_whitespace

BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(data) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        raise TypeError("BinString needs bytes; wrap text with BinString.from_text()")
    if isinstance(data, int):
        # bytes(n) would silently build n zero bytes
        raise TypeError(f"expected bytes-like data, got {type(data).__name__}")
    return bytes(data)


def _byte_value(value) -> int:
    """Normalize a single byte given as an int or a length-1 bytes-like value."""
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {len(value)}")
        return bytes(value)[0]
    raise TypeError(f"expected a byte, got {type(value).__name__}")


@dataclass(order=True, unsafe_hash=True, repr=False)
class BinString:
    """
    Owned byte buffer compared, ordered and hashed by its bytes.

    Transforming operations return new instances. Only ``push*``,
    ``extend`` and ``+=`` change an instance in place; do not mutate an
    instance while it is a dict key or a set member. ``settings`` rides
    along to every derived instance and takes no part in comparison.
    """
    buffer: bytes = field(default=b"")
    settings: Settings = field(default=DEFAULT_SETTINGS, compare=False)

    def __post_init__(self):
        self.buffer = _to_bytes(self.buffer)

    # Construction and conversion

    @classmethod
    def from_text(cls, text: str, settings: Settings = DEFAULT_SETTINGS) -> "BinString":
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return cls(encode_text(text), settings)

    @classmethod
    def new(cls, text: str, settings: Settings = DEFAULT_SETTINGS) -> "BinString":
        return cls.from_text(text, settings)

    @classmethod
    def from_bytes(
        cls, data: Union[BytesLike, Iterable[int]], settings: Settings = DEFAULT_SETTINGS
    ) -> "BinString":
        """Wrap ``data`` without looking at it. A bytes argument is not copied."""
        return cls(_to_bytes(data), settings)

    @classmethod
    def from_iter(cls, items: Iterable[str], settings: Settings = DEFAULT_SETTINGS) -> "BinString":
        """Concatenate a sequence of characters or text fragments, in order."""
        return cls(concat_fragments(items), settings)

    @classmethod
    def coerce(cls, value: Union["BinString", str, BytesLike]) -> "BinString":
        """Convert text, bytes-like values or a BinString (returned as-is)."""
        if isinstance(value, BinString):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value)
        raise TypeError(f"cannot convert {type(value).__name__} to BinString")

    def into_text(self) -> str:
        """
        Return the buffer as a str without validating it.

        Invalid UTF-8 comes back as surrogate escapes, so
        ``BinString.from_text(x.into_text()) == x`` always holds. The reverse
        trip only holds for str without lone surrogates outside U+DC80..U+DCFF.
        """
        return reinterpret(self.buffer)

    def unwrap(self) -> str:
        return self.into_text()

    def copy(self) -> "BinString":
        return self._derive(self.buffer)

    __copy__ = copy

    def _derive(self, buffer: bytes) -> "BinString":
        return type(self)(buffer, self.settings)

    # Views

    def as_bytes(self) -> bytes:
        return self.buffer

    def as_text_unchecked(self) -> str:
        """Text view of the buffer. Only meaningful if the buffer is valid UTF-8."""
        return reinterpret(self.buffer)

    def as_str(self) -> str:
        return self.as_text_unchecked()

    def len(self) -> int:
        return len(self.buffer)

    def is_empty(self) -> bool:
        return not self.buffer

    def __len__(self) -> int:
        return len(self.buffer)

    def __bool__(self) -> bool:
        return bool(self.buffer)

    def __bytes__(self) -> bytes:
        return self.buffer

    def __str__(self) -> str:
        return self.as_text_unchecked()

    def __repr__(self) -> str:
        limit = self.settings.repr_limit
        if len(self.buffer) <= limit:
            return f"BinString({self.buffer!r})"
        return f"BinString({self.buffer[:limit]!r}... <{len(self.buffer)} bytes>)"

    def __iter__(self) -> Iterator[int]:
        return iter(self.buffer)

    # Byte-level operations

    def concat(self, other: Union["BinString", str, BytesLike]) -> "BinString":
        return self._derive(self.buffer + BinString.coerce(other).buffer)

    def __add__(self, other):
        try:
            return self.concat(other)
        except TypeError:
            return NotImplemented

    def __radd__(self, other):
        try:
            return self._derive(BinString.coerce(other).buffer + self.buffer)
        except TypeError:
            return NotImplemented

    def slice(self, bounds: Optional[ByteRange] = None) -> "BinString":
        """
        Copy out the byte offsets covered by ``bounds`` (everything if None).

        Offsets are bytes, not characters: cutting through a multi-byte
        character yields a buffer that is no longer valid UTF-8.

        Raises:
            SliceRangeError: If start > end, end > len() or an endpoint is negative.
        """
        bounds = bounds if bounds is not None else ByteRange()
        start, end = bounds.resolve(len(self.buffer))
        return self._derive(self.buffer[start:end])

    def __getitem__(self, key):
        """
        ``x[a:b]`` slices like ``slice(ByteRange(a, b))``: negative or
        out-of-range offsets raise SliceRangeError instead of wrapping or
        clamping. ``x[i]`` returns one byte value with ordinary bytes
        indexing, so ``x[-1]`` is the last byte while ``x[-1:]`` raises.
        """
        if isinstance(key, slice):
            return self.slice(ByteRange.from_slice(key))
        return self.buffer[key]

    def starts_with(self, prefix: Union["BinString", str, BytesLike]) -> bool:
        return self.buffer.startswith(BinString.coerce(prefix).buffer)

    def ends_with(self, suffix: Union["BinString", str, BytesLike]) -> bool:
        return self.buffer.endswith(BinString.coerce(suffix).buffer)

    def contains(self, needle: Union["BinString", str, BytesLike]) -> bool:
        """An empty needle is contained in every buffer, including an empty one."""
        return BinString.coerce(needle).buffer in self.buffer

    def __contains__(self, item) -> bool:
        if isinstance(item, int):
            return _byte_value(item) in self.buffer
        return self.contains(item)

    def find(self, needle: Union["BinString", str, BytesLike]) -> Optional[int]:
        """Offset of the first occurrence of ``needle``; 0 for an empty needle."""
        index = self.buffer.find(BinString.coerce(needle).buffer)
        return index if index >= 0 else None

    def rfind(self, needle: Union["BinString", str, BytesLike]) -> Optional[int]:
        """Offset of the last occurrence of ``needle``; len() for an empty needle."""
        index = self.buffer.rfind(BinString.coerce(needle).buffer)
        return index if index >= 0 else None

    def replace(self, from_byte, to_byte) -> "BinString":
        """Replace every occurrence of one byte value with another."""
        old = bytes((_byte_value(from_byte),))
        new = bytes((_byte_value(to_byte),))
        return self._derive(self.buffer.replace(old, new))

    # Text-view operations (valid UTF-8 assumed, never checked)

    def trim(self, chars: Optional[str] = None) -> "BinString":
        return self._strip(chars, leading=True, trailing=True)

    def trim_start(self, chars: Optional[str] = None) -> "BinString":
        return self._strip(chars, leading=True, trailing=False)

    def trim_end(self, chars: Optional[str] = None) -> "BinString":
        return self._strip(chars, leading=False, trailing=True)

    def _strip(self, chars: Optional[str], leading: bool, trailing: bool) -> "BinString":
        if chars is None:
            chars = self.settings.whitespace
        return self._derive(strip_whitespace(self.buffer, chars, leading, trailing))

    # In-place growth

    def push(self, ch: str) -> None:
        if not isinstance(ch, str):
            raise TypeError(f"expected str, got {type(ch).__name__}")
        if len(ch) != 1:
            raise ValueError(f"push() takes a single character, got {len(ch)}")
        self.buffer += encode_text(ch)

    def push_str(self, fragment: str) -> None:
        if not isinstance(fragment, str):
            raise TypeError(f"expected str, got {type(fragment).__name__}")
        self.buffer += encode_text(fragment)

    def push_bytes(self, data: BytesLike) -> None:
        self.buffer += _to_bytes(data)

    def extend(self, items: Iterable[str]) -> None:
        """Append every character or fragment of ``items``, in order."""
        self.buffer += concat_fragments(items)

    def __iadd__(self, other):
        try:
            self.buffer += BinString.coerce(other).buffer
        except TypeError:
            return NotImplemented
        return self
