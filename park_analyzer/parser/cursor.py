# park_analyzer/parser/cursor.py
"""Forward-only byte reader used by every layout in the park format.

All integers in the format are little-endian and read as unsigned, even
the money fields. Strings are stored one byte per character.
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from construct import Construct

from ..errors import OutOfBounds
from .constants import MAX_STRING_LENGTH, TRUNCATION_MARKER

Buffer = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class LocalizedString:
    """Single entry string table: language tag plus value."""
    lang: str
    value: str


@dataclass(frozen=True)
class ResearchItem:
    """Research list entry (present variant of an optional record)."""
    type: int
    base_ride_type: int
    entry_index: int
    flags: int
    category: int


class ByteCursor:
    """Reads primitives from a buffer, advancing a private position.

    The single-step reads (integers, byte arrays, fixed-width chars,
    structs and null terminated strings) either consume exactly the bytes
    they need or raise OutOfBounds without moving the position. Composite
    reads (arrays, string tables, optional records) may have advanced
    past their prefix when they fail partway.
    """

    def __init__(self, data: Buffer, position: int = 0):
        self._data = memoryview(data)
        self._pos = position

    def __len__(self) -> int:
        return len(self._data)

    def tell(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def _take(self, size: int) -> memoryview:
        if size > self.remaining:
            raise OutOfBounds(self._pos, size, self.remaining)
        view = self._data[self._pos:self._pos + size]
        self._pos += size
        return view

    def read_uint(self, width: int = 1) -> int:
        """Read an unsigned little-endian integer of `width` bytes."""
        if width <= 0:
            raise ValueError(f"Integer width must be positive, got {width}")
        return int.from_bytes(self._take(width), 'little', signed=False)

    def read_byte_array(self, length: int) -> bytes:
        """Read `length` raw bytes verbatim."""
        return self._take(length).tobytes()

    def read_struct(self, layout: Construct) -> Any:
        """Parse a fixed-size construct layout at the current position."""
        return layout.parse(self._take(layout.sizeof()).tobytes())

    def read_money(self, width: int = 8) -> int:
        # Stored signed by the game but kept unsigned here, like every
        # other integer in the format.
        return self.read_uint(width)

    def read_timestamp(self) -> int:
        return self.read_uint(8)

    def read_bool(self) -> int:
        return self.read_uint(4)

    def read_null_terminated_string(self, max_length: int = MAX_STRING_LENGTH) -> str:
        """Read a zero terminated string.

        Returns the text without its terminator. If no terminator shows up
        within `max_length` bytes, the text read so far is returned with a
        "..." suffix and the cursor sits right after those bytes.
        """
        start = self._pos
        chars = []
        for _ in range(max_length):
            if self.at_end:
                self._pos = start
                raise OutOfBounds(start, len(chars) + 1, len(chars))
            value = self._data[self._pos]
            self._pos += 1
            if value == 0:
                return ''.join(chars)
            chars.append(chr(value))
        return ''.join(chars) + TRUNCATION_MARKER

    def read_fixed_width_chars(self, size: int) -> str:
        """Read exactly `size` bytes, one character each."""
        return ''.join(chr(b) for b in self._take(size))

    def read_length_prefixed_array(self) -> List[int]:
        """Read a u32 count and u32 element width, then the elements."""
        count = self.read_uint(4)
        width = self.read_uint(4)
        if width == 0:
            return []
        return [self.read_uint(width) for _ in range(count)]

    def read_string_array(self) -> List[str]:
        """Read a string array.

        Element width 0 means each element is zero terminated; otherwise
        each element is a fixed-width block. An empty array is still
        followed by a lone terminator byte.
        """
        count = self.read_uint(4)
        width = self.read_uint(4)
        strings = []
        for _ in range(count):
            if width == 0:
                strings.append(self.read_null_terminated_string())
            else:
                strings.append(self.read_fixed_width_chars(width))
        if count == 0:
            self._take(1)
        return strings

    def read_localized_string_pair(self) -> LocalizedString:
        """Read a string table holding a single (language, value) pair."""
        self.read_uint(4)  # table length, always 1
        self.read_uint(4)  # element size
        lang = self.read_null_terminated_string()
        value = self.read_null_terminated_string()
        return LocalizedString(lang=lang, value=value)

    def read_optional_record(self, flag_width: int = 1) -> Optional[ResearchItem]:
        """Read a presence flag and, if set, a research item."""
        if not self.read_uint(flag_width):
            return None
        return ResearchItem(
            type=self.read_uint(4),
            base_ride_type=self.read_uint(4),
            entry_index=self.read_uint(4),
            flags=self.read_uint(4),
            category=self.read_uint(4),
        )

    def read_optional_record_array(self) -> List[ResearchItem]:
        """Read a research item array, dropping absent entries."""
        count = self.read_uint(4)
        self.read_uint(4)  # element size, unused
        items = []
        for _ in range(count):
            item = self.read_optional_record(4)
            if item is not None:
                items.append(item)
        return items
