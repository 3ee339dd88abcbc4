"""Validated, immutable views of UTF-8, UTF-16 and UTF-32 code units."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable, Sequence

from borrowkit.panic import current_location, panic

NPOS = -1
"""Returned by the verifiers when a unit can never start a code point."""


class Encoding(enum.Enum):
    """Code-unit encoding of a view; WIDE uses 32-bit units."""

    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"
    WIDE = "wide"

    @property
    def unit_bits(self) -> int:
        return {"utf-8": 8, "utf-16": 16}.get(self.value, 32)


def _continuation(unit: int) -> bool:
    return unit & 0xC0 == 0x80


def verify_utf8(units: Sequence[int]) -> int:
    """Return the length of the valid prefix, or NPOS on an invalid lead byte."""
    length = len(units)
    idx = 0
    while idx < length:
        c1 = units[idx]
        if c1 & 0x80 == 0:
            width = 1
        elif c1 & 0xE0 == 0xC0:
            width = 2
        elif c1 & 0xF0 == 0xE0:
            width = 3
        elif c1 & 0xF8 == 0xF0:
            width = 4
        else:
            return NPOS
        if length - idx < width:
            return idx
        if not all(_continuation(u) for u in units[idx + 1 : idx + width]):
            return idx
        idx += width
    return idx


def verify_utf16(units: Sequence[int]) -> int:
    """Return the length of the valid prefix, or NPOS on a lone trailing surrogate."""
    length = len(units)
    idx = 0
    while idx < length:
        c1 = units[idx]
        if c1 < 0xD800 or c1 >= 0xE000:
            idx += 1
        elif c1 & 0xFC00 == 0xD800:
            if length - idx < 2 or units[idx + 1] & 0xFC00 != 0xDC00:
                return idx
            idx += 2
        else:
            return NPOS
    return idx


def verify_utf32(units: Sequence[int]) -> int:
    """Return the length of the sequence, or NPOS if any unit is not a scalar value."""
    for unit in units:
        if not (unit < 0xD800 or 0xDFFF < unit <= 0x10FFFF):
            return NPOS
    return len(units)


def verify_utf(units: Sequence[int], encoding: Encoding) -> int:
    """Verify ``units`` under ``encoding``."""
    if encoding is Encoding.UTF8:
        return verify_utf8(units)
    if encoding is Encoding.UTF16:
        return verify_utf16(units)
    return verify_utf32(units)


def encode_units(text: str, encoding: Encoding = Encoding.UTF8) -> tuple[int, ...]:
    """Encode ``text`` into a tuple of code units."""
    if encoding is Encoding.UTF8:
        return tuple(text.encode("utf-8", "surrogatepass"))
    if encoding is Encoding.UTF16:
        data = text.encode("utf-16-be", "surrogatepass")
        return struct.unpack(f">{len(data) // 2}H", data)
    return tuple(map(ord, text))


class StringView:
    """An immutable sequence of code units checked to be well formed."""

    __slots__ = ("_units", "_encoding")

    def __init__(
        self,
        units: Iterable[int],
        encoding: Encoding = Encoding.UTF8,
        *,
        check: bool = True,
    ) -> None:
        units = tuple(units)
        limit = 1 << encoding.unit_bits
        if any(not 0 <= u < limit for u in units):
            raise ValueError(f"code unit out of range for {encoding.value}")
        if check and verify_utf(units, encoding) != len(units):
            panic("invalid utf detected", current_location(2))
        self._units = units
        self._encoding = encoding

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    def size(self) -> int:
        return len(self._units)

    def empty(self) -> bool:
        return not self._units

    def slice(self) -> tuple[int, ...]:
        return self._units

    def __len__(self) -> int:
        return len(self._units)

    def __eq__(self, other) -> bool:
        if isinstance(other, StringView):
            return self._encoding is other._encoding and self._units == other._units
        if isinstance(other, str):
            return self._units == encode_units(other, self._encoding)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._encoding, self._units))

    def __str__(self) -> str:
        if self._encoding is Encoding.UTF8:
            return bytes(self._units).decode("utf-8", "replace")
        if self._encoding is Encoding.UTF16:
            data = struct.pack(f">{len(self._units)}H", *self._units)
            return data.decode("utf-16-be", "surrogatepass")
        return "".join(map(chr, self._units))

    def __repr__(self) -> str:
        return f"StringView({str(self)!r}, {self._encoding.name})"


def view(text: str, encoding: Encoding = Encoding.UTF8) -> StringView:
    """Make a checked view of ``text`` in ``encoding``."""
    return StringView(encode_units(text, encoding), encoding)