"""Owned, growable strings of code units and line printing."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from borrowkit.string_view import Encoding, StringView, encode_units, view


def _as_view(value, encoding: Encoding) -> StringView:
    if isinstance(value, BasicString):
        value = value.str()
    if isinstance(value, StringView):
        if value.encoding is not encoding:
            raise TypeError(
                f"cannot combine {value.encoding.name} text with {encoding.name} text"
            )
        return value
    if isinstance(value, str):
        return view(value, encoding)
    raise TypeError(f"expected text, got {type(value).__name__}")


class BasicString:
    """An owned string of code units that is checked when built.

    Accepts nothing (empty), another string, a :class:`StringView`, a ``str``
    or an iterable of code units, in ``encoding`` (UTF-8 by default).
    """

    __slots__ = ("_units", "_capacity", "_encoding")

    def __init__(
        self,
        source: BasicString | StringView | str | Iterable[int] | None = None,
        encoding: Encoding | None = None,
    ) -> None:
        if isinstance(source, (BasicString, StringView)):
            enc = encoding or source.encoding
            sv = _as_view(source, enc)
        elif source is None:
            enc = encoding or Encoding.UTF8
            sv = StringView((), enc)
        elif isinstance(source, str):
            enc = encoding or Encoding.UTF8
            sv = view(source, enc)
        else:
            enc = encoding or Encoding.UTF8
            sv = StringView(source, enc)
        self._encoding = enc
        self._units = list(sv.slice())
        self._capacity = len(self._units)

    @property
    def encoding(self) -> Encoding:
        return self._encoding

    def size(self) -> int:
        return len(self._units)

    def capacity(self) -> int:
        return self._capacity

    def slice(self) -> tuple[int, ...]:
        return tuple(self._units)

    def str(self) -> StringView:
        """Return a view of the current contents."""
        return StringView(self._units, self._encoding, check=False)

    def append(self, rhs) -> None:
        """Append text of the same encoding, growing capacity to fit exactly."""
        rhs_view = _as_view(rhs, self._encoding)
        needed = len(self._units) + rhs_view.size()
        if needed > self._capacity:
            self._capacity = needed
        self._units.extend(rhs_view.slice())

    def __add__(self, rhs) -> BasicString:
        result = BasicString(self)
        result.append(rhs)
        return result

    def __eq__(self, other) -> bool:
        if isinstance(other, BasicString):
            return self._encoding is other._encoding and self._units == other._units
        if isinstance(other, StringView):
            return self.str() == other
        if isinstance(other, str):
            return tuple(self._units) == encode_units(other, self._encoding)
        return NotImplemented

    __hash__ = None

    def __len__(self) -> int:
        return len(self._units)

    def __str__(self) -> str:
        return str(self.str())

    def __repr__(self) -> str:
        return f"BasicString({str(self)!r}, {self._encoding.name})"


def string_literal(text: str, encoding: Encoding = Encoding.UTF8) -> BasicString:
    """Build a checked string from ``text`` in ``encoding``."""
    return BasicString(view(text, encoding))


def println(value, file=None) -> None:
    """Write ``value`` and a newline; floats use six decimals, bools print as 0/1."""
    out = sys.stdout if file is None else file
    if isinstance(value, bool):
        line = str(int(value))
    elif isinstance(value, int):
        line = str(value)
    elif isinstance(value, float):
        line = f"{value:f}"
    elif isinstance(value, (str, StringView, BasicString)):
        line = str(value)
    else:
        raise TypeError(f"cannot print {type(value).__name__}")
    out.write(line + "\n")