"""Owning boxes, growable vectors, slices and the iterators over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from borrowkit.optional import Nothing, Optional, Some
from borrowkit.panic import Panic, PanicCode, current_location, panic_bounds

T = TypeVar("T")

_SUBSCRIPT_OOB = "vector subscript is out-of-bounds"
_MOVED = object()


def _moved_panic(location) -> Panic:
    return Panic("use of a moved value", PanicCode.LIFETIME, location)


def _check_index(index, size: int) -> int:
    """Return ``index`` if it addresses an element, panicking otherwise."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"indices must be integers, not {type(index).__name__}")
    if index < 0 or index >= size:
        panic_bounds(_SUBSCRIPT_OOB, current_location(3))
    return index


class Box(Generic[T]):
    """A single owned value on the heap; moving it out ends its life."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def _live(self):
        if self._value is _MOVED:
            raise _moved_panic(current_location(3))
        return self._value

    def borrow(self) -> T:
        """Return the held value."""
        return self._live()

    def set(self, value: T) -> None:
        """Replace the held value."""
        self._live()
        self._value = value

    def into_inner(self) -> T:
        """Move the value out; the box cannot be used afterwards."""
        value = self._live()
        self._value = _MOVED
        return value

    def __repr__(self) -> str:
        if self._value is _MOVED:
            return "Box(<moved>)"
        return f"Box({self._value!r})"


class _Slice(Sequence):
    """A fixed-length, bounds-checked window onto a list."""

    __slots__ = ("_items", "_start", "_length")

    def __init__(self, items: list, start: int, length: int) -> None:
        self._items = items
        self._start = start
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        return self._items[self._start + _check_index(index, self._length)]

    def __setitem__(self, index, value) -> None:
        self._items[self._start + _check_index(index, self._length)] = value

    def __iter__(self) -> Iterator:
        for offset in range(self._length):
            yield self._items[self._start + offset]

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"[{', '.join(map(repr, self))}]"


class SliceIterator(Generic[T]):
    """Walks the elements of a slice from front to back."""

    __slots__ = ("_slice", "_pos")

    def __init__(self, items: Sequence[T]) -> None:
        self._slice = items
        self._pos = 0

    def next(self) -> Optional[T]:
        """Return ``Some(element)``, or ``Nothing()`` at the end."""
        if self._pos >= len(self._slice):
            return Nothing()
        item = self._slice[self._pos]
        self._pos += 1
        return Some(item)

    def __iter__(self) -> SliceIterator[T]:
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(item):
                return item
        raise StopIteration


class IntoIterator(Generic[T]):
    """Moves elements out of a consumed vector one at a time."""

    __slots__ = ("_items", "_pos")

    def __init__(self, items: list[T]) -> None:
        self._items = items
        self._pos = 0

    def next(self) -> Optional[T]:
        """Return ``Some(element)``, or ``Nothing()`` once all are moved out."""
        if self._pos >= len(self._items):
            return Nothing()
        item = self._items[self._pos]
        self._items[self._pos] = None
        self._pos += 1
        return Some(item)

    def __iter__(self) -> IntoIterator[T]:
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(item):
                return item
        raise StopIteration


class InitializerList(Generic[T]):
    """A brace list of values that can be moved out front to back."""

    __slots__ = ("_items", "_cur")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items = list(items)
        self._cur = 0

    def next(self) -> Optional[T]:
        """Move out the next value, or return ``Nothing()`` when empty."""
        if self._cur >= len(self._items):
            return Nothing()
        item = self._items[self._cur]
        self._items[self._cur] = None
        self._cur += 1
        return Some(item)

    def size(self) -> int:
        """Number of values not yet moved out."""
        return len(self._items) - self._cur

    def slice(self) -> _Slice:
        """A view of the values not yet moved out."""
        return _Slice(self._items, self._cur, self.size())

    def _drain(self) -> list[T]:
        rest = self._items[self._cur :]
        self._items[self._cur :] = [None] * len(rest)
        self._cur = len(self._items)
        return rest


class Vector(Generic[T]):
    """A growable array with bounds-checked subscripts and doubling growth."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: InitializerList[T] | Iterable[T] = ()) -> None:
        self._items: list = []
        self._capacity = 0
        ilist = items if isinstance(items, InitializerList) else InitializerList(items)
        self.reserve(ilist.size())
        self._items.extend(ilist._drain())

    def _live(self) -> list:
        if self._items is _MOVED:
            raise _moved_panic(current_location(3))
        return self._items

    def size(self) -> int:
        return len(self._live())

    def capacity(self) -> int:
        self._live()
        return self._capacity

    def empty(self) -> bool:
        return not self._live()

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity when full."""
        items = self._live()
        if self._capacity == len(items):
            self.reserve(self._capacity * 2 if self._capacity else 1)
        items.append(value)

    def reserve(self, n: int) -> None:
        """Grow the capacity to at least ``n``; never shrinks it."""
        self._live()
        if n > self._capacity:
            self._capacity = n

    def slice(self) -> _Slice:
        """A mutable, fixed-length view of the elements."""
        items = self._live()
        return _Slice(items, 0, len(items))

    def iter(self) -> SliceIterator[T]:
        return SliceIterator(self.slice())

    def into_iter(self) -> IntoIterator[T]:
        """Consume the vector, returning an iterator that moves out its elements."""
        items = self._live()
        self._items = _MOVED
        self._capacity = 0
        return IntoIterator(items)

    def __getitem__(self, index) -> T:
        items = self._live()
        return items[_check_index(index, len(items))]

    def __setitem__(self, index, value: T) -> None:
        items = self._live()
        items[_check_index(index, len(items))] = value

    def __len__(self) -> int:
        return len(self._live())

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __repr__(self) -> str:
        if self._items is _MOVED:
            return "Vector(<moved>)"
        return f"Vector({self._items!r})"