"""Interior mutability: copy-in/copy-out cells and runtime-checked borrows."""

from __future__ import annotations

import copy
from typing import Generic, TypeVar

from borrowkit.optional import Nothing, Optional, Some
from borrowkit.panic import Panic, PanicCode, current_location, panic

T = TypeVar("T")

_BORROW_FAILED = "ref_cell failed to acquire const borrow"


class Cell(Generic[T]):
    """A value that is only ever copied out and replaced, never borrowed."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        """Return a copy of the held value."""
        return copy.copy(self._value)

    def set(self, value: T) -> None:
        self._value = value

    def replace(self, value: T) -> T:
        """Store ``value`` and return the value it replaces."""
        old, self._value = self._value, value
        return old

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class RefCell(Generic[T]):
    """A value whose shared and exclusive borrows are checked at run time.

    The borrow count is positive while shared borrows are live and -1 while
    an exclusive borrow is live.
    """

    __slots__ = ("_value", "_borrows")

    def __init__(self, value: T) -> None:
        self._value = value
        self._borrows: Cell[int] = Cell(0)

    def try_borrow(self) -> Optional[Ref[T]]:
        """Return ``Some(Ref)``, or ``Nothing()`` if an exclusive borrow is live."""
        if self._borrows.get() < 0:
            return Nothing()
        return Some(Ref(self))

    def borrow(self) -> Ref[T]:
        """Return a shared borrow, panicking if an exclusive borrow is live."""
        match self.try_borrow():
            case Some(ref):
                return ref
        panic(_BORROW_FAILED, current_location(2))

    def try_borrow_mut(self) -> Optional[RefMut[T]]:
        """Return ``Some(RefMut)``, or ``Nothing()`` if any borrow is live."""
        count = self._borrows.get()
        if count > 0 or count == -1:
            return Nothing()
        return Some(RefMut(self))

    def borrow_mut(self) -> RefMut[T]:
        """Return an exclusive borrow, panicking if any borrow is live."""
        match self.try_borrow_mut():
            case Some(ref):
                return ref
        panic(_BORROW_FAILED, current_location(2))

    def get_mut(self) -> T:
        """Return the held value directly, without a runtime check."""
        return self._value

    def borrow_count(self) -> int:
        return self._borrows.get()

    def __repr__(self) -> str:
        return f"RefCell({self._value!r}, borrows={self._borrows.get()})"


def _expired(location) -> Panic:
    return Panic("use of a released borrow", PanicCode.LIFETIME, location)


class Ref(Generic[T]):
    """A shared borrow of a :class:`RefCell`; release it or use it in ``with``."""

    __slots__ = ("_cell", "_active")

    def __init__(self, cell: RefCell[T]) -> None:
        self._cell = cell
        cell._borrows.set(cell._borrows.get() + 1)
        self._active = True

    def get(self) -> T:
        if not self._active:
            raise _expired(current_location(2))
        return self._cell._value

    def release(self) -> None:
        """End the borrow; releasing twice does nothing."""
        if self._active:
            self._active = False
            self._cell._borrows.set(self._cell._borrows.get() - 1)

    def __enter__(self) -> Ref[T]:
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()


class RefMut(Generic[T]):
    """An exclusive borrow of a :class:`RefCell`; release it or use it in ``with``."""

    __slots__ = ("_cell", "_active")

    def __init__(self, cell: RefCell[T]) -> None:
        self._cell = cell
        cell._borrows.set(cell._borrows.get() - 1)
        self._active = True

    def get(self) -> T:
        if not self._active:
            raise _expired(current_location(2))
        return self._cell._value

    def set(self, value: T) -> None:
        if not self._active:
            raise _expired(current_location(2))
        self._cell._value = value

    def release(self) -> None:
        """End the borrow; releasing twice does nothing."""
        if self._active:
            self._active = False
            self._cell._borrows.set(self._cell._borrows.get() + 1)

    def __enter__(self) -> RefMut[T]:
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()