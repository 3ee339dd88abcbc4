"""Optional values and results that panic when unwrapped in the wrong state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from borrowkit.panic import current_location, panic

T = TypeVar("T")
E = TypeVar("E")


class Expected(Generic[T, E]):
    """Either an :class:`Ok` value or an :class:`Err` error."""

    __slots__ = ()

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the value, panicking if this is an error."""
        match self:
            case Ok(value):
                return value
        panic("expected is err", current_location(2))


@dataclass(frozen=True, slots=True)
class Ok(Expected[T, E]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Expected[T, E]):
    error: E


class Optional(Generic[T]):
    """Either :class:`Some` value or :class:`Nothing`."""

    __slots__ = ()

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return isinstance(self, Nothing)

    def ok_or(self, error: E) -> Expected[T, E]:
        """Turn ``Some(v)`` into ``Ok(v)`` and ``Nothing()`` into ``Err(error)``."""
        match self:
            case Some(value):
                return Ok(value)
        return Err(error)

    def expect(self, msg) -> T:
        """Return the value, panicking with ``msg`` if there is none."""
        match self:
            case Some(value):
                return value
        panic(msg, current_location(2))

    def unwrap(self) -> T:
        """Return the value, panicking if there is none."""
        match self:
            case Some(value):
                return value
        panic("optional is none", current_location(2))


@dataclass(frozen=True, slots=True)
class Some(Optional[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Nothing(Optional[T]):
    pass