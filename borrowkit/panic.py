"""Panics: unrecoverable errors raised with the location they came from."""

from __future__ import annotations

import enum
import inspect
import itertools
from dataclasses import dataclass
from types import FrameType


class PanicCode(enum.Enum):
    """Category of a panic."""

    GENERIC = 0
    BOUNDS = 1
    DIVIDE_BY_ZERO = 2
    LIFETIME = 3


@dataclass(frozen=True)
class SourceLocation:
    """A point in the source: file, function, line and column."""

    file_name: str
    function_name: str
    line: int
    column: int = 0


_UNKNOWN = SourceLocation("<unknown>", "<unknown>", 0, 0)


def _column(frame: FrameType) -> int:
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None:
        return 0
    position = next(itertools.islice(positions(), frame.f_lasti // 2, None), None)
    if position is None or position[2] is None:
        return 0
    return position[2] + 1


def current_location(depth: int = 1) -> SourceLocation:
    """Return the location of a calling frame.

    ``depth=1`` is the code that calls this function, ``depth=2`` its caller,
    and so on.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return _UNKNOWN
            frame = frame.f_back
        if frame is None:
            return _UNKNOWN
        return SourceLocation(
            file_name=frame.f_code.co_filename,
            function_name=frame.f_code.co_name,
            line=frame.f_lineno,
            column=_column(frame),
        )
    finally:
        del frame


class Panic(Exception):
    """Raised when a program reaches a state it cannot recover from."""

    def __init__(
        self,
        message: str,
        code: PanicCode = PanicCode.GENERIC,
        location: SourceLocation | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.location = location if location is not None else _UNKNOWN

    def __str__(self) -> str:
        loc = self.location
        if self.code is PanicCode.BOUNDS:
            head = (
                f'out-of-bounds access in "{loc.function_name}", '
                f"at {loc.file_name}:{loc.line}"
            )
        else:
            head = f'function "{loc.function_name}" panicked at {loc.file_name}:{loc.line}'
        return f"{head}\n{self.message}"


def panic(msg, location: SourceLocation | None = None):
    """Raise a generic :class:`Panic`; the location defaults to the caller."""
    if location is None:
        location = current_location(2)
    raise Panic(str(msg), PanicCode.GENERIC, location)


def panic_bounds(msg, location: SourceLocation | None = None):
    """Raise an out-of-bounds :class:`Panic`; the location defaults to the caller."""
    if location is None:
        location = current_location(2)
    raise Panic(str(msg), PanicCode.BOUNDS, location)