"""Shared ownership, atomics, locks and threads."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

from borrowkit.panic import Panic, PanicCode, current_location

T = TypeVar("T")

_DROPPED = object()


def _lifetime_panic(message: str, location) -> Panic:
    return Panic(message, PanicCode.LIFETIME, location)


class Atomic(Generic[T]):
    """A value whose reads and updates are each indivisible across threads."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: T = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, op: T) -> T:
        """Add ``op`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = old + op
            return old

    def fetch_sub(self, op: T) -> T:
        """Subtract ``op`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = old - op
            return old

    def add_fetch(self, op: T) -> T:
        """Add ``op`` and return the new value."""
        with self._lock:
            self._value = self._value + op
            return self._value

    def sub_fetch(self, op: T) -> T:
        """Subtract ``op`` and return the new value."""
        with self._lock:
            self._value = self._value - op
            return self._value

    def store(self, op: T) -> None:
        with self._lock:
            self._value = op

    def load(self) -> T:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"Atomic({self.load()!r})"


class _ArcInner:
    __slots__ = ("value", "strong", "weak")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.strong = Atomic(1)
        self.weak = Atomic(1)


class Arc(Generic[T]):
    """Thread-safe shared ownership of a value through an atomic count."""

    __slots__ = ("_inner",)

    def __init__(self, value: T) -> None:
        self._inner: _ArcInner | None = _ArcInner(value)

    def _live(self) -> _ArcInner:
        if self._inner is None:
            raise _lifetime_panic("use of a dropped arc", current_location(3))
        return self._inner

    def clone(self) -> Arc[T]:
        """Return another owner of the same value."""
        inner = self._live()
        inner.strong.add_fetch(1)
        other = Arc.__new__(Arc)
        other._inner = inner
        return other

    def get(self) -> T:
        return self._live().value

    def strong_count(self) -> int:
        return self._live().strong.load()

    def drop(self) -> None:
        """Give up this handle's ownership; the last owner releases the value."""
        inner = self._live()
        self._inner = None
        if inner.strong.sub_fetch(1) == 0:
            inner.value = _DROPPED
            inner.weak.sub_fetch(1)

    def __del__(self) -> None:
        if getattr(self, "_inner", None) is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._inner is None:
            return "Arc(<dropped>)"
        return f"Arc({self._inner.value!r})"


class _RcInner:
    __slots__ = ("value", "strong", "weak")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.strong = 1
        self.weak = 1


class Rc(Generic[T]):
    """Shared ownership of a value within one thread."""

    __slots__ = ("_inner",)

    def __init__(self, value: T) -> None:
        self._inner: _RcInner | None = _RcInner(value)

    def _live(self) -> _RcInner:
        if self._inner is None:
            raise _lifetime_panic("use of a dropped rc", current_location(3))
        return self._inner

    def clone(self) -> Rc[T]:
        """Return another owner of the same value."""
        inner = self._live()
        inner.strong += 1
        other = Rc.__new__(Rc)
        other._inner = inner
        return other

    def get(self) -> T:
        return self._live().value

    def strong_count(self) -> int:
        return self._live().strong

    def drop(self) -> None:
        """Give up this handle's ownership; the last owner releases the value."""
        inner = self._live()
        self._inner = None
        inner.strong -= 1
        if inner.strong == 0:
            inner.value = _DROPPED
            inner.weak -= 1

    def __del__(self) -> None:
        if getattr(self, "_inner", None) is not None:
            self.drop()

    def __repr__(self) -> str:
        if self._inner is None:
            return "Rc(<dropped>)"
        return f"Rc({self._inner.value!r})"


class LockGuard(Generic[T]):
    """Exclusive access to a locked value until released."""

    __slots__ = ("_owner", "_unlock", "_active")

    def __init__(self, owner: Any, unlock: Callable[[], None]) -> None:
        self._owner = owner
        self._unlock = unlock
        self._active = True

    def _check(self) -> None:
        if not self._active:
            raise _lifetime_panic("use of a released lock guard", current_location(3))

    def get(self) -> T:
        self._check()
        return self._owner._value

    def set(self, value: T) -> None:
        self._check()
        self._owner._value = value

    def release(self) -> None:
        """Unlock; releasing twice does nothing."""
        if self._active:
            self._active = False
            self._unlock()

    def __enter__(self) -> LockGuard[T]:
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()


class SharedLockGuard(Generic[T]):
    """Shared, read-only access to a locked value until released."""

    __slots__ = ("_owner", "_unlock", "_active")

    def __init__(self, owner: Any, unlock: Callable[[], None]) -> None:
        self._owner = owner
        self._unlock = unlock
        self._active = True

    def get(self) -> T:
        if not self._active:
            raise _lifetime_panic("use of a released lock guard", current_location(2))
        return self._owner._value

    def release(self) -> None:
        """Unlock; releasing twice does nothing."""
        if self._active:
            self._active = False
            self._unlock()

    def __enter__(self) -> SharedLockGuard[T]:
        return self

    def __exit__(self, *args) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()


class Mutex(Generic[T]):
    """A value reachable only while holding its lock."""

    __slots__ = ("_value", "_lock")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def lock(self) -> LockGuard[T]:
        """Block until the lock is held and return a guard over the value."""
        self._lock.acquire()
        return LockGuard(self, self._lock.release)

    def __repr__(self) -> str:
        return "Mutex(...)"


class SharedMutex(Generic[T]):
    """A value with many readers or one writer; waiting writers go first."""

    __slots__ = ("_value", "_cond", "_readers", "_writer", "_waiting_writers")

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def _release_exclusive(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    def _release_shared(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def lock(self) -> LockGuard[T]:
        """Block until exclusive access is held."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        return LockGuard(self, self._release_exclusive)

    def lock_shared(self) -> SharedLockGuard[T]:
        """Block until shared access is held."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        return SharedLockGuard(self, self._release_shared)

    def __repr__(self) -> str:
        return "SharedMutex(...)"


class Thread:
    """Runs ``f(*args)`` on a new thread; left unjoined, it is detached."""

    __slots__ = ("_thread", "_result", "_error", "_joined")

    def __init__(self, f: Callable[..., Any], *args: Any) -> None:
        if not callable(f):
            raise TypeError(f"{type(f).__name__} object is not callable")
        self._result: Any = None
        self._error: BaseException | None = None
        self._joined = False
        self._thread = threading.Thread(target=self._run, args=(f, args), daemon=True)
        self._thread.start()

    def _run(self, f: Callable[..., Any], args: tuple) -> None:
        try:
            self._result = f(*args)
        except BaseException as exc:  # re-raised in join
            self._error = exc

    def join(self) -> Any:
        """Wait for the thread and return what it returned, or raise what it raised."""
        if self._joined:
            raise _lifetime_panic("thread already joined", current_location(2))
        self._joined = True
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result