# borrowkit

Small building blocks for code that wants ownership, borrowing and error
handling to be explicit and checked at run time. Misuse does not fail
silently: it raises `borrowkit.panic.Panic`, which carries a `PanicCode`
and the `SourceLocation` of the code that caused it.

## Modules

- `borrowkit.panic`: `Panic` (an `Exception`), `PanicCode` (`GENERIC`,
  `BOUNDS`, `DIVIDE_BY_ZERO`, `LIFETIME`), the frozen dataclass
  `SourceLocation` (`file_name`, `function_name`, `line`, `column`),
  `current_location(depth=1)`, and `panic(msg)` / `panic_bounds(msg)`,
  which raise a `Panic` located at their caller.
- `borrowkit.optional`: `Optional` with `Some(value)` and `Nothing()`,
  offering `is_some`, `is_none`, `unwrap`, `expect(msg)` and `ok_or(error)`;
  `Expected` with `Ok(value)` and `Err(error)`, offering `is_ok`, `is_err`
  and `unwrap`. Unwrapping the wrong alternative raises `Panic`.
  Both work with `match` statements.
- `borrowkit.string_view`: `StringView`, an immutable sequence of code units
  checked to be well formed when built (a malformed sequence raises `Panic`
  with "invalid utf detected"; a unit too large for the encoding raises
  `ValueError`). `Encoding` is `UTF8`, `UTF16`, `UTF32` or `WIDE` (32-bit
  units). Also `view(text, encoding)`, `encode_units(text, encoding)` and the
  verifiers `verify_utf8`, `verify_utf16`, `verify_utf32` and
  `verify_utf(units, encoding)`, which return the length of the valid prefix,
  or `NPOS` (-1) on a unit that can never start a code point.
- `borrowkit.text`: `BasicString`, an owned string of code units with
  `size`, `capacity`, `slice`, `str` (a `StringView` of its contents),
  `append` and `+`; appending grows the capacity to exactly the new size.
  `string_literal(text, encoding)` builds one from a `str`. `println(value,
  file=None)` writes a line: ints as decimals, floats with six decimals,
  bools as `0`/`1`, and text as is; other types raise `TypeError`.
- `borrowkit.cell`: `Cell` (`get` returns a copy, `set`, `replace`) and
  `RefCell`, which allows many shared borrows (`Ref`) or one exclusive
  borrow (`RefMut`). `try_borrow` / `try_borrow_mut` return `Nothing()`
  when the borrow is not allowed; `borrow` / `borrow_mut` raise `Panic`.
  Borrows end on `release()`, at the end of a `with` block, or when the
  guard object is collected. Using a released guard raises `Panic`.
- `borrowkit.containers`: `Box` (`borrow`, `set`, `into_inner`, after which
  the box is unusable), `Vector` (bounds-checked `[]`, `push_back` that
  doubles capacity when full, `reserve`, `slice`, `iter`, and `into_iter`,
  which consumes the vector), and the iterators `SliceIterator`,
  `IntoIterator` and `InitializerList`. Each iterator has `next()` returning
  an `Optional` and also works in a `for` loop. Out-of-range indices raise a
  `Panic` with code `BOUNDS`; negative indices are out of range.
- `borrowkit.sync`: `Atomic` (`fetch_add`, `fetch_sub`, `add_fetch`,
  `sub_fetch`, `store`, `load`), `Arc` (thread-safe) and `Rc` shared owners
  (`clone`, `get`, `strong_count`, `drop`), `Mutex.lock()` returning a
  `LockGuard`, `SharedMutex` with `lock()` and `lock_shared()` (a
  `SharedLockGuard`; waiting writers are served before new readers), and
  `Thread(f, *args)`, whose `join()` returns what `f` returned or re-raises
  what it raised. A thread that is never joined runs detached as a daemon;
  joining twice raises `Panic`.

## Install

```
pip install borrowkit
```

## Examples

```python
from borrowkit.optional import Some, Nothing
from borrowkit.panic import Panic

assert Some(-1).unwrap() == -1
assert Some(-1).ok_or("missing").unwrap() == -1
try:
    Nothing().expect("invalid optional used")
except Panic as exc:
    print(exc)
```

```python
from borrowkit.string_view import Encoding, StringView, view
from borrowkit.panic import Panic

assert view("한").size() == 3
assert view("𐐷", Encoding.UTF16).size() == 2
try:
    StringView([0xCF])
except Panic:
    pass
```

```python
from borrowkit.cell import RefCell

rc = RefCell(-1)
with rc.borrow_mut() as guard:
    guard.set(1337)
    assert rc.try_borrow().is_none()
assert rc.borrow().get() == 1337
```

```python
from borrowkit.containers import Vector
from borrowkit.panic import Panic

vec = Vector([1, 2, 3])
vec.push_back(4)
assert vec.size() == 4 and vec.capacity() == 6
try:
    vec[10]
except Panic:
    pass
```

```python
from borrowkit.sync import Arc, Mutex, Thread

def add(shared, x, y):
    with shared.get().lock() as guard:
        guard.set(guard.get() + x + y)

shared = Arc(Mutex(0))
threads = [Thread(add, shared.clone(), 1, 2) for _ in range(4)]
for t in threads:
    t.join()
with shared.get().lock() as guard:
    assert guard.get() == 12
```

## What it does not do

borrowkit is a library only; it has no command line. Its checks happen at
run time, so nothing stops code from keeping a plain reference to a value
after its guard is released. `Arc` and `Rc` keep a weak count internally but
offer no weak handles.

## Tests

```
pip install "borrowkit[test]"
pytest
```