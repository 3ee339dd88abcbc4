import pytest

from borrowkit.containers import (
    Box,
    InitializerList,
    IntoIterator,
    SliceIterator,
    Vector,
)
from borrowkit.optional import Nothing, Some
from borrowkit.panic import Panic, PanicCode
from borrowkit.string_view import view


def test_box_constructor_and_mutation():
    p = Box(1337)
    assert p.borrow() == 1337
    p.set(7331)
    assert p.borrow() == 7331


def test_nested_box():
    p = Box(Box(1337))
    assert p.borrow().borrow() == 1337


def test_box_into_inner_moves_value():
    p = Box(42)
    assert p.into_inner() == 42
    with pytest.raises(Panic) as info:
        p.borrow()
    assert info.value.code is PanicCode.LIFETIME


def test_vector_push_back_and_slice():
    vec = Vector()
    assert vec.size() == 0
    vec.push_back(1)
    vec.push_back(2)
    vec.push_back(3)
    assert vec.size() == 3

    s = vec.slice()
    assert (s[0], s[1], s[2]) == (1, 2, 3)
    s[0] = 17
    assert vec[0] == 17
    vec[0] = 4
    assert vec[0] == 4
    assert list(vec.slice()) == [4, 2, 3]


def test_vector_capacity_doubles():
    vec = Vector()
    capacities = []
    for i in range(5):
        vec.push_back(i)
        capacities.append(vec.capacity())
    assert capacities == [1, 2, 4, 4, 8]


def test_vector_from_initializer_list():
    xs = Vector([1, 2, 3, 4, 5])
    assert xs.size() == 5
    assert xs.capacity() == 5
    for i in range(5):
        assert xs[i] == i + 1


def test_vector_of_boxes():
    xs = Vector(Box(i) for i in range(1, 6))
    assert xs.size() == 5
    for i in range(5):
        assert xs[i].borrow() == i + 1


def test_vector_box_pushes():
    xs = Vector()
    for _ in range(16):
        xs.push_back(Box(1))
    assert xs.size() == 16
    assert xs.capacity() == 16


def test_vector_elements_shared_through_slice():
    x = Box(1)
    vec = Vector()
    vec.push_back(x)
    assert vec.slice()[0].borrow() == 1
    vec.slice()[0].set(20)
    assert x.borrow() == 20


def test_vector_iterator():
    v = Vector()
    it = v.iter()
    assert it.next() == Nothing()
    assert v.empty()
    for i in range(1, 6):
        v.push_back(i)
    assert v.size() == 5
    assert sum(v.iter()) == 1 + 2 + 3 + 4 + 5


def test_slice_iterator_next_yields_some():
    it = SliceIterator([7, 8])
    assert it.next() == Some(7)
    assert it.next() == Some(8)
    assert it.next() == Nothing()


def test_vector_of_string_views():
    sv1 = view("hello, world!")
    sv2 = view("walking home in the moonlight")
    sv3 = view("catching glimpses of my past life")
    strs = Vector()
    strs.push_back(sv1)
    strs.push_back(sv2)
    strs.push_back(sv3)
    assert strs.size() == 3
    assert strs[0] == sv1


def test_subscript_out_of_bounds_panics():
    xs = Vector([0, 1, 2, 3])
    with pytest.raises(Panic) as info:
        xs[xs.size()]
    assert info.value.code is PanicCode.BOUNDS
    assert info.value.message == "vector subscript is out-of-bounds"


def test_negative_subscript_panics():
    xs = Vector([0, 1])
    with pytest.raises(Panic) as info:
        xs[-1] = 5
    assert info.value.code is PanicCode.BOUNDS
    assert list(xs) == [0, 1]
    assert xs.size() == 2


def test_slice_out_of_bounds_panics():
    s = Vector([1, 2, 3]).slice()
    with pytest.raises(Panic) as info:
        s[10]
    assert info.value.code is PanicCode.BOUNDS
    assert list(s) == [1, 2, 3]


def test_into_iter_consumes_vector():
    vec = Vector([Box(1), Box(2)])
    it = vec.into_iter()
    assert isinstance(it, IntoIterator)
    assert [b.borrow() for b in it] == [1, 2]
    assert it.next() == Nothing()
    with pytest.raises(Panic) as info:
        vec.size()
    assert info.value.code is PanicCode.LIFETIME


def test_initializer_list_moves_front_to_back():
    ilist = InitializerList(["a", "b", "c"])
    assert ilist.size() == 3
    assert ilist.next() == Some("a")
    assert ilist.size() == 2
    assert list(ilist.slice()) == ["b", "c"]
    assert ilist.next() == Some("b")
    assert ilist.next() == Some("c")
    assert ilist.next() == Nothing()
    assert ilist.size() == 0


def test_vector_takes_remaining_initializer_list():
    ilist = InitializerList([1, 2, 3])
    ilist.next()
    vec = Vector(ilist)
    assert list(vec) == [2, 3]
    assert ilist.size() == 0


def test_reserve_never_shrinks():
    vec = Vector()
    vec.reserve(10)
    assert vec.capacity() == 10
    vec.reserve(3)
    assert vec.capacity() == 10
    assert len(vec) == 0