import io

import pytest

from borrowkit.panic import Panic
from borrowkit.string_view import Encoding, StringView, encode_units, view
from borrowkit.text import BasicString, println, string_literal


def test_empty_string():
    s = BasicString()
    assert s.size() == 0
    assert s.capacity() == 0


def test_from_literal():
    s = BasicString("hello, world!")
    assert s.size() == 13
    assert s.capacity() == 13
    assert s == view("hello, world!")
    assert s != view("")


def test_from_units_with_terminator():
    buf = encode_units("hello, world!") + (0,)
    s = BasicString(buf)
    assert s.size() == 14
    assert s.capacity() == 14
    assert s == StringView(buf)
    assert s != view("")


def test_from_view():
    sv = view("hello, world!")
    s = BasicString(sv)
    assert s.size() == 13
    assert s.capacity() == 13
    assert s == sv
    assert s != view("")


def test_invalid_units_panic():
    with pytest.raises(Panic):
        BasicString([0xFF])


def test_append():
    sv1 = view("if I only had the heart")
    sv2 = view(" to find out exactly who you are")
    s = BasicString(sv1)
    s.append(sv2)
    assert s.size() == sv1.size() + sv2.size()
    assert s.capacity() == s.size()
    assert s == view("if I only had the heart to find out exactly who you are")
    assert s != view("")


def test_concatenate():
    sv1 = view("if I only had the heart")
    sv2 = view(" to find out exactly who you are")
    s1 = BasicString(sv1)
    s2 = BasicString(sv2)
    s = BasicString(s1 + s2)
    assert s.size() == sv1.size() + sv2.size()
    assert s.capacity() == s.size()
    assert s == view("if I only had the heart to find out exactly who you are")
    assert s1 == "if I only had the heart"


def test_copy_is_independent():
    s = BasicString("abc")
    t = BasicString(s)
    t.append("def")
    assert s == "abc"
    assert t == "abcdef"
    assert len(t) == 6


def test_append_empty_keeps_capacity():
    s = BasicString("abc")
    s.append("")
    assert s.capacity() == 3
    assert s.slice() == (97, 98, 99)


def test_append_encoding_mismatch():
    s = BasicString("a")
    with pytest.raises(TypeError):
        s.append(view("b", Encoding.UTF16))


@pytest.mark.parametrize(
    "encoding", [Encoding.UTF8, Encoding.UTF16, Encoding.UTF32, Encoding.WIDE]
)
def test_literals(encoding):
    s = string_literal("hello, world!", encoding)
    assert s == view("hello, world!", encoding)
    assert s.encoding is encoding


def test_utf16_literal_of_astral_char():
    s = string_literal("𐐷", Encoding.UTF16)
    assert s.size() == 2
    assert str(s) == "𐐷"


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, "5\n"),
        (-1, "-1\n"),
        (101.3, "101.300000\n"),
        (3.15159, "3.151590\n"),
        (True, "1\n"),
        ("Hello safety", "Hello safety\n"),
    ],
)
def test_println_values(value, expected):
    out = io.StringIO()
    println(value, out)
    assert out.getvalue() == expected


def test_println_views_and_strings():
    out = io.StringIO()
    println(view("From a string literal"), out)
    println(BasicString("Hello World"), out)
    assert out.getvalue() == "From a string literal\nHello World\n"


def test_println_default_stdout(capsys):
    println(BasicString("Hello ") + "World")
    assert capsys.readouterr().out == "Hello World\n"


def test_println_rejects_other_types():
    with pytest.raises(TypeError):
        println([1, 2], io.StringIO())