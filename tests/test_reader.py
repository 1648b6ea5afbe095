import io

import pytest

from stcontainers.reader import TokenReader


def reader(text):
    return TokenReader(io.StringIO(text))


def test_entered_integer():
    assert reader("42\n").read_int() == 42


def test_int_skips_leading_blanks_and_newlines():
    assert reader("  \n \n 17 ").read_int() == 17


def test_negative_int():
    assert reader("-305").read_int() == -305


def test_int_without_digits_is_zero():
    assert reader("abc").read_int() == 0
    assert reader("").read_int() == 0


def test_sequence_of_ints():
    r = reader("1 2\n3")
    assert [r.read_int(), r.read_int(), r.read_int()] == [1, 2, 3]


def test_int_consumes_terminator():
    r = reader("12x")
    assert r.read_int() == 12
    assert r.read_char() == ""


def test_int_stops_at_non_digit_keeping_rest():
    r = reader("12xy")
    assert r.read_int() == 12
    assert r.read_char() == "y"


def test_read_word_stops_at_space():
    r = reader("hello world\n")
    assert r.read_word() == "hello"
    assert r.read_word() == "world"
    assert r.read_word() == ""


def test_read_word_does_not_skip_leading_space():
    r = reader(" word")
    assert r.read_word() == ""
    assert r.read_word() == "word"


def test_read_char_returns_whitespace_too():
    r = reader(" a")
    assert r.read_char() == " "
    assert r.read_char() == "a"
    assert r.read_char() == ""


def test_short_in_range():
    assert reader("-1200").read_short() == -1200


def test_short_wraps():
    assert reader("32768").read_short() == -32768


def test_unsigned():
    assert reader(" 4000000000\n").read_unsigned() == 4000000000


def test_unsigned_wraps_at_32_bits():
    assert reader("4294967296").read_unsigned() == 0


def test_unsigned_short_wraps():
    assert reader("65537").read_unsigned_short() == 1
    assert reader("300").read_unsigned_short() == 300


def test_float_values():
    assert reader("3.14").read_float() == pytest.approx(3.14)
    assert reader("\n -2.5 ").read_float() == pytest.approx(-2.5)
    assert reader("7").read_float() == 7.0


def test_float_leading_point():
    assert reader(".25").read_float() == pytest.approx(0.25)


def test_float_sequence():
    r = reader("1.5 2.25")
    assert r.read_float() == pytest.approx(1.5)
    assert r.read_float() == pytest.approx(2.25)


def test_default_stream_is_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("99\n"))
    assert TokenReader().read_int() == 99