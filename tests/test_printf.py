import io

import pytest

from sigtalk.printf import format, printf, put_char, put_endl, put_nbr, put_str


def test_plain_text_passes_through():
    assert format("hello world") == "hello world"


def test_percent_escape():
    assert format("100%%") == "100%"


def test_unknown_specifier_drops_percent():
    assert format("a%qb") == "aqb"


def test_trailing_percent_dropped():
    assert format("abc%") == "abc"


def test_char_from_str_and_int():
    assert format("%c%c", "z", ord("A")) == "zA"


def test_string_and_null():
    assert format("[%s]", "text") == "[text]"
    assert format("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -42, 123456, 2147483647])
def test_decimal_round_trip(n):
    assert format("%d", n) == str(n)
    assert format("%i", n) == str(n)


def test_int_min():
    assert format("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_int32():
    assert format("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps():
    assert int(format("%u", -1)) == 2**32 - 1
    assert format("%u", 4294967295) == "4294967295"


@pytest.mark.parametrize("n", [0, 9, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format("%x", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert format("%X", n) == lower.upper()


def test_hex_pinned():
    assert format("%x", 255) == "ff"


def test_pointer_nil():
    assert format("%p", None) == "(nil)"
    assert format("%p", 0) == "(nil)"


def test_pointer_address():
    out = format("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_mixed_conversions():
    assert format("%s=%d (%c)", "x", 5, "y") == "x=5 (y)"


def test_too_few_arguments():
    with pytest.raises(ValueError):
        format("%d %d", 1)


def test_non_string_format():
    with pytest.raises(TypeError):
        format(None)


def test_bad_string_argument():
    with pytest.raises(TypeError):
        format("%s", 12)


def test_printf_returns_length_and_writes():
    buf = io.StringIO()
    count = printf("%s-%d", "ab", 12, stream=buf)
    assert buf.getvalue() == "ab-12"
    assert count == len(buf.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("%d\n", 42)
    captured = capsys.readouterr().out
    assert captured == "42\n"
    assert count == len(captured)


def test_put_char():
    buf = io.StringIO()
    put_char("q", buf)
    put_char(ord("r"), buf)
    assert buf.getvalue() == "qr"


def test_put_str_and_none():
    buf = io.StringIO()
    put_str("abc", buf)
    put_str(None, buf)
    assert buf.getvalue() == "abc"


def test_put_endl():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 5, -17, 2147483647, -2147483648])
def test_put_nbr(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == str(n)


def test_put_nbr_wraps():
    buf = io.StringIO()
    put_nbr(2147483648, buf)
    assert buf.getvalue() == "-2147483648"