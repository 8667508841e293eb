import io

import pytest

from minitalk.cfmt import format_basic, printf_basic
from minitalk.parsing import itoa


def test_plain_text_passes_through():
    text = "Waiting message...\n"
    assert format_basic(text) == text


@pytest.mark.parametrize("spec", ["%d", "%i"])
@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_decimal_matches_itoa(spec, n):
    assert format_basic(spec, n) == itoa(n)


def test_decimal_wraps_to_32_bits():
    assert format_basic("%d", 2**31) == "-2147483648"


def test_pid_line():
    pid = 4321
    assert format_basic("Server's pid is %d\n", pid) == "Server's pid is " + itoa(pid) + "\n"


def test_unsigned_round_trip():
    for n in [1, 9, 10, 4294967295]:
        assert int(format_basic("%u", n)) == n


def test_unsigned_negative_wraps():
    assert int(format_basic("%u", -1)) == 0xFFFFFFFF


def test_unsigned_zero_prints_nothing():
    assert format_basic("%u", 0) == ""


def test_char_from_int_and_str():
    assert format_basic("%c", 65) == chr(65)
    assert format_basic("%c", "z") == "z"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_basic("%c", "ab")


def test_string_and_null():
    assert format_basic("%s!", "moray") == "moray!"
    assert format_basic("%s", None) == "(null)"


def test_pointer():
    assert format_basic("%p", 0) == "0x0"
    assert format_basic("%p", None) == "0x0"
    out = format_basic("%p", 0xDEADBEEF)
    assert out.startswith("0x")
    assert int(out, 16) == 0xDEADBEEF


@pytest.mark.parametrize("n", [1, 15, 16, 255, 36475873, 4294967295])
def test_hex_round_trip_and_case(n):
    lower = format_basic("%x", n)
    upper = format_basic("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_zero():
    assert format_basic("%x", 0) == "0"
    assert format_basic("%X", 0) == "0"


def test_hex_negative_wraps():
    assert int(format_basic("%x", -1), 16) == 0xFFFFFFFF


def test_percent_escape():
    assert format_basic("100%%") == "100%"
    assert format_basic("%%d", 7) == "%d"


def test_unknown_conversion_is_literal():
    assert format_basic("%z") == "%z"


def test_trailing_percent_dropped():
    assert format_basic("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_basic("%d %d", 1)


def test_arguments_consumed_in_order():
    assert format_basic("%s-%s", "a", "b") == "a-b"


def test_printf_basic_writes_and_counts():
    stream = io.StringIO()
    count = printf_basic("%s is %d\n", "answer", 42, stream=stream)
    expected = format_basic("%s is %d\n", "answer", 42)
    assert stream.getvalue() == expected
    assert count == len(expected)


def test_printf_basic_default_stdout(capsys):
    count = printf_basic("%c", "x")
    assert capsys.readouterr().out == "x"
    assert count == 1