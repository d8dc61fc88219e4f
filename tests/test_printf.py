import io

import pytest

from higher_lower.printf import format_printf, fprintf, printf


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_d_and_i_agree():
    assert format_printf("%i", -2147483648) == format_printf("%d", -2147483648)


def test_int_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == format_printf("%d", -(2**31))


@pytest.mark.parametrize("n", [0, 1, 15, 255, 4096, 2147483647])
def test_hex_matches_standard_formatting(n):
    assert format_printf("%x", n) == format(n, "x")
    assert format_printf("%X", n) == format(n, "x").upper()


def test_unsigned_wraps_negative():
    assert format_printf("%u", -1) == format_printf("%u", 4294967295)
    assert format_printf("%x", -1) == format_printf("%x", 4294967295)


def test_null_pointer():
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_has_prefix_and_value():
    text = format_printf("%p", 48879)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 48879


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_and_char():
    assert format_printf("%s:%c%c", "key", "h", ord("l")) == "key:hl"


def test_percent_escape_consumes_no_argument():
    assert format_printf("%%%d", 3) == "%3"


def test_unknown_conversion_is_literal():
    assert format_printf("%q") == "%q"


def test_literal_text_passes_through():
    assert format_printf("SCORE IS: %d\n", 7) == "SCORE IS: 7\n"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_returns_length_written(capsys):
    count = printf("CURRENT NUMBER IS: %d\n", 5)
    out = capsys.readouterr().out
    assert out == "CURRENT NUMBER IS: 5\n"
    assert count == len(out)


def test_printf_trailing_percent_reports_error(capsys):
    assert printf("abc%") == -1
    assert capsys.readouterr().out == "abc"


def test_fprintf_writes_to_stream():
    stream = io.StringIO()
    count = fprintf(stream, "%s=%u", "max", 10)
    assert stream.getvalue() == "max=10"
    assert count == len(stream.getvalue())