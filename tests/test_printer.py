import io

import pytest

from miniprintf.printer import FormatError, printf, render


def test_plain_text():
    assert render("hello") == "hello"


def test_mixed_conversions():
    assert render("%d %s", 7, "ab") == "7 ab"


def test_null_string_and_pointer():
    assert render("%s", None) == "(null)"
    assert render("%p", None) == "(nil)"


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"
    assert render("%i", -2147483648) == "-2147483648"


def test_percent_literal():
    assert render("%%") == "%"


def test_unknown_specifier_emitted():
    assert render("%z") == "z"


def test_unknown_specifier_consumes_no_argument():
    assert render("%z%d", 5) == "z5"


def test_hex_roundtrip_through_template():
    assert int(render("%x", 48879), 16) == 48879
    assert render("%X", 48879) == render("%x", 48879).upper()


def test_unsigned_roundtrip():
    assert int(render("%u", 3000000000)) == 3000000000


def test_char_conversion():
    assert render("%c%c", "o", ord("k")) == "ok"


def test_extra_arguments_ignored():
    assert render("x", 1, 2) == "x"


def test_template_stops_at_nul():
    assert render("ab\0cd") == "ab"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        render("100%")


def test_none_template_raises():
    with pytest.raises(FormatError):
        render(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        render("%d")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        render("%s %s", "one")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d", "n", 12, file=stream)
    assert stream.getvalue() == render("%s=%d", "n", 12)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "stdout")
    captured = capsys.readouterr()
    assert captured.out == "stdout"
    assert count == len("stdout")


def test_printf_error_writes_nothing():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc%", file=stream)
    assert stream.getvalue() == ""