import io

import pytest

from pipex.printf import format_text, printf


def test_null_string_prints_placeholder():
    assert format_text("%s", None) == "(null)"


def test_string_is_inserted():
    assert format_text("[%s]", "Print me!") == "[Print me!]"
    assert format_text("[%s]", "") == "[]"


@pytest.mark.parametrize("value", [None, 0])
def test_null_pointer(value):
    assert format_text("%p", value) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0xDEADBEEF, 2**48 + 17])
def test_pointer_round_trip(address):
    text = format_text("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text[2:] == text[2:].lower()


def test_int_min_is_printed_whole():
    assert format_text("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("number", [0, 42, -42, 2147483647, -2147483648, 7])
@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_signed_round_trip(spec, number):
    assert int(format_text(spec, number)) == number


def test_signed_wraps_to_32_bits():
    assert int(format_text("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("number", [0, 42, -42, -2147483648, 2147483647])
def test_unsigned_and_hex_agree(number):
    unsigned = int(format_text("%u", number))
    assert 0 <= unsigned < 2**32
    assert unsigned % 2**32 == number % 2**32
    assert int(format_text("%x", number), 16) == unsigned
    assert format_text("%X", number) == format_text("%x", number).upper()


def test_minus_one_is_all_bits_set():
    assert int(format_text("%u", -1)) == 2**32 - 1
    assert set(format_text("%x", -1)) == {"f"}


def test_percent_escape():
    assert format_text("100%%") == "100%"


def test_unknown_specifier_keeps_the_character():
    assert format_text("a%qb") == "aqb"


def test_trailing_percent_is_dropped():
    assert format_text("abc%") == "abc"


def test_char_from_code_and_string():
    assert format_text("%c", 65) == "A"
    assert format_text("'%c'", "z") == "'z'"
    assert format_text("%c", 0) == "\0"


def test_arguments_are_used_in_order():
    assert format_text("%s-%d-%s", "x", 5, "y") == "x-5-y"


def test_too_few_arguments():
    with pytest.raises(TypeError):
        format_text("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert format_text("%s", "one", "two") == "one"


def test_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%%\n", "value", -7, stream=stream)
    assert stream.getvalue() == format_text("%s=%d%%\n", "value", -7)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("[%s]", "out")
    assert capsys.readouterr().out == "[out]"
    assert count == len("[out]")