import io

import pytest

from cbasics.numberline import (
    LineTooLongError,
    format_numbers,
    parse_numbers,
    process_stream,
    read_line,
)

MAX = 2**64 - 1


def test_parse_decimal_numbers():
    assert parse_numbers("1 2 3") == [1, 2, 3]


def test_parse_leading_zero_splits_in_base_zero():
    # "08" is an octal 0 followed by a decimal 8.
    assert parse_numbers("08 08 08") == [0, 8, 0, 8, 0, 8]


def test_parse_stops_at_garbage():
    assert parse_numbers("12abc 7") == [12]


def test_parse_negative_wraps_around():
    assert parse_numbers("-1") == [MAX]


def test_parse_overflow_saturates():
    assert parse_numbers("9" * 40) == [MAX]


def test_parse_explicit_base():
    assert parse_numbers("ff", 16) == [255]


def test_parse_empty_line():
    assert parse_numbers("") == []


@pytest.mark.parametrize("base", [1, 37, -2])
def test_parse_rejects_bad_base(base):
    with pytest.raises(ValueError):
        parse_numbers("1", base)


@pytest.mark.parametrize("numbers", [[1, 2, 3], [0, 255, 4096], [MAX, 7]])
def test_format_then_parse_round_trip(numbers):
    assert parse_numbers(format_numbers(numbers, " ")) == numbers


def test_format_empty_is_newline():
    assert format_numbers([]) == "\n"


def test_format_uses_prefix_and_uppercase():
    text = format_numbers([10, 171])
    parts = text.rstrip("\n").split(",\t")
    assert len(parts) == 2
    assert all(p.startswith("0X") and p == p.upper() for p in parts)


def test_read_line_strips_newline():
    stream = io.StringIO("abc\ndef\n")
    assert read_line(stream) == "abc"
    assert read_line(stream) == "def"
    assert read_line(stream) is None


def test_read_line_too_long():
    stream = io.StringIO("abcdefgh\n")
    with pytest.raises(LineTooLongError) as info:
        read_line(stream, 4)
    assert info.value.partial == "abc"


def test_read_line_missing_final_newline():
    with pytest.raises(LineTooLongError) as info:
        read_line(io.StringIO("12"))
    assert info.value.partial == "12"


def test_process_stream_writes_hex_lines():
    out, err = io.StringIO(), io.StringIO()
    status = process_stream(io.StringIO("1 2\n3\n"), out, err)
    assert status == 0
    assert out.getvalue() == format_numbers([1, 2]) + format_numbers([3])
    assert err.getvalue() == ""


def test_process_stream_reports_long_line():
    out, err = io.StringIO(), io.StringIO()
    status = process_stream(io.StringIO("1 2 3 4 5 6\n7\n"), out, err, size=8)
    assert status == 0
    assert err.getvalue() == "line too long: 1 2 3 4"
    assert out.getvalue() == format_numbers([7])


def test_process_stream_fails_on_unterminated_line():
    out, err = io.StringIO(), io.StringIO()
    assert process_stream(io.StringIO("5\n6"), out, err) == 1
    assert out.getvalue() == format_numbers([5])