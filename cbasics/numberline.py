"""Read lines of numbers and write them back as comma separated hexadecimal."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

_ULLONG_MAX = (1 << 64) - 1
_WHITESPACE = " \t\n\v\f\r"
_NO_DIGIT = 99


class LineTooLongError(Exception):
    """Raised when no complete line fits into the read buffer.

    ``partial`` holds the text that could be read.
    """

    def __init__(self, partial: str) -> None:
        super().__init__(f"line too long: {partial!r}")
        self.partial = partial


def _digit(ch: str) -> int:
    if ch.isascii() and ch.isalnum():
        return int(ch, 36)
    return _NO_DIGIT


def _read_unsigned(text: str, pos: int, base: int) -> tuple[int, int] | None:
    """Read one unsigned 64-bit number starting at ``pos``.

    Returns the value and the position after it, or None when no digits
    follow. Negative numbers wrap around; values that do not fit saturate.
    """
    end = len(text)
    i = pos
    while i < end and text[i] in _WHITESPACE:
        i += 1
    negative = False
    if i < end and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    if (
        base in (0, 16)
        and text[i:i + 2].lower() == "0x"
        and i + 2 < end
        and _digit(text[i + 2]) < 16
    ):
        base = 16
        i += 2
    elif base == 0:
        base = 8 if text[i:i + 1] == "0" else 10
    start = i
    value = 0
    while i < end:
        digit = _digit(text[i])
        if digit >= base:
            break
        value = value * base + digit
        i += 1
    if i == start:
        return None
    if value > _ULLONG_MAX:
        value = _ULLONG_MAX
    elif negative:
        value = -value & _ULLONG_MAX
    return value, i


def parse_numbers(line: str, base: int = 0) -> list[int]:
    """Split ``line`` into the unsigned numbers it holds.

    ``base`` is 0 or between 2 and 36; 0 picks the base from each number's
    prefix (``0x`` hexadecimal, ``0`` octal, otherwise decimal). Reading
    stops at the first text that is not a number.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"base must be 0 or between 2 and 36, got {base}")
    numbers: list[int] = []
    pos = 0
    while pos < len(line):
        found = _read_unsigned(line, pos, base)
        if found is None:
            break
        value, pos = found
        numbers.append(value)
    return numbers


def _hex(value: int) -> str:
    return f"0X{value:X}" if value else "0"


def format_numbers(numbers: Iterable[int], sep: str = ",\t") -> str:
    """Write ``numbers`` as ``0X``-prefixed hexadecimal joined by ``sep``, ending in a newline."""
    return sep.join(_hex(value) for value in numbers) + "\n"


def read_line(stream: TextIO, size: int = 256) -> str | None:
    """Read one line of at most ``size - 1`` characters, without its newline.

    Returns None at the end of the stream. Raises LineTooLongError when the
    characters read end before a newline.
    """
    if size < 2:
        raise ValueError(f"buffer size must be at least 2, got {size}")
    chunk = stream.readline(size - 1)
    if not chunk:
        return None
    if chunk.endswith("\n"):
        return chunk[:-1]
    raise LineTooLongError(chunk)


def _skip_rest_of_line(stream: TextIO) -> bool:
    """Discard up to and including the next newline; False at end of stream."""
    while True:
        ch = stream.read(1)
        if not ch:
            return False
        if ch == "\n":
            return True


def process_stream(
    instream: TextIO,
    outstream: TextIO,
    errstream: TextIO,
    size: int = 256,
) -> int:
    """Rewrite every line of ``instream`` as hexadecimal numbers.

    Lines too long for the buffer are reported on ``errstream`` and skipped.
    Returns 0 at a clean end of input, 1 when input ends inside a line.
    """
    while True:
        try:
            line = read_line(instream, size)
        except LineTooLongError as exc:
            if not _skip_rest_of_line(instream):
                return 1
            errstream.write(f"line too long: {exc.partial}")
            continue
        if line is None:
            return 0
        outstream.write(format_numbers(parse_numbers(line)))


def main(argv: Sequence[str] | None = None) -> int:
    """Filter standard input to standard output."""
    return process_stream(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())