"""Fibonacci numbers, greatest common divisors and a simple file concatenator."""

from __future__ import annotations

import re
import shutil
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

_MASK = (1 << 64) - 1
_UNSIGNED = re.compile(r"\s*\+?(\d+)")


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"index must not be negative, got {n}")


def fib(n: int) -> int:
    """Fibonacci number ``n`` by plain recursion; fib(1) == fib(2) == 1."""
    _check(n)
    if n < 3:
        return 1
    return (fib(n - 1) + fib(n - 2)) & _MASK


def fib_cached(n: int) -> int:
    """Fibonacci number ``n`` using a table of the earlier values."""
    _check(n)
    if n <= 2:
        return 1
    cache = [1, 1]
    while len(cache) < n:
        cache.append((cache[-1] + cache[-2]) & _MASK)
    return cache[n - 1]


def fib_iter(n: int) -> int:
    """Fibonacci number ``n`` keeping only the last two values."""
    _check(n)
    current, previous = 1, 1
    for _ in range(2, n):
        current, previous = (current + previous) & _MASK, current
    return current


def shifted_fib(n: int) -> int:
    """Fibonacci sequence starting 1, 1, 2 at index 0: shifted_fib(n) == fib(n + 1)."""
    _check(n)
    first, second = 1, 1
    for _ in range(2, n + 1):
        first, second = (first + second) & _MASK, first
    return first


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError(f"both numbers must be positive, got {a} and {b}")
    small, large = sorted((a, b))
    while small:
        small, large = large % small, small
    return large


def cat(
    paths: Iterable[str],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Copy the named files, or standard input when none are named, to ``out``.

    Files that cannot be opened are reported on ``err``. Returns 0 when at
    least one file was copied (or standard input was used), 1 otherwise.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    paths = list(paths)
    if not paths:
        shutil.copyfileobj(sys.stdin, out)
        return 0
    status = 1
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as stream:
                shutil.copyfileobj(stream, out)
        except OSError as exc:
            err.write(f"Could not open {path}: {exc.strerror}\n")
        else:
            status = 0
    return status


def _parse_unsigned(text: str) -> int:
    match = _UNSIGNED.match(text)
    return int(match.group(1)) if match else 0


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def fib_main(argv: Sequence[str] | None = None) -> int:
    """Print the Fibonacci number of the single argument."""
    args = _args(argv)
    if len(args) != 1:
        print("Usage: cbasics-fib <input_value>", file=sys.stderr)
        return 1
    num = _parse_unsigned(args[0])
    print(f"fib({num}): {fib_iter(num)}")
    return 0


def shifted_fib_main(argv: Sequence[str] | None = None) -> int:
    """Print the shifted Fibonacci number of the single argument."""
    args = _args(argv)
    if len(args) != 1:
        print("Usage: cbasics-shifted-fib <input_value>", file=sys.stderr)
        return 1
    print(shifted_fib(_parse_unsigned(args[0])))
    return 0


def gcd_main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of two arguments, 5 and 3 by default."""
    args = _args(argv)
    if not args:
        args = ["5", "3"]
    if len(args) != 2:
        print("Usage: cbasics-gcd [<a> <b>]", file=sys.stderr)
        return 1
    try:
        result = gcd(_parse_unsigned(args[0]), _parse_unsigned(args[1]))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(result)
    return 0


def cat_main(argv: Sequence[str] | None = None) -> int:
    """Concatenate the named files to standard output."""
    return cat(_args(argv))


if __name__ == "__main__":
    raise SystemExit(fib_main())