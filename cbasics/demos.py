"""Small demonstrations of arrays, enumerations, flags and object lifetimes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import IntEnum, IntFlag

from cbasics.linalg import copy_name

INT_MAX = 2**31 - 1
_SAMPLE_VALUES = (9.0, 2.9, 0.0, 0.00007, 3.0e25)
_SIGN_SET = (2.0, 1.0, -2.0)
_SAMPLE_CORVIDS = ("magpie", "raven", "magpie")


class Corvid(IntEnum):
    """Birds of the crow family, numbered from zero."""

    MAGPIE = 0
    RAVEN = 1
    JAY = 2
    CHOUGH = 3


class Flock(IntFlag):
    """A set of corvids, one bit per species."""

    EMPTY = 0
    MAGPIE = 1 << Corvid.MAGPIE
    RAVEN = 1 << Corvid.RAVEN
    JAY = 1 << Corvid.JAY
    CHOUGH = 1 << Corvid.CHOUGH
    FULL = (1 << len(Corvid)) - 1


def square_lines(values: Iterable[float]) -> list[str]:
    """Describe each value and its square."""
    return [
        "element %d is %g, \tits square is %g" % (i, value, value * value)
        for i, value in enumerate(values)
    ]


def count_signs(n: int) -> tuple[int, int]:
    """Count values ``i * s[i % 3]`` for i < n below 1.0 and at least 1.0."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    values = [i * _SIGN_SET[i % 3] for i in range(n)]
    below = sum(1 for value in values if value < 1.0)
    return below, n - below


def counting_up_to_limit(limit: int = INT_MAX, steps: int = 10) -> list[int]:
    """Count upward from ``limit - steps`` until the limit is reached."""
    if steps < 0:
        raise ValueError(f"steps must not be negative, got {steps}")
    return list(range(limit - steps, limit + 1))


def corvid_lines(names: Sequence[str]) -> list[str]:
    """Name the corvid at each index."""
    return [f"Corvid {i} is the {name}" for i, name in enumerate(names)]


def fgoto_lines(n: int) -> list[str]:
    """Report how a loop-local object is reused across ``n`` passes.

    The first pass compares against no object; every later pass finds the
    same object again, holding the previous counter value.
    """
    lines = []
    for j in range(1, n + 1):
        relation = "unequal" if j == 1 else "equal"
        lines.append(f"{j}: p and q are {relation}, *p is: {j - 1}")
    return lines


def zeroed_array_lines(length: int) -> list[str]:
    """Describe a freshly zeroed array of ``length`` unsigned values."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return [f"ap->data[{i}] is {value}" for i, value in enumerate([0] * length)]


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _squares() -> None:
    _print_lines(square_lines(_SAMPLE_VALUES))


def _signs() -> None:
    below, above = count_signs(10)
    print(f"Count < 1.0: {below}\nCount >= 1.0: {above}")


def _counting() -> None:
    print("".join(f"{i} " for i in counting_up_to_limit()))


def _corvids() -> None:
    _print_lines(corvid_lines(_SAMPLE_CORVIDS))


def _fgoto() -> None:
    _print_lines(fgoto_lines(5))


def _zeroed() -> None:
    _print_lines(zeroed_array_lines(32))
    print()


def _program_name() -> None:
    program = sys.argv[0] if sys.argv and sys.argv[0] else "cbasics-demos"
    name = copy_name(program)
    if name == program:
        print(f"Program name, '{name}' successfully copied.")
    else:
        print(f"Copying '{program}' leads to different string '{name}'.", file=sys.stderr)


_DEMOS: dict[str, Callable[[], None]] = {
    "squares": _squares,
    "signs": _signs,
    "counting": _counting,
    "corvids": _corvids,
    "fgoto": _fgoto,
    "zeroed": _zeroed,
    "program-name": _program_name,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named demonstrations, or all of them."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("demos", nargs="*", choices=[*_DEMOS, []] and list(_DEMOS))
    args = parser.parse_args(argv)
    for name in args.demos or _DEMOS:
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())