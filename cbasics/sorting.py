"""Merge sort and quicksort of numbers, with a command that sorts its arguments."""

from __future__ import annotations

import heapq
import re
import sys
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import pairwise

_DOUBLE = re.compile(
    r"\s*(?P<number>[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?P<mantissa>\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r"))",
    re.IGNORECASE,
)


def _merge_sorted(items: list) -> list:
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return list(heapq.merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:])))


def merge_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place with a stable top-down merge sort."""
    values[:] = _merge_sorted(list(values))


def partition(values: MutableSequence, low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around ``values[high]``.

    Smaller values move to the front; the pivot lands between them and the
    rest. Returns the pivot's final index.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid range [{low}, {high}] for {len(values)} values")
    pivot = values[high]
    first_high = low
    for i in range(low, high):
        if values[i] < pivot:
            values[i], values[first_high] = values[first_high], values[i]
            first_high += 1
    values[high], values[first_high] = values[first_high], values[high]
    return first_high


def quick_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place with quicksort, last element as pivot."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if high - low > 0:
            pivot = partition(values, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))


def is_sorted(values: Iterable) -> bool:
    """Whether no value is greater than the one after it."""
    return not any(a > b for a, b in pairwise(values))


def format_numbers(values: Iterable[float]) -> str:
    """Join numbers in %g notation, separated by ', '."""
    return ", ".join("%g" % value for value in values)


def _parse_double(text: str) -> float:
    """Read the leading number of ``text``; no number at all reads as 0."""
    match = _DOUBLE.match(text)
    if not match:
        return 0.0
    number = match["number"]
    if number.lstrip("+-")[:2].lower() == "0x":
        return float.fromhex(number)
    value = float(number)
    mantissa = match["mantissa"]
    if value == 0.0 and mantissa and re.search(r"[1-9]", mantissa):
        raise ValueError("Numerical result out of range")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments and report whether they ended sorted."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: cbasics-sort <[number], ... ,[number]>", file=sys.stderr)
        return 1
    try:
        numbers = [_parse_double(arg) for arg in args]
    except ValueError as exc:
        print(f"strtod: {exc}", file=sys.stderr)
        return 1

    print(format_numbers(numbers))
    merge_sort(numbers)
    print(f"Sorted? {'YES' if is_sorted(numbers) else 'NO'}")
    print(format_numbers(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())