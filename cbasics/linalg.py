"""Integer matrix multiplication and a string-copy check."""

from __future__ import annotations

import sys
from collections.abc import Sequence

Matrix = list[list[int]]


def matmul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product of matrices ``a`` and ``b``.

    Raises ValueError when the column count of ``a`` differs from the row
    count of ``b``.
    """
    a_cols = len(a[0]) if a else 0
    if a_cols != len(b):
        raise ValueError(f"col size {a_cols} != row size {len(b)}")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render each row as space-terminated integers on its own line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def copy_name(name: str) -> str:
    """Return a fresh copy of ``name``."""
    return "".join(list(name))


def main(argv: Sequence[str] | None = None) -> int:
    """Check that the program name copies intact and multiply two sample vectors."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else "cbasics-linalg"
    name = copy_name(program)
    if name == program:
        print(f'Program name "{name}" successfully copied')
    else:
        print(f"Copying {program} leads to a different string {name}")

    row = [[1, 2, 3]]
    column = [[4], [5], [6]]
    for left, right in ((row, column), (column, row)):
        try:
            product = matmul(left, right)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            continue
        sys.stdout.write(format_matrix(product))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())