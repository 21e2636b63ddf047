"""A fixed-capacity FIFO ring buffer of floats."""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence


class BufferFullError(Exception):
    """Raised when appending to a buffer that already holds max_len values."""


class CircularBuffer:
    """Ring buffer of floats: values go in at the rear and leave from the front.

    Positions are counted from the oldest element and mapped onto the
    underlying storage modulo the capacity.
    """

    def __init__(self, max_len: int) -> None:
        max_len = operator.index(max_len)
        if max_len < 0:
            raise ValueError(f"capacity must not be negative, got {max_len}")
        self._tab = [0.0] * max_len
        self._start = 0
        self._len = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, max_len={self.max_len})"

    @property
    def max_len(self) -> int:
        """Capacity of the underlying storage."""
        return len(self._tab)

    def _slot(self, pos: int) -> int:
        capacity = len(self._tab)
        return (self._start + pos) % capacity if capacity else pos

    def _index(self, pos: int) -> int:
        pos = operator.index(pos)
        if not 0 <= pos < self.max_len:
            raise IndexError(f"position {pos} outside capacity {self.max_len}")
        return self._slot(pos)

    def set_start(self, start: int) -> None:
        """Place element 0 at storage slot ``start``."""
        start = operator.index(start)
        if start < 0:
            raise ValueError(f"start index must not be negative, got {start}")
        self._start = start % self.max_len if self.max_len else 0

    def append(self, value: float) -> None:
        """Add ``value`` at the rear; raise BufferFullError when full."""
        if self._len >= self.max_len:
            raise BufferFullError(f"buffer holds its maximum of {self.max_len} values")
        self._tab[self._slot(self._len)] = float(value)
        self._len += 1

    def pop(self) -> float:
        """Remove and return the oldest value, or 0.0 when the buffer is empty."""
        if not self._len:
            return 0.0
        value = self._tab[self._start]
        self._start = (self._start + 1) % self.max_len
        self._len -= 1
        return value

    def element(self, pos: int) -> float:
        """Return the value stored at position ``pos`` (any slot below capacity)."""
        return self._tab[self._index(pos)]

    def __getitem__(self, pos: int) -> float:
        return self.element(pos)

    def __setitem__(self, pos: int, value: float) -> None:
        self._tab[self._index(pos)] = float(value)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[float]:
        for offset in range(self._len):
            yield self._tab[self._slot(offset)]

    def resize(self, max_len: int) -> None:
        """Change the capacity, keeping the stored values in order.

        Raises ValueError when the new capacity cannot hold the stored values.
        """
        max_len = operator.index(max_len)
        if max_len < 0:
            raise ValueError(f"capacity must not be negative, got {max_len}")
        length = self._len
        if length > max_len:
            raise ValueError(
                f"cannot shrink to {max_len}: buffer holds {length} values"
            )
        old = self.max_len
        if max_len == old:
            return
        ostart = self._slot(0) if old else 0
        nstart = ostart
        wrapped = ostart + length > old
        tab: list[float]
        if max_len > old:
            tab = self._tab + [0.0] * (max_len - old)
            if wrapped:
                upper = old - ostart
                lower = length - upper
                if lower <= max_len - old:
                    tab[old:old + lower] = tab[:lower]
                else:
                    nstart = max_len - upper
                    tab[nstart:nstart + upper] = tab[ostart:ostart + upper]
        else:
            tab = list(self._tab)
            if wrapped:
                upper = old - ostart
                nstart = max_len - upper
                tab[nstart:nstart + upper] = tab[ostart:ostart + upper]
            elif ostart + length > max_len:
                tab[:length] = tab[ostart:ostart + length]
                nstart = 0
            del tab[max_len:]
        self._tab = tab
        self._start = nstart


def _print_contents(buffer: CircularBuffer) -> None:
    for pos, value in enumerate(buffer):
        print(f"[{pos}] = {value:.2f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate appending, popping and resizing a buffer."""
    buffer = CircularBuffer(10)
    print(f"Size of the circular array: {buffer.max_len}")
    buffer.set_start(8)

    start = 13.7
    for i in range(5):
        buffer.append(start * (i + 1))
    print(f"Current number of values: {len(buffer)}")
    print("Removing earliest entry into the circular array")

    value = buffer.pop()
    print(f"Earliest entry: {value:.2f}")
    print(f"Current number of values: {len(buffer)}")
    _print_contents(buffer)

    print("Resizing the circular array")
    try:
        buffer.resize(6)
    except ValueError:
        print("Could not resize the array")
    else:
        print(f"New size of the circular array: {buffer.max_len}")
        _print_contents(buffer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())