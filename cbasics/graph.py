"""Breadth-first search over an adjacency matrix using a bounded FIFO queue."""

from __future__ import annotations

import operator
from collections.abc import Sequence

_SAMPLE_GRAPH = (
    (False, True, False, False, True),
    (True, False, True, True, True),
    (False, True, False, True, False),
    (False, True, True, False, True),
    (True, True, False, True, False),
)
_DEFAULT_SIZE = 64


class QueueOverflowError(Exception):
    """Raised when a BoundedQueue has no free slot left."""


class BoundedQueue:
    """FIFO queue backed by a fixed number of slots.

    A queue of ``size`` slots accepts ``size - 1`` items. Slots freed by
    dequeuing are only reused once a dequeue finds the queue empty, which
    resets it.
    """

    def __init__(self, size: int = _DEFAULT_SIZE) -> None:
        size = operator.index(size)
        if size < 1:
            raise ValueError(f"queue size must be positive, got {size}")
        self._slots: list[object] = [None] * size
        self._top = 0
        self._end = 0

    def enqueue(self, item: object) -> None:
        """Add ``item`` at the rear; raise QueueOverflowError when no slot is left."""
        if self._end >= len(self._slots) - 1:
            raise QueueOverflowError(
                f"queue of {len(self._slots)} slots has no room left"
            )
        self._slots[self._end] = item
        self._end += 1

    def dequeue(self) -> object:
        """Remove and return the front item.

        Raises IndexError when the queue is empty, after resetting it.
        """
        if self._top == self._end:
            self._top = self._end = 0
            raise IndexError("queue is empty")
        item = self._slots[self._top]
        self._top += 1
        return item

    def __len__(self) -> int:
        return self._end - self._top


def bfs(adjacency: Sequence[Sequence[bool]], start: int) -> list[bool]:
    """Return, for every vertex, whether it is reachable from ``start``."""
    count = len(adjacency)
    if any(len(row) != count for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < count:
        raise IndexError(f"start vertex {start} outside 0..{count - 1}")
    visited = [False] * count
    queue = BoundedQueue(count + 1)
    visited[start] = True
    queue.enqueue(start)
    while True:
        try:
            vertex = queue.dequeue()
        except IndexError:
            break
        for neighbour, connected in enumerate(adjacency[vertex]):
            if connected and not visited[neighbour]:
                visited[neighbour] = True
                queue.enqueue(neighbour)
    return visited


def main(argv: Sequence[str] | None = None) -> int:
    """Run a breadth-first search on a sample graph from vertex 3."""
    for index, seen in enumerate(bfs(_SAMPLE_GRAPH, 3)):
        print(f"Index: {index} visited ?: {int(seen)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())