"""Processes and shared memory: a named shared message, a child command and a ring buffer."""

from __future__ import annotations

import os
import queue
import subprocess
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from multiprocessing import resource_tracker
from multiprocessing.shared_memory import SharedMemory

DEFAULT_NAME = "OS"
DEFAULT_SIZE = 4096
MESSAGE = "Hello_World!"


@dataclass(frozen=True)
class Item:
    """One entry passed from producer to consumer."""

    id: int
    amount: int


def _untrack(segment: SharedMemory) -> None:
    # Keep the segment alive after this process exits.
    if os.name == "posix":
        resource_tracker.unregister("/" + segment.name, "shared_memory")


def write_shared_message(name: str = DEFAULT_NAME, size: int = DEFAULT_SIZE) -> None:
    """Store the greeting in the shared memory segment ``name``, creating it if needed.

    The segment outlives this process until a reader removes it.
    """
    payload = MESSAGE.encode() + b"\0"
    if size < len(payload):
        raise ValueError(f"segment of {size} bytes cannot hold the message")
    try:
        segment = SharedMemory(name=name, create=True, size=size)
    except FileExistsError:
        segment = SharedMemory(name=name)
    try:
        _untrack(segment)
        segment.buf[: len(payload)] = payload
    finally:
        segment.close()


def read_shared_message(name: str = DEFAULT_NAME, size: int = DEFAULT_SIZE) -> str:
    """Read the text in segment ``name`` up to its first NUL, then remove the segment.

    Raises FileNotFoundError when no such segment exists.
    """
    segment = SharedMemory(name=name)
    try:
        data = bytes(segment.buf[: min(size, segment.size)])
    finally:
        segment.close()
        segment.unlink()
    return data.split(b"\0", 1)[0].decode(errors="replace")


def run_listing(command: Sequence[str] = ("ls",)) -> int:
    """Run ``command`` as a child process, wait for it and return its exit status."""
    print("Parent process executing", flush=True)
    print("Child process is executing", flush=True)
    completed = subprocess.run(list(command), check=False)
    print("Child Complete", flush=True)
    return completed.returncode


def producer_consumer(count: int = 15, size: int = 10) -> list[Item]:
    """Pass ``count`` items through a ring of ``size`` slots to a consumer thread.

    The ring keeps one slot free, so at most ``size - 1`` items wait at once.
    Returns the items in the order the consumer received them.
    """
    if size < 2:
        raise ValueError(f"ring needs at least 2 slots, got {size}")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    ring: queue.Queue[Item | None] = queue.Queue(maxsize=size - 1)
    consumed: list[Item] = []

    def consume() -> None:
        while (item := ring.get()) is not None:
            consumed.append(item)
            print(f"Consuming item with id '{item.id}'")

    consumer = threading.Thread(target=consume)
    consumer.start()
    try:
        for index in range(count):
            print(f"[{index + 1}] Adding item to the buffer at slot [{index % size}]")
            ring.put(Item(id=2234, amount=4000))
    finally:
        ring.put(None)
        consumer.join()
    return consumed


def _segment_name(argv: Sequence[str] | None) -> str:
    args = list(sys.argv[1:] if argv is None else argv)
    return args[0] if args else DEFAULT_NAME


def producer_main(argv: Sequence[str] | None = None) -> int:
    """Write the greeting into a named shared memory segment."""
    name = _segment_name(argv)
    try:
        write_shared_message(name)
    except OSError as exc:
        print(
            f"Error[{exc.errno}]: {exc.strerror}.\n"
            f"Could not create a new shared memory object with the name '{name}'.",
            file=sys.stderr,
        )
        return 1
    return 0


def consumer_main(argv: Sequence[str] | None = None) -> int:
    """Print the text of a named shared memory segment and remove it."""
    name = _segment_name(argv)
    try:
        message = read_shared_message(name)
    except OSError as exc:
        print(
            f"Error[{exc.errno}]: {exc.strerror}.\n"
            f"Could not open the shared memory object with the name '{name}'.",
            file=sys.stderr,
        )
        return 1
    print(message)
    return 0


def listing_main(argv: Sequence[str] | None = None) -> int:
    """List the current directory in a child process."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        status = run_listing(args or ("ls",))
    except OSError:
        print("Fork failed", file=sys.stderr)
        return 1
    return 0 if status == 0 else 1


def ring_main(argv: Sequence[str] | None = None) -> int:
    """Pass fifteen items through a ten-slot ring to a consumer."""
    items = producer_consumer(15, 10)
    print(f"Consumer completed after receiving {len(items)} items")
    return 0


if __name__ == "__main__":
    raise SystemExit(ring_main())