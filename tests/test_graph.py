import pytest

from cbasics.graph import BoundedQueue, QueueOverflowError, bfs, main

SAMPLE = [
    [False, True, False, False, True],
    [True, False, True, True, True],
    [False, True, False, True, False],
    [False, True, True, False, True],
    [True, True, False, True, False],
]


def test_queue_is_fifo():
    queue = BoundedQueue(5)
    for item in ("a", "b", "c"):
        queue.enqueue(item)
    assert len(queue) == 3
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_queue_accepts_one_less_than_size():
    queue = BoundedQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)


def test_slots_not_reused_until_reset():
    queue = BoundedQueue(3)
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)


def test_empty_dequeue_raises_and_resets():
    queue = BoundedQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue(7)
    queue.enqueue(8)
    assert queue.dequeue() == 7


def test_invalid_size():
    with pytest.raises(ValueError):
        BoundedQueue(0)


def test_bfs_connected_sample():
    assert bfs(SAMPLE, 3) == [True] * 5


def test_bfs_disconnected():
    graph = [
        [False, True, False],
        [True, False, False],
        [False, False, False],
    ]
    assert bfs(graph, 0) == [True, True, False]
    assert bfs(graph, 2) == [False, False, True]


def test_bfs_reachability_is_symmetric_for_undirected_graph():
    graph = [
        [False, True, False, False],
        [True, False, False, False],
        [False, False, False, True],
        [False, False, True, False],
    ]
    for a in range(4):
        for b in range(4):
            assert bfs(graph, a)[b] == bfs(graph, b)[a]


def test_bfs_rejects_non_square():
    with pytest.raises(ValueError):
        bfs([[False, True], [True, False, False]], 0)


def test_bfs_rejects_bad_start():
    with pytest.raises(IndexError):
        bfs(SAMPLE, 5)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"Index: {i} visited ?: 1" for i in range(5)]