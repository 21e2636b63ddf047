import pytest

from cbasics.circular import BufferFullError, CircularBuffer, main


def make(capacity, start, values):
    buffer = CircularBuffer(capacity)
    buffer.set_start(start)
    for value in values:
        buffer.append(value)
    return buffer


def test_fifo_order():
    buffer = make(3, 0, [5.6, 10.2])
    assert len(buffer) == 2
    assert buffer.pop() == 5.6
    assert len(buffer) == 1
    assert buffer.pop() == 10.2
    assert len(buffer) == 0


def test_pop_empty_returns_zero():
    buffer = CircularBuffer(4)
    assert buffer.pop() == 0.0
    assert len(buffer) == 0


def test_append_to_full_raises():
    buffer = make(2, 0, [1.0, 2.0])
    with pytest.raises(BufferFullError):
        buffer.append(3.0)
    assert list(buffer) == [1.0, 2.0]


def test_zero_capacity_rejects_append():
    buffer = CircularBuffer(0)
    assert buffer.max_len == 0
    with pytest.raises(BufferFullError):
        buffer.append(1.0)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CircularBuffer(-1)


def test_wrap_around_keeps_order():
    values = [1.0, 2.0, 3.0, 4.0, 5.0]
    buffer = make(10, 8, values)
    assert list(buffer) == values
    assert [buffer[i] for i in range(len(buffer))] == values


def test_pop_then_append_cycles():
    buffer = make(3, 0, [1.0, 2.0, 3.0])
    assert buffer.pop() == 1.0
    buffer.append(4.0)
    assert list(buffer) == [2.0, 3.0, 4.0]


def test_element_range_is_capacity():
    buffer = make(4, 0, [7.0])
    assert buffer.element(0) == 7.0
    buffer.element(3)
    with pytest.raises(IndexError):
        buffer.element(4)
    with pytest.raises(IndexError):
        buffer.element(-1)


def test_setitem_updates_value():
    buffer = make(5, 3, [1.0, 2.0, 3.0])
    buffer[1] = 9.5
    assert list(buffer) == [1.0, 9.5, 3.0]
    with pytest.raises(IndexError):
        buffer[5] = 0.0


def test_resize_shrink_wrapped():
    buffer = make(10, 8, [1.0, 2.0, 3.0, 4.0, 5.0])
    buffer.pop()
    before = list(buffer)
    buffer.resize(6)
    assert buffer.max_len == 6
    assert list(buffer) == before
    buffer.append(6.0)
    buffer.append(7.0)
    assert list(buffer) == before + [6.0, 7.0]


def test_resize_shrink_unwrapped_past_new_end():
    buffer = make(10, 7, [1.0, 2.0])
    buffer.resize(3)
    assert list(buffer) == [1.0, 2.0]
    assert buffer.max_len == 3


def test_resize_grow_lower_part_moved():
    buffer = make(4, 1, [1.0, 2.0, 3.0, 4.0])
    buffer.resize(5)
    assert list(buffer) == [1.0, 2.0, 3.0, 4.0]
    buffer.append(5.0)
    assert list(buffer) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_resize_grow_upper_part_moved():
    buffer = make(4, 3, [1.0, 2.0, 3.0, 4.0])
    buffer.resize(5)
    assert list(buffer) == [1.0, 2.0, 3.0, 4.0]
    buffer.append(5.0)
    assert [buffer.pop() for _ in range(5)] == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_resize_below_length_raises():
    buffer = make(5, 0, [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        buffer.resize(2)
    assert buffer.max_len == 5
    assert list(buffer) == [1.0, 2.0, 3.0]


def test_resize_same_size_keeps_contents():
    buffer = make(3, 2, [1.0, 2.0])
    buffer.resize(3)
    assert list(buffer) == [1.0, 2.0]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Size of the circular array: 10"
    assert lines[1] == "Current number of values: 5"
    assert "Earliest entry: 13.70" in lines
    assert "Current number of values: 4" in lines
    resize_at = lines.index("Resizing the circular array")
    assert lines[resize_at + 1] == "New size of the circular array: 6"
    before = lines[resize_at - 4:resize_at]
    after = lines[resize_at + 2:]
    assert before == after
    assert before[0].startswith("[0] = ")