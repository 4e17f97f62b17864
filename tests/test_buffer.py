import pytest

from smplterm.buffer import BufferFull, FixedBuffer


def test_new_buffer_is_empty():
    buf = FixedBuffer(4)
    assert len(buf) == 0
    assert list(buf) == []
    assert buf.capacity == 4


def test_push_then_iterate_keeps_order():
    buf = FixedBuffer(3)
    for ch in "abc":
        buf.push(ch)
    assert list(buf) == ["a", "b", "c"]
    assert len(buf) == 3


def test_push_beyond_capacity_raises():
    buf = FixedBuffer(2)
    buf.push(1)
    buf.push(2)
    with pytest.raises(BufferFull):
        buf.push(3)
    assert list(buf) == [1, 2]


def test_zero_capacity_rejects_push():
    with pytest.raises(BufferFull):
        FixedBuffer(0).push("x")


def test_pop_returns_last_item():
    buf = FixedBuffer(3)
    buf.push("x")
    buf.push("y")
    assert buf.pop() == "y"
    assert list(buf) == ["x"]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        FixedBuffer(3).pop()


def test_pop_makes_room_again():
    buf = FixedBuffer(1)
    buf.push(1)
    buf.pop()
    buf.push(2)
    assert list(buf) == [2]


def test_reset_clears_items():
    buf = FixedBuffer(3)
    buf.push(1)
    buf.push(2)
    buf.reset()
    assert len(buf) == 0
    buf.push(3)
    assert list(buf) == [3]


def test_getitem_by_index_and_slice():
    buf = FixedBuffer(5)
    for n in range(4):
        buf.push(n)
    assert buf[0] == 0
    assert buf[-1] == 3
    assert buf[1:3] == [1, 2]


def test_getitem_out_of_range_raises():
    buf = FixedBuffer(5)
    buf.push("a")
    assert buf[0] == "a"
    assert len(buf) == 1
    with pytest.raises(IndexError):
        buf[1]


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        FixedBuffer(-1)


def test_push_pop_round_trip():
    buf = FixedBuffer(10)
    items = list("sampler")
    for item in items:
        buf.push(item)
    popped = [buf.pop() for _ in items]
    assert popped == items[::-1]
    assert len(buf) == 0