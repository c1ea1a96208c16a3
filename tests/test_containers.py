import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.containers import BoundedArray, Queue, Stack


def test_array_source_sequence():
    arr = BoundedArray(10)
    arr.insert(0, 5)
    arr.insert(1, 10)
    arr.insert(1, 7)
    assert list(arr) == [5, 7, 10]
    assert arr.update(1, 15) == 7
    assert list(arr) == [5, 15, 10]
    assert arr.remove(2) == 10
    assert list(arr) == [5, 15]
    with pytest.raises(IndexError):
        arr.insert(3, 20)
    assert len(arr) == 2


def test_array_full():
    arr = BoundedArray(2)
    arr.insert(0, 1)
    arr.insert(1, 2)
    with pytest.raises(OverflowError):
        arr.insert(0, 3)
    assert list(arr) == [1, 2]


@pytest.mark.parametrize("index", [-1, 1])
def test_array_invalid_access(index):
    arr = BoundedArray(3)
    arr.insert(0, 9)
    with pytest.raises(IndexError):
        arr.remove(index)
    with pytest.raises(IndexError):
        arr.update(index, 0)
    with pytest.raises(IndexError):
        arr[index]


def test_array_getitem():
    arr = BoundedArray(3)
    arr.insert(0, 4)
    arr.insert(0, 8)
    assert arr[0] == 8 and arr[1] == 4


def test_array_negative_capacity():
    with pytest.raises(ValueError):
        BoundedArray(-1)


def test_queue_source_sequence():
    q = Queue()
    q.enqueue(10)
    q.enqueue(20)
    assert q.front() == 10
    assert q.dequeue() == 10
    q.enqueue(50)
    assert q.dequeue() == 20
    assert q.is_empty() is False
    assert len(q) == 1


def test_queue_empty_errors():
    q = Queue()
    assert q.is_empty() is True
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.front()


def test_queue_full():
    q = Queue(capacity=1)
    q.enqueue(1)
    with pytest.raises(OverflowError):
        q.enqueue(2)


@given(st.lists(st.integers(), max_size=50))
def test_queue_is_fifo(values):
    q = Queue()
    for value in values:
        q.enqueue(value)
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_stack_source_sequence():
    stk = Stack()
    stk.push(1)
    stk.push(50)
    stk.push(20)
    assert stk.peek() == 20
    assert stk.pop() == 20
    assert stk.peek() == 50


def test_stack_underflow():
    stk = Stack()
    with pytest.raises(IndexError):
        stk.pop()
    with pytest.raises(IndexError):
        stk.peek()


def test_stack_overflow_at_capacity():
    stk = Stack()
    for value in range(stk.capacity):
        stk.push(value)
    with pytest.raises(OverflowError):
        stk.push(0)
    assert len(stk) == stk.capacity


@given(st.lists(st.integers(), max_size=100))
def test_stack_is_lifo(values):
    stk = Stack()
    for value in values:
        stk.push(value)
    assert [stk.pop() for _ in values] == values[::-1]
    assert stk.is_empty()