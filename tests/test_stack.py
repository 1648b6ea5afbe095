import pytest

from stcontainers.stack import ArrayStack


def test_new_stack_is_empty():
    stack = ArrayStack(3)
    assert stack.empty()
    assert len(stack) == 0


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayStack(capacity)


def test_lifo_order():
    values = ["a", "b", "c", "d"]
    stack = ArrayStack(len(values))
    for v in values:
        stack.push(v)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert stack.empty()


def test_top_does_not_remove():
    stack = ArrayStack(2)
    stack.push(10)
    stack.push(20)
    assert stack.top() == 20
    assert len(stack) == 2
    assert stack.pop() == 20
    assert stack.top() == 10


def test_overflow():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        ArrayStack(1).pop()


def test_top_empty_raises():
    with pytest.raises(IndexError):
        ArrayStack(1).top()


def test_reuse_after_emptying():
    stack = ArrayStack(1)
    stack.push("x")
    assert stack.pop() == "x"
    stack.push("y")
    assert stack.top() == "y"