import pytest

from dsalab.stacks import BoundedStack, LinkedStack, StackEmptyError, StackFullError


def test_bounded_default_limit_is_seven():
    stack = BoundedStack()
    for value in range(7):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(99)
    assert len(stack) == 7


def test_bounded_push_pop_lifo():
    stack = BoundedStack(3)
    for value in (4, 8, 15):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [15, 8, 4]


def test_bounded_peek_does_not_remove():
    stack = BoundedStack(2)
    stack.push(11)
    stack.push(22)
    assert stack.peek() == 22
    assert len(stack) == 2


def test_bounded_iter_bottom_to_top():
    stack = BoundedStack(4)
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [1, 2, 3]


def test_bounded_full_raises():
    stack = BoundedStack(1)
    stack.push(5)
    with pytest.raises(StackFullError):
        stack.push(6)
    assert list(stack) == [5]


def test_bounded_space_frees_after_pop():
    stack = BoundedStack(1)
    stack.push(5)
    stack.pop()
    stack.push(6)
    assert stack.peek() == 6


def test_bounded_empty_errors():
    stack = BoundedStack(2)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_bounded_negative_limit_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_errors_are_index_errors():
    with pytest.raises(IndexError):
        BoundedStack(0).push(1)
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_linked_push_pop_lifo():
    stack = LinkedStack([3, 6, 9])
    assert stack.peek() == 9
    assert [stack.pop() for _ in range(3)] == [9, 6, 3]
    assert len(stack) == 0


def test_linked_iter_bottom_to_top():
    stack = LinkedStack()
    for value in (7, 14, 21):
        stack.push(value)
    assert list(stack) == [7, 14, 21]


def test_linked_contains():
    stack = LinkedStack([2, 4, 6])
    assert 4 in stack
    assert 5 not in stack


def test_linked_pop_updates_contents():
    stack = LinkedStack([1, 2, 3])
    stack.pop()
    assert list(stack) == [1, 2]
    assert 3 not in stack


def test_linked_empty_errors():
    stack = LinkedStack()
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_linked_round_trip():
    values = [5, 1, 4, 1, 5, 9]
    stack = LinkedStack(values)
    popped = [stack.pop() for _ in range(len(values))]
    assert popped[::-1] == values