"""LIFO stacks: one with a fixed capacity, one on linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

DEFAULT_LIMIT = 7


class StackFullError(IndexError):
    """Raised when pushing onto a stack that has reached its limit."""

    def __init__(self, message: str = "Stack is full") -> None:
        super().__init__(message)


class StackEmptyError(IndexError):
    """Raised when popping or peeking at an empty stack."""

    def __init__(self, message: str = "Empty Stack") -> None:
        super().__init__(message)


class BoundedStack:
    """A stack that holds at most ``limit`` values."""

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 0:
            raise ValueError(f"Invalid stack limit: {limit}")
        self.limit = limit
        self._items: List[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limit={self.limit}, items={self._items!r})"

    def push(self, value: int) -> None:
        if len(self._items) >= self.limit:
            raise StackFullError()
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()

    def peek(self) -> int:
        if not self._items:
            raise StackEmptyError()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from the bottom of the stack to the top."""
        return iter(list(self._items))


@dataclass(eq=False)
class _Node:
    info: int
    next: Optional[_Node] = None


class LinkedStack:
    """An unbounded stack whose top node links down towards the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes_from_top(self) -> Iterator[_Node]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError()
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.info

    def peek(self) -> int:
        if self._top is None:
            raise StackEmptyError()
        return self._top.info

    def __contains__(self, value: object) -> bool:
        return any(node.info == value for node in self._nodes_from_top())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the values from the bottom of the stack to the top."""
        return reversed([node.info for node in self._nodes_from_top()])