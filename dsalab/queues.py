"""A FIFO queue built on singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class EmptyQueueError(IndexError):
    """Raised when an operation needs an element but the queue is empty."""

    def __init__(self, message: str = "No element in the Queue") -> None:
        super().__init__(message)


@dataclass(eq=False)
class _Node:
    info: int
    next: Optional[_Node] = None


class LinkedQueue:
    """A queue that adds at the tail and removes from the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def enqueue(self, value: int) -> None:
        """Add a value at the back of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self._head is None:
            raise EmptyQueueError()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.info

    def rotate(self, k: int) -> None:
        """Move the front value to the back, k times; k <= 0 leaves the queue as is."""
        if self._head is None:
            raise EmptyQueueError()
        if k <= 0:
            return
        for _ in range(k % self._size):
            self.enqueue(self.dequeue())

    def clear(self) -> None:
        """Remove every value; raise EmptyQueueError if there is none."""
        if self._head is None:
            raise EmptyQueueError("Queue is Empty")
        self._head = self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.info
            node = node.next