"""A doubly linked list of integers with 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    info: int
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = None


class DoublyLinkedList:
    """A list whose nodes link both to the next and to the previous node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_at(self, position: int) -> int:
        """Remove the node at a 1-based position and return its value."""
        if self._head is None:
            raise IndexError("Empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"Invalid position: {position}")
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                self._unlink(node)
                return node.info
        raise IndexError(f"Invalid position: {position}")

    def __contains__(self, value: object) -> bool:
        return any(node.info == value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.info for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.info
            node = node.prev

    def is_palindrome(self) -> bool:
        """Compare values walking in from both ends."""
        if self._head is None:
            raise ValueError("Empty list")
        left, right = self._head, self._tail
        for _ in range(self._size // 2):
            assert left is not None and right is not None
            if left.info != right.info:
                return False
            left, right = left.next, right.prev
        return True

    def remove_duplicates(self) -> int:
        """Keep the first occurrence of each value; return how many were removed."""
        seen = set()
        removed = 0
        for node in list(self._nodes()):
            if node.info in seen:
                self._unlink(node)
                removed += 1
            else:
                seen.add(node.info)
        return removed