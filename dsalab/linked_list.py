"""A singly linked list of integers with 1-based positional operations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    info: int
    next: Optional[_Node] = None


class LinkedList:
    """A singly linked list.

    Positions are counted from 1, as in the interactive menus the list is
    driven from: position 1 is the head.
    """

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

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(f"Invalid position: {position}")

    def _node_at(self, position: int) -> _Node:
        self._check_position(position)
        return next(islice(self._nodes(), position - 1, None))

    def _unlink(self, prev: Optional[_Node], node: _Node) -> None:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def append(self, value: int) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, position: int, value: int) -> None:
        """Insert a value directly after the node at the given position."""
        node = self._node_at(position)
        new_node = _Node(value, node.next)
        node.next = new_node
        if node is self._tail:
            self._tail = new_node
        self._size += 1

    def remove_at(self, position: int) -> int:
        """Remove the node at the given position and return its value."""
        self._check_position(position)
        prev = None if position == 1 else self._node_at(position - 1)
        node = self._head if prev is None else prev.next
        assert node is not None
        self._unlink(prev, node)
        return node.info

    def remove_value(self, value: int) -> bool:
        """Remove the first node holding the value; return whether one was found."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if node.info == value:
                self._unlink(prev, node)
                return True
            prev = node
        return False

    def update(self, position: int, value: int) -> None:
        """Replace the value at a position; on an empty list the value is appended."""
        if self._head is None:
            self.append(value)
            return
        self._node_at(position).info = value

    def index(self, value: int) -> int:
        """Return the position of the first occurrence of a value."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.info for node in self._nodes())

    def minimum(self) -> int:
        if self._head is None:
            raise ValueError("Empty list")
        return min(self)

    def maximum(self) -> int:
        if self._head is None:
            raise ValueError("Empty list")
        return max(self)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        prev: Optional[_Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            nxt = current.next
            current.next = prev
            prev = current
            current = nxt
        self._head = prev

    def is_palindrome(self) -> bool:
        """Return whether the list reads the same in both directions."""
        values = list(self)
        return values == values[::-1]

    def remove_duplicates(self) -> int:
        """Keep only the first occurrence of each value; return how many were removed."""
        seen = set()
        removed = 0
        prev: Optional[_Node] = None
        node = self._head
        while node is not None:
            nxt = node.next
            if node.info in seen:
                self._unlink(prev, node)
                removed += 1
            else:
                seen.add(node.info)
                prev = node
            node = nxt
        return removed

    def swap_kth(self, k: int) -> None:
        """Swap the k-th value from the start with the k-th value from the end."""
        self._check_position(k)
        front = self._node_at(k)
        back = self._node_at(self._size - k + 1)
        front.info, back.info = back.info, front.info