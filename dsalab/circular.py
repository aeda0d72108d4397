"""A circular doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    info: int
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = field(default=None, repr=False)


class CircularList:
    """A list whose last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: int) -> None:
        """Add a value just before the head, i.e. at the end of the ring."""
        node = _Node(value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            last = self._head.prev
            assert last is not None
            node.prev, node.next = last, self._head
            last.next = node
            self._head.prev = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.info
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._head.prev if self._head is not None else None
        for _ in range(self._size):
            assert node is not None
            yield node.info
            node = node.prev

    def _unlink(self, node: _Node) -> None:
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1

    def remove_odd_positions(self) -> int:
        """Remove the nodes at positions 1, 3, 5, ...; return how many were removed."""
        node = self._head
        doomed = []
        for position in range(1, self._size + 1):
            assert node is not None
            if position % 2:
                doomed.append(node)
            node = node.next
        for victim in doomed:
            self._unlink(victim)
        return len(doomed)