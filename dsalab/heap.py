"""An array-backed max-heap."""

from __future__ import annotations

from typing import Iterable, Iterator, List


def sift_up(items: List[int], index: int) -> int:
    """Move items[index] up while it is larger than its parent; return its new index."""
    value = items[index]
    while index > 0:
        parent = (index - 1) // 2
        if not value > items[parent]:
            break
        items[index] = items[parent]
        index = parent
    items[index] = value
    return index


def sift_down(items: List[int], index: int) -> int:
    """Move items[index] down below any larger child; return its new index."""
    size = len(items)
    while True:
        child = 2 * index + 1
        if child >= size:
            break
        if child + 1 < size and items[child + 1] > items[child]:
            child += 1
        if items[index] < items[child]:
            items[index], items[child] = items[child], items[index]
            index = child
        else:
            break
    return index


class MaxHeap:
    """A max-heap; iteration yields the stored array in level order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: List[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        self._items.append(value)
        sift_up(self._items, len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            sift_down(self._items, 0)
        return top

    def peek(self) -> int:
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))