"""A fixed-capacity array and linear search over sequences."""

from __future__ import annotations

from typing import Iterator, List, Sequence


class ArrayFullError(IndexError):
    """Raised when adding to an array that has no free slot."""

    def __init__(self, message: str = "Array is Full.") -> None:
        super().__init__(message)


class BoundedArray:
    """An array holding at most ``capacity`` integers in insertion order."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Size is not valid!")
        self._capacity = capacity
        self._items: List[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={self._items!r})"

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, value: int) -> None:
        if self.is_full():
            raise ArrayFullError()
        self._items.append(value)

    def remove(self, value: int) -> None:
        """Remove the first occurrence of a value, shifting later values left."""
        if self.is_empty():
            raise ValueError("Array is Empty.")
        try:
            self._items.remove(value)
        except ValueError:
            raise ValueError("Key not found.") from None

    def index(self, value: int) -> int:
        """Return the 0-based index of the first occurrence of a value."""
        if self.is_empty():
            raise ValueError("Array is Empty.")
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError("Key does not exist.") from None

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))


def find_position(values: Sequence[int], target: int) -> int:
    """Return the 1-based position of the first occurrence of ``target``."""
    for position, value in enumerate(values, start=1):
        if value == target:
            return position
    raise ValueError("Not Found")