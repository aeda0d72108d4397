"""Operations on linked lists and integer sequences driven by search keys."""

from __future__ import annotations

from typing import Iterable, List

from dsalab.linked_list import LinkedList


def insert_after_value(linked: LinkedList, key: int, value: int) -> int:
    """Insert ``value`` after every node that holds ``key``.

    Only nodes present before the call are matched, so an inserted value
    equal to the key is never matched again. Returns the number of
    insertions. Raises ValueError when the key is not in the list.
    """
    positions = [pos for pos, item in enumerate(linked, start=1) if item == key]
    if not positions:
        raise ValueError(f"Key not found: {key}")
    # Working from the back keeps the earlier positions valid.
    for position in reversed(positions):
        linked.insert_after(position, value)
    return len(positions)


def count_occurrences(values: Iterable[int], key: int) -> int:
    """Return how many times ``key`` occurs in ``values``."""
    return sum(1 for item in values if item == key)


def evens(values: Iterable[int]) -> List[int]:
    """Return the even values, in their original order."""
    return [item for item in values if item % 2 == 0]


def odds(values: Iterable[int]) -> List[int]:
    """Return the odd values, in their original order."""
    return [item for item in values if item % 2 != 0]


def remove_first(linked: LinkedList, key: int) -> None:
    """Remove the first node holding ``key``; raise ValueError if there is none."""
    if not linked.remove_value(key):
        raise ValueError(f"Element not found: {key}")