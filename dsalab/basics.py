"""Small warm-up routines: swapping, palindromes, counting, matrices, factorials."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Hashable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

DEFAULT_LOW = 10
DEFAULT_HIGH = 30


def swap(a: T, b: T) -> Tuple[T, T]:
    """Return the two values in exchanged order."""
    return b, a


def is_palindrome(sequence: Sequence[Hashable]) -> bool:
    """Return whether the sequence reads the same forwards and backwards."""
    items = list(sequence)
    return items == items[::-1]


def frequency(sequence: Sequence[Hashable], key: Hashable) -> int:
    """Return how many items of the sequence equal ``key``."""
    return sum(1 for item in sequence if item == key)


def random_matrix(
    rows: int,
    cols: int,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    rng: Optional[random.Random] = None,
) -> List[List[int]]:
    """Return a rows x cols matrix of random integers in [low, high]."""
    if rows < 0 or cols < 0:
        raise ValueError(f"Invalid matrix shape: {rows}x{cols}")
    if low > high:
        raise ValueError(f"Empty value range: {low}..{high}")
    generator = rng if rng is not None else random.Random()
    return [[generator.randint(low, high) for _ in range(cols)] for _ in range(rows)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix one row per line, values separated by single spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


@dataclass
class Student:
    """A student's name and age."""

    name: str
    age: int

    def describe(self) -> str:
        return f"Name : {self.name}\nAge : {self.age}"