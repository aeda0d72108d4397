"""Binary search trees: an ordered BST and a zig-zag shaped tree."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, List, Optional


class DuplicateValueError(ValueError):
    """Raised when a value already present is inserted into a search tree."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Duplicate value: {value}")
        self.value = value


@dataclass
class _Node:
    info: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _iter_preorder(root: Optional[_Node]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.info
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _iter_inorder(root: Optional[_Node]) -> Iterator[int]:
    stack: List[_Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.info
        node = node.right


def _postorder(root: Optional[_Node]) -> List[int]:
    # Root-right-left order reversed gives left-right-root.
    result: List[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.info)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


class BinarySearchTree:
    """A binary search tree of distinct values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert a value; raise DuplicateValueError if it is already present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            parent = node
            if value < node.info:
                node = node.left
            elif value > node.info:
                node = node.right
            else:
                raise DuplicateValueError(value)
        new_node = _Node(value)
        if parent is None:
            self._root = new_node
        elif value < parent.info:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

    def delete(self, value: int) -> bool:
        """Remove a value; return whether it was present.

        A node with two children takes the value of the smallest node of its
        right subtree, which is then removed in its place.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.info != value:
            parent = node
            node = node.left if value < node.info else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.info = successor.info
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.info:
                return True
            node = node.left if value < node.info else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _iter_inorder(self._root)

    def find_min(self) -> int:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("find_min on an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.info

    def preorder(self) -> List[int]:
        return list(_iter_preorder(self._root))

    def inorder(self) -> List[int]:
        return list(_iter_inorder(self._root))

    def postorder(self) -> List[int]:
        return _postorder(self._root)

    def kth_smallest(self, k: int) -> int:
        """Return the k-th smallest value, counting from 1."""
        if k < 1 or k > self._size:
            raise IndexError(f"The tree has fewer than {k} elements.")
        return next(islice(_iter_inorder(self._root), k - 1, None))


class ZigZagTree:
    """A binary tree whose insertions alternate between left and right descents.

    Each insertion walks straight down in the current direction until it
    finds a free slot. Afterwards the direction flips once for every existing
    node passed on the way down.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._zig = True
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        go_left = self._zig
        node = self._root
        steps = 1
        while True:
            nxt = node.left if go_left else node.right
            if nxt is None:
                break
            node = nxt
            steps += 1
        if go_left:
            node.left = new_node
        else:
            node.right = new_node
        if steps % 2:
            self._zig = not self._zig

    def inorder(self) -> List[int]:
        return list(_iter_inorder(self._root))

    def preorder(self) -> List[int]:
        return list(_iter_preorder(self._root))