"""Menu-driven sessions over the data structures, fed by whitespace-separated tokens."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from dsalab.array_adt import BoundedArray
from dsalab.bst import BinarySearchTree, DuplicateValueError
from dsalab.doubly_linked import DoublyLinkedList
from dsalab.queues import EmptyQueueError, LinkedQueue

Token = Union[str, int]


class _EndOfInput(Exception):
    """Raised internally when the command tokens run out."""


def _tokens(commands: Iterable[Token]) -> Iterator[str]:
    for item in commands:
        if isinstance(item, str):
            yield from item.split()
        else:
            yield str(item)


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise _EndOfInput from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _join(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def run_bst_session(commands: Iterable[Token]) -> List[str]:
    """Drive a binary search tree from menu tokens; return the lines it prints.

    Choices: 1 insert, 2 pre-order, 3 in-order, 4 post-order, 5 search,
    6 delete, 7 k-th smallest, 0 exit.
    """
    tree = BinarySearchTree()
    tokens = _tokens(commands)
    out: List[str] = []
    try:
        while True:
            match _read_int(tokens):
                case 0:
                    break
                case 1:
                    value = _read_int(tokens)
                    try:
                        tree.insert(value)
                    except DuplicateValueError as exc:
                        out.append(str(exc))
                case 2:
                    out.append(_join(tree.preorder()))
                case 3:
                    out.append(_join(tree.inorder()))
                case 4:
                    out.append(_join(tree.postorder()))
                case 5:
                    key = _read_int(tokens)
                    if key in tree:
                        out.append(f"Key exists: {key}")
                    else:
                        out.append("Key does not exist.")
                case 6:
                    tree.delete(_read_int(tokens))
                case 7:
                    k = _read_int(tokens)
                    try:
                        value = tree.kth_smallest(k)
                    except IndexError as exc:
                        out.append(str(exc))
                    else:
                        out.append(f"The {k}-th smallest element is: {value}")
                case _:
                    out.append("Invalid Choice")
    except _EndOfInput:
        pass
    return out


def run_queue_session(commands: Iterable[Token]) -> List[str]:
    """Drive a queue from menu tokens; return the lines it prints.

    Choices: 1 enqueue, 2 dequeue, 3 necklace (rotate k times and print),
    4 print, 0 exit.
    """
    queue = LinkedQueue()
    tokens = _tokens(commands)
    out: List[str] = []
    try:
        while True:
            match _read_int(tokens):
                case 0:
                    break
                case 1:
                    queue.enqueue(_read_int(tokens))
                case 2:
                    try:
                        queue.dequeue()
                    except EmptyQueueError as exc:
                        out.append(str(exc))
                case 3:
                    if not len(queue):
                        out.append(str(EmptyQueueError()))
                        continue
                    queue.rotate(_read_int(tokens))
                    out.append(_join(queue))
                case 4:
                    out.append(_join(queue) if len(queue) else "No elements in the Queue")
                case _:
                    out.append("Invalid choice")
    except _EndOfInput:
        pass
    return out


def _run_array_session(commands: Iterable[Token]) -> List[str]:
    """Drive a bounded array; the first token is its capacity."""
    tokens = _tokens(commands)
    out: List[str] = []
    try:
        capacity = _read_int(tokens)
        if capacity <= 0:
            return ["Size is not valid!"]
        array = BoundedArray(capacity)
        while True:
            match _read_int(tokens):
                case 0:
                    break
                case 1:
                    if array.is_full():
                        out.append("Array is Full.")
                    else:
                        array.add(_read_int(tokens))
                case 2:
                    if array.is_empty():
                        out.append("Array is Empty.")
                    else:
                        out.append(f"Elements in the array: {_join(array)}")
                case 3:
                    out.append(f"Maximum size of the array: {array.capacity}")
                case 4:
                    out.append(f"Current size of the array: {len(array)}")
                case 5:
                    if array.is_empty():
                        out.append("Array is Empty.")
                        continue
                    try:
                        index = array.index(_read_int(tokens))
                    except ValueError as exc:
                        out.append(str(exc))
                    else:
                        out.append(f"Key exists at index {index}.")
                case 6:
                    out.append("Array is Full." if array.is_full() else "Array is not Full.")
                case 7:
                    out.append("Array is Empty." if array.is_empty() else "Array is not Empty.")
                case 8:
                    if array.is_empty():
                        out.append("Array is Empty.")
                        continue
                    try:
                        array.remove(_read_int(tokens))
                    except ValueError as exc:
                        out.append(str(exc))
                    else:
                        out.append("Key removed successfully.")
                case _:
                    out.append("Invalid choice!")
    except _EndOfInput:
        pass
    return out


def _run_doubly_session(commands: Iterable[Token]) -> List[str]:
    """Drive a doubly linked list from menu tokens."""
    linked = DoublyLinkedList()
    tokens = _tokens(commands)
    out: List[str] = []
    try:
        while True:
            match _read_int(tokens):
                case 0:
                    break
                case 1:
                    linked.append(_read_int(tokens))
                case 2:
                    if not len(linked):
                        out.append("Empty list")
                        continue
                    try:
                        linked.remove_at(_read_int(tokens))
                    except IndexError as exc:
                        out.append(str(exc))
                case 3:
                    out.append(_join(linked) if len(linked) else "Empty list")
                case 4:
                    out.append(f"No of nodes: {len(linked)}")
                case 5:
                    if not len(linked):
                        out.append("Empty list")
                        continue
                    key = _read_int(tokens)
                    out.append("Key exists" if key in linked else "Key does not exist")
                case 6:
                    out.append(_join(reversed(linked)) if len(linked) else "Empty list")
                case _:
                    out.append("Invalid Choice")
    except _EndOfInput:
        pass
    return out


_PROGRAMS: Dict[str, Callable[[Iterable[Token]], List[str]]] = {
    "bst": run_bst_session,
    "queue": run_queue_session,
    "array": _run_array_session,
    "dlist": _run_doubly_session,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a menu session on standard input and print its output."""
    parser = argparse.ArgumentParser(
        prog="dsalab",
        description="Run a menu-driven data structure session reading choices from stdin.",
    )
    parser.add_argument("program", choices=sorted(_PROGRAMS), help="which structure to drive")
    args = parser.parse_args(argv)
    try:
        lines = _PROGRAMS[args.program](sys.stdin.read().split())
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())