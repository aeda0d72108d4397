# dsalab

Classic data structures and algorithms in plain Python, using only the
standard library.

## Modules

- `dsalab.bst`
  - `BinarySearchTree` holds distinct values. It supports `insert`,
    `delete` (which returns whether the value was present), `in`, `len`
    and in-order iteration. It also has `find_min`, and `preorder`,
    `inorder` and `postorder`, which return lists.
  - `kth_smallest(k)` counts from 1 and raises `IndexError` when `k` is out
    of range.
  - Inserting a value that is already present raises `DuplicateValueError`,
    a subclass of `ValueError`.
  - `ZigZagTree` places each new value by descending straight left or
    straight right. The direction changes between insertions. It offers
    `inorder` and `preorder`.
- `dsalab.heap`
  - `MaxHeap` has `push`, `pop`, `peek` and `len`. `pop` and `peek` on an
    empty heap raise `IndexError`.
  - Iterating a heap yields its array in level order.
  - The list helpers `sift_up(items, index)` and `sift_down(items, index)`
    are also available.
- `dsalab.expression`
  - `infix_to_postfix` converts an infix expression of one-character
    operands. An unmatched `)` raises `ValueError`.
  - `evaluate_postfix` gives each operand the value of its offset from
    `'0'`. Division truncates toward zero, and dividing by zero gives 0.
  - `precedence` and `is_operand` are also available.
- `dsalab.linked_list`
  - `LinkedList` is a singly linked list with 1-based positions. It
    supports `append`, `insert_after`, `remove_at`, `remove_value`,
    `update`, `index`, `minimum`, `maximum`, in-place `reverse`,
    `is_palindrome`, `remove_duplicates` and `swap_kth(k)`.
- `dsalab.list_ops`
  - `insert_after_value`, `remove_first`, `count_occurrences`, `evens` and
    `odds`.
- `dsalab.doubly_linked`
  - `DoublyLinkedList` supports `append`, `remove_at`, `in`, `reversed()`,
    `is_palindrome` and `remove_duplicates`.
- `dsalab.circular`
  - `CircularList` is a circular doubly linked list with `append`,
    forward and reverse iteration, and `remove_odd_positions`.
- `dsalab.queues`
  - `LinkedQueue` supports `enqueue`, `dequeue`, `rotate(k)` and `clear`.
  - Dequeuing, rotating or clearing an empty queue raises
    `EmptyQueueError`.
- `dsalab.stacks`
  - `BoundedStack(limit=7)` raises `StackFullError` when it is full and
    `StackEmptyError` when it is empty.
  - `LinkedStack` is unbounded.
  - Both stacks iterate from the bottom to the top.
- `dsalab.array_adt`
  - `BoundedArray(capacity)` supports `add`, `remove`, `index` (0-based),
    `is_full` and `is_empty`. Adding to a full array raises
    `ArrayFullError`.
  - `find_position(values, target)` returns a 1-based position.
- `dsalab.basics`
  - `swap`, `is_palindrome`, `frequency`, `random_matrix`, `format_matrix`
    and `factorial`.
  - `Student` is a dataclass with a `describe()` method.

## Example

```python
from dsalab.bst import BinarySearchTree
from dsalab.expression import infix_to_postfix, evaluate_postfix

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.inorder())         # [20, 30, 40, 50, 70]
print(tree.kth_smallest(2))   # 30

postfix = infix_to_postfix("6+3*4")
print(postfix)                    # 634*+
print(evaluate_postfix(postfix))  # 18
```

## Command line

Installing the package provides the `dsalab` command. It takes one argument
naming a session: `bst`, `queue`, `array` or `dlist`.

The command reads whitespace-separated menu choices and their values from
standard input. It then prints the lines the session produces. Choice `0`
ends a session.

```
echo "1 50 1 30 1 70 3 7 2 0" | dsalab bst
```

This prints `30 50 70` and then `The 2-th smallest element is: 50`.

The choices for each session:

- `bst`
  - `1 v` inserts `v`.
  - `2`, `3` and `4` print the pre-order, in-order and post-order
    traversals.
  - `5 v` searches for `v`.
  - `6 v` deletes `v`.
  - `7 k` prints the k-th smallest value.
- `queue`
  - `1 v` enqueues `v`.
  - `2` dequeues.
  - `3 k` rotates the queue k times and prints it.
  - `4` prints the queue.
- `array`
  - The first number given is the capacity.
  - `1 v` adds `v`.
  - `2` displays the array.
  - `3` and `4` print the maximum and the current size.
  - `5 v` searches for `v`.
  - `6` and `7` report whether the array is full or empty.
  - `8 v` removes `v`.
- `dlist`
  - `1 v` appends `v`.
  - `2 p` removes the node at position `p`.
  - `3` prints the list.
  - `4` prints the node count.
  - `5 v` searches for `v`.
  - `6` prints the list in reverse.

## What it does not do

The command is not an interactive menu. It shows no prompts, and it produces
its output only after standard input has been read to the end.

Only the four sessions above are available from the command line. The other
structures are used from Python.

A token that is not an integer stops the session with an error message and
exit status 1.

## Running the tests

```
pip install -e ".[test]"
pytest
```