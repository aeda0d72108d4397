"""Infix to postfix conversion and evaluation of single-digit postfix expressions."""

from __future__ import annotations

from typing import List

_LETTERS_AND_DIGITS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)


def precedence(char: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    if char == "^":
        return 3
    if char in ("*", "/"):
        return 2
    if char in ("+", "-"):
        return 1
    return -1


def is_operand(char: str) -> bool:
    """Return whether the character is an ASCII letter or digit."""
    return char in _LETTERS_AND_DIGITS


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of one-character operands to postfix."""
    stack: List[str] = []
    output: List[str] = []
    for char in expression:
        if is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _apply(operator: str, left: int, right: int) -> int | None:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            return 0
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    return None


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression whose operands are single characters.

    An operand's value is its offset from '0'. Division truncates toward zero
    and division by zero gives 0. An unknown operator consumes its two
    operands and yields nothing.
    """
    stack: List[int] = []

    def pop() -> int:
        if not stack:
            raise ValueError("Stack is empty: malformed postfix expression")
        return stack.pop()

    for char in postfix:
        if is_operand(char):
            stack.append(ord(char) - ord("0"))
            continue
        right = pop()
        left = pop()
        result = _apply(char, left, right)
        if result is not None:
            stack.append(result)
    return pop()