"""Infix to postfix conversion, postfix evaluation and bracket matching."""

from __future__ import annotations

import re

_PRECEDENCE = {"(": 1, "+": 2, "-": 2, "*": 3, "/": 3}
_OPERATORS = "+-*/"


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right >= 0) else -quotient


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Spaces are ignored and input stops at the first newline. Operators are
    ``+ - * /`` with the usual precedence, grouped left to right.
    """
    text = expression.split("\n", 1)[0].replace(" ", "")
    stack: list[str] = []
    output: list[str] = []
    for ch in text:
        if ch == "(":
            stack.append(ch)
        elif ch.isalnum():
            output.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        elif ch in _OPERATORS:
            while stack and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[ch]:
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ValueError(f"unexpected character {ch!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '('")
        output.append(top)
    return "".join(output)


def _reduce(tokens: list[str | int]) -> int:
    stack: list[int] = []
    for token in tokens:
        if isinstance(token, int):
            stack.append(token)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(_apply(token, left, right))
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def evaluate_digit_postfix(postfix: str) -> int:
    """Evaluate a postfix expression whose operands are single digits.

    Division truncates toward zero.
    """
    tokens: list[str | int] = []
    for ch in postfix:
        if ch.isdigit():
            tokens.append(int(ch))
        elif ch in _OPERATORS:
            tokens.append(ch)
        else:
            raise ValueError(f"unexpected character {ch!r}")
    return _reduce(tokens)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of integers separated by spaces or commas.

    A ``-`` directly followed by digits is a negative number. Division
    truncates toward zero.
    """
    tokens: list[str | int] = []
    for token in re.split(r"[\s,]+", expression.strip()):
        if not token:
            continue
        if token in _OPERATORS:
            tokens.append(token)
            continue
        try:
            tokens.append(int(token))
        except ValueError:
            raise ValueError(f"bad token {token!r}") from None
    return _reduce(tokens)


_PAIRS = {")": "(", "]": "[", ">": "<"}


def is_balanced(expression: str) -> bool:
    """Whether the ``()``, ``[]`` and ``<>`` brackets in ``expression`` match and nest."""
    stack: list[str] = []
    for ch in expression:
        if ch in "([<":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack.pop() != _PAIRS[ch]:
                return False
    return not stack