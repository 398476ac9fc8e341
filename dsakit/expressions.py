"""Infix arithmetic: evaluating integer expressions and converting to postfix."""

from __future__ import annotations

import re
import string

_OPERATORS = frozenset("+-*/")
_OPERANDS = frozenset(string.ascii_letters + string.digits)
_LEXEME = re.compile(r"[0-9]+|.", re.DOTALL)


def precedence(op: str) -> int:
    """Return the binding strength of an arithmetic operator; 0 for anything else."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def apply_op(a: int, b: int, op: str) -> int:
    """Apply op to a and b; division truncates toward zero."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return _truncating_div(a, b)
    raise ValueError(f"unknown operator {op!r}")


def evaluate(expr: str) -> int:
    """Evaluate an integer expression of + - * / and parentheses.

    Operators of equal precedence group from the left. Spaces are ignored.
    Raises ValueError for a malformed expression or an unknown character.
    """
    values: list[int] = []
    ops: list[str] = []

    def reduce_top() -> None:
        if len(values) < 2 or not ops:
            raise ValueError("malformed expression")
        op = ops.pop()
        right = values.pop()
        left = values.pop()
        values.append(apply_op(left, right, op))

    for match in _LEXEME.finditer(expr):
        piece = match.group()
        if piece == " ":
            continue
        if piece == "(":
            ops.append(piece)
        elif piece[0] in string.digits:
            values.append(int(piece))
        elif piece == ")":
            while ops and ops[-1] != "(":
                reduce_top()
            if ops:
                ops.pop()
        elif piece in _OPERATORS:
            while ops and precedence(ops[-1]) >= precedence(piece):
                reduce_top()
            ops.append(piece)
        else:
            raise ValueError(f"unexpected character {piece!r}")

    while ops:
        reduce_top()
    if not values:
        raise ValueError("expression holds no value")
    return values[-1]


def _postfix_rank(ch: str) -> int:
    if ch == "^":
        return 3
    if ch in ("*", "/"):
        return 2
    if ch in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Letters and digits are operands; every other character but parentheses
    is treated as an operator. Raises ValueError on an unmatched ')'.
    """
    stack: list[str] = []
    result: list[str] = []
    for ch in expr:
        if ch in _OPERANDS:
            result.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        else:
            while stack and _postfix_rank(ch) <= _postfix_rank(stack[-1]):
                result.append(stack.pop())
            stack.append(ch)
    result.extend(reversed(stack))
    return "".join(result)