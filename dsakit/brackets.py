"""Checks that brackets in a string open and close in matching pairs."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def are_brackets_balanced(expr: str) -> bool:
    """Tell whether the brackets of expr are balanced.

    Any character other than an opening bracket counts as closing, so a
    non-bracket character met when nothing is open makes the result False;
    while a bracket is open such characters are passed over.
    """
    stack: list[str] = []
    for ch in expr:
        if ch in _OPENING:
            stack.append(ch)
            continue
        if not stack:
            return False
        if ch in _PAIRS and stack.pop() != _PAIRS[ch]:
            return False
    return not stack


def is_valid(text: str) -> bool:
    """Tell whether the brackets of text match, ignoring every other character."""
    stack: list[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
    return not stack