"""Bit manipulation and related small numeric routines."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_UINT32_MASK = 0xFFFFFFFF


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k) computed with Pascal's rule."""
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"C({n}, {k}) is not defined")
    row = [1] + [0] * k
    for size in range(1, n + 1):
        for j in range(min(size, k), 0, -1):
            row[j] += row[j - 1]
    return row[k]


def count_set_bits(n: int) -> int:
    """Count the one bits of n taken as a 32-bit unsigned integer."""
    n &= _UINT32_MASK
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def xor_swap(x: int, y: int) -> tuple[int, int]:
    """Exchange two integers with three XORs and return them swapped."""
    x ^= y
    y ^= x
    x ^= y
    return x, y


def hex_to_binary(text: str) -> str:
    """Expand each hexadecimal digit of text into four binary digits."""
    bits = []
    for ch in text:
        if ch not in _HEX_DIGITS:
            raise ValueError(f"Invalid hexadecimal digit {ch}")
        bits.append(format(int(ch, 16), "04b"))
    return "".join(bits)