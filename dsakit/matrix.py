"""Elementary operations on matrices held as lists of rows."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]


def _rows(matrix: Matrix) -> tuple[list[list[int]], int]:
    rows = [list(row) for row in matrix]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows, width


def lower_triangle(matrix: Matrix) -> list[list[int]]:
    """Return, row by row, the elements below the main diagonal."""
    rows, _ = _rows(matrix)
    return [row[:index] for index, row in enumerate(rows)]


def lower_triangle_sum(matrix: Matrix) -> int:
    """Return the sum of the elements below the main diagonal."""
    return sum(sum(row) for row in lower_triangle(matrix))


def matrix_sum(first: Matrix, second: Matrix) -> list[list[int]]:
    """Add two matrices of the same shape element by element."""
    a_rows, a_width = _rows(first)
    b_rows, b_width = _rows(second)
    if len(a_rows) != len(b_rows) or a_width != b_width:
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(a_rows, b_rows)]


def matrix_multiply(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the matrix product of first and second."""
    a_rows, a_width = _rows(first)
    b_rows, b_width = _rows(second)
    if a_width != len(b_rows):
        raise ValueError(
            "The number of columns in Matrix-1 must be equal to the number "
            "of rows in Matrix-2"
        )
    columns = list(zip(*b_rows)) if b_rows else []
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        if columns
        else [0] * b_width
        for row in a_rows
    ]


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix one row per line, each element preceded by a space."""
    rows, _ = _rows(matrix)
    return "".join(
        " " + "".join(f" {value}" for value in row) + "\n" for row in rows
    )