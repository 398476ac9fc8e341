"""Rat-in-a-maze search by backtracking, moving only down or right."""

from __future__ import annotations

from typing import Sequence


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path from the top-left to the bottom-right cell.

    Open cells hold 1. The path moves down before it tries right. Returns a
    grid marking the path with 1, or None when no path exists.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")

    solution = [[0] * cols for _ in range(rows)]

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and grid[x][y] == 1:
            solution[x][y] = 1
            return True
        if not (0 <= x < rows and 0 <= y < cols) or grid[x][y] != 1:
            return False
        if solution[x][y] == 1:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def format_solution(solution: Sequence[Sequence[int]]) -> str:
    """Render a solution grid, each cell padded by a space on either side."""
    return "".join(
        "".join(f" {cell} " for cell in row) + "\n" for row in solution
    )