"""Iterative Tower of Hanoi over the pegs S (source), A (auxiliary) and D (destination)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str


def _move_between(
    first: list[int], second: list[int], first_label: str, second_label: str
) -> Move:
    if not first:
        disk = second.pop()
        first.append(disk)
        return Move(disk, second_label, first_label)
    if not second:
        disk = first.pop()
        second.append(disk)
        return Move(disk, first_label, second_label)
    if first[-1] > second[-1]:
        disk = second.pop()
        first.append(disk)
        return Move(disk, second_label, first_label)
    disk = first.pop()
    second.append(disk)
    return Move(disk, first_label, second_label)


def hanoi_moves(disks: int) -> list[Move]:
    """Return the moves that carry disks from peg S to peg D, smallest disk 1."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    s, a, d = "S", "A", "D"
    if disks % 2 == 0:
        d, a = a, d
    src = list(range(disks, 0, -1))
    aux: list[int] = []
    dest: list[int] = []
    moves = []
    for step in range(1, 2**disks):
        if step % 3 == 1:
            moves.append(_move_between(src, dest, s, d))
        elif step % 3 == 2:
            moves.append(_move_between(src, aux, s, a))
        else:
            moves.append(_move_between(aux, dest, a, d))
    return moves


def format_move(move: Move) -> str:
    """Describe a move in words."""
    return f"Move the disk {move.disk} from {move.source} to {move.target}"