from __future__ import annotations

from enum import Enum

from .board import Board


class Fate(Enum):
    SURVIVES = "survives"
    DIES = "dies"
    BORN = "born"
    STAYS_DEAD = "stays_dead"


def classify(alive: bool, neighbors: int) -> Fate:
    """The standard B3/S23 decision table for one cell."""
    if alive:
        return Fate.SURVIVES if neighbors in (2, 3) else Fate.DIES
    return Fate.BORN if neighbors == 3 else Fate.STAYS_DEAD


def comes_alive(fate: Fate) -> bool:
    return fate in (Fate.SURVIVES, Fate.BORN)


class AliveCellRules:
    """Responds to live-cell classifications by keeping the cell alive in the next board."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def has_two_neighbors(self, x: int, y: int) -> None:
        if comes_alive(classify(True, 2)):
            self.board.come_alive_at(x, y)

    def has_three_neighbors(self, x: int, y: int) -> None:
        if comes_alive(classify(True, 3)):
            self.board.come_alive_at(x, y)


class DeadCellRules:
    """
    Responds to fringe-cell classifications by giving birth in the next board.
    There is no has_two_neighbors: a dead cell with two neighbors stays dead,
    and the fringe traversal only reports cells with exactly three.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    def has_three_neighbors(self, x: int, y: int) -> None:
        if comes_alive(classify(False, 3)):
            self.board.come_alive_at(x, y)
