from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .board import Board, Coord
from .rules import AliveCellRules, DeadCellRules
from .normalize import normalize_to_origin
from .hashkey import generation_key


def _debug_enabled() -> bool:
    return os.getenv('LIFE_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class RunResult:
    generations: int  # ticks actually performed
    population: int
    extinct: bool
    period: Optional[int] = None
    displacement: Optional[Coord] = None

    @property
    def still_life(self) -> bool:
        return self.period == 1 and self.displacement == (0, 0)

    @property
    def spaceship(self) -> bool:
        return self.period is not None and self.displacement not in (None, (0, 0))


class Game:
    """Owns the current generation and advances it one tick at a time."""

    def __init__(self) -> None:
        self._board = Board()
        self._generation = 0

    @classmethod
    def from_cells(cls, cells: Iterable[Coord], generation: int = 0) -> 'Game':
        """Rebuilds a game at a given generation, e.g. from a JSON state."""
        game = cls()
        for (x, y) in cells:
            game.seed(x, y)
        game._generation = int(generation)
        return game

    @property
    def board(self) -> Board:
        return self._board

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        return self._board.population

    def cells(self) -> Tuple[Coord, ...]:
        return self._board.cells()

    def seed(self, x: int, y: int) -> None:
        self._board.come_alive_at(x, y)

    come_alive_at = seed

    def reset(self) -> None:
        self._board = Board()
        self._generation = 0

    def tick(self) -> None:
        """
        Builds the next generation into a fresh board: live cells with 2 or 3
        neighbors survive, fringe cells with exactly 3 are born. The current
        board is replaced only once both passes are done.
        """
        new_board = Board()
        alive_rules = AliveCellRules(new_board)
        dead_rules = DeadCellRules(new_board)

        self._board.for_each_live_cell_by_neighbor_count(alive_rules)
        self._board.for_each_fringe_cell_with_three_neighbors(dead_rules)

        self._board = new_board
        self._generation += 1
        if _debug_enabled():
            print(f"[tick] gen={self._generation} population={new_board.population}")

    time_passes = tick

    def render(self, device) -> None:
        """Calls device.draw_cell(x, y) once per live cell."""
        self._board.each_live_cell(device.draw_cell)

    def run(self, generations: int, stop_on_repeat: bool = True) -> RunResult:
        """
        Ticks up to `generations` times. Stops early when the population dies out or,
        with stop_on_repeat, when a shape seen earlier in this run comes back
        (possibly translated). Period and displacement describe that repeat.
        """
        # Several shapes may share a key; each bucket keeps all of them.
        seen: Dict[str, List[Tuple[int, FrozenSet[Coord], int, int]]] = {}

        def remember() -> Optional[Tuple[int, Coord]]:
            cells = self._board.cells()
            key = generation_key(cells)
            norm, dx, dy = normalize_to_origin(cells)
            bucket = seen.setdefault(key, [])
            for first_gen, prior_norm, first_dx, first_dy in bucket:
                if prior_norm == norm:
                    return self._generation - first_gen, (first_dx - dx, first_dy - dy)
            bucket.append((self._generation, norm, dx, dy))
            return None

        if stop_on_repeat:
            remember()
        performed = 0
        period: Optional[int] = None
        displacement: Optional[Coord] = None
        for _ in range(max(0, int(generations))):
            self.tick()
            performed += 1
            if self.population == 0:
                break
            if stop_on_repeat:
                repeat = remember()
                if repeat is not None:
                    period, displacement = repeat
                    break
        result = RunResult(
            generations=performed,
            population=self.population,
            extinct=self.population == 0,
            period=period,
            displacement=displacement,
        )
        if _debug_enabled():
            print(f"[run] {result}")
        return result
