from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Set, Tuple

Coord = Tuple[int, int]  # (x, y), unbounded in both directions


def points_surrounding(x: int, y: int) -> List[Coord]:
    """Returns the 8 coordinates around (x, y). No clipping: the grid is infinite."""
    return [
        (x + dx, y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    ]


@dataclass
class Board:
    """The live cells of one generation. Dead cells are never stored."""
    live: Set[Coord] = field(default_factory=set)

    def come_alive_at(self, x: int, y: int) -> None:
        """Marks (x, y) alive. Marking an already live cell changes nothing."""
        self.live.add((int(x), int(y)))

    def reset(self) -> None:
        self.live.clear()

    def is_alive(self, x: int, y: int) -> bool:
        return (x, y) in self.live

    def __contains__(self, coord: object) -> bool:
        return coord in self.live

    def __len__(self) -> int:
        return len(self.live)

    @property
    def population(self) -> int:
        return len(self.live)

    def cells(self) -> Tuple[Coord, ...]:
        """Live cells in sorted order, for reproducible iteration."""
        return tuple(sorted(self.live))

    def neighbor_count(self, x: int, y: int) -> int:
        """Counts the live cells among the 8 surrounding (x, y). Always in [0, 8]."""
        return sum(1 for point in points_surrounding(x, y) if point in self.live)

    def fringe(self) -> FrozenSet[Coord]:
        """
        Dead cells adjacent to at least one live cell.
        These are the only dead cells that can change state in one tick.
        """
        around: Set[Coord] = set()
        for (x, y) in self.live:
            around.update(points_surrounding(x, y))
        return frozenset(around - self.live)

    def for_each_live_cell_by_neighbor_count(self, handler) -> None:
        """Dispatches each live cell with exactly 2 or 3 live neighbors to `handler`."""
        for (x, y) in self.cells():
            count = self.neighbor_count(x, y)
            if count == 2:
                handler.has_two_neighbors(x, y)
            elif count == 3:
                handler.has_three_neighbors(x, y)

    def for_each_fringe_cell_with_three_neighbors(self, handler) -> None:
        """Dispatches each fringe cell with exactly 3 live neighbors to `handler`."""
        for (x, y) in sorted(self.fringe()):
            if self.neighbor_count(x, y) == 3:
                handler.has_three_neighbors(x, y)

    def each_live_cell(self, visitor: Callable[[int, int], None]) -> None:
        for (x, y) in self.cells():
            visitor(x, y)

    def pretty(self, origin: Optional[Coord] = None) -> str:
        """Text rows over the bounding box: '#' live, '.' dead, '+' for a dead `origin`."""
        if not self.live:
            return ""
        xs = [x for (x, _) in self.live]
        ys = [y for (_, y) in self.live]
        min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
        if origin is not None:
            min_x, max_x = min(min_x, origin[0]), max(max_x, origin[0])
            min_y, max_y = min(min_y, origin[1]), max(max_y, origin[1])
        lines: List[str] = []
        for y in range(min_y, max_y + 1):
            row: List[str] = []
            for x in range(min_x, max_x + 1):
                if (x, y) in self.live:
                    row.append("#")
                elif origin == (x, y):
                    row.append("+")
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines)
