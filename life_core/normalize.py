from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Tuple

from .board import Coord


def _shift_coord(c: Coord, dx: int, dy: int) -> Coord:
    x, y = c
    return (x + dx, y + dy)


def bounding_box(cells: Iterable[Coord]) -> Optional[Tuple[int, int, int, int]]:
    """Returns (min_x, min_y, max_x, max_y), or None for an empty population."""
    pts = list(cells)
    if not pts:
        return None
    xs = [x for (x, _) in pts]
    ys = [y for (_, y) in pts]
    return min(xs), min(ys), max(xs), max(ys)


def normalize_to_origin(cells: Iterable[Coord]) -> Tuple[FrozenSet[Coord], int, int]:
    """Shift so the bounding box's min corner sits at (0,0). Returns
    (shifted_cells, dx, dy) where dx, dy is the shift that was applied."""
    pts = list(cells)
    box = bounding_box(pts)
    if box is None:
        return frozenset(), 0, 0
    min_x, min_y, _, _ = box
    dx, dy = -min_x, -min_y
    return frozenset(_shift_coord(c, dx, dy) for c in pts), dx, dy
