from __future__ import annotations

import random
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .board import Coord

_LIVE_ALIASES = ('O', 'o', '*')

# Rows are read top to bottom as increasing y, columns left to right as increasing x.
PATTERNS: Dict[str, Tuple[str, ...]] = {
    # still lifes
    'block': ('##', '##'),
    'beehive': ('.##.', '#..#', '.##.'),
    'loaf': ('.##.', '#..#', '.#.#', '..#.'),
    'boat': ('##.', '#.#', '.#.'),
    # oscillators
    'blinker': ('###',),
    'toad': ('.###', '###.'),
    'beacon': ('##..', '##..', '..##', '..##'),
    # spaceships
    'glider': ('.#.', '..#', '###'),
    'lwss': ('.#..#', '#....', '#...#', '####.'),
    # methuselahs
    'r_pentomino': ('.##', '##.', '.#.'),
    'diehard': ('......#.', '##......', '.#...###'),
    'acorn': ('.#.....', '...#...', '##..###'),
}


def parse_pattern(
    rows: Sequence[str],
    live: str = '#',
    dead: str = '.',
    origin: Coord = (0, 0),
) -> FrozenSet[Coord]:
    """
    Converts text rows into live coordinates, offset by `origin`.
    Accepts 'O', 'o' and '*' as live besides `live`, and spaces as dead.
    Rows may have different lengths; missing cells are dead.
    """
    ox, oy = origin
    cells: List[Coord] = []
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == live or ch in _LIVE_ALIASES:
                cells.append((ox + x, oy + y))
            elif ch == dead or ch == ' ':
                continue
            else:
                raise ValueError(f'Invalid pattern character {ch!r} at row {y}, column {x}')
    return frozenset(cells)


def _canonical_name(name: str) -> str:
    return name.strip().lower().replace('-', '_')


def pattern_names() -> List[str]:
    return sorted(PATTERNS)


def load_pattern(name: str, origin: Coord = (0, 0)) -> FrozenSet[Coord]:
    """Looks up a named pattern (case-insensitive, '-' and '_' interchangeable)."""
    rows = PATTERNS.get(_canonical_name(name))
    if rows is None:
        raise ValueError(f'Unknown pattern: {name}')
    return parse_pattern(rows, origin=origin)


def random_soup(width: int, height: int, density: float = 0.5, seed: Optional[int] = None) -> FrozenSet[Coord]:
    """Fills a width x height rectangle at random; same seed, same soup."""
    if width <= 0 or height <= 0:
        raise ValueError('Soup dimensions must be positive')
    if not 0.0 <= density <= 1.0:
        raise ValueError('Density must be between 0 and 1')
    rng = random.Random(seed)
    return frozenset(
        (x, y)
        for y in range(height)
        for x in range(width)
        if rng.random() < density
    )


def seed_game(game, cells: Iterable[Coord], offset: Coord = (0, 0)) -> None:
    """Seeds every cell into `game` (anything with seed(x, y)), shifted by `offset`."""
    dx, dy = offset
    for (x, y) in cells:
        game.seed(x + dx, y + dy)
