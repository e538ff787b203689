from __future__ import annotations

# Facade module that re-exports the Life core.
# The Flask app and the tests import from here; the logic lives under life_core/*.

try:
    from .life_core.board import Board, Coord, points_surrounding  # type: ignore
    from .life_core.rules import AliveCellRules, DeadCellRules, Fate, classify, comes_alive  # type: ignore
    from .life_core.simulation import Game, RunResult  # type: ignore
    from .life_core.patterns import (  # type: ignore
        PATTERNS,
        parse_pattern,
        pattern_names,
        load_pattern,
        random_soup,
        seed_game,
    )
    from .life_core.normalize import bounding_box, normalize_to_origin, _shift_coord  # type: ignore
    from .life_core.hashkey import generation_key, raw_generation_key  # type: ignore
    from .life_core.render import TextDevice, render_text  # type: ignore
except ImportError:
    from life_core.board import Board, Coord, points_surrounding  # type: ignore
    from life_core.rules import AliveCellRules, DeadCellRules, Fate, classify, comes_alive  # type: ignore
    from life_core.simulation import Game, RunResult  # type: ignore
    from life_core.patterns import (  # type: ignore
        PATTERNS,
        parse_pattern,
        pattern_names,
        load_pattern,
        random_soup,
        seed_game,
    )
    from life_core.normalize import bounding_box, normalize_to_origin, _shift_coord  # type: ignore
    from life_core.hashkey import generation_key, raw_generation_key  # type: ignore
    from life_core.render import TextDevice, render_text  # type: ignore


def main() -> None:
    # CLI driver delegated to life_core.cli
    try:
        from .life_core.cli import main as _main  # type: ignore
    except ImportError:
        from life_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
