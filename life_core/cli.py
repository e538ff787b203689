from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from .simulation import Game
from .patterns import load_pattern, pattern_names, random_soup, seed_game
from .render import render_text


def _parse_size(text: str) -> Tuple[int, int]:
    sep = 'x' if 'x' in text.lower() else ','
    try:
        w_s, h_s = [t for t in text.lower().split(sep) if t != '']
        return int(w_s), int(h_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected WIDTHxHEIGHT, got {text!r}')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Conway's Game of Life on an unbounded grid")
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--pattern', default=None, help='Named starting pattern (see --list-patterns)')
    source.add_argument('--random', type=_parse_size, default=None, metavar='WxH', help='Random soup of this size')
    parser.add_argument('--density', type=float, default=0.5, help='Live cell density for --random')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --random')
    parser.add_argument('--generations', type=int, default=10, help='Number of ticks to run')
    parser.add_argument('--show-every', type=int, default=0, help='Print every K-th generation (0: only first and last)')
    parser.add_argument('--detect-cycles', action='store_true', help='Stop when a shape repeats and report its period')
    parser.add_argument('--list-patterns', action='store_true', help='List named patterns and exit')
    args = parser.parse_args(argv)

    if args.list_patterns:
        for name in pattern_names():
            print(name)
        return

    if args.generations < 0:
        parser.error('--generations must be non-negative')
    if args.show_every < 0:
        parser.error('--show-every must be non-negative')

    try:
        if args.random is not None:
            width, height = args.random
            cells = random_soup(width, height, density=args.density, seed=args.seed)
        else:
            cells = load_pattern(args.pattern or 'glider')
    except ValueError as e:
        parser.error(str(e))

    game = Game()
    seed_game(game, cells)
    print(f'Generation {game.generation} (population {game.population}):')
    print(render_text(game))

    if args.show_every:
        # Step in chunks so intermediate generations can be printed.
        result = None
        remaining = args.generations
        while remaining > 0:
            chunk = min(args.show_every, remaining)
            result = game.run(chunk, stop_on_repeat=False)
            remaining -= chunk
            print(f'\nGeneration {game.generation} (population {game.population}):')
            print(render_text(game))
            if result.extinct:
                break
        if args.detect_cycles:
            print('\nnote: --detect-cycles is ignored with --show-every')
    else:
        result = game.run(args.generations, stop_on_repeat=args.detect_cycles)
        print(f'\nGeneration {game.generation} (population {game.population}):')
        print(render_text(game))

    summary = f'Ran {game.generation} generation(s); population {game.population}'
    if result is not None and result.extinct:
        summary += '; extinct'
    if result is not None and result.period is not None:
        summary += f'; period {result.period}, displacement {result.displacement}'
    print('\n' + summary)
