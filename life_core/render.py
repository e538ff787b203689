from __future__ import annotations

from typing import List, Optional

from .board import Board, Coord


class TextDevice:
    """A renderer that remembers what it was asked to draw and prints it as text rows."""

    def __init__(self) -> None:
        self._drawn = Board()
        self.calls: List[Coord] = []

    def draw_cell(self, x: int, y: int) -> None:
        self.calls.append((x, y))
        self._drawn.come_alive_at(x, y)

    def clear(self) -> None:
        self.calls = []
        self._drawn.reset()

    def text(self, origin: Optional[Coord] = None) -> str:
        return self._drawn.pretty(origin)


def render_text(game, origin: Optional[Coord] = None) -> str:
    """Renders the game's current generation through a fresh TextDevice."""
    device = TextDevice()
    game.render(device)
    return device.text(origin)
