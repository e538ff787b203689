from __future__ import annotations

from typing import Iterable, Tuple

from .board import Coord
from .normalize import normalize_to_origin

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _zigzag(value: int) -> int:
    """Maps signed ints onto non-negative ints: 0, -1, 1, -2, 2 -> 0, 1, 2, 3, 4."""
    return (value << 1) if value >= 0 else ((-value << 1) - 1)


# Szudzik's pairing function and Vigna's SplitMix64 finalizer.
def _pair64(left: int, right: int) -> int:
    if left >= right:
        return (left * left) + left + right
    else:
        return left + (right * right)


def _mix64(value: int) -> int:
    value = (value + 0x9e3779b97f4a7c15) & _MASK64
    value ^= (value >> 30)
    value = (value * 0xbf58476d1ce4e5b9) & _MASK64
    value ^= (value >> 27)
    value = (value * 0x94d049bb133111eb) & _MASK64
    value ^= (value >> 31)
    return value & _MASK64


def _hash_cells64(cells: Iterable[Coord]) -> int:
    h = 0
    for (x, y) in sorted(cells):
        cell = _pair64(_zigzag(x), _zigzag(y)) & _MASK64
        h = _mix64(_pair64(h, cell) & _MASK64)
    return h


def _key(cells: Tuple[Coord, ...]) -> str:
    return f"{_hash_cells64(cells):016x}|{len(cells)}"


def raw_generation_key(cells: Iterable[Coord]) -> str:
    """64-bit key for the cells exactly where they are."""
    return _key(tuple(set(cells)))


def generation_key(cells: Iterable[Coord]) -> str:
    """Translation-invariant key: SplitMix64 over Szudzik-paired coordinates after
    shifting the bounding box to (0,0). Formatted as hex + population."""
    norm, _dx, _dy = normalize_to_origin(cells)
    return _key(tuple(norm))
