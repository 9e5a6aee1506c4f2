from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


Offset = Tuple[int, int]
RGBA = Tuple[float, float, float, float]


class ShapeKind(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


# (column, row) offsets inside a 4x4 frame, one entry per clockwise rotation.
TILES: Dict[ShapeKind, Tuple[Tuple[Offset, ...], ...]] = {
    ShapeKind.I: (
        ((0, 1), (1, 1), (2, 1), (3, 1)),
        ((2, 0), (2, 1), (2, 2), (2, 3)),
        ((0, 2), (1, 2), (2, 2), (3, 2)),
        ((1, 0), (1, 1), (1, 2), (1, 3)),
    ),
    ShapeKind.O: (
        ((1, 0), (2, 0), (1, 1), (2, 1)),
    ) * 4,
    ShapeKind.T: (
        ((1, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 1)),
        ((0, 1), (1, 1), (2, 1), (1, 2)),
        ((1, 0), (1, 1), (1, 2), (0, 1)),
    ),
    ShapeKind.S: (
        ((1, 0), (2, 0), (0, 1), (1, 1)),
        ((1, 0), (1, 1), (2, 1), (2, 2)),
        ((1, 1), (2, 1), (0, 2), (1, 2)),
        ((0, 0), (0, 1), (1, 1), (1, 2)),
    ),
    ShapeKind.Z: (
        ((0, 0), (1, 0), (1, 1), (2, 1)),
        ((2, 0), (2, 1), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (1, 2), (2, 2)),
        ((1, 0), (1, 1), (0, 1), (0, 2)),
    ),
    ShapeKind.J: (
        ((0, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (2, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1), (2, 2)),
        ((2, 0), (2, 1), (2, 2), (1, 2)),
    ),
    ShapeKind.L: (
        ((2, 0), (0, 1), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 2)),
        ((0, 1), (1, 1), (2, 1), (0, 2)),
        ((0, 0), (1, 0), (1, 1), (1, 2)),
    ),
}

COLORS: Dict[ShapeKind, RGBA] = {
    ShapeKind.I: (0.00, 0.73, 0.83, 1.0),  # cyan
    ShapeKind.O: (1.00, 0.92, 0.23, 1.0),  # yellow
    ShapeKind.T: (0.61, 0.15, 0.69, 1.0),  # purple
    ShapeKind.S: (0.55, 0.76, 0.29, 1.0),  # light green
    ShapeKind.Z: (0.95, 0.26, 0.21, 1.0),  # red
    ShapeKind.J: (0.13, 0.59, 0.95, 1.0),  # blue
    ShapeKind.L: (1.00, 0.60, 0.00, 1.0),  # orange
}

# Shift applied to board_width // 2 so each kind spawns centered.
_SPAWN_SHIFT: Dict[ShapeKind, int] = {
    ShapeKind.I: -2,
    ShapeKind.O: -2,
    ShapeKind.T: -2,
    ShapeKind.S: -1,
    ShapeKind.Z: -2,
    ShapeKind.J: -2,
    ShapeKind.L: -2,
}


def tiles(kind: ShapeKind, rotation: int) -> Tuple[Offset, ...]:
    return TILES[kind][rotation % 4]


def color(kind: ShapeKind) -> RGBA:
    return COLORS[kind]


def spawn_origin(kind: ShapeKind, board_width: int = 10) -> int:
    return board_width // 2 + _SPAWN_SHIFT[kind]
