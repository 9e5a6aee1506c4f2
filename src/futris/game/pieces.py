from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Tuple

from .shapes import RGBA, ShapeKind, color, spawn_origin, tiles


Coordinate = Tuple[int, int]

KINDS: Tuple[ShapeKind, ...] = tuple(ShapeKind)


class KindSource(Protocol):
    """Anything that hands out uniform integers in ``[0, n)``, e.g. ``random.Random``."""

    def randrange(self, stop: int) -> int: ...


@dataclass
class Piece:
    x: int
    y: int
    shape: ShapeKind
    rotation: int = 0  # clockwise quarter turns, 0..3

    def cells(self) -> List[Coordinate]:
        return self.cells_offset(0, 0)

    def cells_offset(self, dx: int, dy: int) -> List[Coordinate]:
        return [
            (self.x + tx + dx, self.y + ty + dy)
            for tx, ty in tiles(self.shape, self.rotation)
        ]

    def cells_rotated(self) -> List[Coordinate]:
        """Cells the piece would occupy after one clockwise turn in place."""
        return [
            (self.x + tx, self.y + ty)
            for tx, ty in tiles(self.shape, (self.rotation + 1) % 4)
        ]

    def rotate(self) -> None:
        self.rotation = (self.rotation + 1) % 4

    def color(self) -> RGBA:
        return color(self.shape)


def random_piece(rng: KindSource, board_width: int = 10) -> Piece:
    kind = KINDS[rng.randrange(len(KINDS))]
    return Piece(x=spawn_origin(kind, board_width), y=0, shape=kind, rotation=0)
