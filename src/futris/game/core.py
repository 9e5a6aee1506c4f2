from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .grid import Coordinate, GameGrid
from .pieces import KindSource, Piece, random_piece
from .rules import ScoringRules
from .shapes import RGBA, ShapeKind, color

logger = logging.getLogger(__name__)


class Command(IntEnum):
    ROTATE_RIGHT = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    SOFT_DROP = 3
    HARD_DROP = 4


@dataclass(frozen=True)
class GameConfig:
    width: int = 10
    height: int = 30
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        # Pieces live in a 4x4 frame and spawn around width // 2.
        if self.width < 4:
            raise ValueError(f"width must be at least 4, got {self.width}")
        if self.height < 2:
            raise ValueError(f"height must be at least 2, got {self.height}")


class Playfield:
    """Board state machine: settled grid, falling piece, score and progress flag.

    Every mutation goes through ``apply_command`` or ``tick``. Once the game is
    lost (``in_progress`` is False) both are no-ops; build a new Playfield to
    play again.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[KindSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng: KindSource = rng if rng is not None else random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.in_progress = True
        self.score = 0
        self.lines_cleared_total = 0
        self.active_piece: Piece = self._spawn_piece()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    # ------------------------------------------------------------------ commands

    def apply_command(self, cmd: Command) -> None:
        cmd = Command(cmd)
        if not self.in_progress:
            return
        if cmd == Command.ROTATE_RIGHT:
            self._rotate()
        elif cmd == Command.MOVE_LEFT:
            self._move_horizontally(-1)
        elif cmd == Command.MOVE_RIGHT:
            self._move_horizontally(1)
        elif cmd == Command.SOFT_DROP:
            self.tick()
        elif cmd == Command.HARD_DROP:
            self._hard_drop()

    def tick(self) -> None:
        """One step of gravity: fall a row, or land when the row below is blocked."""
        if not self.in_progress:
            return
        if self.illegal_position(self.active_piece.cells_offset(0, 1)):
            self._land()
        else:
            self.active_piece.y += 1

    def illegal_position(self, cells: Iterable[Coordinate]) -> bool:
        return self.grid.is_illegal(cells)

    def _rotate(self) -> None:
        if not self.illegal_position(self.active_piece.cells_rotated()):
            self.active_piece.rotate()

    def _move_horizontally(self, distance: int) -> None:
        if not self.illegal_position(self.active_piece.cells_offset(distance, 0)):
            self.active_piece.x += distance

    def _hard_drop(self) -> None:
        while not self.illegal_position(self.active_piece.cells_offset(0, 1)):
            self.active_piece.y += 1
        self._land()

    # ------------------------------------------------------------------ landing

    def _land(self) -> None:
        piece = self.active_piece
        cells = piece.cells()
        self.grid.settle(cells, int(piece.shape))
        logger.debug("landed %s at x=%d y=%d rotation=%d", piece.shape.name, piece.x, piece.y, piece.rotation)

        if any(y <= 0 for _, y in cells):
            self.in_progress = False
            logger.info("game over: %s locked at the top, score=%d", piece.shape.name, self.score)
        else:
            rows = self.grid.full_rows()
            lines = self.grid.clear_rows(rows)
            if lines:
                gained = self.rules.score_for_lines(lines)
                self.score += gained
                self.lines_cleared_total += lines
                logger.info("cleared %d line(s) down to row %d: +%d, score=%d", lines, max(rows), gained, self.score)

        self.active_piece = self._spawn_piece()

    def _spawn_piece(self) -> Piece:
        piece = random_piece(self.rng, self.config.width)
        logger.debug("spawned %s at x=%d", piece.shape.name, piece.x)
        # Block out: the new piece already overlaps the stack.
        if self.in_progress and self.illegal_position(piece.cells()):
            self.in_progress = False
            logger.info("game over: no room to spawn %s, score=%d", piece.shape.name, self.score)
        return piece

    # ------------------------------------------------------------------ read access

    def settled_cells(self) -> Iterator[Tuple[int, int, RGBA]]:
        """Yield ``(column, row, color)`` for every settled cell."""
        for x, y, value in self.grid.settled():
            yield x, y, color(ShapeKind(value))

    def active_cells(self) -> List[Coordinate]:
        return self.active_piece.cells()

    def active_color(self) -> RGBA:
        return self.active_piece.color()

    def get_state(self) -> np.ndarray:
        # Overlay the falling piece on a copy of the grid as negative kind ids.
        state = self.grid.clone_state()
        if self.in_progress:
            for x, y in self.active_piece.cells():
                if 0 <= y < self.grid.height and 0 <= x < self.grid.width:
                    state[y, x] = -int(self.active_piece.shape)
        return state
