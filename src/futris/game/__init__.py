"""Game module for Futris.

Exports the rules engine and supporting classes:
- GameGrid: Settled-cell grid, legality checks and line removal
- Piece: The falling piece and random spawning
- ShapeKind: Enum of the seven piece kinds, with shape/color tables
- ScoringRules: Line-clear scoring
- Playfield: Board state machine driven by commands and gravity ticks
"""

from .grid import GameGrid
from .pieces import Piece, random_piece
from .rules import ScoringRules
from .shapes import ShapeKind, color, spawn_origin, tiles
from .core import Command, GameConfig, Playfield

__all__ = [
    "GameGrid",
    "Piece",
    "random_piece",
    "ShapeKind",
    "tiles",
    "color",
    "spawn_origin",
    "ScoringRules",
    "Command",
    "GameConfig",
    "Playfield",
]
