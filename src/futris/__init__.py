"""Futris: a falling-block puzzle rules engine."""

from futris.game import Command, GameConfig, Playfield, ScoringRules, ShapeKind

__all__ = ["Command", "GameConfig", "Playfield", "ScoringRules", "ShapeKind"]
