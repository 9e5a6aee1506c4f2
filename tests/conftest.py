from __future__ import annotations

import itertools
from typing import Callable

import pytest

from futris.game import GameConfig, Playfield, ScoringRules, ShapeKind
from futris.game.pieces import KINDS


class SequenceRng:
    """Hands out the given kinds in order, cycling when exhausted."""

    def __init__(self, kinds) -> None:
        self._indices = itertools.cycle([KINDS.index(k) for k in kinds] or [0])

    def randrange(self, stop: int) -> int:
        assert stop == len(KINDS)
        return next(self._indices)


@pytest.fixture
def make_board() -> Callable[..., Playfield]:
    def _make(*kinds: ShapeKind, width: int = 10, height: int = 30, score_per_line: int = 100) -> Playfield:
        return Playfield(
            GameConfig(width=width, height=height),
            ScoringRules(score_per_line=score_per_line),
            rng=SequenceRng(kinds),
        )

    return _make
