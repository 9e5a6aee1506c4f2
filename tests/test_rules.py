import pytest

from futris.game.rules import ScoringRules


def test_quadratic_line_score():
    rules = ScoringRules(score_per_line=10)
    assert rules.score_for_lines(0) == 0
    assert rules.score_for_lines(1) == 10
    assert rules.score_for_lines(2) == 40
    assert rules.score_for_lines(4) == 160


def test_negative_unit_rejected():
    with pytest.raises(ValueError):
        ScoringRules(score_per_line=-1)
