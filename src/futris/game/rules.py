from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    score_per_line: int = 100

    def __post_init__(self) -> None:
        if self.score_per_line < 0:
            raise ValueError(f"score_per_line must be >= 0, got {self.score_per_line}")

    def score_for_lines(self, lines: int) -> int:
        # Quadratic: a four-line clear is worth 16 single lines.
        if lines <= 0:
            return 0
        return lines * lines * self.score_per_line
