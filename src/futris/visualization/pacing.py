from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DropSchedule:
    """Gravity interval that speeds up as lines are cleared."""

    start_ms: int = 600
    min_ms: int = 100
    step_ms: int = 40
    lines_per_step: int = 10

    def __post_init__(self) -> None:
        if self.min_ms <= 0 or self.start_ms < self.min_ms:
            raise ValueError(f"need 0 < min_ms <= start_ms, got min_ms={self.min_ms} start_ms={self.start_ms}")
        if self.lines_per_step <= 0:
            raise ValueError(f"lines_per_step must be positive, got {self.lines_per_step}")

    def interval_ms(self, lines_cleared: int) -> int:
        level = max(0, lines_cleared) // self.lines_per_step
        return max(self.min_ms, self.start_ms - level * self.step_ms)
