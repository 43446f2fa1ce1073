from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    soft_drop_points: int = 1

    def score_for_lines(self, lines: int) -> int:
        # Flat per-line award, no multi-line bonus
        if lines <= 0:
            return 0
        return lines * self.line_clear_points
