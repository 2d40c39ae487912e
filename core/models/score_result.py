from __future__ import annotations

from pydantic import BaseModel, Field


class ScoreResult(BaseModel):
    """Final score of one town.

    - total: sum of the breakdown minus the empty-square penalty
    - breakdown: points per building identifier (all instances summed)
    - penalty_count: empty squares that cost a point (0 when the Cathedral stands)
    """

    total: int
    breakdown: dict[str, int] = Field(default_factory=dict)
    penalty_count: int = Field(default=0, ge=0)

    @property
    def positive_total(self) -> int:
        return sum(self.breakdown.values())

    def summary_lines(self) -> list[str]:
        lines = [f"{name.lower()}: {points}" for name, points in sorted(self.breakdown.items())]
        lines.append(f"empty squares: -{self.penalty_count}")
        lines.append(f"total: {self.total}")
        return lines
