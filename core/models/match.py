from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.resource import Resource
from core.models.building import Pattern
from core.models.grid_position import GridPosition


class Match(BaseModel):
    """One place where a building pattern currently fits the grid."""

    row: int = Field(..., ge=0, description="Top row of the matched window")
    col: int = Field(..., ge=0, description="Left column of the matched window")
    pattern: Pattern = Field(..., description="The symmetric variant that matched")
    building_name: str = Field(..., description="Identifier of the building that can be built")

    model_config = {"frozen": True}

    def coordinates(self) -> list[GridPosition]:
        """Grid cells consumed by building from this match (the pattern's non-wildcard slots)."""
        return [
            GridPosition(row=self.row + r, col=self.col + c)
            for r, pattern_row in enumerate(self.pattern)
            for c, cell in enumerate(pattern_row)
            if cell != Resource.NONE
        ]
