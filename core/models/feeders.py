"""Feeder capabilities: which grid positions a food building feeds.

Every variant answers ``fed_positions(position, grid)``. The positions are
candidates only; the score manager checks what actually stands there.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from core.enums.building_id import COTTAGE_CLASS
from core.grid_helpers import Grid, connected_groups, largest_group, line_positions
from core.models.grid_position import GLOBAL_FOOD, GridPosition


class GlobalFeeder(BaseModel):
    """Adds ``amount`` units to the shared food pool (Farm)."""

    kind: Literal["global"] = "global"
    amount: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def fed_positions(self, position: GridPosition, grid: Grid) -> list[GridPosition]:
        return [GLOBAL_FOOD] * self.amount


class AdjacentFeeder(BaseModel):
    """Feeds the eight surrounding squares (Granary)."""

    kind: Literal["adjacent"] = "adjacent"

    model_config = {"frozen": True}

    def fed_positions(self, position: GridPosition, grid: Grid) -> list[GridPosition]:
        return position.surrounding(len(grid))


class ContiguousFeeder(BaseModel):
    """Feeds the largest connected group of cottage-class buildings (Greenhouse).

    Cottages and cottage aliases connect to each other. The score manager
    fills ``cottage_ids`` from the active registry. On a size tie the group
    met first in a row-major scan wins.
    """

    kind: Literal["contiguous"] = "contiguous"
    cottage_ids: tuple[str, ...] = COTTAGE_CLASS

    model_config = {"frozen": True}

    def fed_positions(self, position: GridPosition, grid: Grid) -> list[GridPosition]:
        groups = connected_groups(grid, lambda cell: cell in self.cottage_ids, same_value=False)
        return largest_group(groups)


class RowColumnFeeder(BaseModel):
    """Feeds every other square in the feeder's row and column (Orchard)."""

    kind: Literal["row_column"] = "row_column"

    model_config = {"frozen": True}

    def fed_positions(self, position: GridPosition, grid: Grid) -> list[GridPosition]:
        return line_positions(position, len(grid))


Feeder = Annotated[
    GlobalFeeder | AdjacentFeeder | ContiguousFeeder | RowColumnFeeder,
    Field(discriminator="kind"),
]
