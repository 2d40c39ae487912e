"""
Pydantic models for the JSON files read by the town scoring tools.

A scoring file names the deck in play (one card per colour plus a monument)
and lists the boards to score against it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from core.catalog import BUILDINGS_BY_CATEGORY, COTTAGE, find_building
from core.enums.building_category import DECK_CATEGORIES, BuildingCategory
from core.enums.building_id import normalize_building_id
from core.enums.resource import RESOURCE_TAGS
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GridPosition
from core.models.registry import BuildingRegistry
from core.models.town_board import TownBoard


def _check_category(name: str, category: BuildingCategory) -> str:
    building = find_building(name)
    if building is None:
        msg = f"Unknown building: {name}"
        raise ValueError(msg)
    if building.category != category:
        msg = f"{building.name} is a {building.category.value} building, not {category.value}"
        raise ValueError(msg)
    return building.name


class DeckConfiguration(BaseModel):
    """
    The building cards used in one game.

    Cottage is always part of the deck and is not listed here.
    """

    red: str = Field(..., description="Farm-type card (RED)")
    gray: str = Field(..., description="Well-type card (GRAY)")
    yellow: str = Field(..., description="Theater-type card (YELLOW)")
    green: str = Field(..., description="Tavern-type card (GREEN)")
    orange: str = Field(..., description="Chapel-type card (ORANGE)")
    black: str = Field(..., description="Factory-type card (BLACK)")
    monument: str = Field(..., description="The player's monument")

    @field_validator("red", "gray", "yellow", "green", "orange", "black")
    @classmethod
    def validate_category_pick(cls, value: str, info) -> str:
        return _check_category(value, BuildingCategory(info.field_name.upper()))

    @field_validator("monument")
    @classmethod
    def validate_monument(cls, value: str) -> str:
        building = find_building(value)
        if building is None or not building.is_monument:
            msg = f"{value} is not a monument"
            raise ValueError(msg)
        return building.name

    def picks(self) -> dict[BuildingCategory, str]:
        return {category: getattr(self, category.value.lower()) for category in DECK_CATEGORIES}

    def build_registry(self) -> BuildingRegistry:
        """Cottage first, then the picks in catalog colour order, then the monument."""
        buildings = [COTTAGE]
        for category, name in self.picks().items():
            for building in BUILDINGS_BY_CATEGORY[category]:
                if building.name == name:
                    buildings.append(building)
        buildings.append(find_building(self.monument))
        return BuildingRegistry(buildings=buildings)


class BoardSnapshot(BaseModel):
    """A town as stored on disk, plus the end-of-game facts some scorers need."""

    name: str = Field(default="board", description="Label used in reports")
    grid: list[list[str]] = Field(..., description="Rows of cell values")
    metadata: dict[str, CellMetadata] = Field(
        default_factory=dict,
        description='Per-cell records keyed by "row,col"',
    )
    finish_rank: int | None = Field(default=None, ge=1, description="Order in which this town was completed")
    rival_counts: dict[str, int] | None = Field(
        default=None,
        description="Building counts of the player on the right",
    )

    @field_validator("grid")
    @classmethod
    def validate_square(cls, value: list[list[str]]) -> list[list[str]]:
        if not value or any(len(row) != len(value) for row in value):
            msg = "Grid must be square"
            raise ValueError(msg)
        grid = [[normalize_building_id(cell) for cell in row] for row in value]
        for row in grid:
            for cell in row:
                if cell not in RESOURCE_TAGS and find_building(cell) is None:
                    msg = f"Unknown cell value: {cell!r}"
                    raise ValueError(msg)
        return grid

    @field_validator("rival_counts")
    @classmethod
    def validate_rival_counts(cls, value: dict[str, int] | None) -> dict[str, int] | None:
        if value is None:
            return None
        return {normalize_building_id(name): count for name, count in value.items()}

    @field_validator("metadata")
    @classmethod
    def validate_keys(cls, value: dict[str, CellMetadata]) -> dict[str, CellMetadata]:
        for key in value:
            try:
                GridPosition.parse(key)
            except ValueError as e:
                msg = f'Metadata key must look like "row,col", got {key!r}'
                raise ValueError(msg) from e
        return value

    def to_board(self) -> TownBoard:
        return TownBoard(
            size=len(self.grid),
            grid=[list(row) for row in self.grid],
            metadata={GridPosition.parse(key): data for key, data in self.metadata.items()},
        )


class BatchScoringFile(BaseModel):
    """One deck and every board to be scored with it."""

    deck: DeckConfiguration
    boards: list[BoardSnapshot] = Field(default_factory=list)
