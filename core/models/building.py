from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from core.enums.building_category import BuildingCategory
from core.enums.building_id import COTTAGE_CLASS, BuildingId, normalize_building_id
from core.enums.resource import Resource
from core.models.effects import BuildingEffect
from core.models.feeders import Feeder
from core.models.scorers import Scorer

Pattern = tuple[tuple[Resource, ...], ...]


class BuildingDefinition(BaseModel):
    """One building card: how it is built and how it behaves once standing.

    - name: unique card name, compared case-insensitively
    - category: the card's colour class
    - pattern: resource layout to build it; ``Resource.NONE`` marks a don't-care slot
    - feed_cost: food consumed to count as fed (0 for buildings that never eat)
    - counts_as: identifiers this building also counts as for neighbour checks
    - is_monument: monuments are mutually exclusive within one town
    - feeder, scorer, effect: optional behaviour capabilities
    """

    name: str = Field(..., min_length=1)
    category: BuildingCategory
    pattern: Pattern
    feed_cost: int = Field(default=0, ge=0)
    counts_as: tuple[str, ...] = ()
    is_monument: bool = False
    feeder: Feeder | None = None
    scorer: Scorer | None = None
    effect: BuildingEffect | None = None
    description: str = ""

    model_config = {"frozen": True}

    @field_validator("pattern")
    @classmethod
    def _rectangular_pattern(cls, value: Pattern) -> Pattern:
        if not value or not value[0]:
            msg = "Pattern must have at least one row and one column"
            raise ValueError(msg)
        width = len(value[0])
        if any(len(row) != width for row in value):
            msg = f"Pattern rows must all have width {width}"
            raise ValueError(msg)
        if all(cell == Resource.NONE for row in value for cell in row):
            msg = "Pattern needs at least one required resource"
            raise ValueError(msg)
        return value

    @field_validator("counts_as")
    @classmethod
    def _normalize_aliases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_building_id(alias) for alias in value)

    @property
    def identifier(self) -> str:
        """The value written on the grid for this building."""
        return normalize_building_id(self.name)

    @property
    def is_cottage_class(self) -> bool:
        return self.identifier in COTTAGE_CLASS or BuildingId.COTTAGE.value in self.counts_as

    @property
    def cottage_weight(self) -> int:
        """How many cottages a fed instance is worth (castles count as two)."""
        if self.identifier == BuildingId.COTTAGE.value:
            return 1
        return 2 if self.is_cottage_class else 0

    def required_cells(self) -> int:
        return sum(1 for row in self.pattern for cell in row if cell != Resource.NONE)
