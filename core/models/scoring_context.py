from __future__ import annotations

from pydantic import BaseModel, Field

from core.enums.building_id import BuildingId
from core.models.building import BuildingDefinition
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GridPosition
from core.models.registry import BuildingRegistry


class ScoringContext(BaseModel):
    """Read-only view a scorer gets for one building instance.

    Built fresh by the score manager for every scored cell; ``counts`` and the
    fed data are board-wide aggregates from the earlier passes.
    """

    grid: list[list[str]]
    position: GridPosition
    identifier: str
    counts: dict[str, int] = Field(default_factory=dict)
    fed: bool = False
    fed_positions: frozenset[GridPosition] = frozenset()
    fed_cottage_count: int = 0
    metadata: dict[GridPosition, CellMetadata] = Field(default_factory=dict)
    registry: BuildingRegistry = Field(default_factory=BuildingRegistry)
    finish_rank: int | None = Field(default=None, ge=1, description="Finishing order, 1 = first to complete")
    rival_counts: dict[str, int] | None = Field(
        default=None, description="Building counts of the player on the right, when known"
    )

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def valid_building_names(self) -> list[str]:
        return self.registry.names()

    def cell(self, pos: GridPosition) -> str:
        return self.grid[pos.row][pos.col]

    def neighbor_cells(self) -> list[str]:
        return [self.cell(pos) for pos in self.position.orthogonal_neighbors(self.size)]

    def definition_of(self, cell: str) -> BuildingDefinition | None:
        return self.registry.get(cell)

    def matches_identity(self, cell: str, targets: tuple[str, ...]) -> bool:
        """True if ``cell`` is one of ``targets`` or counts as one of them."""
        if cell in targets:
            return True
        definition = self.definition_of(cell)
        return definition is not None and any(alias in targets for alias in definition.counts_as)

    def is_cottage_class(self, cell: str) -> bool:
        return self.matches_identity(cell, (BuildingId.COTTAGE.value,))

    def count_of(self, identifier: str) -> int:
        return self.counts.get(identifier, 0)
