from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from core.enums.building_id import COTTAGE_CLASS, normalize_building_id
from core.models.building import BuildingDefinition


class BuildingRegistry(BaseModel):
    """The ordered set of building cards active in one game.

    Look-ups are case-insensitive. A fully set-up registry holds exactly one
    monument, but partial registries are accepted so a deck can be assembled
    step by step.
    """

    buildings: list[BuildingDefinition] = Field(default_factory=list)

    @field_validator("buildings")
    @classmethod
    def _unique_names(cls, value: list[BuildingDefinition]) -> list[BuildingDefinition]:
        seen = set()
        for building in value:
            if building.identifier in seen:
                msg = f"Duplicate building in registry: {building.name}"
                raise ValueError(msg)
            seen.add(building.identifier)
        return value

    def get(self, name: str) -> BuildingDefinition | None:
        identifier = normalize_building_id(name)
        for building in self.buildings:
            if building.identifier == identifier:
                return building
        return None

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self.buildings)

    def names(self) -> list[str]:
        return [building.name for building in self.buildings]

    @property
    def monument(self) -> BuildingDefinition | None:
        for building in self.buildings:
            if building.is_monument:
                return building
        return None

    @property
    def is_complete(self) -> bool:
        return sum(1 for building in self.buildings if building.is_monument) == 1

    def without_monuments(self) -> list[BuildingDefinition]:
        return [building for building in self.buildings if not building.is_monument]

    def cottage_class_ids(self) -> tuple[str, ...]:
        """Cottage identifiers plus every registered building that counts as a cottage."""
        aliases = tuple(building.identifier for building in self.buildings if building.is_cottage_class)
        return tuple(dict.fromkeys(COTTAGE_CLASS + aliases))
