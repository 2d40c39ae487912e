from __future__ import annotations

from enum import Enum


class Resource(str, Enum):
    """The five resource cubes a player can drop on the town grid.

    ``NONE`` doubles as the empty-cell tag on the grid and as the
    don't-care slot inside a building pattern.
    """

    WOOD = "WOOD"
    WHEAT = "WHEAT"
    BRICK = "BRICK"
    GLASS = "GLASS"
    STONE = "STONE"
    NONE = "NONE"


ALL_RESOURCES: tuple[Resource, ...] = (
    Resource.WOOD,
    Resource.WHEAT,
    Resource.BRICK,
    Resource.GLASS,
    Resource.STONE,
)

RESOURCE_TAGS: frozenset[str] = frozenset(r.value for r in Resource)


def is_building_cell(cell: str) -> bool:
    """True if a grid cell holds a building identifier rather than a resource or nothing."""
    return cell not in RESOURCE_TAGS
