from __future__ import annotations

from enum import Enum


class BuildingId(str, Enum):
    """Grid identifiers of the buildings that board-wide rules single out.

    A building identifier on the grid is the building's card name, upper-cased.
    """

    COTTAGE = "COTTAGE"
    BARRETT_CASTLE = "BARRETT CASTLE"
    TRADING_POST = "TRADING POST"
    WAREHOUSE = "WAREHOUSE"
    TAVERN = "TAVERN"
    SHED = "SHED"
    SHRINE = "SHRINE OF THE ELDER TREE"
    CATHEDRAL = "CATHEDRAL OF CATERINA"


# Buildings that are fed and scored as cottages.
COTTAGE_CLASS: tuple[str, ...] = (BuildingId.COTTAGE.value, BuildingId.BARRETT_CASTLE.value)


def normalize_building_id(name: str) -> str:
    """Canonical grid identifier for a building name (case-insensitive)."""
    return name.strip().upper()
