from __future__ import annotations

from enum import Enum


class BuildingCategory(str, Enum):
    """The eight colour classes printed on the building cards."""

    BLUE = "BLUE"
    RED = "RED"
    GRAY = "GRAY"
    YELLOW = "YELLOW"
    GREEN = "GREEN"
    ORANGE = "ORANGE"
    BLACK = "BLACK"
    PURPLE = "PURPLE"


# Categories a deck picks exactly one card from (BLUE is always Cottage, PURPLE is the monument).
DECK_CATEGORIES: tuple[BuildingCategory, ...] = (
    BuildingCategory.RED,
    BuildingCategory.GRAY,
    BuildingCategory.YELLOW,
    BuildingCategory.GREEN,
    BuildingCategory.ORANGE,
    BuildingCategory.BLACK,
)
