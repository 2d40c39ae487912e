"""Core enums for town-builder domain objects."""

from .building_category import DECK_CATEGORIES, BuildingCategory
from .building_id import COTTAGE_CLASS, BuildingId, normalize_building_id
from .effect_type import EffectType
from .resource import ALL_RESOURCES, RESOURCE_TAGS, Resource, is_building_cell

__all__ = [
    "Resource",
    "ALL_RESOURCES",
    "RESOURCE_TAGS",
    "is_building_cell",
    "BuildingCategory",
    "DECK_CATEGORIES",
    "BuildingId",
    "COTTAGE_CLASS",
    "normalize_building_id",
    "EffectType",
]
