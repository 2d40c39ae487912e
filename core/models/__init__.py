"""Pydantic models for core town-builder domain objects."""

from .building import BuildingDefinition, Pattern
from .cell_metadata import CellMetadata
from .effects import BuildingEffect
from .feeders import AdjacentFeeder, ContiguousFeeder, Feeder, GlobalFeeder, RowColumnFeeder
from .grid_position import GLOBAL_FOOD, GRID_SIZE, GridPosition
from .match import Match
from .registry import BuildingRegistry
from .score_result import ScoreResult
from .scoring_context import ScoringContext
from .town_board import TownBoard

__all__ = [
    "GridPosition",
    "GLOBAL_FOOD",
    "GRID_SIZE",
    "CellMetadata",
    "TownBoard",
    "BuildingDefinition",
    "Pattern",
    "BuildingEffect",
    "Feeder",
    "GlobalFeeder",
    "AdjacentFeeder",
    "ContiguousFeeder",
    "RowColumnFeeder",
    "BuildingRegistry",
    "Match",
    "ScoreResult",
    "ScoringContext",
]
