"""The static building catalog: every card of the deck, grouped by colour.

Patterns are written top row first. ``_`` is a don't-care slot.
"""

from __future__ import annotations

from core.enums.building_category import BuildingCategory
from core.enums.building_id import BuildingId
from core.enums.effect_type import EffectType
from core.enums.resource import Resource
from core.models.building import BuildingDefinition
from core.models.effects import BuildingEffect
from core.models.feeders import AdjacentFeeder, ContiguousFeeder, GlobalFeeder, RowColumnFeeder
from core.models.scorers import (
    AdjacencyCountScorer,
    AdjacencyRequirementScorer,
    AdjacentFedScorer,
    AlmshouseScorer,
    CategoryAdjacencyScorer,
    CenterCountScorer,
    CornerCountScorer,
    FeastHallScorer,
    FedCottageCountScorer,
    FinishRankScorer,
    FixedScorer,
    GlobalUniqueScorer,
    IsolationScorer,
    LargestGroupScorer,
    LineCountScorer,
    MissingTypeScorer,
    RestrictedNeighborScorer,
    SavedScoreScorer,
    SetSizeScorer,
    UnfedCottageScorer,
    UniqueLineScorer,
    UniqueNeighborScorer,
)

WOOD = Resource.WOOD
WHEAT = Resource.WHEAT
BRICK = Resource.BRICK
GLASS = Resource.GLASS
STONE = Resource.STONE
_ = Resource.NONE

COTTAGE_TARGETS = (BuildingId.COTTAGE.value,)

# --- BLUE ------------------------------------------------------------------

COTTAGE = BuildingDefinition(
    name="Cottage",
    category=BuildingCategory.BLUE,
    pattern=((_, WHEAT), (BRICK, GLASS)),
    scorer=FixedScorer(points=3, requires_food=True),
    feed_cost=1,
    description="3 points if fed.",
)

# --- RED (food) ------------------------------------------------------------

FARM = BuildingDefinition(
    name="Farm",
    category=BuildingCategory.RED,
    pattern=((WHEAT, WHEAT), (WOOD, WOOD)),
    feeder=GlobalFeeder(amount=4),
    description="Feeds 4 cottages anywhere on the board.",
)

GRANARY = BuildingDefinition(
    name="Granary",
    category=BuildingCategory.RED,
    pattern=((WHEAT, WHEAT), (WOOD, BRICK)),
    feeder=AdjacentFeeder(),
    description="Feeds all buildings in the 8 squares surrounding it.",
)

GREENHOUSE = BuildingDefinition(
    name="Greenhouse",
    category=BuildingCategory.RED,
    pattern=((WHEAT, GLASS), (WOOD, WOOD)),
    feeder=ContiguousFeeder(),
    description="Feeds one contiguous group of Cottages.",
)

ORCHARD = BuildingDefinition(
    name="Orchard",
    category=BuildingCategory.RED,
    pattern=((STONE, WHEAT), (WHEAT, WOOD)),
    feeder=RowColumnFeeder(),
    description="Feeds Cottages in the same row and column.",
)

# --- GRAY ------------------------------------------------------------------

WELL = BuildingDefinition(
    name="Well",
    category=BuildingCategory.GRAY,
    pattern=((WOOD, STONE),),
    scorer=AdjacencyCountScorer(targets=COTTAGE_TARGETS, points_per_neighbor=1),
    description="1 point for each adjacent cottage.",
)

FOUNTAIN = BuildingDefinition(
    name="Fountain",
    category=BuildingCategory.GRAY,
    pattern=((WOOD, STONE),),
    scorer=AdjacencyRequirementScorer(targets=COTTAGE_TARGETS, points=2),
    description="2 points if adjacent to a Cottage.",
)

MILLSTONE = BuildingDefinition(
    name="Millstone",
    category=BuildingCategory.GRAY,
    pattern=((WOOD, STONE),),
    scorer=CategoryAdjacencyScorer(categories=(BuildingCategory.RED, BuildingCategory.YELLOW), points=2),
    description="2 points if adjacent to a Red or Yellow building.",
)

SHED = BuildingDefinition(
    name="Shed",
    category=BuildingCategory.GRAY,
    pattern=((WOOD, STONE),),
    scorer=FixedScorer(points=1),
    description="Worth 1 point. May be built on any empty square.",
)

# --- YELLOW ----------------------------------------------------------------

THEATER = BuildingDefinition(
    name="Theater",
    category=BuildingCategory.YELLOW,
    pattern=((_, STONE, _), (WOOD, GLASS, WOOD)),
    scorer=UniqueLineScorer(),
    description="1 point for each unique building type in the same row and column.",
)

BAKERY = BuildingDefinition(
    name="Bakery",
    category=BuildingCategory.YELLOW,
    pattern=((_, WHEAT, _), (BRICK, GLASS, BRICK)),
    scorer=CategoryAdjacencyScorer(categories=(BuildingCategory.RED,), points=3),
    description="3 points if adjacent to a Food (Red) building.",
)

MARKET = BuildingDefinition(
    name="Market",
    category=BuildingCategory.YELLOW,
    pattern=((_, WOOD, _), (STONE, GLASS, STONE)),
    scorer=LineCountScorer(),
    description="1 point for each other Market in the same row or column.",
)

TAILOR = BuildingDefinition(
    name="Tailor",
    category=BuildingCategory.YELLOW,
    pattern=((_, WHEAT, _), (STONE, GLASS, STONE)),
    scorer=CenterCountScorer(),
    description="1 point. +1 point for each other Tailor in the 4 center squares.",
)

# --- GREEN -----------------------------------------------------------------

TAVERN = BuildingDefinition(
    name="Tavern",
    category=BuildingCategory.GREEN,
    pattern=((BRICK, BRICK, GLASS),),
    scorer=SetSizeScorer(table=(0, 2, 5, 9, 14, 20)),
    description="Score increasing points for each Tavern you have built.",
)

INN = BuildingDefinition(
    name="Inn",
    category=BuildingCategory.GREEN,
    pattern=((WHEAT, STONE, GLASS),),
    scorer=IsolationScorer(points=3),
    description="3 points if not in a row or column with another Inn.",
)

ALMSHOUSE = BuildingDefinition(
    name="Almshouse",
    category=BuildingCategory.GREEN,
    pattern=((STONE, STONE, GLASS),),
    scorer=AlmshouseScorer(),
    description="Score increasing points for each Almshouse you have built.",
)

FEAST_HALL = BuildingDefinition(
    name="Feast Hall",
    category=BuildingCategory.GREEN,
    pattern=((WOOD, WOOD, GLASS),),
    scorer=FeastHallScorer(points=2, bonus=1),
    description="2 points, and an extra 1 if you have more Feast Halls than the player on your right.",
)

# --- ORANGE ----------------------------------------------------------------

CHAPEL = BuildingDefinition(
    name="Chapel",
    category=BuildingCategory.ORANGE,
    pattern=((_, _, GLASS), (STONE, GLASS, STONE)),
    scorer=FedCottageCountScorer(),
    description="1 point for each fed cottage.",
)

ABBEY = BuildingDefinition(
    name="Abbey",
    category=BuildingCategory.ORANGE,
    pattern=((_, _, GLASS), (BRICK, STONE, STONE)),
    scorer=RestrictedNeighborScorer(
        categories=(BuildingCategory.BLACK, BuildingCategory.GREEN, BuildingCategory.YELLOW), points=3
    ),
    description="3 points if not adjacent to a black, green or yellow building.",
)

CLOISTER = BuildingDefinition(
    name="Cloister",
    category=BuildingCategory.ORANGE,
    pattern=((_, _, GLASS), (WOOD, BRICK, STONE)),
    scorer=CornerCountScorer(),
    description="1 point for each Cloister in a corner of your town.",
)

TEMPLE = BuildingDefinition(
    name="Temple",
    category=BuildingCategory.ORANGE,
    pattern=((_, _, GLASS), (BRICK, BRICK, STONE)),
    scorer=AdjacentFedScorer(min_fed=2, points=4),
    description="4 points if adjacent to 2 or more fed cottages.",
)

# --- BLACK -----------------------------------------------------------------

FACTORY = BuildingDefinition(
    name="Factory",
    category=BuildingCategory.BLACK,
    pattern=((WOOD, _, _, _), (BRICK, STONE, STONE, BRICK)),
    effect=BuildingEffect(
        effect_type=EffectType.FACTORY,
        capacity=1,
        description="Stores a resource. When another player names it, place a different one instead.",
    ),
    description="Place 1 resource on the Factory; whenever it is named, you may play a different one.",
)

TRADING_POST = BuildingDefinition(
    name="Trading Post",
    category=BuildingCategory.BLACK,
    pattern=((STONE, WOOD, _), (STONE, WOOD, BRICK)),
    scorer=FixedScorer(points=1),
    effect=BuildingEffect(effect_type=EffectType.TRADING_POST, description="Counts as any resource."),
    description="1 point. Counts as a wild resource for future buildings.",
)

BANK = BuildingDefinition(
    name="Bank",
    category=BuildingCategory.BLACK,
    pattern=((WHEAT, WHEAT, _), (WOOD, GLASS, BRICK)),
    scorer=FixedScorer(points=4),
    effect=BuildingEffect(
        effect_type=EffectType.BANK,
        capacity=1,
        description="Stores a resource you can no longer name as master builder.",
    ),
    description="4 points. Place a resource on the Bank; you can no longer name it as master builder.",
)

WAREHOUSE = BuildingDefinition(
    name="Warehouse",
    category=BuildingCategory.BLACK,
    pattern=((WHEAT, WOOD, WHEAT), (BRICK, _, BRICK)),
    effect=BuildingEffect(
        effect_type=EffectType.WAREHOUSE,
        capacity=3,
        description="Stores up to 3 resources; swap the named resource with a stored one.",
    ),
    description="-1 point for each resource left on the Warehouse. Stores up to 3 resources.",
)

# --- PURPLE (monuments) ----------------------------------------------------

ARCHIVE = BuildingDefinition(
    name="Archive of the Second Age",
    category=BuildingCategory.PURPLE,
    pattern=((WHEAT, WHEAT), (BRICK, GLASS)),
    scorer=GlobalUniqueScorer(),
    is_monument=True,
    description="1 point for each building type that appears exactly once in your town.",
)

FORT_IRONWEED = BuildingDefinition(
    name="Fort Ironweed",
    category=BuildingCategory.PURPLE,
    pattern=((WHEAT, _, BRICK), (STONE, WOOD, STONE)),
    scorer=FixedScorer(points=7),
    effect=BuildingEffect(effect_type=EffectType.FORT_IRONWEED),
    is_monument=True,
    description="7 points. Unless you are the last player, you can no longer be master builder.",
)

BARRETT_CASTLE = BuildingDefinition(
    name="Barrett Castle",
    category=BuildingCategory.PURPLE,
    pattern=((WHEAT, _, _, STONE), (WOOD, GLASS, GLASS, BRICK)),
    scorer=FixedScorer(points=5, requires_food=True),
    feed_cost=1,
    counts_as=COTTAGE_TARGETS,
    is_monument=True,
    description="5 points if fed. Counts as 2 cottages.",
)

OBELISK = BuildingDefinition(
    name="Obelisk of the Crescent",
    category=BuildingCategory.PURPLE,
    pattern=((WHEAT, _, _), (BRICK, GLASS, BRICK)),
    effect=BuildingEffect(effect_type=EffectType.OBELISK),
    is_monument=True,
    description="You may place all future buildings on any empty square in your town.",
)

STATUE_BONDMAKER = BuildingDefinition(
    name="Statue of the Bondmaker",
    category=BuildingCategory.PURPLE,
    pattern=((WOOD, STONE, STONE, GLASS), (WHEAT, _, _, _)),
    effect=BuildingEffect(effect_type=EffectType.STATUE_BONDMAKER, capacity=1),
    is_monument=True,
    description="When another player names a resource, you may place it on a Cottage. Each Cottage holds 1.",
)

ARCHITECTS_GUILD = BuildingDefinition(
    name="Architect's Guild",
    category=BuildingCategory.PURPLE,
    pattern=((_, _, GLASS), (_, WHEAT, STONE), (WOOD, BRICK, _)),
    scorer=FixedScorer(points=1),
    effect=BuildingEffect(effect_type=EffectType.ARCHITECTS_GUILD),
    is_monument=True,
    description="1 point. When constructed, replace up to 2 buildings in your town with any other types.",
)

GROVE_UNIVERSITY = BuildingDefinition(
    name="Grove University",
    category=BuildingCategory.PURPLE,
    pattern=((_, BRICK, _), (STONE, GLASS, STONE)),
    scorer=FixedScorer(points=3),
    effect=BuildingEffect(effect_type=EffectType.GROVE_UNIVERSITY),
    is_monument=True,
    description="3 points. Immediately place a building on an empty square in your town.",
)

OPALEYE_WATCH = BuildingDefinition(
    name="Opaleye's Watch",
    category=BuildingCategory.PURPLE,
    pattern=((WOOD, _, _, _), (BRICK, GLASS, WHEAT, WHEAT), (STONE, _, _, _)),
    effect=BuildingEffect(effect_type=EffectType.OPALEYE_WATCH, capacity=3),
    is_monument=True,
    description="Place 3 unique buildings on this card; take one when a neighbour builds it.",
)

MANDRAS_PALACE = BuildingDefinition(
    name="Mandras Palace",
    category=BuildingCategory.PURPLE,
    pattern=((WHEAT, GLASS), (BRICK, WOOD)),
    scorer=UniqueNeighborScorer(multiplier=2),
    is_monument=True,
    description="2 points for each unique adjacent building type.",
)

SHRINE = BuildingDefinition(
    name="Shrine of the Elder Tree",
    category=BuildingCategory.PURPLE,
    pattern=((BRICK, WHEAT, STONE), (WOOD, GLASS, WOOD)),
    scorer=SavedScoreScorer(),
    is_monument=True,
    description="Points based on the number of buildings in your town when constructed.",
)

SKY_BATHS = BuildingDefinition(
    name="The Sky Baths",
    category=BuildingCategory.PURPLE,
    pattern=((_, WHEAT, _), (STONE, GLASS, WOOD), (BRICK, _, BRICK)),
    scorer=MissingTypeScorer(points_per_missing=2),
    is_monument=True,
    description="2 points for each building type your town is missing.",
)

SILVA_FORUM = BuildingDefinition(
    name="Silva Forum",
    category=BuildingCategory.PURPLE,
    pattern=((_, _, WHEAT, _), (BRICK, BRICK, STONE, WOOD)),
    scorer=LargestGroupScorer(),
    is_monument=True,
    description="1 point, plus 1 for each building in your largest contiguous group of one type.",
)

MAUSOLEUM = BuildingDefinition(
    name="Grand Mausoleum of the Rodina",
    category=BuildingCategory.PURPLE,
    pattern=((WOOD, WOOD), (BRICK, STONE)),
    scorer=UnfedCottageScorer(points_per_cottage=3),
    is_monument=True,
    description="Your unfed cottages are worth 3 points each.",
)

CATHEDRAL = BuildingDefinition(
    name="Cathedral of Caterina",
    category=BuildingCategory.PURPLE,
    pattern=((_, WHEAT), (STONE, GLASS)),
    scorer=FixedScorer(points=2),
    is_monument=True,
    description="2 points. Empty squares in your town are worth 0 points instead of -1.",
)

STARLOOM = BuildingDefinition(
    name="The Starloom",
    category=BuildingCategory.PURPLE,
    pattern=((GLASS, GLASS), (WOOD, WHEAT)),
    scorer=FinishRankScorer(table=(6, 3, 2)),
    is_monument=True,
    description="Points based on how early you complete your town: 6, 3 or 2.",
)


BLUE_BUILDINGS = (COTTAGE,)
RED_BUILDINGS = (FARM, GRANARY, GREENHOUSE, ORCHARD)
GRAY_BUILDINGS = (WELL, FOUNTAIN, MILLSTONE, SHED)
YELLOW_BUILDINGS = (THEATER, BAKERY, MARKET, TAILOR)
GREEN_BUILDINGS = (TAVERN, INN, ALMSHOUSE, FEAST_HALL)
ORANGE_BUILDINGS = (CHAPEL, ABBEY, CLOISTER, TEMPLE)
BLACK_BUILDINGS = (FACTORY, TRADING_POST, BANK, WAREHOUSE)
MONUMENTS = (
    ARCHIVE,
    FORT_IRONWEED,
    BARRETT_CASTLE,
    OBELISK,
    STATUE_BONDMAKER,
    ARCHITECTS_GUILD,
    GROVE_UNIVERSITY,
    OPALEYE_WATCH,
    MANDRAS_PALACE,
    SHRINE,
    SKY_BATHS,
    SILVA_FORUM,
    MAUSOLEUM,
    CATHEDRAL,
    STARLOOM,
)

ALL_BUILDINGS: tuple[BuildingDefinition, ...] = (
    BLUE_BUILDINGS
    + RED_BUILDINGS
    + GRAY_BUILDINGS
    + YELLOW_BUILDINGS
    + GREEN_BUILDINGS
    + ORANGE_BUILDINGS
    + BLACK_BUILDINGS
    + MONUMENTS
)

BUILDINGS_BY_CATEGORY: dict[BuildingCategory, tuple[BuildingDefinition, ...]] = {
    BuildingCategory.BLUE: BLUE_BUILDINGS,
    BuildingCategory.RED: RED_BUILDINGS,
    BuildingCategory.GRAY: GRAY_BUILDINGS,
    BuildingCategory.YELLOW: YELLOW_BUILDINGS,
    BuildingCategory.GREEN: GREEN_BUILDINGS,
    BuildingCategory.ORANGE: ORANGE_BUILDINGS,
    BuildingCategory.BLACK: BLACK_BUILDINGS,
    BuildingCategory.PURPLE: MONUMENTS,
}


def find_building(name: str) -> BuildingDefinition | None:
    """Look a card up in the full catalog by case-insensitive name."""
    identifier = name.strip().upper()
    for building in ALL_BUILDINGS:
        if building.identifier == identifier:
            return building
    return None
