"""Four-pass scoring of a town.

1. Scan the grid, count buildings and collect the food feeders produce.
2. Feed hungry buildings: food aimed at their square first, then the shared pool.
3. Score every building through its scorer and apply the Warehouse deduction.
4. Apply whole-board set tables (Tavern).

The empty-square penalty is subtracted last unless the Cathedral stands.
Each call recomputes everything from the snapshot it is given; identifiers
missing from the registry are ignored in every pass.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from fractions import Fraction

from pydantic import BaseModel, Field

from core.enums.building_id import BuildingId, normalize_building_id
from core.enums.resource import is_building_cell
from core.models.cell_metadata import CellMetadata
from core.models.feeders import ContiguousFeeder
from core.models.grid_position import GLOBAL_FOOD, GridPosition, all_positions
from core.models.registry import BuildingRegistry
from core.models.score_result import ScoreResult
from core.models.scorers import Points, SetSizeScorer
from core.models.scoring_context import ScoringContext

Grid = Sequence[Sequence[str]]

PENALTY_WAIVERS: frozenset[str] = frozenset({BuildingId.CATHEDRAL.value})


class BoardSurvey(BaseModel):
    """Pass 1 output: what stands on the board and the food it produces."""

    counts: dict[str, int] = Field(default_factory=dict)
    empty_count: int = 0
    food_pool: int = 0
    positional_food: set[GridPosition] = Field(default_factory=set)


class FeedingResult(BaseModel):
    """Pass 2 output.

    - fed_positions: squares whose building ate this round
    - food_pool: units left in the shared pool after feeding
    - fed_cottage_count: fed cottages, castles counting double
    """

    fed_positions: frozenset[GridPosition] = frozenset()
    food_pool: int = 0
    fed_cottage_count: int = 0


def survey_board(grid: Grid, registry: BuildingRegistry) -> BoardSurvey:
    survey = BoardSurvey()
    for pos in all_positions(len(grid)):
        cell = grid[pos.row][pos.col]
        if not is_building_cell(cell):
            # Leftover resources count as empty squares at the end of the game.
            survey.empty_count += 1
            continue

        definition = registry.get(cell)
        if definition is None:
            continue
        survey.counts[cell] = survey.counts.get(cell, 0) + 1

        feeder = definition.feeder
        if feeder is None:
            continue
        if isinstance(feeder, ContiguousFeeder):
            feeder = feeder.model_copy(update={"cottage_ids": registry.cottage_class_ids()})
        for fed_pos in feeder.fed_positions(pos, grid):
            if fed_pos == GLOBAL_FOOD:
                survey.food_pool += 1
            else:
                survey.positional_food.add(fed_pos)
    return survey


def feed_buildings(grid: Grid, registry: BuildingRegistry, survey: BoardSurvey) -> FeedingResult:
    """Feed every building with a feed cost.

    Food aimed at a building's own square feeds it for free. Otherwise it
    draws its cost from the pool if enough is left. Cottage aliases
    (Barrett Castle) draw from the pool before ordinary buildings.
    """
    hungry = []
    for pos in all_positions(len(grid)):
        definition = registry.get(grid[pos.row][pos.col]) if is_building_cell(grid[pos.row][pos.col]) else None
        if definition is None or definition.feed_cost == 0:
            continue
        alias_first = 0 if definition.cottage_weight > 1 else 1
        hungry.append((alias_first, pos, definition))
    hungry.sort(key=lambda item: item[0])

    pool = survey.food_pool
    fed: set[GridPosition] = set()
    fed_cottages = 0
    for _priority, pos, definition in hungry:
        if pos in survey.positional_food:
            fed.add(pos)
        elif pool >= definition.feed_cost:
            pool -= definition.feed_cost
            fed.add(pos)
        else:
            continue
        fed_cottages += definition.cottage_weight

    return FeedingResult(fed_positions=frozenset(fed), food_pool=pool, fed_cottage_count=fed_cottages)


def has_penalty_waiver(grid: Grid) -> bool:
    return any(cell in PENALTY_WAIVERS for row in grid for cell in row)


def _as_points(value: Points) -> int:
    if isinstance(value, Fraction):
        return round(value)
    return int(value)


def calculate_score(
    grid: Grid,
    metadata: Mapping[GridPosition, CellMetadata] | None,
    registry: BuildingRegistry,
    finish_rank: int | None = None,
    rival_counts: Mapping[str, int] | None = None,
) -> ScoreResult:
    """Score one town from a grid snapshot, its metadata and the active registry.

    Args:
        grid: Grid snapshot (rows of cell values)
        metadata: Per-cell records, keyed by position
        registry: Buildings active in this game
        finish_rank: Order in which this player completed their town, if known
        rival_counts: Building counts of the player on the right, if known

    Returns:
        The total, the per-building breakdown and the number of penalized squares
    """
    metadata = dict(metadata or {})
    grid_rows = [list(row) for row in grid]
    rivals = None
    if rival_counts is not None:
        rivals = {normalize_building_id(name): count for name, count in rival_counts.items()}

    # Pass 1
    survey = survey_board(grid_rows, registry)
    # Pass 2
    feeding = feed_buildings(grid_rows, registry, survey)

    # Pass 3
    breakdown: dict[str, Points] = {}
    for pos in all_positions(len(grid_rows)):
        cell = grid_rows[pos.row][pos.col]
        if not is_building_cell(cell):
            continue
        definition = registry.get(cell)
        if definition is None:
            continue

        if definition.scorer is not None and definition.scorer.per_cell:
            ctx = ScoringContext(
                grid=grid_rows,
                position=pos,
                identifier=cell,
                counts=survey.counts,
                fed=pos in feeding.fed_positions,
                fed_positions=feeding.fed_positions,
                fed_cottage_count=feeding.fed_cottage_count,
                metadata=metadata,
                registry=registry,
                finish_rank=finish_rank,
                rival_counts=rivals,
            )
            breakdown[cell] = breakdown.get(cell, 0) + definition.scorer.score(ctx)

        if cell == BuildingId.WAREHOUSE.value:
            data = metadata.get(pos)
            stored = len(data.stored_resources) if data is not None else 0
            breakdown[cell] = breakdown.get(cell, 0) - stored

    # Pass 4
    for definition in registry.buildings:
        scorer = definition.scorer
        if isinstance(scorer, SetSizeScorer) and survey.counts.get(definition.identifier):
            breakdown[definition.identifier] = scorer.score_set(survey.counts[definition.identifier])

    final_breakdown = {name: _as_points(points) for name, points in breakdown.items()}
    penalty = 0 if has_penalty_waiver(grid_rows) else survey.empty_count

    return ScoreResult(
        total=sum(final_breakdown.values()) - penalty,
        breakdown=final_breakdown,
        penalty_count=penalty,
    )
