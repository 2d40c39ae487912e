"""Scoring capabilities.

Each variant is a small frozen model tagged by ``kind`` that turns a
``ScoringContext`` into the points earned by one building instance. All of
them are pure: the same context always yields the same points, and scoring
one cell never depends on the order in which other cells are scored.

``SetSizeScorer`` is the exception to the per-cell rule: it is resolved once
for the whole board by the score manager (see ``per_cell``).
"""

from __future__ import annotations

from fractions import Fraction
from typing import TYPE_CHECKING, Annotated, ClassVar, Literal

from pydantic import BaseModel, Field

from core.enums.building_category import BuildingCategory
from core.enums.resource import is_building_cell
from core.grid_helpers import connected_groups, largest_group, line_positions
from core.models.grid_position import all_positions, center_positions, corner_positions

if TYPE_CHECKING:
    from core.models.scoring_context import ScoringContext

Points = int | Fraction


class ScorerBase(BaseModel):
    # False for scorers applied once per board instead of once per cell.
    per_cell: ClassVar[bool] = True

    model_config = {"frozen": True}

    def score(self, ctx: ScoringContext) -> Points:
        raise NotImplementedError


class FixedScorer(ScorerBase):
    """Constant points, optionally only when the building is fed (Cottage, Shed)."""

    kind: Literal["fixed"] = "fixed"
    points: int
    requires_food: bool = False

    def score(self, ctx: ScoringContext) -> Points:
        if self.requires_food and not ctx.fed:
            return 0
        return self.points


class AdjacencyCountScorer(ScorerBase):
    """Points for every orthogonal neighbour in ``targets`` (Well)."""

    kind: Literal["adjacency_count"] = "adjacency_count"
    targets: tuple[str, ...]
    points_per_neighbor: int = 1

    def score(self, ctx: ScoringContext) -> Points:
        hits = sum(1 for cell in ctx.neighbor_cells() if ctx.matches_identity(cell, self.targets))
        return hits * self.points_per_neighbor


class AdjacencyRequirementScorer(ScorerBase):
    """Flat bonus once any orthogonal neighbour is in ``targets`` (Fountain)."""

    kind: Literal["adjacency_requirement"] = "adjacency_requirement"
    targets: tuple[str, ...]
    points: int

    def score(self, ctx: ScoringContext) -> Points:
        for cell in ctx.neighbor_cells():
            if ctx.matches_identity(cell, self.targets):
                return self.points
        return 0


class CategoryAdjacencyScorer(ScorerBase):
    """Flat bonus if any orthogonal neighbour belongs to one of ``categories`` (Millstone, Bakery)."""

    kind: Literal["category_adjacency"] = "category_adjacency"
    categories: tuple[BuildingCategory, ...]
    points: int

    def score(self, ctx: ScoringContext) -> Points:
        for cell in ctx.neighbor_cells():
            definition = ctx.definition_of(cell)
            if definition is not None and definition.category in self.categories:
                return self.points
        return 0


class RestrictedNeighborScorer(ScorerBase):
    """Flat bonus only if no orthogonal neighbour belongs to ``categories`` (Abbey)."""

    kind: Literal["restricted_neighbor"] = "restricted_neighbor"
    categories: tuple[BuildingCategory, ...]
    points: int

    def score(self, ctx: ScoringContext) -> Points:
        for cell in ctx.neighbor_cells():
            definition = ctx.definition_of(cell)
            if definition is not None and definition.category in self.categories:
                return 0
        return self.points


class UniqueLineScorer(ScorerBase):
    """1 point per distinct building type in the same row and column (Theater)."""

    kind: Literal["unique_line"] = "unique_line"

    def score(self, ctx: ScoringContext) -> Points:
        seen = set()
        for pos in line_positions(ctx.position, ctx.size):
            cell = ctx.cell(pos)
            if is_building_cell(cell):
                seen.add(cell)
        return len(seen)


class LineCountScorer(ScorerBase):
    """1 point per other instance of the same building in the row and column (Market)."""

    kind: Literal["line_count"] = "line_count"

    def score(self, ctx: ScoringContext) -> Points:
        return sum(1 for pos in line_positions(ctx.position, ctx.size) if ctx.cell(pos) == ctx.identifier)


class CenterCountScorer(ScorerBase):
    """1 point, plus 1 per other same building on the four center squares (Tailor)."""

    kind: Literal["center_count"] = "center_count"

    def score(self, ctx: ScoringContext) -> Points:
        others = sum(
            1
            for pos in center_positions(ctx.size)
            if pos != ctx.position and ctx.cell(pos) == ctx.identifier
        )
        return 1 + others


class GlobalUniqueScorer(ScorerBase):
    """1 point for every building type that appears exactly once on the board (Archive)."""

    kind: Literal["global_unique"] = "global_unique"

    def score(self, ctx: ScoringContext) -> Points:
        return sum(1 for count in ctx.counts.values() if count == 1)


class IsolationScorer(ScorerBase):
    """Flat bonus unless another instance shares this row or column (Inn)."""

    kind: Literal["isolation"] = "isolation"
    points: int = 3

    def score(self, ctx: ScoringContext) -> Points:
        for pos in line_positions(ctx.position, ctx.size):
            if ctx.cell(pos) == ctx.identifier:
                return 0
        return self.points


class SavedScoreScorer(ScorerBase):
    """Returns the score frozen into the cell's metadata at construction (Shrine)."""

    kind: Literal["saved_score"] = "saved_score"

    def score(self, ctx: ScoringContext) -> Points:
        data = ctx.metadata.get(ctx.position)
        if data is None or data.saved_score is None:
            return 0
        return data.saved_score


class MissingTypeScorer(ScorerBase):
    """Points for every registry building with no instance on the board (Sky Baths)."""

    kind: Literal["missing_type"] = "missing_type"
    points_per_missing: int = 2

    def score(self, ctx: ScoringContext) -> Points:
        missing = sum(1 for name in ctx.valid_building_names if not ctx.count_of(name.upper()))
        return missing * self.points_per_missing


class LargestGroupScorer(ScorerBase):
    """1 point plus the size of the largest same-type connected group on the board (Silva Forum)."""

    kind: Literal["largest_group"] = "largest_group"

    def score(self, ctx: ScoringContext) -> Points:
        groups = connected_groups(ctx.grid, is_building_cell)
        return 1 + len(largest_group(groups))


class UnfedCottageScorer(ScorerBase):
    """Points for every cottage-class building that went hungry (Grand Mausoleum)."""

    kind: Literal["unfed_cottage"] = "unfed_cottage"
    points_per_cottage: int = 3

    def score(self, ctx: ScoringContext) -> Points:
        unfed = sum(
            1
            for pos in all_positions(ctx.size)
            if ctx.is_cottage_class(ctx.cell(pos)) and pos not in ctx.fed_positions
        )
        return unfed * self.points_per_cottage


# Whole-set totals for an even number of Almshouses.
ALMSHOUSE_EVEN_TOTALS: dict[int, int] = {0: 0, 2: 5, 4: 15, 6: 26}


def almshouse_set_total(count: int) -> int:
    """Total points for ``count`` Almshouses: odd sets lose 1 each, even sets follow the table."""
    if count % 2 == 1:
        return -count
    if count in ALMSHOUSE_EVEN_TOTALS:
        return ALMSHOUSE_EVEN_TOTALS[count]
    top = max(ALMSHOUSE_EVEN_TOTALS)
    return ALMSHOUSE_EVEN_TOTALS[top] + 5 * (count - top)


class AlmshouseScorer(ScorerBase):
    """Odd/even set scoring, returned as each instance's exact share of the set total.

    The share is a ``Fraction`` so that summing it over every instance gives
    back the set total without rounding.
    """

    kind: Literal["almshouse"] = "almshouse"

    def score(self, ctx: ScoringContext) -> Points:
        count = ctx.count_of(ctx.identifier)
        if count == 0:
            return 0
        return Fraction(almshouse_set_total(count), count)


class SetSizeScorer(ScorerBase):
    """Whole-board lookup by number of instances, capped at the table's end (Tavern)."""

    per_cell: ClassVar[bool] = False

    kind: Literal["set_size"] = "set_size"
    table: tuple[int, ...] = (0, 2, 5, 9, 14, 20)

    def score(self, ctx: ScoringContext) -> Points:
        return 0

    def score_set(self, count: int) -> int:
        return self.table[min(count, len(self.table) - 1)]


class UniqueNeighborScorer(ScorerBase):
    """``multiplier`` points per distinct building type orthogonally adjacent (Mandras Palace)."""

    kind: Literal["unique_neighbor"] = "unique_neighbor"
    multiplier: int = 2

    def score(self, ctx: ScoringContext) -> Points:
        distinct = {cell for cell in ctx.neighbor_cells() if is_building_cell(cell)}
        return len(distinct) * self.multiplier


class FedCottageCountScorer(ScorerBase):
    """1 point per fed cottage on the board, castles counting double (Chapel)."""

    kind: Literal["fed_cottage_count"] = "fed_cottage_count"

    def score(self, ctx: ScoringContext) -> Points:
        return ctx.fed_cottage_count


class CornerCountScorer(ScorerBase):
    """1 point per instance of this building standing in a corner (Cloister)."""

    kind: Literal["corner_count"] = "corner_count"

    def score(self, ctx: ScoringContext) -> Points:
        return sum(1 for pos in corner_positions(ctx.size) if ctx.cell(pos) == ctx.identifier)


class AdjacentFedScorer(ScorerBase):
    """Bonus when at least ``min_fed`` fed cottages are orthogonally adjacent (Temple)."""

    kind: Literal["adjacent_fed"] = "adjacent_fed"
    min_fed: int = 2
    points: int = 4

    def score(self, ctx: ScoringContext) -> Points:
        fed = sum(
            1
            for pos in ctx.position.orthogonal_neighbors(ctx.size)
            if pos in ctx.fed_positions and ctx.is_cottage_class(ctx.cell(pos))
        )
        return self.points if fed >= self.min_fed else 0


class FeastHallScorer(ScorerBase):
    """Base points, plus a bonus when this town has more of them than the rival's (Feast Hall)."""

    kind: Literal["feast_hall"] = "feast_hall"
    points: int = 2
    bonus: int = 1

    def score(self, ctx: ScoringContext) -> Points:
        if ctx.rival_counts is None:
            return self.points
        if ctx.count_of(ctx.identifier) > ctx.rival_counts.get(ctx.identifier, 0):
            return self.points + self.bonus
        return self.points


class FinishRankScorer(ScorerBase):
    """Points by finishing order, 1st first (The Starloom). Zero without a rank."""

    kind: Literal["finish_rank"] = "finish_rank"
    table: tuple[int, ...] = (6, 3, 2)

    def score(self, ctx: ScoringContext) -> Points:
        if ctx.finish_rank is None or ctx.finish_rank > len(self.table):
            return 0
        return self.table[ctx.finish_rank - 1]


Scorer = Annotated[
    FixedScorer
    | AdjacencyCountScorer
    | AdjacencyRequirementScorer
    | CategoryAdjacencyScorer
    | RestrictedNeighborScorer
    | UniqueLineScorer
    | LineCountScorer
    | CenterCountScorer
    | GlobalUniqueScorer
    | IsolationScorer
    | SavedScoreScorer
    | MissingTypeScorer
    | LargestGroupScorer
    | UnfedCottageScorer
    | AlmshouseScorer
    | SetSizeScorer
    | UniqueNeighborScorer
    | FedCottageCountScorer
    | CornerCountScorer
    | AdjacentFedScorer
    | FeastHallScorer
    | FinishRankScorer,
    Field(discriminator="kind"),
]
