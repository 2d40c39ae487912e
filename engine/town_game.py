"""Single-player game flow around one town board.

``TownGame`` is what the surrounding layer drives: name a resource, drop it,
rescan for buildable patterns, construct, and finally score. It owns one
board and is not meant to be shared between threads.
"""

from __future__ import annotations

from core.enums.building_id import BuildingId
from core.enums.effect_type import EffectType
from core.enums.resource import Resource, is_building_cell
from core.errors import InvalidBuildTarget, InvalidMatch, NoResourceSelected, UnknownBuilding
from core.models.building import BuildingDefinition
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GRID_SIZE, GridPosition
from core.models.match import Match
from core.models.registry import BuildingRegistry
from core.models.score_result import ScoreResult
from core.models.town_board import TownBoard
from engine import effects
from engine.matcher import WILDCARD_BUILDINGS, find_matches
from engine.score_manager import calculate_score
from logging_utils import log_board, log_success

# Effects that need a follow-up choice from the player right after construction.
TRIGGERED_EFFECTS: frozenset[EffectType] = frozenset(
    {
        EffectType.FACTORY,
        EffectType.BANK,
        EffectType.ARCHITECTS_GUILD,
        EffectType.GROVE_UNIVERSITY,
        EffectType.OPALEYE_WATCH,
    }
)


def shrine_points(building_count: int) -> int:
    """Shrine of the Elder Tree: 1 to 5 buildings score that many points, 6 or more score 8."""
    return building_count if building_count < 6 else 8


class TownGame:
    def __init__(self, registry: BuildingRegistry, size: int = GRID_SIZE, board: TownBoard | None = None):
        self.registry = registry
        self.board = board if board is not None else TownBoard(size=size)
        self.current_resource: Resource | None = None
        self.available_matches: list[Match] = []
        self.last_move: GridPosition | None = None

    def start(self) -> None:
        self.board = TownBoard(size=self.board.size)
        self.current_resource = None
        self.last_move = None
        self.available_matches = []

    def _definition(self, name: str) -> BuildingDefinition:
        definition = self.registry.get(name)
        if definition is None:
            raise UnknownBuilding(f"{name} is not in this game's deck")
        return definition

    # --- turns -------------------------------------------------------------

    def select_resource(self, resource: Resource | str) -> None:
        self.current_resource = Resource(resource)

    def place_resource(self, row: int, col: int) -> None:
        if self.current_resource is None:
            raise NoResourceSelected("No resource selected")

        self.board.place(row, col, self.current_resource)
        log_board(f"Placed {self.current_resource.value} at {row}, {col}")
        self.last_move = GridPosition(row=row, col=col)
        self.current_resource = None
        self.scan_for_matches()

    def undo(self) -> None:
        if self.last_move is not None:
            self.board.remove(self.last_move.row, self.last_move.col)
            self.last_move = None
            self.scan_for_matches()

    def can_undo(self) -> bool:
        return self.last_move is not None

    def construct(self, match: Match, target_row: int, target_col: int) -> EffectType | None:
        """Build ``match``'s building, placing it on ``(target_row, target_col)``.

        Resource squares of the match are emptied. Squares satisfied by a
        wildcard building or by a stored resource keep their building; a
        stored resource that was used up is removed from the cell.

        Returns:
            The effect the player must resolve next, if the building has one

        Raises:
            UnknownBuilding: If the matched building is not in the registry
            InvalidBuildTarget: If the target is not an allowed square
            InvalidMatch: If the pattern no longer fits the board, or a second monument is built
        """
        definition = self._definition(match.building_name)
        grid = self.board.grid

        if definition.is_monument and self.has_monument():
            msg = f"A monument already stands; {definition.name} cannot be built"
            raise InvalidMatch(msg)
        if match not in find_matches(grid, definition, self.board.metadata):
            msg = f"{definition.name} pattern at {match.row}, {match.col} is no longer on the board"
            raise InvalidMatch(msg)

        resource_coords = []
        stored_coords = []
        for pos in match.coordinates():
            cell = grid[pos.row][pos.col]
            if cell in WILDCARD_BUILDINGS:
                continue
            if is_building_cell(cell):
                stored_coords.append(pos)
            else:
                resource_coords.append(pos)

        target = GridPosition(row=target_row, col=target_col)
        if target in stored_coords:
            raise InvalidBuildTarget(target_row, target_col)

        saved_score = None
        if definition.identifier == BuildingId.SHRINE.value:
            saved_score = shrine_points(self.board.building_count() + 1)

        self.board.construct_building(
            resource_coords,
            target_row,
            target_col,
            definition.identifier,
            allow_empty_target=effects.free_placement_allowed(self.board, self.registry, definition.name),
        )

        for pos in stored_coords:
            data = self.board.get_metadata(pos.row, pos.col)
            if data is not None:
                self.board.set_metadata(pos.row, pos.col, data.model_copy(update={"stored_resource": None}))

        if saved_score is not None:
            data = self.board.get_metadata(target_row, target_col) or CellMetadata()
            self.board.set_metadata(target_row, target_col, data.model_copy(update={"saved_score": saved_score}))

        log_success(f"Built {definition.name} at {target_row}, {target_col}")
        self.last_move = None
        self.scan_for_matches()

        if definition.effect is not None and definition.effect.effect_type in TRIGGERED_EFFECTS:
            log_board(f"{definition.name} triggers {definition.effect.effect_type.value}")
            return definition.effect.effect_type
        return None

    def place_free_building(self, row: int, col: int, building_name: str) -> None:
        """Grove University and Opaleye's Watch: put a building on an empty square for free."""
        definition = self._definition(building_name)
        self.board.place_building(row, col, definition.identifier)
        log_success(f"Placed free {definition.name} at {row}, {col}")
        self.scan_for_matches()

    def replace_building(self, row: int, col: int, building_name: str) -> None:
        """Architect's Guild: turn the building on a square into another type."""
        definition = self._definition(building_name)
        self.board.replace_building(row, col, definition.identifier)
        log_board(f"Replaced building at {row}, {col} with {definition.name}")
        self.scan_for_matches()

    # --- queries -----------------------------------------------------------

    def has_monument(self) -> bool:
        for row in self.board.grid:
            for cell in row:
                definition = self.registry.get(cell)
                if definition is not None and definition.is_monument:
                    return True
        return False

    def scan_for_matches(self) -> list[Match]:
        """Rescan the board; once a monument stands, monuments are no longer offered."""
        grid = self.board.snapshot()
        skip_monuments = self.has_monument()
        matches = []
        for building in self.registry.buildings:
            if skip_monuments and building.is_monument:
                continue
            matches.extend(find_matches(grid, building, self.board.metadata))
        self.available_matches = matches
        return matches

    def is_game_over(self) -> bool:
        return not self.board.empty_positions() and not self.available_matches

    def score(self, finish_rank: int | None = None, rival_counts: dict[str, int] | None = None) -> ScoreResult:
        return calculate_score(
            self.board.snapshot(),
            self.board.metadata_snapshot(),
            self.registry,
            finish_rank=finish_rank,
            rival_counts=rival_counts,
        )
