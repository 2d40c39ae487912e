from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, model_validator

from core.enums.building_id import normalize_building_id
from core.enums.resource import Resource, is_building_cell
from core.errors import InvalidBuildTarget, OccupiedCell, OutOfBounds
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GRID_SIZE, GridPosition, all_positions

Coordinate = GridPosition | tuple[int, int]


def _as_position(coord: Coordinate) -> GridPosition:
    if isinstance(coord, GridPosition):
        return coord
    row, col = coord
    return GridPosition(row=row, col=col)


class TownBoard(BaseModel):
    """A player's town: an N x N grid of cell values plus sparse per-cell metadata.

    - Every cell holds exactly one value: ``NONE``, a resource tag or a building identifier
    - Metadata only exists for cells holding a stateful building and is dropped
      whenever that cell is cleared
    - Mutations validate everything first, so a rejected call leaves the board untouched
    """

    size: int = Field(default=GRID_SIZE, ge=1)
    grid: list[list[str]] = Field(default_factory=list, description="Rows of cell values")
    metadata: dict[GridPosition, CellMetadata] = Field(
        default_factory=dict,
        description="Per-cell records for stateful buildings, keyed by position.",
    )

    @model_validator(mode="after")
    def _initialize_grid(self) -> TownBoard:
        """Fill an empty grid with ``NONE`` and check a supplied one is square."""
        if not self.grid:
            self.grid = [[Resource.NONE.value] * self.size for _ in range(self.size)]
        if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            msg = f"Grid must be {self.size}x{self.size}"
            raise ValueError(msg)
        self.grid = [[str(cell.value if isinstance(cell, Resource) else cell) for cell in row] for row in self.grid]
        return self

    # --- reads -------------------------------------------------------------

    def _check_bounds(self, pos: GridPosition) -> None:
        if not pos.in_bounds(self.size):
            raise OutOfBounds(pos.row, pos.col, self.size)

    def cell(self, row: int, col: int) -> str:
        pos = GridPosition(row=row, col=col)
        self._check_bounds(pos)
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell(row, col) == Resource.NONE.value

    def snapshot(self) -> list[list[str]]:
        """Copy of the grid; changing it does not touch the board."""
        return [list(row) for row in self.grid]

    def metadata_snapshot(self) -> dict[GridPosition, CellMetadata]:
        return {pos: data.model_copy(deep=True) for pos, data in self.metadata.items()}

    def empty_positions(self) -> list[GridPosition]:
        return [pos for pos in all_positions(self.size) if self.grid[pos.row][pos.col] == Resource.NONE.value]

    def building_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if is_building_cell(cell))

    def positions_of(self, building_id: str) -> list[GridPosition]:
        identifier = normalize_building_id(building_id)
        return [pos for pos in all_positions(self.size) if self.grid[pos.row][pos.col] == identifier]

    def get_metadata(self, row: int, col: int) -> CellMetadata | None:
        return self.metadata.get(GridPosition(row=row, col=col))

    # --- mutations ---------------------------------------------------------

    def set_metadata(self, row: int, col: int, data: CellMetadata) -> None:
        pos = GridPosition(row=row, col=col)
        self._check_bounds(pos)
        self.metadata[pos] = data

    def place(self, row: int, col: int, resource: Resource | str) -> None:
        """Drop a resource on an empty cell.

        Raises:
            OutOfBounds: If the coordinates are outside the grid
            OccupiedCell: If the cell already holds something
            ValueError: If ``resource`` is not a placeable resource
        """
        pos = GridPosition(row=row, col=col)
        self._check_bounds(pos)
        resource = Resource(resource)
        if resource == Resource.NONE:
            msg = "Cannot place an empty resource"
            raise ValueError(msg)
        if not self.is_empty(row, col):
            raise OccupiedCell(row, col, self.grid[row][col])
        self.grid[row][col] = resource.value

    def clear(self, coords: Iterable[Coordinate]) -> None:
        """Reset every in-bounds coordinate to ``NONE`` and drop its metadata.

        Out-of-bounds coordinates are skipped.
        """
        for coord in coords:
            pos = _as_position(coord)
            if pos.in_bounds(self.size):
                self.grid[pos.row][pos.col] = Resource.NONE.value
                self.metadata.pop(pos, None)

    def remove(self, row: int, col: int) -> None:
        self.clear([(row, col)])

    def construct_building(
        self,
        pattern_coords: Iterable[Coordinate],
        target_row: int,
        target_col: int,
        building_id: str,
        allow_empty_target: bool = False,
    ) -> None:
        """Consume the matched resources and put the building on one of their squares.

        Args:
            pattern_coords: Cells covered by the matched pattern's required slots
            target_row, target_col: Where the building goes
            building_id: Building name; stored upper-cased
            allow_empty_target: Also accept any empty cell as target (Obelisk, Shed)

        Raises:
            OutOfBounds: If the target or a pattern cell is outside the grid
            InvalidBuildTarget: If the target is not one of the pattern cells
        """
        coords = [_as_position(coord) for coord in pattern_coords]
        target = GridPosition(row=target_row, col=target_col)
        self._check_bounds(target)
        for pos in coords:
            self._check_bounds(pos)

        if target not in coords:
            if not (allow_empty_target and self.is_empty(target_row, target_col)):
                raise InvalidBuildTarget(target_row, target_col)

        self.clear(coords)
        self.grid[target_row][target_col] = normalize_building_id(building_id)

    def place_building(self, row: int, col: int, building_id: str) -> None:
        """Put a building straight onto an empty cell without consuming resources."""
        pos = GridPosition(row=row, col=col)
        self._check_bounds(pos)
        if not self.is_empty(row, col):
            raise OccupiedCell(row, col, self.grid[row][col])
        self.grid[row][col] = normalize_building_id(building_id)

    def replace_building(self, row: int, col: int, building_id: str) -> None:
        """Swap the building on a cell for another type; the old building's metadata is dropped."""
        pos = GridPosition(row=row, col=col)
        self._check_bounds(pos)
        if not is_building_cell(self.grid[row][col]):
            raise InvalidBuildTarget(row, col)
        self.metadata.pop(pos, None)
        self.grid[row][col] = normalize_building_id(building_id)

    # --- display -----------------------------------------------------------

    def pretty_print(self) -> str:
        """Render the grid as text, one row per line, empty cells as ``---``."""
        width = max(len(cell) for row in self.grid for cell in row)
        width = max(width, 5)
        lines = []
        for r, row in enumerate(self.grid):
            cells = ["---".ljust(width) if cell == Resource.NONE.value else cell.ljust(width) for cell in row]
            lines.append(" | ".join(cells) + f"  (row {r})")
        return "\n".join(lines)
