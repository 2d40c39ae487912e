from __future__ import annotations

from pydantic import BaseModel, Field

GRID_SIZE = 4

ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

SURROUNDING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class GridPosition(BaseModel):
    """Row/column coordinates on the square town grid.

    Coordinates are kept generic (negative values are allowed) so the
    global-food marker can be expressed as a position; bounds are checked by
    the board and by the neighbour helpers.
    """

    row: int = Field(..., description="Row index, 0 at the top")
    col: int = Field(..., description="Column index, 0 at the left")

    model_config = {
        "frozen": True,
    }

    @classmethod
    def parse(cls, key: str) -> GridPosition:
        """Parse the ``"row,col"`` key format used by stored board snapshots."""
        row, col = key.split(",")
        return cls(row=int(row), col=int(col))

    @property
    def key(self) -> str:
        return f"{self.row},{self.col}"

    def in_bounds(self, size: int = GRID_SIZE) -> bool:
        return 0 <= self.row < size and 0 <= self.col < size

    def _offset_positions(self, offsets: tuple[tuple[int, int], ...], size: int) -> list[GridPosition]:
        positions = []
        for dr, dc in offsets:
            pos = GridPosition(row=self.row + dr, col=self.col + dc)
            if pos.in_bounds(size):
                positions.append(pos)
        return positions

    def orthogonal_neighbors(self, size: int = GRID_SIZE) -> list[GridPosition]:
        """Up to four edge-sharing neighbours, clipped to the grid."""
        return self._offset_positions(ORTHOGONAL_OFFSETS, size)

    def surrounding(self, size: int = GRID_SIZE) -> list[GridPosition]:
        """Up to eight neighbours (orthogonal and diagonal), clipped to the grid."""
        return self._offset_positions(SURROUNDING_OFFSETS, size)


# Marker returned by global feeders: one unit of food for the shared pool.
GLOBAL_FOOD = GridPosition(row=-1, col=-1)


def all_positions(size: int = GRID_SIZE) -> list[GridPosition]:
    """Every cell of the grid in row-major order."""
    return [GridPosition(row=r, col=c) for r in range(size) for c in range(size)]


def corner_positions(size: int = GRID_SIZE) -> list[GridPosition]:
    return [GridPosition(row=r, col=c) for r in (0, size - 1) for c in (0, size - 1)]


def center_positions(size: int = GRID_SIZE) -> list[GridPosition]:
    middle = (size // 2 - 1, size // 2)
    return [GridPosition(row=r, col=c) for r in middle for c in middle]
