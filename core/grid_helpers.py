"""Helper functions for reading the town grid.

The grid is a plain list of rows of cell strings (resource tags, ``NONE`` or
building identifiers), as returned by ``TownBoard.snapshot()``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from core.models.grid_position import GridPosition, all_positions

Grid = Sequence[Sequence[str]]


def cell_at(grid: Grid, pos: GridPosition) -> str:
    return grid[pos.row][pos.col]


def line_positions(pos: GridPosition, size: int) -> list[GridPosition]:
    """Every other cell sharing a row or a column with ``pos``.

    Row cells come first (left to right), then column cells (top to bottom).
    """
    row_cells = [GridPosition(row=pos.row, col=c) for c in range(size) if c != pos.col]
    col_cells = [GridPosition(row=r, col=pos.col) for r in range(size) if r != pos.row]
    return row_cells + col_cells


def connected_groups(
    grid: Grid, member: Callable[[str], bool], same_value: bool = True
) -> list[list[GridPosition]]:
    """Find every maximal 4-connected group of cells whose value satisfies ``member``.

    Args:
        grid: Grid snapshot to scan
        member: Predicate selecting which cell values take part
        same_value: If True, neighbours join a group only when they hold the
            same value as the group's first cell; if False any two member cells
            connect (used for cottage-class groups mixing Cottages and castles)

    Returns:
        Groups in the row-major order of their first cell
    """
    size = len(grid)
    visited: set[GridPosition] = set()
    groups: list[list[GridPosition]] = []

    for start in all_positions(size):
        value = cell_at(grid, start)
        if start in visited or not member(value):
            continue

        group = []
        stack = [start]
        visited.add(start)
        while stack:
            current = stack.pop()
            group.append(current)
            for neighbor in current.orthogonal_neighbors(size):
                if neighbor in visited:
                    continue
                neighbor_value = cell_at(grid, neighbor)
                if not member(neighbor_value):
                    continue
                if same_value and neighbor_value != value:
                    continue
                visited.add(neighbor)
                stack.append(neighbor)
        groups.append(group)

    return groups


def largest_group(groups: list[list[GridPosition]]) -> list[GridPosition]:
    """The biggest group; on a tie the first one found wins. Empty if there are none."""
    best: list[GridPosition] = []
    for group in groups:
        if len(group) > len(best):
            best = group
    return best
