"""Pattern matching of building cards against the town grid.

A pattern matches a grid window when every required slot is satisfied by the
cell under it. Patterns are tried in every distinct rotation and mirror image.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from core.enums.building_id import BuildingId
from core.enums.resource import Resource
from core.models.building import BuildingDefinition, Pattern
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GridPosition
from core.models.match import Match

Grid = Sequence[Sequence[str]]

WILDCARD_BUILDINGS: frozenset[str] = frozenset({BuildingId.TRADING_POST.value})


def _as_pattern(array: np.ndarray) -> Pattern:
    return tuple(tuple(row) for row in array.tolist())


def rotate(pattern: Pattern) -> Pattern:
    """Rotate a pattern 90 degrees clockwise."""
    return _as_pattern(np.rot90(np.array(pattern, dtype=object), k=-1))


def flip(pattern: Pattern) -> Pattern:
    """Mirror a pattern left to right."""
    return _as_pattern(np.fliplr(np.array(pattern, dtype=object)))


def get_symmetries(pattern: Pattern) -> list[Pattern]:
    """All distinct rotations of the pattern and of its mirror image.

    The original pattern is always first. Symmetric patterns give fewer than
    eight variants.
    """
    variants: list[Pattern] = []
    seen: set[Pattern] = set()
    current = _as_pattern(np.array(pattern, dtype=object))

    for _ in range(4):
        for candidate in (current, flip(current)):
            if candidate not in seen:
                seen.add(candidate)
                variants.append(candidate)
        current = rotate(current)

    return variants


def cell_matches(required: Resource, cell: str, metadata: CellMetadata | None = None) -> bool:
    """Whether a grid cell satisfies one pattern slot.

    A slot matches when it is a wildcard, when the cell holds the same
    resource, when the cell holds a wildcard building (Trading Post), or when
    the cell's metadata stores the required resource.
    """
    if required == Resource.NONE:
        return True
    if cell == required.value:
        return True
    if cell in WILDCARD_BUILDINGS:
        return True
    return metadata is not None and metadata.stored_resource == required


def is_match(
    grid: Grid,
    pattern: Pattern,
    start_row: int,
    start_col: int,
    metadata: Mapping[GridPosition, CellMetadata] | None = None,
) -> bool:
    for r, pattern_row in enumerate(pattern):
        for c, required in enumerate(pattern_row):
            row, col = start_row + r, start_col + c
            data = metadata.get(GridPosition(row=row, col=col)) if metadata else None
            if not cell_matches(required, grid[row][col], data):
                return False
    return True


def find_matches(
    grid: Grid,
    building: BuildingDefinition,
    metadata: Mapping[GridPosition, CellMetadata] | None = None,
) -> list[Match]:
    """Every (window, variant) where ``building`` can be built.

    The same top-left corner may be reported more than once when different
    variants fit there; callers de-duplicate if they need to.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    matches = []

    for variant in get_symmetries(building.pattern):
        height = len(variant)
        width = len(variant[0])
        for r in range(rows - height + 1):
            for c in range(cols - width + 1):
                if is_match(grid, variant, r, c, metadata):
                    matches.append(Match(row=r, col=c, pattern=variant, building_name=building.identifier))

    return matches


def scan(
    grid: Grid,
    buildings: Iterable[BuildingDefinition],
    metadata: Mapping[GridPosition, CellMetadata] | None = None,
) -> list[Match]:
    """Matches for every building in ``buildings``, in registry order."""
    matches = []
    for building in buildings:
        matches.extend(find_matches(grid, building, metadata))
    return matches
