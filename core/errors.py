"""Error kinds raised by board mutations and effect operations.

All of them are recoverable: the caller reports a rejected action and the
board is left exactly as it was before the call.
"""

from __future__ import annotations


class TownError(Exception):
    """Base class for every rejected town action."""


class OutOfBounds(TownError, IndexError):
    def __init__(self, row: int, col: int, size: int = 4):
        self.row = row
        self.col = col
        super().__init__(f"Invalid coordinate: {row}, {col} (grid is {size}x{size})")


class OccupiedCell(TownError, ValueError):
    def __init__(self, row: int, col: int, occupant: str):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(f"Spot {row}, {col} already occupied by {occupant}")


class InvalidBuildTarget(TownError, ValueError):
    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Building must be placed on one of the pattern squares, not {row}, {col}")


class StorageFull(TownError, ValueError):
    """A storage building already holds as many resources as it can."""


class InvalidStorage(TownError, ValueError):
    """The target cell cannot hold a resource, or the storage slot does not exist."""


class NoResourceSelected(TownError, ValueError):
    """A resource placement was attempted before a resource was named."""


class UnknownBuilding(TownError, KeyError):
    """A building name is not part of the active registry."""


class InvalidMatch(TownError, ValueError):
    """The matched pattern is no longer on the board, or its building may not be built again."""
