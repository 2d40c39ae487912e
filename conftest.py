"""Shared fixtures for the town engine tests."""

import pytest

from core import catalog
from core.models.registry import BuildingRegistry
from core.models.town_board import TownBoard


def grid_from(rows: list[str]) -> list[list[str]]:
    """Build a grid from ``"A | B | ..."`` rows; ``.`` is an empty square."""
    grid = []
    for row in rows:
        cells = [cell.strip().upper() for cell in row.split("|")]
        grid.append(["NONE" if cell == "." else cell for cell in cells])
    return grid


@pytest.fixture
def make_grid():
    return grid_from


@pytest.fixture
def empty_grid():
    return [["NONE"] * 4 for _ in range(4)]


@pytest.fixture
def board():
    return TownBoard()


@pytest.fixture
def registry_of():
    def _registry(*buildings):
        return BuildingRegistry(buildings=list(buildings))

    return _registry


@pytest.fixture
def base_registry():
    """Cottage plus a deck covering feeding, set scoring and the penalty waiver."""
    return BuildingRegistry(
        buildings=[
            catalog.COTTAGE,
            catalog.FARM,
            catalog.GRANARY,
            catalog.WELL,
            catalog.THEATER,
            catalog.TAVERN,
            catalog.ALMSHOUSE,
            catalog.CHAPEL,
            catalog.FACTORY,
            catalog.TRADING_POST,
            catalog.BANK,
            catalog.WAREHOUSE,
            catalog.BARRETT_CASTLE,
            catalog.CATHEDRAL,
        ]
    )
