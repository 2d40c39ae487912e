"""Tests for building effects that store resources or change placement."""

import pytest

from core import catalog
from core.enums.resource import Resource
from core.errors import InvalidStorage, StorageFull
from core.models.registry import BuildingRegistry
from core.models.town_board import TownBoard
from engine import effects


@pytest.fixture
def registry():
    return BuildingRegistry(
        buildings=[
            catalog.COTTAGE,
            catalog.SHED,
            catalog.FACTORY,
            catalog.BANK,
            catalog.WAREHOUSE,
            catalog.STATUE_BONDMAKER,
            catalog.OBELISK,
            catalog.OPALEYE_WATCH,
        ]
    )


def test_factory_stores_one_resource_and_allows_swap(board, registry):
    board.place_building(0, 0, "FACTORY")

    effects.store_resource(board, registry, 0, 0, "GLASS")

    assert board.get_metadata(0, 0).reserved_resource == Resource.GLASS
    assert board.get_metadata(0, 0).stored_resource is None
    assert effects.can_factory_swap(board, registry, "GLASS")
    assert not effects.can_factory_swap(board, registry, Resource.WOOD)


def test_bank_resource_is_forbidden(board, registry):
    board.place_building(0, 0, "BANK")
    board.place_building(0, 1, "BANK")
    effects.store_resource(board, registry, 0, 0, "WHEAT")
    effects.store_resource(board, registry, 0, 1, "WHEAT")

    assert effects.forbidden_resources(board, registry) == [Resource.WHEAT]
    assert not effects.can_factory_swap(board, registry, "WHEAT")


def test_cottage_needs_the_statue_to_store(board, registry):
    board.place_building(1, 1, "COTTAGE")
    with pytest.raises(InvalidStorage):
        effects.store_resource(board, registry, 1, 1, "BRICK")
    assert board.get_metadata(1, 1) is None

    board.place_building(3, 3, "STATUE OF THE BONDMAKER")
    assert effects.has_statue_of_bondmaker(board, registry)
    effects.store_resource(board, registry, 1, 1, "BRICK")
    assert board.get_metadata(1, 1).stored_resource == Resource.BRICK

    with pytest.raises(StorageFull):
        effects.store_resource(board, registry, 1, 1, "WOOD")
    assert board.get_metadata(1, 1).stored_resource == Resource.BRICK


@pytest.mark.parametrize("cell", ["NONE", "WOOD", "SHED"])
def test_store_on_cell_that_cannot_hold(registry, cell):
    board = TownBoard()
    if cell == "WOOD":
        board.place(2, 2, cell)
    elif cell == "SHED":
        board.place_building(2, 2, cell)

    with pytest.raises(InvalidStorage):
        effects.store_resource(board, registry, 2, 2, "STONE")


def test_store_empty_resource_is_rejected(board, registry):
    board.place_building(0, 0, "FACTORY")
    with pytest.raises(InvalidStorage):
        effects.store_resource(board, registry, 0, 0, "NONE")


def test_warehouse_holds_three(board, registry):
    board.place_building(2, 0, "WAREHOUSE")
    for resource in ("WOOD", "GLASS", "WOOD"):
        effects.store_in_warehouse(board, registry, 2, 0, resource)

    with pytest.raises(StorageFull):
        effects.store_in_warehouse(board, registry, 2, 0, "STONE")

    assert effects.warehouse_contents(board, 2, 0) == [Resource.WOOD, Resource.GLASS, Resource.WOOD]


def test_warehouse_swap_returns_old_resource(board, registry):
    board.place_building(2, 0, "WAREHOUSE")
    effects.store_in_warehouse(board, registry, 2, 0, "WOOD")
    effects.store_in_warehouse(board, registry, 2, 0, "GLASS")

    popped = effects.swap_in_warehouse(board, registry, 2, 0, 1, "BRICK")

    assert popped == Resource.GLASS
    assert effects.warehouse_contents(board, 2, 0) == [Resource.WOOD, Resource.BRICK]

    with pytest.raises(InvalidStorage):
        effects.swap_in_warehouse(board, registry, 2, 0, 2, "STONE")


def test_warehouse_operations_need_a_warehouse(board, registry):
    board.place_building(0, 0, "FACTORY")
    with pytest.raises(InvalidStorage):
        effects.store_in_warehouse(board, registry, 0, 0, "WOOD")
    assert effects.warehouse_contents(board, 3, 3) == []


def test_free_placement(board, registry):
    assert effects.free_placement_allowed(board, registry, "Shed")
    assert not effects.free_placement_allowed(board, registry, "Cottage")

    board.place_building(3, 3, "OBELISK OF THE CRESCENT")
    assert effects.has_obelisk(board, registry)
    assert effects.free_placement_allowed(board, registry, "Cottage")


def test_opaleye_watch(board):
    board.place_building(0, 0, "OPALEYE'S WATCH")
    with pytest.raises(InvalidStorage):
        effects.prepare_opaleye_watch(board, 0, 0, ["Well", "Well", "Farm"])

    effects.prepare_opaleye_watch(board, 0, 0, ["Well", "Farm", "Tavern"])
    effects.take_from_opaleye_watch(board, 0, 0, "farm")

    assert board.get_metadata(0, 0).watch_buildings == ["WELL", "TAVERN"]
    with pytest.raises(InvalidStorage):
        effects.take_from_opaleye_watch(board, 0, 0, "Farm")
