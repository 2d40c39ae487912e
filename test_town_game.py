"""Tests for the turn-by-turn game flow."""

import pytest

from core import catalog
from core.enums.effect_type import EffectType
from core.enums.resource import Resource
from core.errors import InvalidBuildTarget, InvalidMatch, NoResourceSelected, OccupiedCell, UnknownBuilding
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GridPosition
from core.models.match import Match
from core.models.registry import BuildingRegistry
from core.models.town_board import TownBoard
from engine.matcher import find_matches
from engine.town_game import TownGame, shrine_points


@pytest.fixture
def registry():
    return BuildingRegistry(
        buildings=[
            catalog.COTTAGE,
            catalog.FARM,
            catalog.WELL,
            catalog.TAVERN,
            catalog.FACTORY,
            catalog.TRADING_POST,
            catalog.SHRINE,
        ]
    )


@pytest.fixture
def game(registry):
    return TownGame(registry)


def play(game, resource, row, col):
    game.select_resource(resource)
    game.place_resource(row, col)


def cottage_matches(game):
    return [m for m in game.available_matches if m.building_name == "COTTAGE"]


def test_place_requires_a_selected_resource(game):
    with pytest.raises(NoResourceSelected):
        game.place_resource(0, 0)


def test_place_and_undo(game):
    play(game, "WOOD", 2, 2)
    assert game.board.cell(2, 2) == "WOOD"
    assert game.can_undo()
    assert game.current_resource is None

    game.undo()

    assert game.board.cell(2, 2) == "NONE"
    assert not game.can_undo()


def test_failed_placement_keeps_selection(game):
    play(game, "WOOD", 0, 0)
    game.select_resource("STONE")
    with pytest.raises(OccupiedCell):
        game.place_resource(0, 0)
    assert game.current_resource == Resource.STONE


def test_build_a_cottage(game):
    play(game, "WHEAT", 0, 1)
    play(game, "BRICK", 1, 0)
    play(game, "GLASS", 1, 1)

    matches = cottage_matches(game)
    assert len(matches) == 1

    effect = game.construct(matches[0], 1, 1)

    assert effect is None
    assert game.board.cell(1, 1) == "COTTAGE"
    assert game.board.cell(0, 1) == "NONE"
    assert game.board.cell(1, 0) == "NONE"
    assert not game.can_undo()
    assert cottage_matches(game) == []


def test_construct_on_wrong_square_changes_nothing(game):
    play(game, "WHEAT", 0, 1)
    play(game, "BRICK", 1, 0)
    play(game, "GLASS", 1, 1)
    before = game.board.snapshot()

    with pytest.raises(InvalidBuildTarget):
        game.construct(cottage_matches(game)[0], 3, 3)

    assert game.board.snapshot() == before


def test_construct_unknown_building(game):
    match = Match(row=0, col=0, pattern=((Resource.WOOD,),), building_name="DRAGON")
    with pytest.raises(UnknownBuilding):
        game.construct(match, 0, 0)


def test_factory_triggers_its_effect(game):
    for resource, row, col in [
        ("WOOD", 0, 0),
        ("BRICK", 1, 0),
        ("STONE", 1, 1),
        ("STONE", 1, 2),
        ("BRICK", 1, 3),
    ]:
        play(game, resource, row, col)

    factory = [m for m in game.available_matches if m.building_name == "FACTORY"]
    assert factory

    assert game.construct(factory[0], 1, 3) == EffectType.FACTORY
    assert game.board.cell(1, 3) == "FACTORY"


def test_trading_post_survives_being_used(make_grid, registry):
    board = TownBoard(
        grid=make_grid(
            [
                ". | wheat | . | .",
                "trading post | glass | . | .",
                ". | . | . | .",
                ". | . | . | .",
            ]
        )
    )
    game = TownGame(registry, board=board)
    game.scan_for_matches()
    match = cottage_matches(game)[0]

    with pytest.raises(InvalidBuildTarget):
        game.construct(match, 1, 0)

    game.construct(match, 1, 1)

    assert game.board.cell(1, 0) == "TRADING POST"
    assert game.board.cell(1, 1) == "COTTAGE"
    assert game.board.cell(0, 1) == "NONE"


def test_stored_resource_is_used_up(make_grid, registry):
    board = TownBoard(
        grid=make_grid(
            [
                ". | wheat | . | .",
                "cottage | glass | . | .",
                ". | . | . | .",
                ". | . | . | .",
            ]
        ),
        metadata={GridPosition(row=1, col=0): CellMetadata(stored_resource=Resource.BRICK)},
    )
    game = TownGame(registry, board=board)
    game.scan_for_matches()

    game.construct(cottage_matches(game)[0], 1, 1)

    assert game.board.cell(1, 0) == "COTTAGE"
    assert game.board.get_metadata(1, 0).stored_resource is None
    assert game.board.cell(1, 1) == "COTTAGE"


@pytest.mark.parametrize("count, points", [(1, 1), (3, 3), (5, 5), (6, 8), (12, 8)])
def test_shrine_points(count, points):
    assert shrine_points(count) == points


def test_shrine_saves_its_score(make_grid, registry):
    board = TownBoard(
        grid=make_grid(
            [
                "brick | wheat | stone | cottage",
                "wood | glass | wood | well",
                ". | . | . | .",
                ". | . | . | .",
            ]
        )
    )
    game = TownGame(registry, board=board)
    shrine = [m for m in game.scan_for_matches() if m.building_name == "SHRINE OF THE ELDER TREE"]

    game.construct(shrine[0], 0, 0)

    assert game.board.get_metadata(0, 0).saved_score == 3
    assert game.score().breakdown["SHRINE OF THE ELDER TREE"] == 3


def test_monuments_are_not_offered_once_one_stands(make_grid, registry):
    rows = [
        "brick | wheat | stone | .",
        "wood | glass | wood | .",
        ". | . | . | .",
        ". | . | . | .",
    ]
    game = TownGame(registry, board=TownBoard(grid=make_grid(rows)))
    assert any(m.building_name == "SHRINE OF THE ELDER TREE" for m in game.scan_for_matches())

    game.board.place_building(3, 3, "SHRINE OF THE ELDER TREE")

    assert game.has_monument()
    assert not any(m.building_name == "SHRINE OF THE ELDER TREE" for m in game.scan_for_matches())


def test_game_over_when_full_without_matches(registry):
    game = TownGame(registry, board=TownBoard(grid=[["WOOD"] * 4 for _ in range(4)]))
    game.scan_for_matches()
    assert game.is_game_over()

    game.board.remove(0, 0)
    game.scan_for_matches()
    assert not game.is_game_over()


def test_free_building_and_replacement(game):
    game.place_free_building(0, 0, "well")
    assert game.board.cell(0, 0) == "WELL"

    game.replace_building(0, 0, "Tavern")
    assert game.board.cell(0, 0) == "TAVERN"

    with pytest.raises(UnknownBuilding):
        game.place_free_building(1, 1, "Bakery")


def test_score_passes_end_of_game_facts(game):
    game.place_free_building(0, 0, "FARM")
    game.place_free_building(0, 1, "COTTAGE")

    result = game.score()

    assert result.breakdown == {"COTTAGE": 3}
    assert result.total == 3 - 14


def test_start_resets_the_town(game):
    play(game, "WOOD", 0, 0)
    game.start()
    assert game.board.building_count() == 0
    assert len(game.board.empty_positions()) == 16
    assert not game.can_undo()


def test_a_used_match_cannot_be_built_again(game):
    play(game, "WOOD", 0, 0)
    play(game, "STONE", 0, 1)
    well = [m for m in game.available_matches if m.building_name == "WELL"][0]
    game.construct(well, 0, 0)
    before = game.board.snapshot()

    with pytest.raises(InvalidMatch):
        game.construct(well, 0, 1)

    assert game.board.snapshot() == before
    assert game.board.positions_of("WELL") == [GridPosition(row=0, col=0)]


def test_buildings_in_a_stale_match_keep_their_resources(make_grid, registry):
    board = TownBoard(
        grid=make_grid(
            [
                ". | wheat | . | .",
                "cottage | glass | . | .",
                ". | . | . | .",
                ". | . | . | .",
            ]
        ),
        metadata={GridPosition(row=1, col=0): CellMetadata(stored_resource=Resource.BRICK)},
    )
    game = TownGame(registry, board=board)
    game.scan_for_matches()
    match = cottage_matches(game)[0]
    game.board.set_metadata(1, 0, CellMetadata(reserved_resource=Resource.BRICK))

    with pytest.raises(InvalidMatch):
        game.construct(match, 1, 1)

    assert game.board.cell(0, 1) == "WHEAT"
    assert game.board.get_metadata(1, 0).reserved_resource == Resource.BRICK


def test_a_second_monument_is_rejected(make_grid, registry):
    board = TownBoard(
        grid=make_grid(
            [
                "brick | wheat | stone | .",
                "wood | glass | wood | .",
                ". | . | . | .",
                ". | . | . | shrine of the elder tree",
            ]
        )
    )
    game = TownGame(registry, board=board)
    match = find_matches(game.board.snapshot(), catalog.SHRINE)[0]

    with pytest.raises(InvalidMatch):
        game.construct(match, 0, 0)

    assert game.board.positions_of("SHRINE OF THE ELDER TREE") == [GridPosition(row=3, col=3)]
