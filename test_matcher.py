"""Tests for pattern symmetries and grid matching."""

import pytest
from pydantic import ValidationError

from core import catalog
from core.enums.building_category import BuildingCategory
from core.enums.resource import Resource
from core.models.building import BuildingDefinition
from core.models.cell_metadata import CellMetadata
from core.models.grid_position import GridPosition
from engine.matcher import cell_matches, find_matches, flip, get_symmetries, is_match, rotate, scan

W, S, B, G, H, _ = (
    Resource.WOOD,
    Resource.STONE,
    Resource.BRICK,
    Resource.GLASS,
    Resource.WHEAT,
    Resource.NONE,
)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (((W, W), (W, W)), 1),
        (((W, W),), 2),
        (((W, S),), 4),
        (catalog.THEATER.pattern, 4),
        (catalog.COTTAGE.pattern, 8),
        (catalog.FACTORY.pattern, 8),
    ],
)
def test_symmetry_counts(pattern, expected):
    variants = get_symmetries(pattern)
    assert len(variants) == expected
    assert len(set(variants)) == len(variants)


@pytest.mark.parametrize("building", catalog.ALL_BUILDINGS, ids=lambda b: b.name)
def test_symmetries_are_closed_and_start_with_original(building):
    variants = get_symmetries(building.pattern)
    assert 1 <= len(variants) <= 8
    assert variants[0] == building.pattern
    for variant in variants:
        assert rotate(variant) in variants
        assert flip(variant) in variants


def test_rotate_is_clockwise():
    assert rotate(((W, S),)) == ((W,), (S,))
    assert rotate(((W, S), (B, G))) == ((B, W), (G, S))


def test_rotate_four_times_and_flip_twice_are_identity():
    pattern = catalog.OPALEYE_WATCH.pattern
    rotated = pattern
    for _i in range(4):
        rotated = rotate(rotated)
    assert rotated == pattern
    assert flip(flip(pattern)) == pattern


def test_cottage_match_reports_consumed_cells(make_grid):
    grid = make_grid(
        [
            ". | wheat | . | .",
            "brick | glass | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )

    matches = find_matches(grid, catalog.COTTAGE)

    assert len(matches) == 1
    match = matches[0]
    assert (match.row, match.col) == (0, 0)
    assert match.building_name == "COTTAGE"
    assert match.coordinates() == [
        GridPosition(row=0, col=1),
        GridPosition(row=1, col=0),
        GridPosition(row=1, col=1),
    ]


def test_rotated_placement_is_found(make_grid):
    # Cottage turned 90 degrees clockwise
    grid = make_grid(
        [
            ". | . | . | .",
            ". | brick | . | .",
            ". | glass | wheat | .",
            ". | . | . | .",
        ]
    )
    matches = find_matches(grid, catalog.COTTAGE)
    assert [(m.row, m.col) for m in matches] == [(1, 1)]


def test_matching_is_idempotent_and_does_not_touch_grid(make_grid):
    grid = make_grid(
        [
            "wood | stone | wood | .",
            "stone | . | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )
    before = [list(row) for row in grid]

    first = find_matches(grid, catalog.WELL)
    second = find_matches(grid, catalog.WELL)

    assert first == second
    assert grid == before
    assert len(first) == 3


def test_no_match_without_resources(empty_grid):
    assert scan(empty_grid, catalog.ALL_BUILDINGS) == []


def test_trading_post_counts_as_any_resource(make_grid):
    grid = make_grid(
        [
            ". | wheat | . | .",
            "trading post | glass | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )
    assert len(find_matches(grid, catalog.COTTAGE)) == 1


def test_stored_resource_satisfies_pattern(make_grid):
    grid = make_grid(
        [
            ". | wheat | . | .",
            "cottage | glass | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )
    assert find_matches(grid, catalog.COTTAGE) == []

    metadata = {GridPosition(row=1, col=0): CellMetadata(stored_resource=Resource.BRICK)}
    assert len(find_matches(grid, catalog.COTTAGE, metadata)) == 1


def test_reserved_resource_does_not_satisfy_pattern(make_grid):
    grid = make_grid(
        [
            ". | wheat | . | .",
            "factory | glass | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )
    metadata = {GridPosition(row=1, col=0): CellMetadata(reserved_resource=Resource.BRICK)}
    assert find_matches(grid, catalog.COTTAGE, metadata) == []


def test_different_variants_at_same_corner_are_all_reported(make_grid):
    diagonal = BuildingDefinition(
        name="Diagonal",
        category=BuildingCategory.GRAY,
        pattern=((W, _), (_, W)),
    )
    grid = make_grid(
        [
            "wood | wood | . | .",
            "wood | wood | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )

    matches = find_matches(grid, diagonal)

    assert [(m.row, m.col) for m in matches] == [(0, 0), (0, 0)]
    assert matches[0].pattern != matches[1].pattern


def test_all_wildcard_pattern_is_rejected():
    with pytest.raises(ValidationError):
        BuildingDefinition(name="Nothing", category=BuildingCategory.GRAY, pattern=((_, _), (_, _)))


def test_is_match_checks_every_slot(make_grid):
    grid = make_grid(
        [
            "wood | stone | . | .",
            ". | . | . | .",
            ". | . | . | .",
            ". | . | . | .",
        ]
    )
    assert is_match(grid, ((W, S),), 0, 0)
    assert not is_match(grid, ((W, S),), 0, 1)
    assert not is_match(grid, ((S, W),), 0, 0)


def test_all_wildcard_pattern_matches_everywhere(make_grid):
    grid = make_grid(
        [
            "wood | cottage | . | trading post",
            ". | glass | well | .",
            "stone | . | . | brick",
            ". | farm | wheat | .",
        ]
    )
    pattern = ((_, _), (_, _))
    assert all(is_match(grid, pattern, r, c) for r in range(3) for c in range(3))


def test_trading_post_slot_rule():
    assert cell_matches(Resource.WOOD, "TRADING POST")
    assert cell_matches(Resource.WOOD, "WOOD")
    assert not cell_matches(Resource.WOOD, "NONE")
    assert not cell_matches(Resource.WOOD, "COTTAGE")
    assert cell_matches(Resource.NONE, "COTTAGE")
