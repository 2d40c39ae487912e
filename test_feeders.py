"""Tests for the feeding capabilities."""

from core.models.feeders import AdjacentFeeder, ContiguousFeeder, GlobalFeeder, RowColumnFeeder
from core.models.grid_position import GLOBAL_FOOD, GridPosition


def pos(row, col):
    return GridPosition(row=row, col=col)


def test_global_feeder_adds_to_pool(empty_grid):
    fed = GlobalFeeder(amount=4).fed_positions(pos(0, 0), empty_grid)
    assert fed == [GLOBAL_FOOD] * 4


def test_adjacent_feeder_is_clipped_to_grid(empty_grid):
    feeder = AdjacentFeeder()
    assert set(feeder.fed_positions(pos(0, 0), empty_grid)) == {pos(0, 1), pos(1, 0), pos(1, 1)}
    assert len(feeder.fed_positions(pos(1, 1), empty_grid)) == 8
    assert len(feeder.fed_positions(pos(3, 1), empty_grid)) == 5


def test_row_column_feeder(empty_grid):
    fed = RowColumnFeeder().fed_positions(pos(1, 2), empty_grid)
    assert fed == [pos(1, 0), pos(1, 1), pos(1, 3), pos(0, 2), pos(2, 2), pos(3, 2)]


def test_contiguous_feeder_picks_largest_group(make_grid):
    grid = make_grid(
        [
            "cottage | cottage | . | .",
            ". | . | . | cottage",
            ". | . | greenhouse | cottage",
            ". | . | cottage | cottage",
        ]
    )
    fed = ContiguousFeeder().fed_positions(pos(2, 2), grid)
    assert set(fed) == {pos(1, 3), pos(2, 3), pos(3, 2), pos(3, 3)}


def test_contiguous_feeder_tie_goes_to_first_group(make_grid):
    grid = make_grid(
        [
            ". | . | . | .",
            "cottage | cottage | . | .",
            ". | . | . | .",
            ". | . | cottage | cottage",
        ]
    )
    fed = ContiguousFeeder().fed_positions(pos(0, 0), grid)
    assert set(fed) == {pos(1, 0), pos(1, 1)}


def test_contiguous_feeder_joins_castle_and_cottages(make_grid):
    grid = make_grid(
        [
            "cottage | barrett castle | cottage | .",
            ". | . | . | .",
            "cottage | cottage | . | .",
            ". | . | . | .",
        ]
    )
    fed = ContiguousFeeder().fed_positions(pos(3, 3), grid)
    assert set(fed) == {pos(0, 0), pos(0, 1), pos(0, 2)}


def test_contiguous_feeder_without_cottages(empty_grid):
    assert ContiguousFeeder().fed_positions(pos(0, 0), empty_grid) == []
