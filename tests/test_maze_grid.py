from __future__ import annotations

import pytest

from mazegame.maze import (
    Cell,
    find_start,
    grid_dimensions,
    grid_from_ascii,
    grid_to_ascii,
    is_exit,
    is_valid_move,
)

ROWS = [
    "#####",
    "#S.##",
    "#.#E#",
    "#####",
]


def test_grid_dimensions_uses_whole_cells():
    assert grid_dimensions(800, 600) == (26, 20)
    assert grid_dimensions(800, 600, cell_size=40) == (20, 15)
    assert grid_dimensions(89, 61, cell_size=30) == (2, 2)


def test_is_valid_move_rejects_out_of_bounds():
    grid = grid_from_ascii(ROWS)
    assert is_valid_move(grid, 5, 1) is False
    assert is_valid_move(grid, 1, 4) is False
    assert is_valid_move(grid, 100, 100) is False


def test_is_valid_move_rejects_walls_and_accepts_the_rest():
    grid = grid_from_ascii(ROWS)
    assert is_valid_move(grid, 0, 0) is False
    assert is_valid_move(grid, 2, 2) is False
    assert is_valid_move(grid, 1, 1) is True  # start
    assert is_valid_move(grid, 2, 1) is True  # path
    assert is_valid_move(grid, 3, 2) is True  # exit


def test_is_exit():
    grid = grid_from_ascii(ROWS)
    assert is_exit(grid, 3, 2) is True
    assert is_exit(grid, 1, 1) is False


def test_find_start_scans_row_major():
    grid = grid_from_ascii(["#####", "#..S#", "#S..#", "#####"])
    assert find_start(grid) == (3, 1)


def test_find_start_defaults_when_missing():
    grid = grid_from_ascii(["####", "#..#", "#.E#", "####"])
    assert find_start(grid) == (1, 1)


def test_ascii_round_trip_and_validation():
    grid = grid_from_ascii(ROWS)
    assert grid[1][1] is Cell.START
    assert grid_to_ascii(grid) == "\n".join(ROWS)

    with pytest.raises(ValueError):
        grid_from_ascii([])
    with pytest.raises(ValueError):
        grid_from_ascii(["###", "##"])
    with pytest.raises(ValueError):
        grid_from_ascii(["#x#"])
