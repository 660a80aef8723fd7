from __future__ import annotations

import logging
from typing import Sequence, Tuple

from .cells import CELL_SIZE, Cell, Grid, Point, cell_from_char

logger = logging.getLogger(__name__)

DEFAULT_START: Point = (1, 1)


def grid_dimensions(screen_width: int, screen_height: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Number of whole cells that fit the screen, as (width, height)."""
    return screen_width // cell_size, screen_height // cell_size


def grid_width(grid: Grid) -> int:
    return len(grid[0]) if grid else 0


def grid_height(grid: Grid) -> int:
    return len(grid)


def is_valid_move(grid: Grid, x: int, y: int) -> bool:
    """Return True if the player may occupy (x, y).

    Only the upper bounds are checked here. Callers must never produce a
    negative coordinate; Python would otherwise index from the end of the row.
    """
    if x >= grid_width(grid) or y >= grid_height(grid):
        return False
    return grid[y][x].passable


def is_exit(grid: Grid, x: int, y: int) -> bool:
    return grid[y][x] is Cell.EXIT


def find_start(grid: Grid) -> Point:
    """Coordinates of the first START cell in row-major order, or (1, 1)."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell is Cell.START:
                return x, y
    logger.warning("No START cell in grid; defaulting player to %s", DEFAULT_START)
    return DEFAULT_START


def grid_from_ascii(rows: Sequence[str]) -> Grid:
    """
    Build a grid from ASCII rows for tests/tools.

    '#' wall, '.' path, 'S' start, 'E' exit.
    """
    if not rows:
        raise ValueError("rows must not be empty")
    width = len(rows[0])
    for r in rows:
        if len(r) != width:
            raise ValueError("All rows must be same width")
    return [[cell_from_char(ch) for ch in row] for row in rows]


def grid_to_ascii(grid: Grid) -> str:
    return "\n".join("".join(cell.value for cell in row) for row in grid)
