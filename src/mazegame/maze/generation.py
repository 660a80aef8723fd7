from __future__ import annotations

import logging

from ..core.rng import RNG
from .cells import Cell, Grid

logger = logging.getLogger(__name__)


def generate(width: int, height: int, rng: RNG) -> Grid:
    """Generate a width x height maze.

    Steps, in this order:
      1. fill with PATH and wall off the outer border;
      2. scatter ``width * height // 5`` walls at uniformly sampled interior
         cells (samples may repeat);
      3. carve the middle column of every even interior row back to PATH;
      4. stamp START at (1, 1) and EXIT at (width - 2, height - 2).

    The result always has a walled border and a single START and EXIT, but is
    not guaranteed to have a route between them.

    Sizes below 2 in either dimension are not supported.
    """
    grid: Grid = [[Cell.PATH for _ in range(width)] for _ in range(height)]

    for y in range(height):
        grid[y][0] = Cell.WALL
        grid[y][width - 1] = Cell.WALL
    for x in range(width):
        grid[0][x] = Cell.WALL
        grid[height - 1][x] = Cell.WALL

    wall_count = (width * height) // 5
    for _ in range(wall_count):
        x = rng.randint(1, width - 2)
        y = rng.randint(1, height - 2)
        grid[y][x] = Cell.WALL

    mid = width // 2
    for y in range(1, height - 1):
        if y % 2 == 0:
            grid[y][mid] = Cell.PATH

    grid[1][1] = Cell.START
    grid[height - 2][width - 2] = Cell.EXIT

    logger.debug(
        "Generated %dx%d maze (seed=%s, scattered walls=%d)", width, height, rng.seed, wall_count
    )
    return grid
