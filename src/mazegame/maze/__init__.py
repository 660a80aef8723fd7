"""Maze model: cell kinds, generation and movement rules.

Nothing in this package depends on the rendering or windowing stack.
"""
from .cells import CELL_SIZE, Cell, Grid, Point
from .generation import generate
from .grid import (
    find_start,
    grid_dimensions,
    grid_from_ascii,
    grid_height,
    grid_to_ascii,
    grid_width,
    is_exit,
    is_valid_move,
)

__all__ = [
    "CELL_SIZE",
    "Cell",
    "Grid",
    "Point",
    "generate",
    "find_start",
    "grid_dimensions",
    "grid_from_ascii",
    "grid_height",
    "grid_to_ascii",
    "grid_width",
    "is_exit",
    "is_valid_move",
]
