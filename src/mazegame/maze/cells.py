from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class Cell(Enum):
    """Kinds of maze cell. Everything except WALL can be entered."""

    WALL = "#"
    PATH = "."
    START = "S"
    EXIT = "E"

    @property
    def passable(self) -> bool:
        return self is not Cell.WALL


Grid = List[List[Cell]]  # grid[y][x]
Point = Tuple[int, int]

# Edge length of one cell in screen units
CELL_SIZE = 30

_BY_CHAR: Dict[str, Cell] = {cell.value: cell for cell in Cell}


def cell_from_char(ch: str) -> Cell:
    try:
        return _BY_CHAR[ch]
    except KeyError as e:
        raise ValueError(f"Unknown cell character: {ch!r}") from e
