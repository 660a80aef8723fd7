from __future__ import annotations

import logging
from typing import Optional

from ..core.game_data import GameData
from ..core.keys import HostContext, Key
from ..core.rng import RNG
from ..core.scenes.base_scene import Scene
from ..core.scenes.transitions import SceneSwitch
from ..maze import (
    CELL_SIZE,
    Cell,
    Grid,
    Point,
    find_start,
    generate,
    grid_dimensions,
    is_exit,
    is_valid_move,
)
from ..render import colors
from ..render.draw import DrawContext
from .win_scene import WinScene

logger = logging.getLogger(__name__)

CELL_COLORS = {
    Cell.WALL: colors.BLACK,
    Cell.PATH: colors.WHITE,
    Cell.START: colors.GREEN,
    Cell.EXIT: colors.RED,
}


class MazeScene(Scene):
    """Guide the player token from the green START cell to the red EXIT cell.

    The grid is generated once, sized to fit the screen, and never changes.
    Each arrow/WASD press moves the player one cell; presses of several
    directions in the same frame add up, so Right+Down moves diagonally.
    """

    name = "maze"

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        rng: Optional[RNG] = None,
        cell_size: int = CELL_SIZE,
        grid: Optional[Grid] = None,
    ) -> None:
        self.cell_size = cell_size
        if grid is None:
            width, height = grid_dimensions(screen_width, screen_height, cell_size)
            grid = generate(width, height, rng if rng is not None else RNG())
        self.grid: Grid = grid
        self.grid_height = len(grid)
        self.grid_width = len(grid[0])
        self.player_x, self.player_y = find_start(grid)
        logger.debug(
            "MazeScene created: grid=%dx%d player=(%d,%d)",
            self.grid_width,
            self.grid_height,
            self.player_x,
            self.player_y,
        )

    @property
    def player(self) -> Point:
        return self.player_x, self.player_y

    def on_enter(self, host: HostContext, data: GameData) -> None:
        data.points = 0

    def handle_input(self, host: HostContext, data: GameData) -> SceneSwitch:
        new_x = self.player_x
        new_y = self.player_y

        # Order matters when opposite keys land in the same frame
        if host.is_key_pressed(Key.RIGHT) or host.is_key_pressed(Key.D):
            new_x += 1
        if host.is_key_pressed(Key.LEFT) or host.is_key_pressed(Key.A):
            if new_x > 0:
                new_x -= 1
        if host.is_key_pressed(Key.DOWN) or host.is_key_pressed(Key.S):
            new_y += 1
        if host.is_key_pressed(Key.UP) or host.is_key_pressed(Key.W):
            if new_y > 0:
                new_y -= 1

        if (new_x, new_y) != (self.player_x, self.player_y):
            if is_valid_move(self.grid, new_x, new_y):
                self.player_x = new_x
                self.player_y = new_y
            else:
                logger.debug("Move to (%d,%d) blocked", new_x, new_y)

        return SceneSwitch.none()

    def update(self, delta_time: float, data: GameData) -> SceneSwitch:
        # No latch: every update spent on the exit scores again
        if is_exit(self.grid, self.player_x, self.player_y):
            data.score()
            logger.info("Maze completed; score=%d", data.points)
            return SceneSwitch.push(WinScene())
        return SceneSwitch.none()

    def draw(self, d: DrawContext, data: GameData) -> None:
        size = self.cell_size
        d.clear_background(colors.WHITE)

        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                cell_x = x * size
                cell_y = y * size
                d.draw_rectangle(cell_x, cell_y, size, size, CELL_COLORS[cell])
                d.draw_rectangle_lines(cell_x, cell_y, size, size, colors.GRAY)

        player_screen_x = self.player_x * size + size // 2
        player_screen_y = self.player_y * size + size // 2
        d.draw_circle(player_screen_x, player_screen_y, size * 0.4, colors.BLUE)

        d.draw_text(f"Score: {data.points}", 10, data.screen_height - 25, 20, colors.BLACK)
