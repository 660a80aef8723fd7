from __future__ import annotations

import logging

from ..core.game_data import GameData
from ..core.keys import HostContext, Key
from ..core.scenes.base_scene import Scene
from ..core.scenes.transitions import SceneSwitch
from ..render import colors
from ..render.draw import DrawContext

logger = logging.getLogger(__name__)


class WinScene(Scene):
    """Shown on top of the maze after the exit is reached.

    Enter/Space pops back to the maze underneath; since the player is still
    standing on the exit, the maze scores again and pushes a fresh win screen.
    Esc quits.
    """

    name = "win"

    def handle_input(self, host: HostContext, data: GameData) -> SceneSwitch:
        if host.is_key_pressed(Key.ENTER) or host.is_key_pressed(Key.SPACE):
            logger.info("Returning to maze")
            return SceneSwitch.pop()
        if host.is_key_pressed(Key.ESCAPE):
            return SceneSwitch.quit()
        return SceneSwitch.none()

    def draw(self, d: DrawContext, data: GameData) -> None:
        d.clear_background(colors.DARK_SLATE_GRAY)
        center_x = data.screen_width // 2
        center_y = data.screen_height // 2
        d.draw_text("You escaped!", center_x - 110, center_y - 60, 36, colors.GHOST_WHITE)
        d.draw_text(f"Score: {data.points}", center_x - 50, center_y, 20, colors.GHOST_WHITE)
        d.draw_text("Esc to quit", center_x - 55, center_y + 40, 18, colors.GRAY)
