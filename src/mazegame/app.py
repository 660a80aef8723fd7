from __future__ import annotations

import logging
from typing import Dict

import arcade

from .core.game_data import GameData
from .core.keys import InputState, Key
from .core.rng import RNG
from .core.scenes.manager import SceneManager
from .core.settings import Settings
from .render.arcade_draw import ArcadeDrawContext
from .scenes.maze_scene import MazeScene

logger = logging.getLogger(__name__)


def _arcade_key_map() -> Dict[int, Key]:
    """Translate arcade.key codes to the Key members the scenes query."""
    mapping = {getattr(arcade.key, key.value): key for key in Key}
    # Keypad Enter confirms too
    mapping[arcade.key.NUM_ENTER] = Key.ENTER
    return mapping


class GameApp(arcade.Window):
    """
    The game window and frame loop.

    Responsibilities:
    - Configure the Arcade window from Settings
    - Feed key events into an InputState (key-press edges per frame)
    - Drive the SceneManager once per frame: input, update, then draw
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

        super().__init__(
            width=settings.video.width,
            height=settings.video.height,
            title="Maze",
            fullscreen=settings.video.fullscreen,
            resizable=False,
            vsync=settings.video.vsync,
            center_window=True,
        )

        self.input = InputState()
        self.data = GameData(screen_width=self.width, screen_height=self.height)
        self.draw_context = ArcadeDrawContext(self)
        self._key_map = _arcade_key_map()

        self.scene_manager = SceneManager(self.input, self.data)
        self.scene_manager.push(
            MazeScene(
                self.width,
                self.height,
                rng=RNG(settings.maze.seed),
                cell_size=settings.maze.cell_size,
            )
        )

        logger.info(
            "GameApp initialized: %dx%d fullscreen=%s vsync=%s seed=%s",
            settings.video.width,
            settings.video.height,
            settings.video.fullscreen,
            settings.video.vsync,
            settings.maze.seed,
        )

    # Arcade lifecycle
    def on_update(self, delta_time: float):  # noqa: N802 (arcade API)
        self.scene_manager.frame(delta_time)
        self.input.end_frame()
        if not self.scene_manager.running:
            logger.info("Scene manager stopped; closing window")
            self.close()

    def on_draw(self):  # noqa: N802 (arcade API)
        self.scene_manager.draw(self.draw_context)

    def on_key_press(self, key: int, modifiers: int):  # noqa: N802 (arcade API)
        mapped = self._key_map.get(key)
        if mapped is not None:
            self.input.press(mapped)

    def on_key_release(self, key: int, modifiers: int):  # noqa: N802 (arcade API)
        mapped = self._key_map.get(key)
        if mapped is not None:
            self.input.release(mapped)

    def run(self) -> None:
        """Start the main loop."""
        logger.info("Starting main loop")
        arcade.run()
