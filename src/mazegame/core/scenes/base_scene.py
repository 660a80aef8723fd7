from __future__ import annotations

import logging

from ...render.draw import DrawContext
from ..game_data import GameData
from ..keys import HostContext
from .transitions import SceneSwitch

logger = logging.getLogger(__name__)


class Scene:
    """
    Base class for all scenes managed by the SceneManager.

    Lifecycle hooks:
    - on_enter(host, data): called when the scene is pushed
    - on_exit(host, data): called when the scene is popped
    - handle_input(host, data) -> SceneSwitch: once per frame, first
    - update(delta_time, data) -> SceneSwitch: once per frame, after input
    - draw(d, data): once per frame, last; must not change scene state
    """

    name: str = "scene"

    def on_enter(self, host: HostContext, data: GameData) -> None:
        logger.debug("%s.on_enter", type(self).__name__)

    def on_exit(self, host: HostContext, data: GameData) -> None:
        logger.debug("%s.on_exit", type(self).__name__)

    def handle_input(self, host: HostContext, data: GameData) -> SceneSwitch:
        return SceneSwitch.none()

    def update(self, delta_time: float, data: GameData) -> SceneSwitch:
        return SceneSwitch.none()

    def draw(self, d: DrawContext, data: GameData) -> None:
        pass
