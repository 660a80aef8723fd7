from __future__ import annotations

import logging
from typing import List, Optional

from ...errors import SceneStackEmpty
from ...render.draw import DrawContext
from ..game_data import GameData
from ..keys import HostContext
from .base_scene import Scene
from .transitions import SceneSwitch, SwitchKind

logger = logging.getLogger(__name__)


class SceneManager:
    """A stack-based scene manager.

    - push(scene): push a new scene on top; calls on_enter
    - pop(): remove top scene; calls on_exit
    - replace(scene): pop then push
    - apply(switch): perform a SceneSwitch returned by a scene
    - frame(dt, d): run handle_input, update and draw on the top scene

    Scenes below the top stay on the stack untouched until they surface again.
    """

    def __init__(self, host: HostContext, data: GameData) -> None:
        self._stack: List[Scene] = []
        self.host = host
        self.data = data
        self.running = True

    @property
    def current(self) -> Optional[Scene]:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, scene: Scene) -> None:
        self._stack.append(scene)
        logger.debug("Scene pushed: %s", type(scene).__name__)
        scene.on_enter(self.host, self.data)

    def pop(self) -> Scene:
        if not self._stack:
            raise SceneStackEmpty("No scene to pop")
        scene = self._stack.pop()
        logger.debug("Scene popped: %s", type(scene).__name__)
        scene.on_exit(self.host, self.data)
        if not self._stack:
            logger.info("Scene stack empty; stopping")
            self.running = False
        return scene

    def replace(self, scene: Scene) -> None:
        self.pop()
        # Replacing the last scene must not stop the loop
        self.running = True
        self.push(scene)

    def apply(self, switch: SceneSwitch) -> None:
        kind = switch.kind
        if kind is SwitchKind.NONE:
            return
        if kind is SwitchKind.PUSH:
            self.push(switch.scene)
        elif kind is SwitchKind.POP:
            self.pop()
        elif kind is SwitchKind.REPLACE:
            self.replace(switch.scene)
        elif kind is SwitchKind.QUIT:
            logger.info("Quit requested by %s", type(self.current).__name__)
            self.running = False

    def frame(self, delta_time: float, d: Optional[DrawContext] = None) -> None:
        """Run one frame: input, update, draw, in that order.

        A switch returned from handle_input is applied before update, so
        update and draw run on whichever scene is on top at that point.
        """
        if not self.running or self.current is None:
            return
        self.apply(self.current.handle_input(self.host, self.data))
        if not self.running or self.current is None:
            return
        self.apply(self.current.update(delta_time, self.data))
        if d is not None:
            self.draw(d)

    def draw(self, d: DrawContext) -> None:
        if self.running and self.current is not None:
            self.current.draw(d, self.data)
