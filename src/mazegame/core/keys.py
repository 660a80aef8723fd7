from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, Set

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the scenes query. Values match the ``arcade.key`` constant names."""

    RIGHT = "RIGHT"
    LEFT = "LEFT"
    DOWN = "DOWN"
    UP = "UP"
    D = "D"
    A = "A"
    S = "S"
    W = "W"
    ENTER = "ENTER"
    SPACE = "SPACE"
    ESCAPE = "ESCAPE"


class HostContext(Protocol):
    """What a scene may ask the host about input during handle_input."""

    def is_key_pressed(self, key: Key) -> bool: ...


class InputState:
    """
    Per-frame key-press edge tracker.

    - press(key) records an edge unless the key is already held down
    - release(key) clears the held state so the next press is a new edge
    - end_frame() forgets this frame's edges

    is_key_pressed() therefore fires at most once per physical press,
    no matter how many frames the key stays down.
    """

    def __init__(self) -> None:
        self._held: Set[Key] = set()
        self._edges: Set[Key] = set()

    def press(self, key: Key) -> None:
        if key in self._held:
            return
        self._held.add(key)
        self._edges.add(key)
        logger.debug("Key edge: %s", key.value)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def end_frame(self) -> None:
        self._edges.clear()

    def is_key_pressed(self, key: Key) -> bool:
        return key in self._edges

    def is_key_down(self, key: Key) -> bool:
        return key in self._held
