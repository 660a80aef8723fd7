from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .base_scene import Scene


class SwitchKind(Enum):
    NONE = "none"
    PUSH = "push"
    POP = "pop"
    REPLACE = "replace"
    QUIT = "quit"


@dataclass(frozen=True)
class SceneSwitch:
    """A scene's request to the SceneManager, returned from handle_input/update.

    PUSH and REPLACE carry the scene to activate; the other kinds carry none.
    """

    kind: SwitchKind = SwitchKind.NONE
    scene: Optional["Scene"] = None

    @classmethod
    def none(cls) -> "SceneSwitch":
        return cls(SwitchKind.NONE)

    @classmethod
    def push(cls, scene: "Scene") -> "SceneSwitch":
        return cls(SwitchKind.PUSH, scene)

    @classmethod
    def pop(cls) -> "SceneSwitch":
        return cls(SwitchKind.POP)

    @classmethod
    def replace(cls, scene: "Scene") -> "SceneSwitch":
        return cls(SwitchKind.REPLACE, scene)

    @classmethod
    def quit(cls) -> "SceneSwitch":
        return cls(SwitchKind.QUIT)

    @property
    def is_none(self) -> bool:
        return self.kind is SwitchKind.NONE
