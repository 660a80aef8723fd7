from .base_scene import Scene
from .manager import SceneManager
from .transitions import SceneSwitch, SwitchKind

__all__ = ["Scene", "SceneManager", "SceneSwitch", "SwitchKind"]
