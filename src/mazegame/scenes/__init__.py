from .maze_scene import MazeScene
from .win_scene import WinScene

__all__ = ["MazeScene", "WinScene"]
