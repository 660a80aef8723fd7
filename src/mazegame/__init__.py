"""
Maze game package.

A single grid maze scene plus the small scene-stack runtime it plugs into:
- maze: cell kinds, procedural generation and movement rules (headless)
- scenes: the maze scene controller and the win screen
- core: shared game data, key-press edges, scene stack, settings, RNG
- render: drawing interface and its Arcade implementation

Only ``mazegame.app`` and ``mazegame.render.arcade_draw`` import Arcade.
"""
from .core.game_data import GameData
from .core.rng import RNG
from .errors import MazeGameError, SceneStackEmpty, SettingsError
from .maze import Cell, generate, is_valid_move
from .scenes import MazeScene, WinScene

__all__ = [
    "GameData",
    "RNG",
    "MazeGameError",
    "SceneStackEmpty",
    "SettingsError",
    "Cell",
    "generate",
    "is_valid_move",
    "MazeScene",
    "WinScene",
]

__version__ = "0.1.0"
