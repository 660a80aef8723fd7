from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from ..errors import SettingsError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key, parser)
ENV_OVERRIDES = {
    "MAZE_WIDTH": ("video", "width", int),
    "MAZE_HEIGHT": ("video", "height", int),
    "MAZE_SEED": ("maze", "seed", int),
}


@dataclass
class VideoSettings:
    width: int = 800
    height: int = 600
    fullscreen: bool = False
    vsync: bool = True


@dataclass
class MazeSettings:
    cell_size: int = 30
    seed: Optional[int] = None


@dataclass
class Settings:
    video: VideoSettings = field(default_factory=VideoSettings)
    maze: MazeSettings = field(default_factory=MazeSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _env_data() -> dict:
        data: dict = {}
        for name, (section, key, parse) in ENV_OVERRIDES.items():
            raw = os.getenv(name)
            if raw is None or raw.strip() == "":
                continue
            try:
                value = parse(raw.strip())
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", name, raw)
                continue
            data.setdefault(section, {})[key] = value
        return data

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            video = VideoSettings(**(data.get("video") or {}))
            maze = MazeSettings(**(data.get("maze") or {}))
        except TypeError as e:
            raise SettingsError(f"Unknown setting: {e}") from e
        return Settings(video=video, maze=maze)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults, an optional user file and the environment.

        Later sources win: defaults < user YAML < MAZE_* environment variables.
        """
        try:
            with resources.files("mazegame.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        merged = cls._deep_merge(merged, cls._env_data())
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def validate(self) -> "Settings":
        """Raise SettingsError unless the window fits at least a 3x3 grid of cells."""
        if self.video.width <= 0 or self.video.height <= 0:
            raise SettingsError(f"Invalid window size {self.video.width}x{self.video.height}")
        if self.maze.cell_size < 1:
            raise SettingsError(f"Invalid cell size {self.maze.cell_size}")
        cols = self.video.width // self.maze.cell_size
        rows = self.video.height // self.maze.cell_size
        if cols < 3 or rows < 3:
            raise SettingsError(f"Window too small for a maze: {cols}x{rows} cells")
        return self

    def save(self, path: Path) -> None:
        data = {
            "video": dataclasses.asdict(self.video),
            "maze": dataclasses.asdict(self.maze),
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.info("Saved settings to %s", path)
