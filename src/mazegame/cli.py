import argparse
import logging
import sys
from pathlib import Path

from .core.rng import RNG
from .core.settings import Settings
from .errors import SettingsError
from .maze import generate, grid_dimensions, grid_to_ascii
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="mazegame",
        description="Maze - walk from the green start cell to the red exit",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for maze generation (overrides settings).",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the generated maze as ASCII and exit without opening a window.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        settings = Settings.load(user_path=args.settings_path).validate()
    except SettingsError as e:
        logger.error("Invalid settings: %s", e)
        return 2
    if args.seed is not None:
        settings.maze.seed = args.seed

    if args.dump:
        width, height = grid_dimensions(settings.video.width, settings.video.height, settings.maze.cell_size)
        grid = generate(width, height, RNG(settings.maze.seed))
        sys.stdout.write(grid_to_ascii(grid) + "\n")
        return 0

    # Imported here so --dump works without a display
    from .app import GameApp

    app = GameApp(settings)
    app.run()
    return 0
