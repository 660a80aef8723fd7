import logging
import os
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stdout handler on the root logger.

    ``MAZE_LOG_LEVEL`` (e.g. ``DEBUG``) takes precedence over ``level``.
    """
    level_name = os.getenv("MAZE_LOG_LEVEL")
    if level_name:
        named = logging.getLevelName(level_name.strip().upper())
        if isinstance(named, int):
            level = named

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
