class MazeGameError(Exception):
    """Base error for maze game exceptions."""


class SettingsError(MazeGameError):
    """Raised when configuration values cannot produce a playable window/grid."""


class SceneStackEmpty(MazeGameError):
    """Raised when popping from a scene manager that holds no scenes."""
