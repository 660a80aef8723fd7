from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameData:
    """State shared by every scene on the stack."""

    points: int = 0
    screen_width: int = 800
    screen_height: int = 600

    def score(self) -> None:
        """Award one point."""
        self.points += 1
