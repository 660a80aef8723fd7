from __future__ import annotations

from abc import ABC, abstractmethod

from .colors import Color


class DrawContext(ABC):
    """Drawing primitives handed to Scene.draw, decoupling scenes from Arcade.

    All coordinates are screen units with the origin at the top-left corner
    and y growing downwards. Rectangles are given by their top-left corner.
    """

    @abstractmethod
    def clear_background(self, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Filled rectangle."""
        raise NotImplementedError

    @abstractmethod
    def draw_rectangle_lines(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Rectangle outline, one unit wide."""
        raise NotImplementedError

    @abstractmethod
    def draw_circle(self, center_x: int, center_y: int, radius: float, color: Color) -> None:
        """Filled circle."""
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, font_size: int, color: Color) -> None:
        """Text whose top-left corner sits at (x, y)."""
        raise NotImplementedError
