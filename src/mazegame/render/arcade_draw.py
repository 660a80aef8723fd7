from __future__ import annotations

import logging

import arcade

from .colors import Color
from .draw import DrawContext

logger = logging.getLogger(__name__)


class ArcadeDrawContext(DrawContext):
    """DrawContext backed by Arcade's immediate-mode drawing functions.

    Arcade puts the origin at the bottom-left; scenes draw with a top-left
    origin, so every y coordinate is flipped against the window height.
    """

    def __init__(self, window: arcade.Window) -> None:
        self.window = window

    def _flip(self, y: float) -> float:
        return self.window.height - y

    def clear_background(self, color: Color) -> None:
        self.window.clear(color=color)

    def draw_rectangle(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        arcade.draw_lbwh_rectangle_filled(x, self._flip(y + height), width, height, color)

    def draw_rectangle_lines(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        arcade.draw_lbwh_rectangle_outline(x, self._flip(y + height), width, height, color, 1)

    def draw_circle(self, center_x: int, center_y: int, radius: float, color: Color) -> None:
        arcade.draw_circle_filled(center_x, self._flip(center_y), radius, color)

    def draw_text(self, text: str, x: int, y: int, font_size: int, color: Color) -> None:
        arcade.draw_text(
            text,
            x,
            self._flip(y),
            color=color,
            font_size=font_size,
            anchor_x="left",
            anchor_y="top",
        )
