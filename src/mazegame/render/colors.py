"""RGB colors used by the scenes. Values match the ``arcade.color`` palette."""
from typing import Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
GREEN: Color = (0, 255, 0)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
GRAY: Color = (128, 128, 128)
DARK_SLATE_GRAY: Color = (47, 79, 79)
GHOST_WHITE: Color = (248, 248, 255)
