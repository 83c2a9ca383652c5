"""Engine default palette and theme color resolution.

Themes may omit colors; these values are what the engine falls back to.
"""

import pygame
from shared.constants import DEFAULT_TEXT_COLOR
from shared.errors import MalformedValueError

BG_SCREEN        = (10, 10, 18)      # fill behind screens whose background is missing
BG_PLACEHOLDER   = (70, 40, 90)      # stand-in for a missing image
BORDER_PLACEHOLDER = (200, 120, 220) # outline of a missing image

TEXT_DEFAULT     = pygame.Color(DEFAULT_TEXT_COLOR)
TEXT_GRAY        = (120, 120, 140)   # locked level titles when the theme has no color-gray
TEXT_HINT        = (220, 220, 240)   # preview tool hint line

HOVER_OUTLINE    = (255, 220, 130)   # hovered button outline


def to_color(value, path: str = "color") -> pygame.Color:
    """Turn a theme color (name or [r, g, b]) into a pygame Color."""
    if value is None:
        return pygame.Color(TEXT_DEFAULT)
    if isinstance(value, str):
        try:
            return pygame.Color(value)
        except ValueError:
            raise MalformedValueError(path, "known color name", value) from None
    return pygame.Color(*value)
