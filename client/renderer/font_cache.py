"""Shared font factory with module-level cache."""

from __future__ import annotations
import sys
from typing import Optional
import pygame

_cache: dict[tuple[Optional[str], int], pygame.font.Font] = {}

# In WASM the game canvas is not CSS-scaled (pygame.SCALED is disabled), so
# fonts appear small on typical browser viewports.  Apply a multiplier so text
# is comfortably readable without any CSS transform tricks.
_WASM_FONT_SCALE = 1.5 if sys.platform == "emscripten" else 1.0


def get_font(size: int, path: Optional[str] = None) -> pygame.font.Font:
    """Font from a theme file, or pygame's default font when ``path`` is None."""
    key = (path, size)
    if key not in _cache:
        if not pygame.font.get_init():
            pygame.font.init()
        scaled = round(size * _WASM_FONT_SCALE)
        _cache[key] = pygame.font.Font(path, scaled)
    return _cache[key]


def clear_cache() -> None:
    """Drop cached fonts, e.g. after switching to a theme with another main font."""
    _cache.clear()
