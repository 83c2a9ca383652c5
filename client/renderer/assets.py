"""Load and cache theme images."""

import os
import pygame
import client.theme as theme

# Module-level cache: absolute file name -> pygame.Surface
images: dict[str, pygame.Surface] = {}

_PLACEHOLDER_SIZE = (64, 32)


def placeholder(size=_PLACEHOLDER_SIZE) -> pygame.Surface:
    surf = pygame.Surface(size, pygame.SRCALPHA)
    surf.fill(theme.BG_PLACEHOLDER)
    w, h = size
    pygame.draw.rect(surf, theme.BORDER_PLACEHOLDER, surf.get_rect(), 1)
    pygame.draw.line(surf, theme.BORDER_PLACEHOLDER, (0, 0), (w - 1, h - 1), 1)
    pygame.draw.line(surf, theme.BORDER_PLACEHOLDER, (w - 1, 0), (0, h - 1), 1)
    return surf


def get_image(path: str, placeholder_size=_PLACEHOLDER_SIZE) -> pygame.Surface:
    """Load an image once; a missing file gives a visible placeholder.

    Call after pygame.display is initialized (convert_alpha needs a display).
    """
    if path in images:
        return images[path]

    if not os.path.exists(path):
        print(f"[assets] WARNING: Missing theme image: {path}")
        surf = placeholder(placeholder_size)
    else:
        raw = pygame.image.load(path)
        surf = raw.convert_alpha() if pygame.display.get_surface() else raw
    images[path] = surf
    return surf


def clear_cache() -> None:
    images.clear()
