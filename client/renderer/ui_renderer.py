"""Themed widgets: image buttons, sprites and text labels."""

from __future__ import annotations
import pygame
import client.theme as theme


class ImageButton:
    def __init__(self, image: pygame.Surface, position: tuple[float, float],
                 active_size: tuple[float, float] = None):
        self.image = image
        self.position = position
        w, h = active_size or image.get_size()
        self.rect = pygame.Rect(round(position[0]), round(position[1]), round(w), round(h))
        self.hovered = False
        self.visible = True

    def draw(self, surface: pygame.Surface):
        if not self.visible:
            return
        surface.blit(self.image, self.position)
        if self.hovered:
            pygame.draw.rect(surface, theme.HOVER_OUTLINE, self.rect, 1)

    def update(self, mouse_pos):
        self.hovered = self.visible and self.rect.collidepoint(mouse_pos)

    def clicked(self, mouse_pos) -> bool:
        return self.visible and self.rect.collidepoint(mouse_pos)


class Sprite:
    """Non-interactive image, e.g. a decoration or panel."""

    def __init__(self, image: pygame.Surface, position: tuple[float, float]):
        self.image = image
        self.position = position

    def draw(self, surface: pygame.Surface):
        surface.blit(self.image, self.position)


class Label:
    def __init__(self, font: pygame.font.Font, text: str, position: tuple[float, float],
                 color=theme.TEXT_DEFAULT):
        self.font = font
        self.position = position
        self.color = color
        self.surface = font.render(text, True, color)

    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def draw(self, surface: pygame.Surface):
        surface.blit(self.surface, self.position)
