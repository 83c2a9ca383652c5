"""Main menu preview: background plus the stacked start/options/quit images."""

import os
import pygame
from client.layout import main_menu_buttons
from client.renderer.assets import get_image
from client.renderer.ui_renderer import ImageButton, Sprite
import client.theme as theme

# Scene each menu button leads to in the preview, by position in the list
BUTTON_TARGETS = ["picker", None, "quit"]


class MenuScene:
    def __init__(self, app):
        self.app = app
        self.background: Sprite = None
        self.buttons: list[ImageButton] = []

    def reset(self):
        t = self.app.themes
        menu = t.theme.main_menu
        root = t.theme_path()
        self.background = Sprite(get_image(os.path.join(root, menu.background), (800, 600)), (0, 0))

        images = [get_image(os.path.join(root, name), (200, 50)) for name in menu.buttons]
        positions = main_menu_buttons([img.get_size() for img in images])
        self.buttons = [ImageButton(img, pos) for img, pos in zip(images, positions)]

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            for btn in self.buttons:
                btn.update(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, btn in enumerate(self.buttons):
                if not btn.clicked(event.pos):
                    continue
                target = BUTTON_TARGETS[i] if i < len(BUTTON_TARGETS) else None
                if target == "quit":
                    self.app.running = False
                elif target:
                    self.app.set_scene(target)
                return

    def update(self, dt):
        pass

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        self.background.draw(screen)
        for btn in self.buttons:
            btn.draw(screen)
