"""Win / loose screens: a single full-screen background."""

from __future__ import annotations
import os
import pygame
from shared.constants import ScreenName, SCREEN_WIDTH, SCREEN_HEIGHT
from client.renderer.assets import get_image
from client.renderer.ui_renderer import Sprite
import client.theme as theme


class ResultsScene:
    def __init__(self, app, outcome: ScreenName):
        self.app = app
        self.outcome = outcome
        self.background: Sprite = None

    def reset(self):
        t = self.app.themes
        spec = t.theme.win if self.outcome == ScreenName.WIN else t.theme.loose
        path = os.path.join(t.theme_path(), spec.background)
        self.background = Sprite(get_image(path, (SCREEN_WIDTH, SCREEN_HEIGHT)), (0, 0))

    def handle_event(self, event):
        # Any click returns to the menu
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.app.set_scene(ScreenName.MENU.value)

    def update(self, dt):
        pass

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        self.background.draw(screen)
