"""Preview window: scene manager and event dispatch for theme screens."""

from __future__ import annotations
import asyncio
import sys
import pygame
from shared.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TITLE, ScreenName, SCREEN_ORDER,
)
from client.theme_manager import ThemeManager
from client.scenes.hud_scene import HudScene
from client.scenes.menu import MenuScene
from client.scenes.level_picker import LevelPickerScene
from client.scenes.results import ResultsScene
from client.renderer.font_cache import get_font
from client.settings import load_settings, save_settings, themes_dir
import client.theme as theme


class App:
    """Opens a theme and shows its screens one at a time."""

    def __init__(self, theme_name: str = None, screen_name: str = ScreenName.HUD.value,
                 verify_assets: bool = False):
        pygame.init()
        self.settings = load_settings()
        self.fullscreen: bool = self.settings.get("fullscreen", False)
        self.screen = self._apply_display_mode()
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.themes = ThemeManager(themes_dir(self.settings))
        self.themes.load_theme(theme_name or self.settings["theme"], verify_assets=verify_assets)
        pygame.display.set_caption(f"{TITLE} - {self.themes.current_theme}")

        self.scenes: dict = {}
        self.current_scene = None
        self.current_name = ""
        self._init_scenes()
        self.set_scene(screen_name)

    def _apply_display_mode(self) -> pygame.Surface:
        if sys.platform == "emscripten":
            # SCALED conflicts with the CSS resize handler in WASM; use 0.
            flags = 0
        else:
            flags = pygame.SCALED
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        return pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen
        pygame.display.toggle_fullscreen()
        if sys.platform != "emscripten":
            self.settings["fullscreen"] = self.fullscreen
            save_settings(self.settings)

    def _init_scenes(self):
        self.scenes[ScreenName.HUD.value] = HudScene(self)
        self.scenes[ScreenName.MENU.value] = MenuScene(self)
        self.scenes[ScreenName.PICKER.value] = LevelPickerScene(self)
        self.scenes[ScreenName.WIN.value] = ResultsScene(self, ScreenName.WIN)
        self.scenes[ScreenName.LOOSE.value] = ResultsScene(self, ScreenName.LOOSE)

    def set_scene(self, scene_name: str):
        scene = self.scenes.get(scene_name)
        if scene is None:
            print(f"[app] Unknown screen '{scene_name}'")
            return
        scene.reset()
        self.current_scene = scene
        self.current_name = scene_name
        print(f"[app] Switched to {scene_name}")

    def cycle_scene(self, step: int = 1):
        names = [s.value for s in SCREEN_ORDER]
        i = names.index(self.current_name) if self.current_name in names else 0
        self.set_scene(names[(i + step) % len(names)])

    def _handle_key(self, event) -> bool:
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_F11:
            self.toggle_fullscreen()
        elif event.key == pygame.K_TAB:
            self.cycle_scene(-1 if event.mod & pygame.KMOD_SHIFT else 1)
        elif pygame.K_1 <= event.key < pygame.K_1 + len(SCREEN_ORDER):
            self.set_scene(SCREEN_ORDER[event.key - pygame.K_1].value)
        else:
            return False
        return True

    def _draw_hint(self):
        font = get_font(14)
        hint = font.render(f"{self.current_name}  |  Tab / 1-{len(SCREEN_ORDER)}: switch  Esc: quit",
                           True, theme.TEXT_HINT)
        self.screen.blit(hint, (6, SCREEN_HEIGHT - hint.get_height() - 4))

    async def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                if event.type == pygame.KEYDOWN and self._handle_key(event):
                    continue
                if self.current_scene:
                    self.current_scene.handle_event(event)

            if self.current_scene:
                self.current_scene.update(dt)
                self.current_scene.render(self.screen)
            self._draw_hint()

            pygame.display.flip()
            await asyncio.sleep(0)

        pygame.quit()
