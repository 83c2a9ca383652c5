"""Theme loading, asset verification and key-path queries for the screens."""

from __future__ import annotations
import os
from typing import Optional
import pygame
from shared.constants import THEME_FILE_NAME
from shared.errors import ThemeError, ThemeParseError, AssetNotFoundError
from shared.models import Theme
from shared.theme_io import load_theme_text
from shared import theme_path
from client.renderer import font_cache, assets
import client.theme as palette


class ThemeManager:
    """Holds the current theme; screens read values from it by key path.

    A theme is loaded once and is read-only afterwards. A failed load keeps
    the previously loaded theme.
    """

    def __init__(self, themes_dir: str):
        self.themes_dir = themes_dir
        self.current_theme: str = ""
        self.theme: Optional[Theme] = None
        self._root: dict = {}
        self.verified = False

    def theme_path(self, name: Optional[str] = None) -> str:
        return os.path.join(self.themes_dir, name or self.current_theme)

    def load_theme(self, name: str, verify_assets: bool = True) -> Theme:
        theme_dir = self.theme_path(name)
        theme_def = os.path.join(theme_dir, THEME_FILE_NAME)
        if name == self.current_theme and self.theme is not None:
            # Reloading the current theme only runs the checks it skipped
            if verify_assets and not self.verified:
                try:
                    verify_theme_assets(self.theme, theme_dir)
                except ThemeError as e:
                    e.with_file(theme_def)
                    raise
                self.verified = True
            return self.theme

        try:
            with open(theme_def, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError as e:
            raise AssetNotFoundError(name, THEME_FILE_NAME, theme_def) from e
        except OSError as e:
            raise ThemeParseError("Cannot read theme file", e.strerror or str(e), theme_def) from e

        root, theme = load_theme_text(text, theme_def)
        try:
            verify_theme_colors(theme)
            if verify_assets:
                verify_theme_assets(theme, theme_dir)
        except ThemeError as e:
            e.with_file(theme_def)
            raise

        self._root = root
        self.theme = theme
        self.current_theme = name
        self.verified = verify_assets
        font_cache.clear_cache()
        assets.clear_cache()
        print(f"[theme] Loaded theme '{name}' from {theme_dir}")
        extra = sorted(theme.extra)
        if extra:
            print(f"[theme] Ignoring unknown keys: {', '.join(extra)}")
        return theme

    def _require_loaded(self):
        if self.theme is None:
            raise ThemeError("No theme loaded")

    def _get(self, path: str, idx: int):
        self._require_loaded()
        return theme_path.traverse(self._root, path, idx)

    # --- Queries ------------------------------------------------------------

    def key_exists(self, path: str, idx: int = -1) -> bool:
        return bool(self._root) and theme_path.key_exists(self._root, path, idx)

    def get_position(self, path: str, idx: int = -1) -> tuple[float, float]:
        x, y = theme_path.as_position(self._get(path, idx), path)
        return float(x), float(y)

    def get_int(self, path: str, idx: int = -1) -> int:
        return theme_path.as_int(self._get(path, idx), path)

    def get_float(self, path: str, idx: int = -1) -> float:
        return float(theme_path.as_number(self._get(path, idx), path))

    def get_string(self, path: str, idx: int = -1) -> str:
        return theme_path.as_string(self._get(path, idx), path)

    def get_file_name(self, path: str, idx: int = -1) -> str:
        name = theme_path.as_file_name(self._get(path, idx), path)
        return os.path.join(self.theme_path(), name)

    def get_color(self, path: str, idx: int = -1) -> pygame.Color:
        value = theme_path.as_color(self._get(path, idx), path)
        return palette.to_color(value, path)

    def get_array_length(self, path: str, idx: int = -1) -> int:
        return len(theme_path.as_list(self._get(path, idx), path))

    def main_font(self, size: int) -> pygame.font.Font:
        self._require_loaded()
        path = self.get_file_name("main-font")
        if not os.path.isfile(path):
            # Only reachable when the theme was loaded without asset checks
            print(f"[theme] WARNING: Missing main font {path}, using pygame default")
            path = None
        return font_cache.get_font(size, path)


def verify_theme_assets(theme: Theme, theme_dir: str) -> None:
    """Raise AssetNotFoundError for the first referenced file that is missing."""
    missing = missing_assets(theme, theme_dir)
    if missing:
        raise AssetNotFoundError(*missing[0])


def verify_theme_colors(theme: Theme) -> None:
    """Color names are only checked against pygame's table here, not in shared."""
    for key_path, value in theme.color_references():
        palette.to_color(value, key_path)


def missing_assets(theme: Theme, theme_dir: str) -> list[tuple[str, str]]:
    return [(key_path, name) for key_path, name in theme.asset_references()
            if not os.path.isfile(os.path.join(theme_dir, name))]
