"""Settings persistence: load/save settings.json next to the executable (or project root)."""

import os
import sys
import json
from shared.constants import DEFAULT_THEME, THEMES_SUBDIR

DEFAULT_SETTINGS = {
    "theme": DEFAULT_THEME,
    "themes_dir": None,      # None -> data/themes in the project root
    "fullscreen": False,
}


def _base_dir() -> str:
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    # Two levels up from client/settings.py → project root
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _settings_path() -> str:
    return os.path.join(_base_dir(), 'settings.json')


def default_themes_dir() -> str:
    return os.path.join(_base_dir(), *THEMES_SUBDIR)


def load_settings() -> dict:
    settings = dict(DEFAULT_SETTINGS)
    path = _settings_path()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError):
        return settings
    if isinstance(data, dict):
        settings.update(data)
    return settings


def save_settings(data: dict) -> None:
    path = _settings_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def themes_dir(settings: dict) -> str:
    return settings.get("themes_dir") or default_themes_dir()
