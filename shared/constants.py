"""Theme constants shared between the headless loader and the pygame client."""

from enum import Enum

# Display (the game runs at a fixed 800x600 window)
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
TITLE = "Drachen Theme Preview"

# Theme files
THEME_FILE_NAME = "theme.js"
DEFAULT_THEME = "default"
THEMES_SUBDIR = ("data", "themes")

# Path query
PATH_SEPARATOR = "/"

# Engine defaults used when a theme omits an optional field
DEFAULT_TEXT_COLOR = "black"

# The bottom panel is anchored at this y coordinate by the game UI
BOTTOM_PANEL_Y = 500


class ThemeKey(str, Enum):
    MAIN_FONT = "main-font"
    TOP_PANEL = "top-panel"
    BOTTOM_PANEL = "bottom-panel"
    BUTTONS = "buttons"
    TOWER_BUTTONS = "tower-buttons"
    TEXT = "text"
    DECORATIONS = "decorations"
    WIN = "win"
    LOOSE = "loose"
    MAIN_MENU = "main-menu"
    LEVEL_PICKER = "level-picker"
    TOOLTIP = "tooltip"            # optional


class ScreenName(str, Enum):
    HUD = "hud"
    MENU = "menu"
    PICKER = "picker"
    WIN = "win"
    LOOSE = "loose"


# Order used by the preview when cycling through screens
SCREEN_ORDER = [
    ScreenName.HUD,
    ScreenName.MENU,
    ScreenName.PICKER,
    ScreenName.WIN,
    ScreenName.LOOSE,
]


class LevelButtonState(str, Enum):
    GREEN = "green"    # level already won
    RED = "red"        # next playable level
    GRAY = "gray"      # locked


# Text fields the in-game HUD expects, in draw order
HUD_TEXT_FIELDS = ["level-name", "lives", "countdown", "money"]

# Buttons the in-game HUD expects
HUD_BUTTONS = ["upgrade", "sell"]
