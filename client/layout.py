"""Screen layout derived from theme data.

Pure functions, no pygame: positions in, positions out.
"""

from __future__ import annotations
from dataclasses import dataclass
from shared.constants import LevelButtonState, SCREEN_WIDTH, SCREEN_HEIGHT
from shared.models import LevelButtonsSpec


@dataclass
class LevelRow:
    index: int
    button_pos: tuple[float, float]
    text_pos: tuple[float, float]
    active_width: float
    state: LevelButtonState


def level_state(index: int, pack_enabled: bool, last_won: int) -> LevelButtonState:
    """Won levels are green, the next one red, everything after is locked.

    ``last_won`` is -1 when no level of the pack has been won yet.
    """
    if not pack_enabled or index > last_won + 1:
        return LevelButtonState.GRAY
    if index <= last_won:
        return LevelButtonState.GREEN
    return LevelButtonState.RED


def level_button_rows(spec: LevelButtonsSpec, count: int, pack_enabled: bool = True,
                      last_won: int = -1) -> list[LevelRow]:
    sx, sy = spec.start
    lx, ly = spec.line_offset
    tx, ty = spec.text_offset
    rows = []
    for i in range(count):
        bx, by = sx + lx * i, sy + ly * i
        rows.append(LevelRow(
            index=i,
            button_pos=(bx, by),
            text_pos=(bx + tx, by + ty),
            active_width=spec.line_width,
            state=level_state(i, pack_enabled, last_won),
        ))
    return rows


def centered(position: tuple[float, float], size: tuple[float, float]) -> tuple[float, float]:
    """Top-left corner of a box of ``size`` centered on ``position``."""
    return position[0] - size[0] / 2, position[1] - size[1] / 2


def main_menu_buttons(sizes: list[tuple[int, int]], screen_size=(SCREEN_WIDTH, SCREEN_HEIGHT),
                      spacing: int = 20) -> list[tuple[int, int]]:
    """Top-left corners for the menu button images, stacked and centered on screen."""
    if not sizes:
        return []
    total_h = sum(h for _, h in sizes) + spacing * (len(sizes) - 1)
    y = (screen_size[1] - total_h) // 2
    positions = []
    for w, h in sizes:
        positions.append(((screen_size[0] - w) // 2, y))
        y += h + spacing
    return positions

