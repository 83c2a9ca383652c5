"""Tests for layout derived from theme data."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from shared.constants import LevelButtonState
from shared.models import LevelButtonsSpec
from client.layout import level_state, level_button_rows, centered, main_menu_buttons


def make_spec():
    return LevelButtonsSpec(
        start=(110, 190), line_offset=(0, 55), text_offset=(65, 10),
        line_width=350, font_size=25, color="black",
        red="picker/DiamondButtonRed.png", green="picker/DiamondButtonGreen.png",
    )


class TestLevelState:
    def test_nothing_won(self):
        assert level_state(0, True, -1) == LevelButtonState.RED
        assert level_state(1, True, -1) == LevelButtonState.GRAY

    def test_some_won(self):
        assert level_state(0, True, 1) == LevelButtonState.GREEN
        assert level_state(1, True, 1) == LevelButtonState.GREEN
        assert level_state(2, True, 1) == LevelButtonState.RED
        assert level_state(3, True, 1) == LevelButtonState.GRAY

    def test_pack_disabled(self):
        assert level_state(0, False, 5) == LevelButtonState.GRAY


class TestLevelRows:
    def test_row_positions(self):
        rows = level_button_rows(make_spec(), 3)
        assert [r.button_pos for r in rows] == [(110, 190), (110, 245), (110, 300)]
        assert rows[2].text_pos == (175, 310)
        assert all(r.active_width == 350 for r in rows)

    def test_row_states(self):
        rows = level_button_rows(make_spec(), 4, last_won=0)
        assert [r.state for r in rows] == [
            LevelButtonState.GREEN, LevelButtonState.RED,
            LevelButtonState.GRAY, LevelButtonState.GRAY,
        ]

    def test_no_levels(self):
        assert level_button_rows(make_spec(), 0) == []


class TestGeometry:
    def test_centered(self):
        assert centered((400, 50), (100, 20)) == (350, 40)

    def test_main_menu_stack(self):
        positions = main_menu_buttons([(200, 50), (200, 50), (100, 50)], (800, 600), spacing=20)
        # 3 * 50 + 2 * 20 = 190 -> top at (600 - 190) // 2 = 205
        assert positions == [(300, 205), (300, 275), (350, 345)]

    def test_main_menu_empty(self):
        assert main_menu_buttons([]) == []

