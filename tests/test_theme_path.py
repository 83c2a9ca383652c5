"""Tests for key-path traversal."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from shared.theme_path import parse_segment, traverse, key_exists, as_position, as_color, is_number
from shared.errors import MissingKeyError, MalformedValueError

ROOT = {
    "top-panel": "top_bar.png",
    "buttons": {"upgrade": {"position": [340, 520], "image": "button/ButtonUpgrade.png"}},
    "tower-buttons": [
        {"image": "a.png", "position": [40, 520], "tower": 0},
        {"image": "b.png", "position": [120, 520], "tower": 1},
    ],
    "main-menu": {"buttons": ["start.png", "quit.png"]},
}


class TestParseSegment:
    def test_plain(self):
        assert parse_segment("buttons") == ("buttons", None)

    def test_explicit_index(self):
        assert parse_segment("tower-buttons[1]") == ("tower-buttons", 1)

    def test_caller_index(self):
        assert parse_segment("tower-buttons[]", 4) == ("tower-buttons", 4)

    def test_bad_segment(self):
        with pytest.raises(MalformedValueError):
            parse_segment("[2]")


class TestTraverse:
    def test_top_level(self):
        assert traverse(ROOT, "top-panel") == "top_bar.png"

    def test_nested(self):
        assert traverse(ROOT, "buttons/upgrade/position") == [340, 520]

    def test_array_with_idx(self):
        assert traverse(ROOT, "tower-buttons[]/tower", 1) == 1

    def test_array_explicit_index_wins(self):
        assert traverse(ROOT, "tower-buttons[0]/image", 1) == "a.png"

    def test_last_segment_array(self):
        assert traverse(ROOT, "main-menu/buttons[]", 1) == "quit.png"

    def test_missing_key(self):
        with pytest.raises(MissingKeyError) as exc:
            traverse(ROOT, "buttons/sell/position")
        assert exc.value.path == "buttons/sell"

    def test_index_out_of_range(self):
        with pytest.raises(MissingKeyError) as exc:
            traverse(ROOT, "tower-buttons[]/tower", 2)
        assert exc.value.path == "tower-buttons[2]"

    def test_array_without_idx(self):
        with pytest.raises(MissingKeyError):
            traverse(ROOT, "tower-buttons[]/tower")

    def test_descend_into_scalar(self):
        with pytest.raises(MalformedValueError):
            traverse(ROOT, "top-panel/image")

    def test_empty_segment(self):
        with pytest.raises(MalformedValueError):
            traverse(ROOT, "buttons//upgrade")

    def test_key_exists(self):
        assert key_exists(ROOT, "buttons/upgrade/image")
        assert key_exists(ROOT, "tower-buttons[]/tower", 0)
        assert not key_exists(ROOT, "text/lives/color")
        assert not key_exists(ROOT, "top-panel/image")


class TestValueChecks:
    def test_position_float(self):
        assert as_position([1.5, 2], "p") == (1.5, 2)

    def test_position_string_rejected(self):
        with pytest.raises(MalformedValueError):
            as_position(["1", 2], "p")

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_position_non_finite_rejected(self, bad):
        with pytest.raises(MalformedValueError):
            as_position([bad, 1], "p")
        assert not is_number(bad)

    def test_color_name(self):
        assert as_color("black", "c") == "black"

    def test_color_rgb(self):
        assert as_color([255, 201, 15], "c") == (255, 201, 15)

    def test_color_float_component_rejected(self):
        with pytest.raises(MalformedValueError):
            as_color([0.5, 0, 0], "c")
