"""Tests for the theme schema against the bundled default theme."""

import sys
import os
import copy
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from shared.models import Theme, TextSpec, ButtonSpec, LevelButtonsSpec, TooltipSpec
from shared.errors import MissingKeyError, MalformedValueError
from shared.theme_io import parse_theme
from shared.theme_path import is_number

DEFAULT_THEME = os.path.join(os.path.dirname(__file__), "..", "data", "themes", "default", "theme.js")


def load_raw():
    with open(DEFAULT_THEME, encoding="utf-8") as f:
        return parse_theme(f.read(), DEFAULT_THEME)


def load_default():
    return Theme.from_dict(load_raw())


class TestDefaultTheme:
    def test_upgrade_button(self):
        theme = load_default()
        assert theme.buttons["upgrade"].position == (340, 520)
        assert theme.buttons["upgrade"].image == "button/ButtonUpgrade.png"

    def test_sell_button(self):
        theme = load_default()
        assert theme.buttons["sell"].position == (440, 520)

    def test_tower_buttons(self):
        theme = load_default()
        assert len(theme.tower_buttons) == 3
        assert [b.tower for b in theme.tower_buttons] == [0, 1, 2]
        assert theme.tower_buttons[1].image == "button/ButtonCanon.png"

    def test_level_buttons(self):
        lb = load_default().level_picker.level_buttons
        assert lb.line_width == 350
        assert lb.color == "black"
        assert lb.start == (110, 190)
        assert lb.gray is None

    def test_picker_name_color_is_rgb(self):
        picker = load_default().level_picker
        assert picker.name.color == (255, 201, 15)
        assert picker.desc.color == "black"
        assert picker.preview.position == (447, 124)

    def test_text_without_color_uses_default(self):
        theme = load_default()
        assert theme.text["lives"].color is None
        assert theme.text["level-name"].font_size == 28

    def test_screens(self):
        theme = load_default()
        assert theme.win.background == "Win.png"
        assert theme.loose.background == "Loose.png"
        assert len(theme.main_menu.buttons) == 3
        assert theme.main_font == "segoepr.ttf"

    def test_all_positions_are_number_pairs(self):
        theme = load_default()
        specs = (list(theme.buttons.values()) + theme.tower_buttons
                 + list(theme.text.values()) + theme.decorations)
        for spec in specs:
            assert isinstance(spec.position, tuple)
            assert len(spec.position) == 2
            assert all(is_number(v) for v in spec.position)

    def test_all_font_sizes_positive_ints(self):
        theme = load_default()
        picker = theme.level_picker
        sizes = [t.font_size for t in theme.text.values()]
        sizes += [picker.name.font_size, picker.desc.font_size, picker.level_buttons.font_size]
        for size in sizes:
            assert isinstance(size, int) and size > 0

    def test_asset_references(self):
        refs = dict(load_default().asset_references())
        assert refs["main-font"] == "segoepr.ttf"
        assert refs["tower-buttons[2]/image"] == "button/ButtonTea.png"
        assert refs["main-menu/buttons[1]"] == "menu/button_options.png"
        assert "level-picker/level-buttons/gray" not in refs

    def test_color_references(self):
        refs = dict(load_default().color_references())
        assert refs["level-picker/name/color"] == (255, 201, 15)
        assert refs["level-picker/level-buttons/color"] == "black"


class TestUnknownKeys:
    def test_unknown_top_level_key_preserved(self):
        raw = load_raw()
        raw["sound-theme"] = {"music": "theme.ogg"}
        theme = Theme.from_dict(raw)
        assert theme.extra == {"sound-theme": {"music": "theme.ogg"}}
        assert theme.to_dict()["sound-theme"] == {"music": "theme.ogg"}

    def test_unknown_key_not_drawn(self):
        raw = load_raw()
        raw["sound-theme"] = {"image": "Unused.png"}
        theme = Theme.from_dict(raw)
        assert "Unused.png" not in [name for _, name in theme.asset_references()]

    def test_unknown_nested_key_preserved(self):
        raw = load_raw()
        raw["buttons"]["upgrade"]["hover-image"] = "button/Hover.png"
        theme = Theme.from_dict(raw)
        assert theme.buttons["upgrade"].extra == {"hover-image": "button/Hover.png"}
        assert theme.to_dict()["buttons"]["upgrade"]["hover-image"] == "button/Hover.png"

    def test_extra_button_name_allowed(self):
        raw = load_raw()
        raw["buttons"]["pause"] = {"position": [10, 10], "image": "button/Pause.png"}
        assert "pause" in Theme.from_dict(raw).buttons


class TestValidation:
    def test_missing_top_level_key(self):
        raw = load_raw()
        del raw["level-picker"]
        with pytest.raises(MissingKeyError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "level-picker"

    def test_missing_hud_button(self):
        raw = load_raw()
        del raw["buttons"]["sell"]
        with pytest.raises(MissingKeyError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "buttons/sell"

    def test_missing_nested_key_reports_path(self):
        raw = load_raw()
        del raw["tower-buttons"][1]["tower"]
        with pytest.raises(MissingKeyError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "tower-buttons[1]/tower"

    def test_position_wrong_arity(self):
        raw = load_raw()
        raw["buttons"]["upgrade"]["position"] = [340, 520, 0]
        with pytest.raises(MalformedValueError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "buttons/upgrade/position"

    def test_position_bool_rejected(self):
        with pytest.raises(MalformedValueError):
            ButtonSpec.from_dict({"position": [True, 3], "image": "a.png"})

    def test_font_size_must_be_positive(self):
        with pytest.raises(MalformedValueError):
            TextSpec.from_dict({"position": [0, 0], "font-size": 0})

    def test_font_size_must_be_int(self):
        with pytest.raises(MalformedValueError):
            TextSpec.from_dict({"position": [0, 0], "font-size": 24.5})

    def test_color_rgb_out_of_range(self):
        with pytest.raises(MalformedValueError):
            TextSpec.from_dict({"position": [0, 0], "font-size": 12, "color": [300, 0, 0]})

    def test_color_wrong_arity(self):
        with pytest.raises(MalformedValueError):
            TextSpec.from_dict({"position": [0, 0], "font-size": 12, "color": [1, 2]})

    def test_negative_tower_type(self):
        raw = load_raw()
        raw["tower-buttons"][0]["tower"] = -1
        with pytest.raises(MalformedValueError):
            Theme.from_dict(raw)

    def test_image_must_be_string(self):
        raw = load_raw()
        raw["decorations"][0]["image"] = 5
        with pytest.raises(MalformedValueError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "decorations[0]/image"

    def test_whole_theme_rejected(self):
        raw = load_raw()
        raw["text"]["money"]["font-size"] = -4
        with pytest.raises(MalformedValueError):
            Theme.from_dict(raw)

    def test_optional_level_button_fields(self):
        raw = load_raw()
        lb_raw = copy.deepcopy(raw["level-picker"]["level-buttons"])
        lb_raw["gray"] = "picker/DiamondButtonGray.png"
        lb_raw["color-gray"] = [128, 128, 128]
        lb = LevelButtonsSpec.from_dict(lb_raw, "level-picker/level-buttons")
        assert lb.gray == "picker/DiamondButtonGray.png"
        assert lb.color_gray == (128, 128, 128)
        assert lb.to_dict()["color-gray"] == [128, 128, 128]


def tooltip_raw():
    return {
        "title": {"position": [600, 420], "font-size": 18},
        "cost": {"position": [620, 450], "font-size": 16, "color": "black"},
        "coin": {"image": "Coin.png", "position": [600, 452]},
        "color": {"buy": [0, 128, 0], "sell": "red"},
    }


class TestTooltip:
    def test_absent_by_default(self):
        theme = load_default()
        assert theme.tooltip is None
        assert "tooltip" not in theme.to_dict()

    def test_parsed(self):
        raw = load_raw()
        raw["tooltip"] = tooltip_raw()
        tip = Theme.from_dict(raw).tooltip
        assert tip.title.font_size == 18
        assert tip.title.color is None
        assert tip.cost.position == (620, 450)
        assert tip.coin.image == "Coin.png"
        assert tip.buy == (0, 128, 0)
        assert tip.sell == "red"

    def test_round_trip(self):
        raw = load_raw()
        raw["tooltip"] = tooltip_raw()
        raw["tooltip"]["color"]["hint"] = "gray"
        theme = Theme.from_dict(raw)
        assert "tooltip" not in theme.extra
        assert theme.to_dict()["tooltip"] == raw["tooltip"]
        assert Theme.from_dict(theme.to_dict()) == theme

    def test_references(self):
        raw = load_raw()
        raw["tooltip"] = tooltip_raw()
        theme = Theme.from_dict(raw)
        assert dict(theme.asset_references())["tooltip/coin/image"] == "Coin.png"
        colors = dict(theme.color_references())
        assert colors["tooltip/color/buy"] == (0, 128, 0)
        assert colors["tooltip/color/sell"] == "red"
        assert colors["tooltip/cost/color"] == "black"
        assert "tooltip/title/color" not in colors

    def test_missing_sell_color(self):
        raw = tooltip_raw()
        del raw["color"]["sell"]
        with pytest.raises(MissingKeyError) as exc:
            TooltipSpec.from_dict(raw, "tooltip")
        assert exc.value.path == "tooltip/color/sell"

    def test_bad_coin_position(self):
        raw = load_raw()
        raw["tooltip"] = tooltip_raw()
        raw["tooltip"]["coin"]["position"] = [600]
        with pytest.raises(MalformedValueError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "tooltip/coin/position"

    def test_not_an_object(self):
        raw = load_raw()
        raw["tooltip"] = "Tooltip.png"
        with pytest.raises(MalformedValueError) as exc:
            Theme.from_dict(raw)
        assert exc.value.path == "tooltip"
