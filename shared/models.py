"""Typed theme schema.

Each spec validates itself in ``from_dict`` (raising MissingKeyError or
MalformedValueError with the full key path) and serializes back with
``to_dict``. Keys a spec does not know are kept in ``extra`` so a theme
written for a newer engine survives a load/save cycle unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
from shared.constants import ThemeKey, HUD_BUTTONS, HUD_TEXT_FIELDS
from shared.errors import MissingKeyError, MalformedValueError
from shared.theme_path import (
    Position, ColorValue, as_position, as_int, as_font_size, as_number,
    as_file_name, as_color, as_list, as_object,
)


def _path(parent: str, key: str) -> str:
    return f"{parent}/{key}" if parent else key


def _require(d: dict, key: str, parent: str) -> Any:
    if key not in d:
        raise MissingKeyError(_path(parent, key))
    return d[key]


def _extras(d: dict, known: tuple[str, ...]) -> dict:
    return {k: v for k, v in d.items() if k not in known}


def _color_out(color: ColorValue) -> Any:
    return color if isinstance(color, str) else list(color)


@dataclass
class ButtonSpec:
    position: Position
    image: str
    extra: dict = field(default_factory=dict)

    KEYS = ("position", "image")

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "image": self.image,
            **self.extra,
        }

    @staticmethod
    def from_dict(d: dict, path: str = "") -> ButtonSpec:
        d = as_object(d, path)
        return ButtonSpec(
            position=as_position(_require(d, "position", path), _path(path, "position")),
            image=as_file_name(_require(d, "image", path), _path(path, "image")),
            extra=_extras(d, ButtonSpec.KEYS),
        )


@dataclass
class TowerButtonSpec:
    position: Position
    image: str
    tower: int
    extra: dict = field(default_factory=dict)

    KEYS = ("image", "position", "tower")

    def to_dict(self) -> dict:
        return {
            "image": self.image,
            "position": list(self.position),
            "tower": self.tower,
            **self.extra,
        }

    @staticmethod
    def from_dict(d: dict, path: str = "") -> TowerButtonSpec:
        d = as_object(d, path)
        tower = as_int(_require(d, "tower", path), _path(path, "tower"))
        if tower < 0:
            # Tower type ids index into the tower settings table
            raise MalformedValueError(_path(path, "tower"), "non-negative tower type", tower)
        return TowerButtonSpec(
            position=as_position(_require(d, "position", path), _path(path, "position")),
            image=as_file_name(_require(d, "image", path), _path(path, "image")),
            tower=tower,
            extra=_extras(d, TowerButtonSpec.KEYS),
        )


@dataclass
class TextSpec:
    position: Position
    font_size: int
    color: Optional[ColorValue] = None   # None -> engine default
    extra: dict = field(default_factory=dict)

    KEYS = ("position", "font-size", "color")

    def to_dict(self) -> dict:
        d = {
            "position": list(self.position),
            "font-size": self.font_size,
        }
        if self.color is not None:
            d["color"] = _color_out(self.color)
        d.update(self.extra)
        return d

    @staticmethod
    def from_dict(d: dict, path: str = "") -> TextSpec:
        d = as_object(d, path)
        color = None
        if "color" in d:
            color = as_color(d["color"], _path(path, "color"))
        return TextSpec(
            position=as_position(_require(d, "position", path), _path(path, "position")),
            font_size=as_font_size(_require(d, "font-size", path), _path(path, "font-size")),
            color=color,
            extra=_extras(d, TextSpec.KEYS),
        )


@dataclass
class DecorationSpec:
    image: str
    position: Position
    extra: dict = field(default_factory=dict)

    KEYS = ("image", "position")

    def to_dict(self) -> dict:
        return {
            "image": self.image,
            "position": list(self.position),
            **self.extra,
        }

    @staticmethod
    def from_dict(d: dict, path: str = "") -> DecorationSpec:
        d = as_object(d, path)
        return DecorationSpec(
            image=as_file_name(_require(d, "image", path), _path(path, "image")),
            position=as_position(_require(d, "position", path), _path(path, "position")),
            extra=_extras(d, DecorationSpec.KEYS),
        )


@dataclass
class ScreenSpec:
    """Win / loose screen: a full-screen background image."""
    background: str
    extra: dict = field(default_factory=dict)

    KEYS = ("background",)

    def to_dict(self) -> dict:
        return {"background": self.background, **self.extra}

    @staticmethod
    def from_dict(d: dict, path: str = "") -> ScreenSpec:
        d = as_object(d, path)
        return ScreenSpec(
            background=as_file_name(_require(d, "background", path), _path(path, "background")),
            extra=_extras(d, ScreenSpec.KEYS),
        )


@dataclass
class MainMenuSpec:
    background: str
    buttons: list[str] = field(default_factory=list)   # start, options, quit
    extra: dict = field(default_factory=dict)

    KEYS = ("background", "buttons")

    def to_dict(self) -> dict:
        return {
            "background": self.background,
            "buttons": list(self.buttons),
            **self.extra,
        }

    @staticmethod
    def from_dict(d: dict, path: str = "") -> MainMenuSpec:
        d = as_object(d, path)
        bpath = _path(path, "buttons")
        buttons = as_list(_require(d, "buttons", path), bpath)
        return MainMenuSpec(
            background=as_file_name(_require(d, "background", path), _path(path, "background")),
            buttons=[as_file_name(b, f"{bpath}[{i}]") for i, b in enumerate(buttons)],
            extra=_extras(d, MainMenuSpec.KEYS),
        )


@dataclass
class LevelButtonsSpec:
    """One row per level: diamond button image plus the level title."""
    start: Position
    line_offset: Position
    text_offset: Position
    line_width: float
    font_size: int
    color: ColorValue
    red: str
    green: str
    gray: Optional[str] = None
    color_gray: Optional[ColorValue] = None
    extra: dict = field(default_factory=dict)

    KEYS = ("start", "line-offset", "text-offset", "line-width", "font-size",
            "color", "red", "green", "gray", "color-gray")

    def to_dict(self) -> dict:
        d = {
            "start": list(self.start),
            "line-offset": list(self.line_offset),
            "text-offset": list(self.text_offset),
            "line-width": self.line_width,
            "font-size": self.font_size,
            "color": _color_out(self.color),
            "red": self.red,
            "green": self.green,
        }
        if self.gray is not None:
            d["gray"] = self.gray
        if self.color_gray is not None:
            d["color-gray"] = _color_out(self.color_gray)
        d.update(self.extra)
        return d

    @staticmethod
    def from_dict(d: dict, path: str = "") -> LevelButtonsSpec:
        d = as_object(d, path)

        def req(key):
            return _require(d, key, path), _path(path, key)

        gray = None
        if "gray" in d:
            gray = as_file_name(d["gray"], _path(path, "gray"))
        color_gray = None
        if "color-gray" in d:
            color_gray = as_color(d["color-gray"], _path(path, "color-gray"))
        line_width = as_number(*req("line-width"))
        if line_width <= 0:
            raise MalformedValueError(_path(path, "line-width"), "positive width", line_width)
        return LevelButtonsSpec(
            start=as_position(*req("start")),
            line_offset=as_position(*req("line-offset")),
            text_offset=as_position(*req("text-offset")),
            line_width=line_width,
            font_size=as_font_size(*req("font-size")),
            color=as_color(*req("color")),
            red=as_file_name(*req("red")),
            green=as_file_name(*req("green")),
            gray=gray,
            color_gray=color_gray,
            extra=_extras(d, LevelButtonsSpec.KEYS),
        )


@dataclass
class PreviewSpec:
    """Where the level pack preview image is drawn."""
    position: Position
    extra: dict = field(default_factory=dict)

    KEYS = ("position",)

    def to_dict(self) -> dict:
        return {"position": list(self.position), **self.extra}

    @staticmethod
    def from_dict(d: dict, path: str = "") -> PreviewSpec:
        d = as_object(d, path)
        return PreviewSpec(
            position=as_position(_require(d, "position", path), _path(path, "position")),
            extra=_extras(d, PreviewSpec.KEYS),
        )


@dataclass
class LevelPickerSpec:
    background: str
    level_buttons: LevelButtonsSpec
    name: TextSpec
    desc: TextSpec
    preview: PreviewSpec
    back_button: Optional[ButtonSpec] = None
    extra: dict = field(default_factory=dict)

    KEYS = ("background", "level-buttons", "name", "desc", "preview", "back-button")

    def to_dict(self) -> dict:
        d = {
            "background": self.background,
            "level-buttons": self.level_buttons.to_dict(),
            "name": self.name.to_dict(),
            "desc": self.desc.to_dict(),
            "preview": self.preview.to_dict(),
        }
        if self.back_button is not None:
            d["back-button"] = self.back_button.to_dict()
        d.update(self.extra)
        return d

    @staticmethod
    def from_dict(d: dict, path: str = "") -> LevelPickerSpec:
        d = as_object(d, path)
        back_button = None
        if "back-button" in d:
            back_button = ButtonSpec.from_dict(d["back-button"], _path(path, "back-button"))
        return LevelPickerSpec(
            background=as_file_name(_require(d, "background", path), _path(path, "background")),
            level_buttons=LevelButtonsSpec.from_dict(
                _require(d, "level-buttons", path), _path(path, "level-buttons")),
            name=TextSpec.from_dict(_require(d, "name", path), _path(path, "name")),
            desc=TextSpec.from_dict(_require(d, "desc", path), _path(path, "desc")),
            preview=PreviewSpec.from_dict(_require(d, "preview", path), _path(path, "preview")),
            back_button=back_button,
            extra=_extras(d, LevelPickerSpec.KEYS),
        )


@dataclass
class TooltipSpec:
    """Tower info box shown over the HUD: title, cost with a coin icon.

    ``buy`` colors the cost when buying or upgrading, ``sell`` when selling.
    """
    title: TextSpec
    cost: TextSpec
    coin: DecorationSpec
    buy: ColorValue
    sell: ColorValue
    color_extra: dict = field(default_factory=dict)
    extra: dict = field(default_factory=dict)

    KEYS = ("title", "cost", "coin", "color")
    COLOR_KEYS = ("buy", "sell")

    def to_dict(self) -> dict:
        return {
            "title": self.title.to_dict(),
            "cost": self.cost.to_dict(),
            "coin": self.coin.to_dict(),
            "color": {
                "buy": _color_out(self.buy),
                "sell": _color_out(self.sell),
                **self.color_extra,
            },
            **self.extra,
        }

    @staticmethod
    def from_dict(d: dict, path: str = "") -> TooltipSpec:
        d = as_object(d, path)
        cpath = _path(path, "color")
        colors = as_object(_require(d, "color", path), cpath)
        return TooltipSpec(
            title=TextSpec.from_dict(_require(d, "title", path), _path(path, "title")),
            cost=TextSpec.from_dict(_require(d, "cost", path), _path(path, "cost")),
            coin=DecorationSpec.from_dict(_require(d, "coin", path), _path(path, "coin")),
            buy=as_color(_require(colors, "buy", cpath), _path(cpath, "buy")),
            sell=as_color(_require(colors, "sell", cpath), _path(cpath, "sell")),
            color_extra=_extras(colors, TooltipSpec.COLOR_KEYS),
            extra=_extras(d, TooltipSpec.KEYS),
        )


@dataclass
class Theme:
    """A complete theme as read from ``theme.js``."""
    main_font: str
    top_panel: str
    bottom_panel: str
    buttons: dict[str, ButtonSpec]
    tower_buttons: list[TowerButtonSpec]
    text: dict[str, TextSpec]
    decorations: list[DecorationSpec]
    win: ScreenSpec
    loose: ScreenSpec
    main_menu: MainMenuSpec
    level_picker: LevelPickerSpec
    tooltip: Optional[TooltipSpec] = None
    extra: dict = field(default_factory=dict)   # unknown top-level keys

    KEYS = tuple(k.value for k in ThemeKey)

    def to_dict(self) -> dict:
        d = {
            ThemeKey.MAIN_FONT.value: self.main_font,
            ThemeKey.TOP_PANEL.value: self.top_panel,
            ThemeKey.BOTTOM_PANEL.value: self.bottom_panel,
            ThemeKey.BUTTONS.value: {k: v.to_dict() for k, v in self.buttons.items()},
            ThemeKey.TOWER_BUTTONS.value: [b.to_dict() for b in self.tower_buttons],
            ThemeKey.TEXT.value: {k: v.to_dict() for k, v in self.text.items()},
            ThemeKey.DECORATIONS.value: [dec.to_dict() for dec in self.decorations],
            ThemeKey.WIN.value: self.win.to_dict(),
            ThemeKey.LOOSE.value: self.loose.to_dict(),
            ThemeKey.MAIN_MENU.value: self.main_menu.to_dict(),
            ThemeKey.LEVEL_PICKER.value: self.level_picker.to_dict(),
        }
        if self.tooltip is not None:
            d[ThemeKey.TOOLTIP.value] = self.tooltip.to_dict()
        d.update(self.extra)
        return d

    @staticmethod
    def from_dict(d: dict) -> Theme:
        d = as_object(d, "")

        def req(key: ThemeKey):
            return _require(d, key.value, ""), key.value

        buttons_raw, bpath = req(ThemeKey.BUTTONS)
        buttons = {k: ButtonSpec.from_dict(v, _path(bpath, k))
                   for k, v in as_object(buttons_raw, bpath).items()}
        for name in HUD_BUTTONS:
            if name not in buttons:
                raise MissingKeyError(_path(bpath, name))

        text_raw, tpath = req(ThemeKey.TEXT)
        text = {k: TextSpec.from_dict(v, _path(tpath, k))
                for k, v in as_object(text_raw, tpath).items()}
        for name in HUD_TEXT_FIELDS:
            if name not in text:
                raise MissingKeyError(_path(tpath, name))

        towers_raw, twpath = req(ThemeKey.TOWER_BUTTONS)
        decos_raw, dpath = req(ThemeKey.DECORATIONS)

        tooltip = None
        if ThemeKey.TOOLTIP.value in d:
            tooltip = TooltipSpec.from_dict(*req(ThemeKey.TOOLTIP))

        return Theme(
            main_font=as_file_name(*req(ThemeKey.MAIN_FONT)),
            top_panel=as_file_name(*req(ThemeKey.TOP_PANEL)),
            bottom_panel=as_file_name(*req(ThemeKey.BOTTOM_PANEL)),
            buttons=buttons,
            tower_buttons=[TowerButtonSpec.from_dict(b, f"{twpath}[{i}]")
                           for i, b in enumerate(as_list(towers_raw, twpath))],
            text=text,
            decorations=[DecorationSpec.from_dict(x, f"{dpath}[{i}]")
                         for i, x in enumerate(as_list(decos_raw, dpath))],
            win=ScreenSpec.from_dict(*req(ThemeKey.WIN)),
            loose=ScreenSpec.from_dict(*req(ThemeKey.LOOSE)),
            main_menu=MainMenuSpec.from_dict(*req(ThemeKey.MAIN_MENU)),
            level_picker=LevelPickerSpec.from_dict(*req(ThemeKey.LEVEL_PICKER)),
            tooltip=tooltip,
            extra=_extras(d, Theme.KEYS),
        )

    def color_references(self) -> list[tuple[str, ColorValue]]:
        """Every explicit ``(key path, color)`` in the theme."""
        refs = [(f"text/{name}/color", spec.color)
                for name, spec in self.text.items() if spec.color is not None]
        picker = self.level_picker
        for key, spec in (("name", picker.name), ("desc", picker.desc)):
            if spec.color is not None:
                refs.append((f"level-picker/{key}/color", spec.color))
        refs.append(("level-picker/level-buttons/color", picker.level_buttons.color))
        if picker.level_buttons.color_gray is not None:
            refs.append(("level-picker/level-buttons/color-gray", picker.level_buttons.color_gray))
        tip = self.tooltip
        if tip is not None:
            for key, spec in (("title", tip.title), ("cost", tip.cost)):
                if spec.color is not None:
                    refs.append((f"tooltip/{key}/color", spec.color))
            refs.append(("tooltip/color/buy", tip.buy))
            refs.append(("tooltip/color/sell", tip.sell))
        return refs

    def asset_references(self) -> list[tuple[str, str]]:
        """Every ``(key path, file name)`` the theme points at, in file order."""
        refs = [
            (ThemeKey.MAIN_FONT.value, self.main_font),
            (ThemeKey.TOP_PANEL.value, self.top_panel),
            (ThemeKey.BOTTOM_PANEL.value, self.bottom_panel),
        ]
        for name, btn in self.buttons.items():
            refs.append((f"buttons/{name}/image", btn.image))
        for i, btn in enumerate(self.tower_buttons):
            refs.append((f"tower-buttons[{i}]/image", btn.image))
        for i, deco in enumerate(self.decorations):
            refs.append((f"decorations[{i}]/image", deco.image))
        refs.append(("win/background", self.win.background))
        refs.append(("loose/background", self.loose.background))
        refs.append(("main-menu/background", self.main_menu.background))
        for i, img in enumerate(self.main_menu.buttons):
            refs.append((f"main-menu/buttons[{i}]", img))
        picker = self.level_picker
        refs.append(("level-picker/background", picker.background))
        lb = picker.level_buttons
        refs.append(("level-picker/level-buttons/red", lb.red))
        refs.append(("level-picker/level-buttons/green", lb.green))
        if lb.gray is not None:
            refs.append(("level-picker/level-buttons/gray", lb.gray))
        if picker.back_button is not None:
            refs.append(("level-picker/back-button/image", picker.back_button.image))
        if self.tooltip is not None:
            refs.append(("tooltip/coin/image", self.tooltip.coin.image))
        return refs
