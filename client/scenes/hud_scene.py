"""In-game HUD preview: panels, tower buttons, upgrade/sell, counters, decorations."""

from __future__ import annotations
import pygame
from shared.constants import BOTTOM_PANEL_Y, HUD_BUTTONS
from client.layout import centered
from client.renderer.assets import get_image
from client.renderer.ui_renderer import ImageButton, Sprite, Label
import client.theme as theme

# Sample values shown in the text fields
SAMPLE_TEXT = {
    "level-name": "Preview Level",
    "lives": "20",
    "countdown": "10",
    "money": "300",
}
SAMPLE_COST = "150"


class HudScene:
    def __init__(self, app):
        self.app = app
        self.top_panel: Sprite = None
        self.bottom_panel: Sprite = None
        self.tower_buttons: list[ImageButton] = []
        self.tower_types: list[int] = []
        self.buttons: dict[str, ImageButton] = {}
        self.decorations: list[Sprite] = []
        self.labels: list[Label] = []
        self.selected_tower: int = -1
        self.tooltip: list = []
        self.cost_colors: dict[str, pygame.Color] = {}

    def _button(self, prefix: str, idx: int = -1) -> ImageButton:
        t = self.app.themes
        image = get_image(t.get_file_name(prefix + "/image", idx))
        return ImageButton(image, t.get_position(prefix + "/position", idx))

    def _text(self, prefix: str, text: str, color=theme.TEXT_DEFAULT) -> Label:
        t = self.app.themes
        if t.key_exists(prefix + "/color"):
            color = t.get_color(prefix + "/color")
        font = t.main_font(t.get_int(prefix + "/font-size"))
        return Label(font, text, t.get_position(prefix + "/position"), color)

    def _tooltip(self) -> list:
        t = self.app.themes
        if not t.key_exists("tooltip"):
            return []
        self.cost_colors = {
            "buy": t.get_color("tooltip/color/buy"),
            "sell": t.get_color("tooltip/color/sell"),
        }
        coin = Sprite(get_image(t.get_file_name("tooltip/coin/image"), (16, 16)),
                      t.get_position("tooltip/coin/position"))
        return [
            self._text("tooltip/title", "Tower"),
            self._text("tooltip/cost", SAMPLE_COST, self.cost_colors["buy"]),
            coin,
        ]

    def reset(self):
        t = self.app.themes
        self.top_panel = Sprite(get_image(t.get_file_name("top-panel"), (800, 80)), (0, 0))
        self.bottom_panel = Sprite(get_image(t.get_file_name("bottom-panel"), (800, 100)),
                                   (0, BOTTOM_PANEL_Y))

        self.tower_buttons = []
        self.tower_types = []
        for i in range(t.get_array_length("tower-buttons")):
            self.tower_buttons.append(self._button("tower-buttons[]", i))
            self.tower_types.append(t.get_int("tower-buttons[]/tower", i))

        self.decorations = []
        for i in range(t.get_array_length("decorations")):
            image = get_image(t.get_file_name("decorations[]/image", i), (24, 24))
            self.decorations.append(Sprite(image, t.get_position("decorations[]/position", i)))

        self.buttons = {name: self._button("buttons/" + name) for name in HUD_BUTTONS}
        self._tower_selected(-1)

        self.labels = [self._text("text/" + name, text) for name, text in SAMPLE_TEXT.items()]
        # The level name is centered on its point
        level_name = self.labels[0]
        level_name.position = centered(level_name.position, level_name.size())
        self.tooltip = self._tooltip()

    def _tower_selected(self, index: int):
        self.selected_tower = index
        for btn in self.buttons.values():
            btn.visible = index >= 0

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            for btn in self.tower_buttons + list(self.buttons.values()):
                btn.update(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, btn in enumerate(self.tower_buttons):
                if btn.clicked(event.pos):
                    print(f"[hud] Tower button {i} -> tower type {self.tower_types[i]}")
                    self._tower_selected(i)
                    return
            if self.buttons["sell"].clicked(event.pos):
                print("[hud] Sell clicked")
                self._tower_selected(-1)
            elif self.buttons["upgrade"].clicked(event.pos):
                print("[hud] Upgrade clicked")

        if event.type == pygame.MOUSEMOTION and self.tooltip:
            self._cost_color("sell" if self.buttons["sell"].clicked(event.pos) else "buy")

    def _cost_color(self, mode: str):
        if self.tooltip:
            cost = self.tooltip[1]
            self.tooltip[1] = Label(cost.font, SAMPLE_COST, cost.position, self.cost_colors[mode])

    def update(self, dt):
        pass

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        self.top_panel.draw(screen)
        self.bottom_panel.draw(screen)
        for label in self.labels:
            label.draw(screen)
        for deco in self.decorations:
            deco.draw(screen)
        for btn in self.buttons.values():
            btn.draw(screen)
        for btn in self.tower_buttons:
            btn.draw(screen)
        if self.selected_tower >= 0:
            for item in self.tooltip:
                item.draw(screen)
