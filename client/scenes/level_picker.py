"""Level picker preview: pack name/description, level rows, preview image."""

from __future__ import annotations
import os
import pygame
from shared.constants import LevelButtonState
from client.layout import level_button_rows, centered
from client.renderer.assets import get_image, placeholder
from client.renderer.ui_renderer import ImageButton, Sprite, Label
import client.theme as theme

SAMPLE_PACK = {
    "name": "Sample Pack",
    "desc": "Five levels to check the row layout.",
    "levels": ["First Steps", "The Bridge", "Crossroads", "Night Watch", "Dragon Keep"],
    "last_won": 1,
}


class LevelPickerScene:
    def __init__(self, app):
        self.app = app
        self.background: Sprite = None
        self.level_buttons: list[ImageButton] = []
        self.level_labels: list[Label] = []
        self.level_enabled: list[bool] = []
        self.name_label: Label = None
        self.desc_label: Label = None
        self.preview: Sprite = None
        self.back_button: ImageButton = None

    def reset(self):
        t = self.app.themes
        picker = t.theme.level_picker
        root = t.theme_path()

        self.background = Sprite(get_image(os.path.join(root, picker.background), (800, 600)), (0, 0))

        self.name_label = Label(t.main_font(picker.name.font_size), SAMPLE_PACK["name"],
                                picker.name.position, theme.to_color(picker.name.color))
        self.name_label.position = centered(self.name_label.position, self.name_label.size())
        self.desc_label = Label(t.main_font(picker.desc.font_size), SAMPLE_PACK["desc"],
                                picker.desc.position, theme.to_color(picker.desc.color))

        lb = picker.level_buttons
        images = {
            LevelButtonState.GREEN: lb.green,
            LevelButtonState.RED: lb.red,
            LevelButtonState.GRAY: lb.gray or lb.red,
        }
        enabled_color = theme.to_color(lb.color)
        gray_color = theme.to_color(lb.color_gray) if lb.color_gray is not None else theme.TEXT_GRAY
        font = t.main_font(lb.font_size)

        self.level_buttons = []
        self.level_labels = []
        self.level_enabled = []
        for row, title in zip(level_button_rows(lb, len(SAMPLE_PACK["levels"]),
                                                last_won=SAMPLE_PACK["last_won"]),
                              SAMPLE_PACK["levels"]):
            image = get_image(os.path.join(root, images[row.state]), (40, 40))
            self.level_buttons.append(ImageButton(image, row.button_pos,
                                                  (row.active_width, image.get_height())))
            enabled = row.state != LevelButtonState.GRAY
            self.level_labels.append(Label(font, title, row.text_pos,
                                           enabled_color if enabled else gray_color))
            self.level_enabled.append(enabled)

        # The preview image belongs to the level pack, not the theme
        self.preview = Sprite(placeholder((160, 120)),
                              picker.preview.position)

        self.back_button = None
        if picker.back_button is not None:
            image = get_image(os.path.join(root, picker.back_button.image))
            self.back_button = ImageButton(image, picker.back_button.position)

    def handle_event(self, event):
        buttons = self.level_buttons + ([self.back_button] if self.back_button else [])
        if event.type == pygame.MOUSEMOTION:
            for btn in buttons:
                btn.update(event.pos)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, btn in enumerate(self.level_buttons):
                if self.level_enabled[i] and btn.clicked(event.pos):
                    print(f"[picker] Level {i} '{SAMPLE_PACK['levels'][i]}' picked")
                    return
            if self.back_button and self.back_button.clicked(event.pos):
                self.app.set_scene("menu")

    def update(self, dt):
        pass

    def render(self, screen: pygame.Surface):
        screen.fill(theme.BG_SCREEN)
        self.background.draw(screen)
        self.name_label.draw(screen)
        self.desc_label.draw(screen)
        self.preview.draw(screen)
        if self.back_button:
            self.back_button.draw(screen)
        for btn, label in zip(self.level_buttons, self.level_labels):
            btn.draw(screen)
            label.draw(screen)
