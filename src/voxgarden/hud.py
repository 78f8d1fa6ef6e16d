from __future__ import annotations

import textwrap

import pygame

from . import config

_PANEL_W = 300
_PAD = 12


def draw_status(prims, fps: float, avatar_state: str) -> None:
    prims.text(8, prims.surface.get_height() - 22, f"{fps:5.1f} fps  {avatar_state}", 18, (255, 255, 255))


def draw_plant_info(prims, plant) -> None:
    surface = prims.surface
    if plant is None:
        prims.text(_PAD, surface.get_height() - 48, "Click on the ground to explore the garden.", 26, (240, 240, 240))
        return

    lines = textwrap.wrap(plant.feature, 34)
    height = _PAD * 2 + 34 + 26 + 22 + 20 + len(lines) * 20 + 28
    rect = pygame.Rect(surface.get_width() - _PANEL_W - _PAD, _PAD, _PANEL_W, height)
    prims.panel(rect, config.HUD_BG, config.HUD_FG, 4)

    x = rect.x + _PAD
    y = rect.y + _PAD
    y += prims.text(x, y, plant.name, 34, config.HUD_FG)
    y += prims.text(x, y, plant.chinese_name, 24, config.HUD_FG, family=config.CJK_FONTS)
    y += prims.text(x, y, plant.latin_name, 22, (4, 120, 87))
    y += 4
    for line in lines:
        y += prims.text(x, y, line, 22, (2, 44, 34))
    y += 8
    prims.text(x, y, plant.category.value.replace("_", " "), 18, (5, 150, 105))
