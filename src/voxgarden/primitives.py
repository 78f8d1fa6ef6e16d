from __future__ import annotations

import pygame


class SoftPrimitives:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[tuple[str | None, int], pygame.font.Font] = {}

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def rect_center(self, x: float, y: float, size: float, color: tuple[int, int, int]) -> None:
        s = max(1, int(round(size)))
        rect = pygame.Rect(int(x - s / 2), int(y - s / 2), s, s)
        pygame.draw.rect(self.surface, color, rect)

    def ellipse_center(self, x: float, y: float, rx: float, ry: float, color: tuple[int, int, int]) -> None:
        w = max(1, int(rx * 2))
        h = max(1, int(ry * 2))
        pygame.draw.ellipse(self.surface, color, pygame.Rect(int(x - w / 2), int(y - h / 2), w, h))

    def panel(self, rect: pygame.Rect, fill: tuple[int, int, int], border: tuple[int, int, int], width: int) -> None:
        pygame.draw.rect(self.surface, fill, rect, border_radius=6)
        pygame.draw.rect(self.surface, border, rect, width, border_radius=6)

    def text(
        self,
        x: int,
        y: int,
        msg: str,
        size: int,
        color: tuple[int, int, int],
        family: str | None = None,
    ) -> int:
        """Blit `msg` with its top-left at (x, y); returns the rendered height.

        `family` is a comma-separated system font list for glyphs the default
        pygame font lacks.
        """
        key = (family, size)
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.SysFont(family, size) if family else pygame.font.Font(None, size)
            self._fonts[key] = font
        surf = font.render(msg, True, color)
        self.surface.blit(surf, (x, y))
        return surf.get_height()
