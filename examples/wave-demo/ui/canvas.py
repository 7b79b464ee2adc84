"""Pygame-backed canvas and renderer for WaveField."""
from __future__ import annotations

import pygame

from ui.constants import BG_COLOR


def _opaque(color, background: tuple[int, int, int]) -> pygame.Color:
    """Blend a translucent color over the background.

    Lines are drawn straight after a clear, so blending against the
    background color matches what an alpha blit would produce.
    """
    c = pygame.Color(color)
    if c.a == 255:
        return c
    a = c.a / 255
    return pygame.Color(
        round(background[0] + (c.r - background[0]) * a),
        round(background[1] + (c.g - background[1]) * a),
        round(background[2] + (c.b - background[2]) * a),
    )


class PygameRenderer:
    def __init__(self, canvas: PygameCanvas) -> None:
        self._canvas = canvas

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        self._canvas.surface.fill(BG_COLOR, pygame.Rect(x, y, width, height))

    def fill_circle(self, x: float, y: float, radius: float, color) -> None:
        if radius <= 0:
            return
        pygame.draw.circle(self._canvas.surface, pygame.Color(color), (x, y), radius)

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color, width: float
    ) -> None:
        pygame.draw.line(
            self._canvas.surface,
            _opaque(color, BG_COLOR),
            (x1, y1),
            (x2, y2),
            max(1, int(width)),
        )


class PygameCanvas:
    """Wraps the display surface. Size changes come from VIDEORESIZE events."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._renderer = PygameRenderer(self)

    def get_context(self) -> PygameRenderer:
        return self._renderer

    def refresh(self) -> None:
        """Pick up the display surface pygame recreated after a resize."""
        self.surface = pygame.display.get_surface()
