"""Corner status readout."""
from __future__ import annotations

import pygame

from ui.constants import BG_COLOR, HUD_COLOR

STATUS_POS = (8, 8)


def draw_status(
    surface: pygame.Surface,
    font: pygame.font.Font,
    *,
    frame_number: int,
    dot_count: int,
    pattern: str,
    running: bool,
) -> pygame.Rect:
    """Draw the readout on a freshly cleared strip and return that strip."""
    state = "running" if running else "halted"
    text = f"frame {frame_number}  dots {dot_count}  {pattern}  {state}"
    label = font.render(text, True, HUD_COLOR)
    strip = label.get_rect(topleft=STATUS_POS).inflate(8, 4)
    surface.fill(BG_COLOR, strip)
    surface.blit(label, STATUS_POS)
    return strip


def erase_status(surface: pygame.Surface, strip: pygame.Rect | None) -> None:
    if strip is not None:
        surface.fill(BG_COLOR, strip)
