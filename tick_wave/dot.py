"""WaveDot - one grid point and its oscillation state machine."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_wave.easing import smoothing_holds
from tick_wave.patterns import PATTERNS
from tick_wave.types import Color, Direction, Renderer, WavePattern

# Pause lengths injected when the dot turns around.
CREST_PAUSE = 10
TROUGH_PAUSE = 20


@dataclass(frozen=True)
class DotParams:
    """Parameters shared by every dot of one layout generation."""

    dot_size: float
    x_dots: int
    wave_pattern: WavePattern
    wave_delay: float
    frame_qtd: int
    wave_max_height: float
    horizon_reversed: tuple[float, ...]
    color: Color
    backwards: bool = False


class WaveDot:
    def __init__(
        self, x: float, y: float, y_nth: int, x_nth: int, params: DotParams
    ) -> None:
        self.x = x
        self.y = y
        self.original_x = x
        self.original_y = y
        self.y_nth = y_nth
        self.x_nth = x_nth

        depth = params.horizon_reversed[y_nth]
        self.dot_size = math.ceil(depth * 10) * params.dot_size
        self.wave_ceiling = math.ceil(params.wave_max_height * depth)
        self.color = params.color

        stagger = PATTERNS[params.wave_pattern]
        self.hold: float = stagger(y_nth, x_nth, params.x_dots, params.wave_delay)

        self.frame_qtd = params.frame_qtd
        self.current_frame = params.frame_qtd - 1 if params.backwards else 0
        self.direction: Direction = "backward" if params.backwards else "forward"
        self.frames: tuple[float, ...] = self.build_frames()

    @property
    def state(self) -> str:
        """Current state: ``"holding"``, ``"forward"`` or ``"backward"``."""
        if self.hold > 0:
            return "holding"
        return self.direction

    @property
    def offset(self) -> float:
        return self.y - self.original_y

    def build_frames(self) -> tuple[float, ...]:
        """Linear ramp from just below the anchor down to ``-wave_ceiling``."""
        step = self.wave_ceiling / self.frame_qtd
        return tuple(-(step * (i + 1)) for i in range(self.frame_qtd))

    def render(self, renderer: Renderer) -> None:
        renderer.fill_circle(self.x, self.y, self.dot_size, self.color)
        self.advance()

    def advance(self) -> None:
        if self.hold > 0:
            self.hold -= 1
            return

        last = self.frame_qtd - 1
        if self.direction == "forward" and self.current_frame >= last:
            self.direction = "backward"
            self.hold = CREST_PAUSE
        elif self.direction == "backward" and self.current_frame <= 0:
            self.direction = "forward"
            self.hold = TROUGH_PAUSE

        self.hold += smoothing_holds(self.current_frame, self.frame_qtd)
        self.y = self.original_y + self.frames[self.current_frame]

        step = -1 if self.direction == "backward" else 1
        # A one-frame budget would otherwise step off the curve.
        self.current_frame = max(0, min(last, self.current_frame + step))
