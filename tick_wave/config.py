"""Field configuration dataclass."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from tick_wave.types import Color, WaveConfigError, WavePattern

WAVE_PATTERNS: tuple[str, ...] = ("straight", "outside-in", "inside-out")


@dataclass(frozen=True)
class FieldConfig:
    """Immutable configuration for a wave field.

    Attributes:
        canvas_width: Surface width in pixels.
        canvas_height: Surface height in pixels.
        x_dots: Columns on each side of the centerline (indices 0..x_dots).
        y_dots: Rows between horizon and baseline (indices 0..y_dots).
        space_between_x_dots: Horizontal spacing unit in pixels.
        hollow_dots: Rows/columns skipped between drawn ones.
        center_position: Horizontal center as a fraction of the width.
        wave_max_height: Largest displacement, reached by the nearest row.
        horizon_angle: Tilt added to every row's depth fraction.
        color: Dot color, passed through to the renderer.
        dot_size: Base dot radius, scaled by depth.
        wave_delay: Stagger unit in hold ticks.
        wave_pattern: Stagger rule, one of ``WAVE_PATTERNS``.
        repeat: Keep requesting frames after each step.
        frame_qtd: Frames in one half of an oscillation.
        frame_cap: Maximum draw passes per second.
        backwards: Start every dot at the crest, moving back down.
        show_grid: Draw the perspective grid lines under the dots.
        grid_color: Grid line color.
        grid_line_width: Grid line width in pixels.
    """

    canvas_width: int
    canvas_height: int
    x_dots: int
    y_dots: int
    space_between_x_dots: float = 60
    hollow_dots: int = 2
    center_position: float = 0.5
    wave_max_height: float = 100
    horizon_angle: float = 0.0
    color: Color = "black"
    dot_size: float = 0.3
    wave_delay: float = 0
    wave_pattern: WavePattern = "straight"
    repeat: bool = True
    frame_qtd: int = 100
    frame_cap: float = 30
    backwards: bool = False
    show_grid: bool = True
    grid_color: Color = (220, 0, 0, 51)
    grid_line_width: float = 2

    def __post_init__(self) -> None:
        for name in ("x_dots", "y_dots", "frame_qtd", "hollow_dots"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise WaveConfigError(
                    f"{name} must be an int, got {type(value).__name__}"
                )
        if self.x_dots < 0 or self.y_dots < 0:
            raise WaveConfigError("x_dots and y_dots must not be negative")
        if self.canvas_width < 0 or self.canvas_height < 0:
            raise WaveConfigError("canvas size must not be negative")
        if self.frame_qtd <= 0:
            raise WaveConfigError("frame_qtd must be positive")
        if self.frame_cap <= 0:
            raise WaveConfigError("frame_cap must be positive")
        if self.space_between_x_dots <= 0:
            raise WaveConfigError("space_between_x_dots must be positive")
        if self.hollow_dots < 0:
            raise WaveConfigError("hollow_dots must not be negative")
        for name in ("dot_size", "wave_delay", "wave_max_height"):
            if getattr(self, name) < 0:
                raise WaveConfigError(f"{name} must not be negative")
        if not 0.0 <= self.center_position <= 1.0:
            raise WaveConfigError("center_position must be within [0, 1]")
        if self.wave_pattern not in WAVE_PATTERNS:
            raise WaveConfigError(
                f"Unknown wave_pattern {self.wave_pattern!r}, "
                f"expected one of {', '.join(WAVE_PATTERNS)}"
            )

    @property
    def hollow_stride(self) -> int:
        return self.hollow_dots + 1

    @property
    def frame_length(self) -> float:
        """Minimum seconds between two draw passes."""
        return 1.0 / self.frame_cap

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FieldConfig:
        """Build a config from a plain mapping.

        Missing keys and keys set to ``None`` take the documented default.
        Explicit falsy values such as ``0`` or ``False`` are kept as given.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise WaveConfigError(f"Unknown config keys: {', '.join(unknown)}")
        kwargs = {k: v for k, v in data.items() if v is not None}
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise WaveConfigError(str(exc)) from exc

    def resized(self, width: int, height: int) -> FieldConfig:
        """Return a copy with a new canvas size."""
        return dataclasses.replace(self, canvas_width=width, canvas_height=height)
