"""tick-wave - Animated perspective dot-grid waves driven by a frame clock."""
from __future__ import annotations

from tick_wave.clock import FrameClock
from tick_wave.config import WAVE_PATTERNS, FieldConfig
from tick_wave.dot import DotParams, WaveDot
from tick_wave.drivers import ManualFrameDriver, ManualResizeSource
from tick_wave.easing import SMOOTHING_RAMP, smoothing_holds
from tick_wave.field import WaveField
from tick_wave.horizon import HorizonScaler, PerspectiveCurve
from tick_wave.patterns import PATTERNS
from tick_wave.types import RenderContextError, WaveConfigError

__all__ = [
    "WaveField",
    "WaveDot",
    "DotParams",
    "FieldConfig",
    "WAVE_PATTERNS",
    "FrameClock",
    "HorizonScaler",
    "PerspectiveCurve",
    "PATTERNS",
    "SMOOTHING_RAMP",
    "smoothing_holds",
    "ManualFrameDriver",
    "ManualResizeSource",
    "WaveConfigError",
    "RenderContextError",
]
