"""Shared type aliases, protocols and errors for tick-wave."""
from __future__ import annotations

from typing import Any, Callable, Literal, Protocol

Color = Any
WavePattern = Literal["straight", "outside-in", "inside-out"]
Direction = Literal["forward", "backward"]

FrameCallback = Callable[[], None]
ResizeCallback = Callable[[int, int], None]


class WaveConfigError(ValueError):
    """Raised when a field configuration cannot produce a valid layout."""


class RenderContextError(RuntimeError):
    """Raised when the canvas cannot provide a 2-D drawing context."""


class Renderer(Protocol):
    def clear(self, x: float, y: float, width: float, height: float) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...
    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: Color, width: float
    ) -> None: ...


class Canvas(Protocol):
    width: int
    height: int

    def get_context(self) -> Renderer | None: ...


class FrameDriver(Protocol):
    def request_frame(self, callback: FrameCallback) -> None: ...


class ResizeSource(Protocol):
    def subscribe(self, callback: ResizeCallback) -> None: ...
