"""WaveField - grid layout, dot ownership and the per-frame draw pass."""
from __future__ import annotations

import logging
import time
from typing import Callable

from tick_wave.clock import FrameClock
from tick_wave.config import FieldConfig
from tick_wave.dot import DotParams, WaveDot
from tick_wave.horizon import HorizonScaler, PerspectiveCurve
from tick_wave.types import (
    Canvas,
    FrameDriver,
    RenderContextError,
    Renderer,
    ResizeSource,
)

logger = logging.getLogger(__name__)

# Fractions of the canvas height left empty around the grid, and above it.
VERTICAL_MARGIN = 0.3
TOP_MARGIN = 0.15


class WaveField:
    def __init__(
        self,
        canvas: Canvas,
        config: FieldConfig,
        frame_driver: FrameDriver,
        resize_source: ResizeSource | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._canvas = canvas
        self._config = config
        canvas.width = config.canvas_width
        canvas.height = config.canvas_height
        renderer = canvas.get_context()
        if renderer is None:
            raise RenderContextError("Canvas did not provide a 2-D drawing context")
        self._renderer: Renderer = renderer

        self._driver = frame_driver
        self._time = time_source
        self._clock = FrameClock(config.frame_cap)
        self._curve = HorizonScaler().compute_curve(max(config.y_dots, 1))
        self._dots: list[WaveDot] = []
        self.repeat = config.repeat
        self._armed = False

        if resize_source is not None:
            resize_source.subscribe(self.on_resize)

    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def curve(self) -> PerspectiveCurve:
        return self._curve

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def frame_number(self) -> int:
        return self._clock.frame_number

    @property
    def armed(self) -> bool:
        """True while a step is registered with the frame driver."""
        return self._armed

    @property
    def dots(self) -> tuple[WaveDot, ...]:
        return tuple(self._dots)

    @property
    def width(self) -> int:
        return self._config.canvas_width

    @property
    def height(self) -> int:
        return self._config.canvas_height

    def _row_y(self, depth: float) -> float:
        h = self.height
        return (h - h * VERTICAL_MARGIN) * depth + h * TOP_MARGIN

    def _x_center(self) -> float:
        return self.width * self._config.center_position

    def build_layout(self) -> None:
        cfg = self._config
        stride = cfg.hollow_stride
        params = DotParams(
            dot_size=cfg.dot_size,
            x_dots=cfg.x_dots,
            wave_pattern=cfg.wave_pattern,
            wave_delay=cfg.wave_delay,
            frame_qtd=cfg.frame_qtd,
            wave_max_height=cfg.wave_max_height,
            horizon_reversed=self._curve.reversed,
            color=cfg.color,
            backwards=cfg.backwards,
        )
        x_center = self._x_center()

        dots: list[WaveDot] = []
        for x_draw in range(cfg.x_dots + 1):
            for y_draw in range(cfg.y_dots + 1):
                if x_draw % stride != 0 and y_draw % stride != 0:
                    continue

                depth = self._curve.forward[y_draw]
                x_offset = (depth + cfg.horizon_angle) * (x_draw * cfg.space_between_x_dots)
                y = self._row_y(depth)
                y_nth = cfg.y_dots - y_draw
                x_nth = cfg.x_dots - x_draw

                dots.append(WaveDot(x_center + x_offset, y, y_nth, x_nth, params))
                if x_draw != 0:
                    dots.append(WaveDot(x_center - x_offset, y, y_nth, x_nth, params))

        self._dots = dots
        logger.debug(
            "Built %d dots for %dx%d canvas", len(dots), self.width, self.height
        )

    def draw_grid_lines(self) -> None:
        cfg = self._config
        stride = cfg.hollow_stride
        x_center = self._x_center()
        color = cfg.grid_color
        line_width = cfg.grid_line_width

        for y_draw in range(cfg.y_dots + 1):
            if y_draw % stride != 0:
                continue
            depth = self._curve.forward[y_draw]
            x_offset = (depth + cfg.horizon_angle) * (cfg.x_dots * cfg.space_between_x_dots)
            y = self._row_y(depth)
            self._renderer.stroke_line(
                x_center - x_offset, y, x_center + x_offset, y, color, line_width
            )

        top = self._row_y(0.0)
        bottom = self._row_y(1.0)
        for x_draw in range(cfg.x_dots + 1):
            if x_draw % stride != 0:
                continue
            span = x_draw * cfg.space_between_x_dots
            near = (0.0 + cfg.horizon_angle) * span
            far = (1.0 + cfg.horizon_angle) * span
            self._renderer.stroke_line(
                x_center - near, top, x_center - far, bottom, color, line_width
            )
            if x_draw > 0:
                self._renderer.stroke_line(
                    x_center + near, top, x_center + far, bottom, color, line_width
                )

    def step(self) -> None:
        now = self._time()
        if self._clock.due(now):
            self._renderer.clear(0, 0, self.width, self.height)
            if self._config.show_grid:
                self.draw_grid_lines()
            for dot in self._dots:
                dot.render(self._renderer)
            self._clock.mark(now)

        if self.repeat:
            if not self._armed:
                self._armed = True
                self._driver.request_frame(self._on_frame)
        else:
            logger.debug("Wave halted after frame %d", self._clock.frame_number)

    def _on_frame(self) -> None:
        self._armed = False
        self.step()

    def start(self) -> None:
        if self._armed:
            return
        self.build_layout()
        self.step()

    def stop(self) -> None:
        """Halt the loop at the next scheduled step."""
        self.repeat = False

    def on_resize(self, width: int, height: int) -> None:
        width = max(0, int(width))
        height = max(0, int(height))
        self._config = self._config.resized(width, height)
        self._canvas.width = width
        self._canvas.height = height
        logger.debug("Resized to %dx%d", width, height)

        self._renderer.clear(0, 0, width, height)
        self.build_layout()
