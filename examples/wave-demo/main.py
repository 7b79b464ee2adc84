"""Wave Demo — perspective dot-grid wave in a resizable window.

Exercises tick_wave.WaveField with a pygame canvas. The window refresh loop
pumps a ManualFrameDriver; VIDEORESIZE events feed a ManualResizeSource.

Controls:
  Space   Stop / restart the wave
  G       Toggle status readout
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_wave import (
    WAVE_PATTERNS,
    FieldConfig,
    ManualFrameDriver,
    ManualResizeSource,
    WaveConfigError,
    WaveField,
)
from ui.canvas import PygameCanvas
from ui.constants import DOT_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.status import draw_status, erase_status


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Wave Demo — tick-wave visual demo")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--x-dots", type=int, default=18, help="Columns each side of center (default: 18)")
    p.add_argument("--y-dots", type=int, default=24, help="Rows toward the horizon (default: 24)")
    p.add_argument("--spacing", type=float, default=None, help="Column spacing in px (default: 60)")
    p.add_argument("--hollow", type=int, default=None, help="Rows/columns skipped between lines (default: 2)")
    p.add_argument("--height-max", type=float, default=None, help="Wave amplitude in px (default: 100)")
    p.add_argument("--angle", type=float, default=None, help="Horizon tilt (default: 0)")
    p.add_argument("--delay", type=float, default=2, help="Stagger unit in hold ticks (default: 2)")
    p.add_argument("--pattern", choices=WAVE_PATTERNS, default=None, help="Wave pattern (default: straight)")
    p.add_argument("--frames", type=int, default=None, help="Frames per half oscillation (default: 100)")
    p.add_argument("--fps-cap", type=float, default=None, help="Draw passes per second (default: 30)")
    p.add_argument("--once", action="store_true", help="Draw a single frame and halt")
    p.add_argument("--backwards", action="store_true", help="Start every dot at the crest")
    p.add_argument("--no-grid", action="store_true", help="Hide the perspective grid lines")
    p.add_argument("--verbose", action="store_true", help="Log layout rebuilds")
    return p.parse_args()


def build_config(args: argparse.Namespace) -> FieldConfig:
    return FieldConfig.from_mapping(
        {
            "canvas_width": args.width,
            "canvas_height": args.height,
            "x_dots": args.x_dots,
            "y_dots": args.y_dots,
            "space_between_x_dots": args.spacing,
            "hollow_dots": args.hollow,
            "wave_max_height": args.height_max,
            "horizon_angle": args.angle,
            "color": DOT_COLOR,
            "wave_delay": args.delay,
            "wave_pattern": args.pattern,
            "repeat": not args.once,
            "frame_qtd": args.frames,
            "frame_cap": args.fps_cap,
            "backwards": args.backwards,
            "show_grid": not args.no_grid,
        }
    )


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(args)
    except WaveConfigError as exc:
        print(f"wave-demo: {exc}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((config.canvas_width, config.canvas_height), pygame.RESIZABLE)
    pygame.display.set_caption("Wave Demo — tick-wave")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    canvas = PygameCanvas(screen)
    driver = ManualFrameDriver(refresh_rate=FPS)
    resizes = ManualResizeSource()
    field = WaveField(canvas, config, driver, resize_source=resizes)
    field.start()

    show_status = True
    status_strip = None
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.VIDEORESIZE:
                canvas.refresh()
                resizes.resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    if field.repeat:
                        field.stop()
                    else:
                        field.repeat = True
                        field.step()

                elif event.key == pygame.K_g:
                    show_status = not show_status
                    if not show_status:
                        erase_status(canvas.surface, status_strip)
                        status_strip = None

        # --- Frame ---
        driver.pump()

        if show_status:
            erase_status(canvas.surface, status_strip)
            status_strip = draw_status(
                canvas.surface,
                font,
                frame_number=field.frame_number,
                dot_count=len(field.dots),
                pattern=field.config.wave_pattern,
                running=field.repeat,
            )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
