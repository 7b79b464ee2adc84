"""Wave patterns: initial stagger delay for a dot from its grid position."""
from __future__ import annotations

from typing import Callable

COLUMN_WEIGHT = 1.5


def straight(y_nth: int, x_nth: int, x_dots: int, delay: float) -> float:
    return y_nth * delay


def outside_in(y_nth: int, x_nth: int, x_dots: int, delay: float) -> float:
    return y_nth * delay + x_nth * (delay * COLUMN_WEIGHT)


def inside_out(y_nth: int, x_nth: int, x_dots: int, delay: float) -> float:
    return y_nth * delay + (x_dots - x_nth) * (delay * COLUMN_WEIGHT)


PATTERNS: dict[str, Callable[[int, int, int, float], float]] = {
    "straight": straight,
    "outside-in": outside_in,
    "inside-out": inside_out,
}
