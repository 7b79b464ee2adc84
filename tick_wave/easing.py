"""Hold-tick smoothing near the ends of a dot's motion curve."""
from __future__ import annotations

# (upper bound as a fraction of the frame budget, extra hold ticks)
SMOOTHING_RAMP: tuple[tuple[float, int], ...] = (
    (0.01, 8),
    (0.02, 6),
    (0.03, 4),
    (0.04, 2),
    (0.05, 1),
    (0.93, 0),
    (0.94, 2),
    (0.96, 4),
    (0.98, 6),
    (0.99, 8),
    (1.00, 10),
)


def smoothing_holds(frame: int, frame_qtd: int) -> int:
    """Extra hold ticks to inject when playing ``frame`` of ``frame_qtd``."""
    for limit, extra in SMOOTHING_RAMP:
        if frame < frame_qtd * limit:
            return extra
    return 0
