"""FrameClock - frame-rate cap bookkeeping for the wave loop."""
from __future__ import annotations

from tick_wave.types import WaveConfigError


class FrameClock:
    def __init__(self, frame_cap: float) -> None:
        if frame_cap <= 0:
            raise WaveConfigError("frame_cap must be positive")
        self._frame_cap = frame_cap
        self._frame_length = 1.0 / frame_cap
        self._frame_number = 0
        self._last_frame: float | None = None

    @property
    def frame_cap(self) -> float:
        return self._frame_cap

    @property
    def frame_length(self) -> float:
        return self._frame_length

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def last_frame(self) -> float | None:
        return self._last_frame

    def due(self, now: float) -> bool:
        """True when a draw pass may run at ``now``. The first frame is always due."""
        if self._last_frame is None:
            return True
        return now - self._last_frame >= self._frame_length

    def mark(self, now: float) -> int:
        self._last_frame = now
        self._frame_number += 1
        return self._frame_number

    def reset(self) -> None:
        self._last_frame = None
        self._frame_number = 0
