"""Headless frame driver and resize source."""
from __future__ import annotations

import time

from tick_wave.types import FrameCallback, ResizeCallback


class ManualFrameDriver:
    """Queues frame requests and fires them when pumped.

    Each request fires exactly once. Callbacks registered while a pump is
    running wait for the next pump, like a display refresh would.
    """

    def __init__(self, refresh_rate: int = 60) -> None:
        if refresh_rate <= 0:
            raise ValueError("refresh_rate must be positive")
        self._refresh_rate = refresh_rate
        self._pending: list[FrameCallback] = []
        self._refreshes = 0

    @property
    def refresh_rate(self) -> int:
        return self._refresh_rate

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def refreshes(self) -> int:
        return self._refreshes

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def pump(self) -> int:
        """Fire every queued callback once. Returns how many fired."""
        batch, self._pending = self._pending, []
        self._refreshes += 1
        for callback in batch:
            callback()
        return len(batch)

    def run(self, n: int) -> None:
        for _ in range(n):
            if not self._pending:
                break
            self.pump()

    def run_forever(self) -> None:
        """Pump at the refresh rate until nothing is queued."""
        interval = 1.0 / self._refresh_rate
        while self._pending:
            start = time.monotonic()
            self.pump()
            sleep_time = interval - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)


class ManualResizeSource:
    def __init__(self) -> None:
        self._subscribers: list[ResizeCallback] = []

    def subscribe(self, callback: ResizeCallback) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: ResizeCallback) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    def resize(self, width: int, height: int) -> None:
        for callback in list(self._subscribers):
            callback(width, height)
