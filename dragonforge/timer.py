"""A high-resolution timer measuring frame deltas and total lifetime."""

from __future__ import annotations

import time


class Timer:
    """Measures time since creation and since the last update."""

    def __init__(self) -> None:
        now = time.perf_counter_ns()
        self._start = now
        self._last_update = now

    def update(self) -> None:
        """Reset the delta reference point to now."""
        self._last_update = time.perf_counter_ns()

    def delta_nano(self, update: bool = True) -> float:
        """Nanoseconds since the last update; optionally restart the delta."""
        now = time.perf_counter_ns()
        delta = now - self._last_update
        if update:
            self._last_update = now
        return float(delta)

    def delta_micro(self, update: bool = True) -> float:
        return self.delta_nano(update) / 1_000

    def delta_milli(self, update: bool = True) -> float:
        return self.delta_nano(update) / 1_000_000

    def delta_seconds(self, update: bool = True) -> float:
        return self.delta_nano(update) / 1_000_000_000

    def life_nano(self) -> float:
        """Nanoseconds since the timer was created."""
        return float(time.perf_counter_ns() - self._start)

    def life_micro(self) -> float:
        return self.life_nano() / 1_000

    def life_milli(self) -> float:
        return self.life_nano() / 1_000_000

    def life_seconds(self) -> float:
        return self.life_nano() / 1_000_000_000