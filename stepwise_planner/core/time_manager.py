"""Tick timing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Keep the simulation on a fixed tick cadence."""

    def __init__(self, tick_rate: float = 2.0) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate: float = tick_rate
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def interval(self) -> float:
        return 1.0 / self.tick_rate

    def sleep_until_next_tick(self) -> None:
        """Block until the next tick is due, then advance the counter."""

        target = self._last_tick + self.interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_tick = target
        else:
            # Behind schedule; restart the cadence from now.
            self._last_tick = now
        self.tick_counter += 1

    def tick_due(self) -> bool:
        """Return ``True`` and advance if a tick is due, without sleeping.

        Lets a render loop running faster than the tick rate step the
        simulation only every ``interval`` seconds.
        """

        now = time.perf_counter()
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        self.tick_counter += 1
        return True


__all__ = ["TimeManager"]
