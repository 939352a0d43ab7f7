"""Runtime observability helpers."""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 tick durations in seconds
_TICK_HISTORY_LEN = 1000
_tick_durations: Deque[float] = deque(maxlen=_TICK_HISTORY_LEN)

# Whether to print FPS every tick when recording durations
_live_fps: bool = False


def record_tick(duration: float) -> None:
    """Append a tick ``duration`` in seconds to the rolling history."""

    _tick_durations.append(duration)
    if _live_fps:
        print_fps()


def print_fps() -> None:
    """Print average tick rate and duration based on recorded ticks."""

    if not _tick_durations:
        print("FPS: --")
        return

    avg = sum(_tick_durations) / len(_tick_durations)
    fps = 1.0 / avg if avg > 0 else float("inf")
    print(f"{fps:.1f} FPS (avg {avg*1000:.1f} ms)")


def toggle_live_fps() -> bool:
    """Toggle live FPS printing. Returns ``True`` if enabled after toggle."""

    global _live_fps
    _live_fps = not _live_fps
    return _live_fps


def install_tick_observer(tm: Any) -> None:
    """Record tick durations from ``tm``.

    Wraps both ``sleep_until_next_tick`` (headless loop) and ``tick_due``
    (window loop); the latter only counts calls that actually advanced.
    """

    if tm is None or hasattr(tm, "_observer_wrapped"):
        return

    last = time.perf_counter()

    def _mark() -> None:
        nonlocal last
        now = time.perf_counter()
        record_tick(now - last)
        last = now

    original_sleep = tm.sleep_until_next_tick

    def sleep_wrapper() -> None:
        original_sleep()
        _mark()

    tm.sleep_until_next_tick = sleep_wrapper  # type: ignore[assignment]

    original_due = getattr(tm, "tick_due", None)
    if callable(original_due):
        def due_wrapper() -> bool:
            advanced = original_due()
            if advanced:
                _mark()
            return advanced

        tm.tick_due = due_wrapper  # type: ignore[assignment]
    setattr(tm, "_observer_wrapped", True)


def summarize_events(events: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count chase events by ``type``."""

    counts: Dict[str, int] = {}
    for event in events:
        kind = str(event.get("type", "unknown"))
        counts[kind] = counts.get(kind, 0) + 1
    return counts


__all__ = [
    "record_tick",
    "print_fps",
    "toggle_live_fps",
    "install_tick_observer",
    "summarize_events",
    "_tick_durations",
]
