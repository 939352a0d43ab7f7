import time

import pytest

from stepwise_planner.core.time_manager import TimeManager


def test_sleep_increments_counter():
    tm = TimeManager(tick_rate=50.0)
    start = time.perf_counter()
    tm.sleep_until_next_tick()
    elapsed = time.perf_counter() - start

    assert tm.tick_counter == 1
    # Expect roughly 20ms sleep; allow generous tolerance
    assert elapsed == pytest.approx(0.02, abs=0.015)


def test_tick_due_waits_for_interval():
    tm = TimeManager(tick_rate=1.0)
    assert tm.tick_due() is False
    tm._last_tick -= 2.0
    assert tm.tick_due() is True
    assert tm.tick_counter == 1
    assert tm.tick_due() is False


def test_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        TimeManager(0)
