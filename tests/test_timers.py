from pathlib import Path

import pytest

from molegame.core.timers import TimerQueue


def test_call_later_fires_once_when_due(timers):
    fired = []
    handle = timers.call_later(500, lambda: fired.append(timers.now))
    timers.advance(499)
    assert fired == []
    timers.advance(1)
    assert fired == [500]
    timers.advance(10_000)
    assert fired == [500]
    assert not handle.active


def test_call_every_repeats_until_cancelled(timers):
    ticks = []
    handle = timers.call_every(1000, lambda: ticks.append(timers.now))
    timers.advance(3500)
    assert ticks == [1000, 2000, 3000]
    timers.cancel(handle)
    timers.advance(5000)
    assert len(ticks) == 3
    assert timers.pending == 0


def test_callbacks_fire_in_due_order_then_schedule_order(timers):
    order = []
    timers.call_later(300, lambda: order.append("c"))
    timers.call_later(100, lambda: order.append("a"))
    timers.call_later(100, lambda: order.append("b"))
    timers.advance(1000)
    assert order == ["a", "b", "c"]


def test_callbacks_scheduled_inside_window_still_fire(timers):
    order = []

    def first():
        order.append(("first", timers.now))
        timers.call_later(200, lambda: order.append(("second", timers.now)))

    timers.call_later(100, first)
    timers.advance(1000)
    assert order == [("first", 100), ("second", 300)]
    assert timers.now == 1000


def test_repeating_timer_can_cancel_itself(timers):
    ticks = []
    handle = None

    def tick():
        ticks.append(timers.now)
        if len(ticks) == 2:
            handle.cancel()

    handle = timers.call_every(100, tick)
    timers.advance(1000)
    assert ticks == [100, 200]


def test_cancel_is_idempotent(timers):
    handle = timers.call_later(10, lambda: None)
    timers.cancel(handle)
    timers.cancel(handle)
    timers.cancel(None)
    assert timers.advance(100) == 0


@pytest.mark.parametrize("call, arg", [("call_later", -1), ("call_every", 0), ("advance", -5)])
def test_rejects_bad_durations(call, arg):
    q = TimerQueue()
    with pytest.raises(ValueError):
        if call == "advance":
            q.advance(arg)
        else:
            getattr(q, call)(arg, lambda: None)


def test_clear_drops_everything(timers):
    fired = []
    timers.call_later(10, lambda: fired.append(1))
    timers.call_every(10, lambda: fired.append(2))
    timers.clear()
    timers.advance(100)
    assert fired == []


def test_core_package_does_not_reach_into_app():
    core_dir = Path(__file__).resolve().parents[1] / "molegame" / "core"
    offenders = [p.name for p in core_dir.glob("*.py") if "molegame.app" in p.read_text()]
    assert offenders == []
    assert TimerQueue.__module__ == "molegame.core.timers"
