"""Tests for debounced scheduling."""

from siskel.interventions import DebounceScheduler

from conftest import FakeTimerFactory


class TestDebounceScheduler:
  def test_runs_after_delay(self, timers: FakeTimerFactory) -> None:
    calls: list[str] = []
    scheduler = DebounceScheduler(1.0, timer_factory=timers)

    scheduler.schedule("a.ts", lambda: calls.append("a"))

    assert calls == []
    assert timers.timers[0].delay == 1.0
    assert scheduler.pending("a.ts") is True

    timers.timers[0].fire()
    assert calls == ["a"]
    assert scheduler.pending("a.ts") is False

  def test_rapid_changes_coalesce(self, timers: FakeTimerFactory) -> None:
    calls: list[int] = []
    scheduler = DebounceScheduler(1.0, timer_factory=timers)

    for i in range(3):
      scheduler.schedule("a.ts", lambda i=i: calls.append(i))

    assert len(timers.timers) == 3
    assert [t.cancelled for t in timers.timers] == [True, True, False]
    assert len(timers.live) == 1

    for timer in timers.timers:
      timer.fire()
    assert calls == [2]

  def test_replaced_timer_that_fires_late_is_ignored(self, timers: FakeTimerFactory) -> None:
    calls: list[str] = []
    scheduler = DebounceScheduler(1.0, timer_factory=timers)
    scheduler.schedule("a.ts", lambda: calls.append("first"))
    scheduler.schedule("a.ts", lambda: calls.append("second"))

    # Simulates a timer whose thread was already running when cancelled
    timers.timers[0].fn()
    assert calls == []

    timers.timers[1].fire()
    assert calls == ["second"]

  def test_keys_are_independent(self, timers: FakeTimerFactory) -> None:
    scheduler = DebounceScheduler(1.0, timer_factory=timers)
    scheduler.schedule("a.ts", lambda: None)
    scheduler.schedule("b.ts", lambda: None)

    assert len(timers.live) == 2

  def test_cancel(self, timers: FakeTimerFactory) -> None:
    calls: list[str] = []
    scheduler = DebounceScheduler(1.0, timer_factory=timers)
    scheduler.schedule("a.ts", lambda: calls.append("a"))

    assert scheduler.cancel("a.ts") is True
    assert scheduler.cancel("a.ts") is False
    timers.timers[0].fire()
    assert calls == []

  def test_cancel_all(self, timers: FakeTimerFactory) -> None:
    scheduler = DebounceScheduler(1.0, timer_factory=timers)
    scheduler.schedule("a.ts", lambda: None)
    scheduler.schedule("b.ts", lambda: None)

    scheduler.cancel_all()

    assert timers.live == []
    assert scheduler.pending("a.ts") is False
