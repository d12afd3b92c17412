"""Per-key trailing debounce on top of cancellable timers."""

import logging
import threading
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
  """The parts of threading.Timer the scheduler uses."""

  def start(self) -> None:
    ...

  def cancel(self) -> None:
    ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(delay: float, fn: Callable[[], None]) -> TimerHandle:
  timer = threading.Timer(delay, fn)
  timer.daemon = True
  return timer


class DebounceScheduler:
  """Runs a callback `delay_seconds` after the last `schedule` for a key.

  Scheduling a key that already has a pending timer cancels that timer
  and starts a new one, so a burst of calls produces one run.
  """

  def __init__(self, delay_seconds: float = 1.0, timer_factory: TimerFactory = _thread_timer):
    self._delay = delay_seconds
    self._timer_factory = timer_factory
    self._pending: dict[str, TimerHandle] = {}
    self._lock = threading.Lock()

  @property
  def delay_seconds(self) -> float:
    return self._delay

  def schedule(self, key: str, fn: Callable[[], None]) -> None:
    """Schedule `fn` for `key`, replacing any pending run."""
    timer: TimerHandle | None = None

    def fire() -> None:
      with self._lock:
        # A replaced timer that already started firing must not run
        if self._pending.get(key) is not timer:
          return
        del self._pending[key]
      fn()

    with self._lock:
      previous = self._pending.pop(key, None)
      if previous is not None:
        previous.cancel()
        logger.debug("Rescheduled pending run for %s", key)
      timer = self._timer_factory(self._delay, fire)
      self._pending[key] = timer
    timer.start()

  def cancel(self, key: str) -> bool:
    """Cancel the pending run for `key`. Returns True if one existed."""
    with self._lock:
      timer = self._pending.pop(key, None)
    if timer is None:
      return False
    timer.cancel()
    return True

  def cancel_all(self) -> None:
    with self._lock:
      timers = list(self._pending.values())
      self._pending.clear()
    for timer in timers:
      timer.cancel()

  def pending(self, key: str) -> bool:
    with self._lock:
      return key in self._pending
