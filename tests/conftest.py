"""Pytest fixtures."""

from datetime import datetime, timedelta
from typing import Callable

import pytest
from siskel.models import (
  CodeIssue,
  Document,
  Intervention,
  IssueContext,
  IssueKind,
  PersonalityId,
  Severity,
)
from siskel.personalities import respond


class FakeClock:
  """Monotonic clock advanced by hand."""

  def __init__(self, start: float = 1000.0):
    self.now = start

  def __call__(self) -> float:
    return self.now

  def advance(self, seconds: float) -> None:
    self.now += seconds


class FakeDateClock:
  """Wall clock advanced by hand."""

  def __init__(self, start: datetime | None = None):
    self.now = start or datetime(2024, 1, 1, 12, 0, 0)

  def __call__(self) -> datetime:
    return self.now

  def advance(self, seconds: float) -> None:
    self.now += timedelta(seconds=seconds)


class FakeTimer:
  """Stand-in for threading.Timer that only fires when told to."""

  def __init__(self, delay: float, fn: Callable[[], None]):
    self.delay = delay
    self.fn = fn
    self.started = False
    self.cancelled = False

  def start(self) -> None:
    self.started = True

  def cancel(self) -> None:
    self.cancelled = True

  def fire(self) -> None:
    if not self.cancelled:
      self.fn()


class FakeTimerFactory:
  """Records every timer the scheduler creates."""

  def __init__(self):
    self.timers: list[FakeTimer] = []

  def __call__(self, delay: float, fn: Callable[[], None]) -> FakeTimer:
    timer = FakeTimer(delay, fn)
    self.timers.append(timer)
    return timer

  @property
  def live(self) -> list[FakeTimer]:
    return [t for t in self.timers if t.started and not t.cancelled]


@pytest.fixture
def clock() -> FakeClock:
  return FakeClock()


@pytest.fixture
def date_clock() -> FakeDateClock:
  return FakeDateClock()


@pytest.fixture
def timers() -> FakeTimerFactory:
  return FakeTimerFactory()


def make_issue(
  kind: IssueKind = IssueKind.BUG,
  severity: Severity = Severity.WARNING,
  snippet: str = "const name = user.name;",
  line: int = 1,
  file: str = "app.ts",
  message: str = "Potential null access",
  remedy: str | None = "Use optional chaining",
) -> CodeIssue:
  return CodeIssue(
    kind=kind,
    severity=severity,
    file=file,
    line=line,
    snippet=snippet,
    message=message,
    remedy=remedy,
  )


def make_intervention(
  issue: CodeIssue | None = None,
  intervention_id: str = "1-abc",
  personality: PersonalityId = PersonalityId.SUPPORTIVE,
) -> Intervention:
  context = IssueContext.from_issue(issue or make_issue())
  return Intervention(
    id=intervention_id,
    context=context,
    response=respond(personality, context),
    created_at=datetime(2024, 1, 1),
    personality=personality,
  )


@pytest.fixture
def ts_document() -> Document:
  return Document(
    path="src/app.ts",
    text=(
      'const query = "SELECT * FROM users WHERE id=" + userId;\n'
      "el.innerHTML = html;\n"
      'console.log("loaded");\n'
      "fetchUser().then(render);\n"
    ),
    language_tag="typescript",
  )
