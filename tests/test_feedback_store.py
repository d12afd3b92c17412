"""Tests for feedback recording and adaptation."""

from typing import Any

import pytest
from siskel.feedback import FeedbackStore, MemoryStore, PersistenceError, pattern_key
from siskel.feedback.store import ADAPTATION_KEY, HISTORY_KEY, MAX_HISTORY, PATTERNS_KEY
from siskel.models import FeedbackAction, IssueKind, Reaction, Severity

from conftest import FakeDateClock, make_intervention, make_issue


class FailingStore:
  """Key-value store whose every operation fails."""

  def get(self, key: str) -> Any | None:
    raise PersistenceError("disk on fire")

  def set(self, key: str, value: Any) -> None:
    raise PersistenceError("disk on fire")


@pytest.fixture
def store(date_clock: FakeDateClock) -> FeedbackStore:
  return FeedbackStore(MemoryStore(), clock=date_clock)


class TestPatternKey:
  def test_kind_and_truncated_snippet(self) -> None:
    snippet = "a" * 50
    assert pattern_key(IssueKind.SECURITY, snippet) == "security:" + "a" * 30

  def test_short_snippet(self) -> None:
    assert pattern_key(IssueKind.CODE_SMELL, "x") == "code-smell:x"


class TestRecordFeedback:
  def test_appends_history(self, store: FeedbackStore) -> None:
    intervention = make_intervention()
    store.record_feedback(intervention, FeedbackAction.ACCEPTED, "thanks")

    history = store.get_feedback_history()
    assert len(history) == 1
    assert history[0].intervention_id == intervention.id
    assert history[0].action == FeedbackAction.ACCEPTED
    assert history[0].feedback == "thanks"
    assert history[0].personality == "supportive"

  def test_upserts_pattern(self, store: FeedbackStore, date_clock: FakeDateClock) -> None:
    intervention = make_intervention()
    store.record_feedback(intervention, FeedbackAction.ACCEPTED)
    date_clock.advance(60)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)

    patterns = store.get_learning_patterns()
    assert len(patterns) == 1
    assert patterns[0].occurrence_count == 2
    assert patterns[0].reaction == Reaction.REJECTED
    assert patterns[0].last_updated == date_clock.now

  def test_modified_is_neutral(self, store: FeedbackStore) -> None:
    store.record_feedback(make_intervention(), FeedbackAction.MODIFIED)

    assert store.get_learning_patterns()[0].reaction == Reaction.NEUTRAL
    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.BUG] == 1.0

  def test_history_trimmed(self, store: FeedbackStore) -> None:
    intervention = make_intervention()
    for _ in range(MAX_HISTORY + 5):
      store.record_feedback(intervention, FeedbackAction.MODIFIED)

    assert len(store.get_feedback_history()) == MAX_HISTORY

  def test_stats_count_once_per_call(self, store: FeedbackStore) -> None:
    intervention = make_intervention()
    store.record_feedback(intervention, FeedbackAction.ACCEPTED)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    store.record_feedback(intervention, FeedbackAction.MODIFIED)

    stats = store.get_stats()
    assert stats.total == 4
    assert stats.accepted == 1
    assert stats.dismissed == 2
    assert stats.modified == 1


class TestSuppression:
  def test_three_dismissals_suppress_even_critical(self, store: FeedbackStore) -> None:
    issue = make_issue(kind=IssueKind.SECURITY, severity=Severity.CRITICAL, snippet="eval(x)")
    intervention = make_intervention(issue)

    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    assert store.should_show(issue) is True

    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    assert pattern_key(issue.kind, issue.snippet) in store.get_adaptation_rules().suppressed_patterns
    assert store.should_show(issue) is False

  def test_suppression_is_per_pattern(self, store: FeedbackStore) -> None:
    issue = make_issue(severity=Severity.CRITICAL, snippet="a.b;")
    for _ in range(3):
      store.record_feedback(make_intervention(issue), FeedbackAction.DISMISSED)

    other = make_issue(severity=Severity.CRITICAL, snippet="c.d;")
    assert store.should_show(other) is True

  def test_accepted_pattern_preferred(self, store: FeedbackStore) -> None:
    issue = make_issue()
    store.record_feedback(make_intervention(issue), FeedbackAction.ACCEPTED)

    key = pattern_key(issue.kind, issue.snippet)
    assert key in store.get_adaptation_rules().preferred_patterns

  def test_suppression_wins_over_preference(self, store: FeedbackStore) -> None:
    issue = make_issue(severity=Severity.CRITICAL)
    intervention = make_intervention(issue)
    store.record_feedback(intervention, FeedbackAction.ACCEPTED)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)
    store.record_feedback(intervention, FeedbackAction.DISMISSED)

    rules = store.get_adaptation_rules()
    key = pattern_key(issue.kind, issue.snippet)
    assert key in rules.preferred_patterns
    assert key in rules.suppressed_patterns
    assert store.should_show(issue) is False


class TestSensitivity:
  def _dismiss_distinct(self, store: FeedbackStore, kind: IssueKind, count: int) -> None:
    # Distinct snippets so no single pattern reaches the suppression threshold
    for i in range(count):
      issue = make_issue(kind=kind, snippet=f"snippet {i}")
      store.record_feedback(make_intervention(issue), FeedbackAction.DISMISSED)

  def test_floor(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.STYLE, 20)

    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.STYLE] == 0.3

  def test_ceiling(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.STYLE, 2)
    for _ in range(20):
      store.record_feedback(make_intervention(make_issue(kind=IssueKind.STYLE)), FeedbackAction.ACCEPTED)

    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.STYLE] == 1.0

  def test_step_sizes(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.BUG, 1)
    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.BUG] == 0.9

    store.record_feedback(make_intervention(make_issue(snippet="other")), FeedbackAction.ACCEPTED)
    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.BUG] == 0.95

  def test_low_sensitivity_hides_non_critical(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.STYLE, 6)

    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.STYLE] == 0.4
    assert store.should_show(make_issue(kind=IssueKind.STYLE, severity=Severity.INFO, snippet="new")) is False
    assert store.should_show(make_issue(kind=IssueKind.STYLE, severity=Severity.CRITICAL, snippet="new")) is True

  def test_cutoff_is_exclusive(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.STYLE, 5)

    assert store.get_adaptation_rules().sensitivity_by_kind[IssueKind.STYLE] == 0.5
    assert store.should_show(make_issue(kind=IssueKind.STYLE, severity=Severity.INFO, snippet="new")) is True

  def test_other_kinds_unaffected(self, store: FeedbackStore) -> None:
    self._dismiss_distinct(store, IssueKind.STYLE, 10)
    assert store.should_show(make_issue(kind=IssueKind.BUG, severity=Severity.INFO)) is True


class TestPersistence:
  def test_state_survives_new_store(self, date_clock: FakeDateClock) -> None:
    backing = MemoryStore()
    first = FeedbackStore(backing, clock=date_clock)
    issue = make_issue()
    for _ in range(3):
      first.record_feedback(make_intervention(issue), FeedbackAction.DISMISSED)

    second = FeedbackStore(backing, clock=date_clock)

    assert second.get_stats().dismissed == 3
    assert second.get_learning_patterns() == first.get_learning_patterns()
    assert second.should_show(issue) is False

  def test_writes_all_three_keys(self, date_clock: FakeDateClock) -> None:
    backing = MemoryStore()
    FeedbackStore(backing, clock=date_clock).record_feedback(make_intervention(), FeedbackAction.ACCEPTED)

    assert set(backing.keys()) == {HISTORY_KEY, PATTERNS_KEY, ADAPTATION_KEY}

  def test_malformed_entries_skipped(self) -> None:
    backing = MemoryStore({
      HISTORY_KEY: [
        {"intervention_id": "x"},
        {
          "intervention_id": "1-abc",
          "action": "accepted",
          "timestamp": "2024-01-01T00:00:00",
          "issue_kind": "bug",
          "pattern_key": "bug:x",
        },
      ],
      ADAPTATION_KEY: "not a dict",
    })
    store = FeedbackStore(backing)

    assert store.get_stats().total == 1
    assert store.get_adaptation_rules().suppressed_patterns == set()

  def test_failures_reported_not_raised(self) -> None:
    warnings: list[str] = []
    store = FeedbackStore(FailingStore(), on_warning=warnings.append)

    assert len(warnings) == 3
    store.record_feedback(make_intervention(), FeedbackAction.ACCEPTED)

    assert len(warnings) == 6
    assert store.get_stats().accepted == 1


class TestReset:
  def test_clears_everything(self, date_clock: FakeDateClock) -> None:
    backing = MemoryStore()
    store = FeedbackStore(backing, clock=date_clock)
    issue = make_issue()
    for _ in range(3):
      store.record_feedback(make_intervention(issue), FeedbackAction.DISMISSED)

    store.reset()

    assert store.get_stats().total == 0
    assert store.get_learning_patterns() == []
    assert store.should_show(issue) is True
    assert backing.get(HISTORY_KEY) == []
    assert FeedbackStore(backing).get_stats().total == 0

  def test_snapshot_is_a_copy(self, store: FeedbackStore) -> None:
    snapshot = store.get_adaptation_rules()
    snapshot.suppressed_patterns.add("bug:x")

    assert "bug:x" not in store.get_adaptation_rules().suppressed_patterns
