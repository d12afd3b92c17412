"""Feedback recording and adaptation rules."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from siskel.feedback.persistence import KeyValueStore, MemoryStore, PersistenceError
from siskel.models import (
  AdaptationRules,
  CodeIssue,
  FeedbackAction,
  FeedbackRecord,
  Intervention,
  IssueKind,
  LearningPattern,
  Reaction,
  Severity,
)

logger = logging.getLogger(__name__)

HISTORY_KEY = "siskel.feedback.history"
PATTERNS_KEY = "siskel.feedback.patterns"
ADAPTATION_KEY = "siskel.feedback.adaptation"

MAX_HISTORY = 1000
PATTERN_SNIPPET_LENGTH = 30

# A dismissed pattern seen this many times is suppressed
SUPPRESSION_THRESHOLD = 3

DEFAULT_SENSITIVITY = 1.0
SENSITIVITY_FLOOR = 0.3
SENSITIVITY_CEILING = 1.0
DISMISS_STEP = 0.1
ACCEPT_STEP = 0.05
# Below this, non-critical issues of the kind are hidden
SENSITIVITY_CUTOFF = 0.5

_REACTIONS = {
  FeedbackAction.ACCEPTED: Reaction.PREFERRED,
  FeedbackAction.DISMISSED: Reaction.REJECTED,
  FeedbackAction.MODIFIED: Reaction.NEUTRAL,
}

WarningSink = Callable[[str], None]


def pattern_key(kind: IssueKind, snippet: str) -> str:
  """Learning key for "this kind of issue in this kind of code"."""
  return f"{kind.value}:{snippet[:PATTERN_SNIPPET_LENGTH]}"


@dataclass(frozen=True)
class FeedbackStats:
  """Counts derived from the feedback history."""

  total: int
  accepted: int
  dismissed: int
  modified: int


class FeedbackStore:
  """Persists feedback and derives which issues to keep showing.

  Owns three pieces of state: the feedback history (a ring buffer of
  the last MAX_HISTORY records), one LearningPattern per pattern key,
  and the AdaptationRules derived from them. All mutations happen under
  one lock.

  Persistence failures never raise out of this class. A failed read
  falls back to empty state; a failed write is logged and passed to
  `on_warning`, and the in-memory state stays authoritative.
  """

  def __init__(
    self,
    storage: KeyValueStore | None = None,
    on_warning: WarningSink | None = None,
    clock: Callable[[], datetime] = datetime.now,
  ):
    self._storage = storage if storage is not None else MemoryStore()
    self._on_warning = on_warning
    self._clock = clock
    self._lock = threading.RLock()

    self._history: list[FeedbackRecord] = self._load_list(HISTORY_KEY, FeedbackRecord.from_dict)
    self._patterns: dict[str, LearningPattern] = {
      p.pattern_key: p for p in self._load_list(PATTERNS_KEY, LearningPattern.from_dict)
    }
    self._rules = self._load_rules()

  def record_feedback(
    self,
    intervention: Intervention,
    action: FeedbackAction,
    feedback: str | None = None,
  ) -> None:
    """Record a user reaction and update the learned state."""
    ctx = intervention.context
    key = pattern_key(ctx.kind, ctx.snippet)

    with self._lock:
      now = self._clock()
      self._history.append(FeedbackRecord(
        intervention_id=intervention.id,
        action=action,
        timestamp=now,
        issue_kind=ctx.kind,
        pattern_key=key,
        feedback=feedback,
        personality=intervention.personality.value,
      ))
      if len(self._history) > MAX_HISTORY:
        self._history = self._history[-MAX_HISTORY:]

      pattern = self._update_pattern(key, ctx.kind, action, now)
      self._update_rules(pattern, action)
      self._save()

  def should_show(self, issue: CodeIssue) -> bool:
    """Decide whether an issue should reach the user.

    Explicit pattern suppression always wins. Otherwise a kind whose
    sensitivity dropped below SENSITIVITY_CUTOFF hides everything but
    critical issues.
    """
    key = pattern_key(issue.kind, issue.snippet)
    with self._lock:
      if key in self._rules.suppressed_patterns:
        return False
      sensitivity = self._rules.sensitivity_by_kind.get(issue.kind, DEFAULT_SENSITIVITY)

    if sensitivity < SENSITIVITY_CUTOFF and issue.severity != Severity.CRITICAL:
      return False
    return True

  def get_stats(self) -> FeedbackStats:
    with self._lock:
      history = list(self._history)

    return FeedbackStats(
      total=len(history),
      accepted=sum(1 for r in history if r.action == FeedbackAction.ACCEPTED),
      dismissed=sum(1 for r in history if r.action == FeedbackAction.DISMISSED),
      modified=sum(1 for r in history if r.action == FeedbackAction.MODIFIED),
    )

  def get_adaptation_rules(self) -> AdaptationRules:
    """Snapshot of the current adaptation rules."""
    with self._lock:
      return self._rules.copy()

  def get_feedback_history(self) -> list[FeedbackRecord]:
    with self._lock:
      return list(self._history)

  def get_learning_patterns(self) -> list[LearningPattern]:
    with self._lock:
      return list(self._patterns.values())

  def reset(self) -> None:
    """Clear all learned state and persist the empty state."""
    with self._lock:
      self._history = []
      self._patterns = {}
      self._rules = AdaptationRules()
      self._save()
    logger.info("Learning data has been reset")

  def _update_pattern(
    self,
    key: str,
    kind: IssueKind,
    action: FeedbackAction,
    now: datetime,
  ) -> LearningPattern:
    existing = self._patterns.get(key)
    count = existing.occurrence_count if existing else 0

    pattern = LearningPattern(
      pattern_key=key,
      issue_kind=kind,
      reaction=_REACTIONS[action],
      occurrence_count=count + 1,
      last_updated=now,
    )
    self._patterns[key] = pattern
    return pattern

  def _update_rules(self, pattern: LearningPattern, action: FeedbackAction) -> None:
    rules = self._rules
    key = pattern.pattern_key
    kind = pattern.issue_kind

    if action == FeedbackAction.DISMISSED:
      if pattern.occurrence_count >= SUPPRESSION_THRESHOLD and key not in rules.suppressed_patterns:
        rules.suppressed_patterns.add(key)
        logger.info("Learned: will stop showing %s suggestions like %r", kind.value, key)
    elif action == FeedbackAction.ACCEPTED:
      rules.preferred_patterns.add(key)

    sensitivity = rules.sensitivity_by_kind.setdefault(kind, DEFAULT_SENSITIVITY)
    if action == FeedbackAction.DISMISSED:
      sensitivity = max(SENSITIVITY_FLOOR, round(sensitivity - DISMISS_STEP, 2))
    elif action == FeedbackAction.ACCEPTED:
      sensitivity = min(SENSITIVITY_CEILING, round(sensitivity + ACCEPT_STEP, 2))
    rules.sensitivity_by_kind[kind] = sensitivity

  def _save(self) -> None:
    self._persist(HISTORY_KEY, [r.to_dict() for r in self._history])
    self._persist(PATTERNS_KEY, [p.to_dict() for p in self._patterns.values()])
    self._persist(ADAPTATION_KEY, self._rules.to_dict())

  def _persist(self, key: str, value: Any) -> None:
    try:
      self._storage.set(key, value)
    except PersistenceError as e:
      self._warn(f"Could not save learning data ({key}): {e}")

  def _read(self, key: str) -> Any | None:
    try:
      return self._storage.get(key)
    except PersistenceError as e:
      self._warn(f"Could not load learning data ({key}), starting empty: {e}")
      return None

  def _load_list(self, key: str, factory: Callable[[dict[str, Any]], Any]) -> list[Any]:
    raw = self._read(key)
    if not isinstance(raw, list):
      return []

    items = []
    for entry in raw:
      try:
        items.append(factory(entry))
      except (KeyError, TypeError, ValueError) as e:
        logger.warning("Skipping malformed entry in %s: %s", key, e)
    return items

  def _load_rules(self) -> AdaptationRules:
    raw = self._read(ADAPTATION_KEY)
    if not isinstance(raw, dict):
      return AdaptationRules()
    try:
      return AdaptationRules.from_dict(raw)
    except (KeyError, TypeError, ValueError) as e:
      logger.warning("Ignoring malformed adaptation rules: %s", e)
      return AdaptationRules()

  def _warn(self, message: str) -> None:
    logger.warning(message)
    if self._on_warning is not None:
      self._on_warning(message)
