"""Intervention engine: turns detected issues into user-facing interventions.

One analysis cycle per document moves through
IDLE -> DETECTING -> FILTERING -> RESPONDING -> DELIVERED -> IDLE.
Cycles for the same document never overlap; cycles for different
documents may run concurrently and only share the FeedbackStore.
"""

import logging
import threading
import uuid
from datetime import datetime
from enum import Enum
from typing import Callable

from siskel.config.settings import Settings
from siskel.feedback.store import FeedbackStore, WarningSink
from siskel.interventions.scheduler import DebounceScheduler
from siskel.models import (
  CodeIssue,
  Document,
  FeedbackAction,
  FrequencyPolicy,
  Intervention,
  IssueContext,
  IssueKind,
  PersonalityId,
  Severity,
)
from siskel.personalities import respond
from siskel.rules.detector import CooldownGate, RateLimitedDetector

logger = logging.getLogger(__name__)

Enhancer = Callable[[str, str, IssueKind], str]
Subscriber = Callable[[Intervention], None]


class CycleState(Enum):
  """Stage of a document's analysis cycle."""

  IDLE = "idle"
  DETECTING = "detecting"
  FILTERING = "filtering"
  RESPONDING = "responding"
  DELIVERED = "delivered"


def passes_frequency_policy(issue: CodeIssue, policy: FrequencyPolicy) -> bool:
  """Whether an issue survives the configured frequency policy."""
  if policy == FrequencyPolicy.MINIMAL:
    return issue.severity == Severity.CRITICAL
  if policy == FrequencyPolicy.BALANCED:
    return issue.severity != Severity.INFO or issue.kind == IssueKind.SECURITY
  return True


def new_intervention_id(now: datetime) -> str:
  """`<epoch-millis>-<8 hex chars>`."""
  return f"{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:8]}"


class InterventionEngine:
  """Orchestrates detection, filtering, responses and feedback.

  Example:
    engine = InterventionEngine(Settings(), FeedbackStore())
    engine.subscribe(print)
    engine.on_change(Document("app.ts", text, "typescript"))
  """

  def __init__(
    self,
    settings: Settings | None = None,
    store: FeedbackStore | None = None,
    detector: RateLimitedDetector | None = None,
    enhancer: Enhancer | None = None,
    scheduler: DebounceScheduler | None = None,
    clock: Callable[[], datetime] = datetime.now,
    id_factory: Callable[[datetime], str] = new_intervention_id,
    on_warning: WarningSink | None = None,
  ):
    self.settings = settings or Settings()
    self.store = store or FeedbackStore(on_warning=on_warning)
    self.detector = detector or RateLimitedDetector(
      gate=CooldownGate(float(self.settings.cooldown_seconds))
    )
    self.scheduler = scheduler or DebounceScheduler(self.settings.debounce_ms / 1000)
    self._enhancer = enhancer
    self._clock = clock
    self._id_factory = id_factory
    self._on_warning = on_warning

    self._lock = threading.RLock()
    self._interventions: list[Intervention] = []
    self._by_id: dict[str, Intervention] = {}
    self._subscribers: list[Subscriber] = []
    self._states: dict[str, CycleState] = {}
    self._in_flight: set[str] = set()

    self._personality = self.settings.active_personality
    self._paused = False
    self._focus_mode = False

  # Triggers

  def on_change(self, document: Document) -> None:
    """Schedule a debounced analysis after an edit."""
    if not self._proactive_allowed():
      return
    self.scheduler.schedule(document.path, lambda: self._run_proactive(document))

  def on_save(self, document: Document) -> list[Intervention]:
    """Analyze immediately after a save (still subject to cooldown)."""
    if not self.settings.auto_review_on_save or not self._proactive_allowed():
      return []
    return self._run_proactive(document)

  def analyze(self, document: Document) -> list[Intervention]:
    """Run one proactive cycle now, subject to cooldown and learning."""
    return self._run_cycle(
      document,
      detect=self.detector.detect,
      bypass_learning=False,
      limit=self.settings.max_suggestions_per_cycle,
    )

  def request_review(self, document: Document) -> list[Intervention]:
    """Full on-demand review.

    Ignores the cooldown, suppressed patterns, sensitivity and the
    per-cycle limit. The frequency policy still applies.
    """
    return self._run_cycle(
      document,
      detect=self.detector.detect_now,
      bypass_learning=True,
      limit=None,
    )

  # Presentation surface

  def accept(self, intervention_id: str) -> bool:
    """Mark an intervention accepted. False if unknown or already resolved."""
    return self._resolve(intervention_id, FeedbackAction.ACCEPTED)

  def dismiss(self, intervention_id: str, feedback: str | None = None) -> bool:
    """Mark an intervention dismissed. False if unknown or already resolved."""
    return self._resolve(intervention_id, FeedbackAction.DISMISSED, feedback)

  def get_active(self) -> list[Intervention]:
    with self._lock:
      return [i for i in self._interventions if i.active]

  def get(self, intervention_id: str) -> Intervention | None:
    with self._lock:
      return self._by_id.get(intervention_id)

  def subscribe(self, callback: Subscriber) -> Callable[[], None]:
    """Call `callback` once per new intervention. Returns an unsubscribe function."""
    with self._lock:
      self._subscribers.append(callback)

    def unsubscribe() -> None:
      with self._lock:
        if callback in self._subscribers:
          self._subscribers.remove(callback)

    return unsubscribe

  def state(self, path: str) -> CycleState:
    with self._lock:
      return self._states.get(path, CycleState.IDLE)

  # Runtime controls

  @property
  def personality(self) -> PersonalityId:
    return self._personality

  @property
  def paused(self) -> bool:
    return self._paused

  @property
  def focus_mode(self) -> bool:
    return self._focus_mode

  def set_personality(self, personality: PersonalityId) -> None:
    self._personality = personality
    logger.info("Personality changed to %s", personality.value)

  def pause(self) -> None:
    self._paused = True
    self.scheduler.cancel_all()

  def resume(self) -> None:
    self._paused = False

  def toggle(self) -> bool:
    """Flip paused state. Returns True if analysis is now running."""
    if self._paused:
      self.resume()
    else:
      self.pause()
    return not self._paused

  def set_focus_mode(self, enabled: bool) -> None:
    """Silence proactive analysis. On-demand review keeps working."""
    self._focus_mode = enabled
    if enabled:
      self.scheduler.cancel_all()

  def shutdown(self) -> None:
    """Cancel pending analyses and drop all interventions."""
    self.scheduler.cancel_all()
    with self._lock:
      self._interventions.clear()
      self._by_id.clear()
      self._subscribers.clear()

  # Cycle

  def _proactive_allowed(self) -> bool:
    return self.settings.proactive_analysis_enabled and not self._paused and not self._focus_mode

  def _run_proactive(self, document: Document) -> list[Intervention]:
    if not self._proactive_allowed():
      return []
    try:
      return self.analyze(document)
    except Exception:
      logger.exception("Analysis of %s failed", document.path)
      return []

  def _run_cycle(
    self,
    document: Document,
    detect: Callable[[Document], list[CodeIssue]],
    bypass_learning: bool,
    limit: int | None,
  ) -> list[Intervention]:
    key = document.path
    with self._lock:
      if key in self._in_flight:
        logger.debug("Skipping %s: analysis already running", key)
        return []
      self._in_flight.add(key)

    try:
      self._set_state(key, CycleState.DETECTING)
      issues = detect(document)
      if not issues:
        return []

      self._set_state(key, CycleState.FILTERING)
      issues = self._filter(issues, bypass_learning, limit)

      self._set_state(key, CycleState.RESPONDING)
      created: list[Intervention] = []
      for issue in issues:
        created.append(self._build(document, issue, {i.id for i in created}))

      self._set_state(key, CycleState.DELIVERED)
      self._deliver(created)
      return created
    finally:
      with self._lock:
        self._in_flight.discard(key)
      self._set_state(key, CycleState.IDLE)

  def _filter(
    self,
    issues: list[CodeIssue],
    bypass_learning: bool,
    limit: int | None,
  ) -> list[CodeIssue]:
    if not bypass_learning:
      issues = [i for i in issues if self.store.should_show(i)]
    policy = self.settings.intervention_frequency
    issues = [i for i in issues if passes_frequency_policy(i, policy)]
    if limit is not None:
      issues = issues[:limit]
    return issues

  def _build(self, document: Document, issue: CodeIssue, taken: set[str]) -> Intervention:
    issue = self._enhance(document, issue)
    personality = self._personality
    context = IssueContext.from_issue(issue)
    now = self._clock()

    with self._lock:
      intervention_id = self._id_factory(now)
      while intervention_id in self._by_id or intervention_id in taken:
        intervention_id = self._id_factory(now)

    return Intervention(
      id=intervention_id,
      context=context,
      response=respond(personality, context),
      created_at=now,
      personality=personality,
    )

  def _enhance(self, document: Document, issue: CodeIssue) -> CodeIssue:
    if not self.settings.use_ai_enhancement or self._enhancer is None:
      return issue

    try:
      remedy = self._enhancer(document.text, document.language_tag, issue.kind)
    except Exception as e:
      self._warn(f"AI enhancement failed, keeping original suggestion: {e}")
      return issue

    if not remedy or not remedy.strip():
      logger.debug("AI enhancement returned nothing for %s:%d", issue.file, issue.line)
      return issue
    return issue.with_remedy(remedy.strip())

  def _deliver(self, created: list[Intervention]) -> None:
    with self._lock:
      for intervention in created:
        self._interventions.append(intervention)
        self._by_id[intervention.id] = intervention
      subscribers = list(self._subscribers)

    for intervention in created:
      for callback in subscribers:
        try:
          callback(intervention)
        except Exception:
          logger.exception("Subscriber failed for intervention %s", intervention.id)

  def _resolve(
    self,
    intervention_id: str,
    action: FeedbackAction,
    feedback: str | None = None,
  ) -> bool:
    with self._lock:
      intervention = self._by_id.get(intervention_id)
      if intervention is None or intervention.resolved:
        return False
      if action == FeedbackAction.ACCEPTED:
        intervention.accepted = True
      else:
        intervention.dismissed = True

    self.store.record_feedback(intervention, action, feedback)
    return True

  def _set_state(self, key: str, state: CycleState) -> None:
    with self._lock:
      self._states[key] = state
    logger.debug("%s: %s", key, state.value)

  def _warn(self, message: str) -> None:
    logger.warning(message)
    if self._on_warning is not None:
      self._on_warning(message)
