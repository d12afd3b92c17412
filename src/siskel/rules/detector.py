"""Issue detection: runs a language family's rules over a document."""

import logging
import threading
import time
from typing import Callable

from siskel.models import CodeIssue, Document
from siskel.rules.base import LanguageFamily, Rule, RuleMatch, split_lines
from siskel.rules.registry import RuleRegistry, get_rules_for_family

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

_LANGUAGE_FAMILIES: dict[str, LanguageFamily] = {
  "javascript": LanguageFamily.JAVASCRIPT,
  "javascriptreact": LanguageFamily.JAVASCRIPT,
  "typescript": LanguageFamily.JAVASCRIPT,
  "typescriptreact": LanguageFamily.JAVASCRIPT,
  "python": LanguageFamily.PYTHON,
  "html": LanguageFamily.MARKUP,
  "vue": LanguageFamily.MARKUP,
  "svelte": LanguageFamily.MARKUP,
}


def resolve_family(language_tag: str | None) -> LanguageFamily:
  """Map a language tag to its rule family.

  Unknown, empty or malformed tags fall back to the generic family.
  """
  if not language_tag:
    return LanguageFamily.GENERIC
  return _LANGUAGE_FAMILIES.get(language_tag.strip().lower(), LanguageFamily.GENERIC)


class IssueDetector:
  """Runs detection rules and converts their matches to CodeIssues.

  `detect` is a pure function of its inputs: the same text, tag and
  path always give the same issues in the same order. Issues are sorted
  by line; issues on the same line keep rule evaluation order.

  Example:
    detector = IssueDetector()
    issues = detector.detect(text, "typescript", "src/app.ts")
  """

  def __init__(self, rules: list[Rule] | None = None):
    """Initialize the detector.

    Args:
      rules: Optional explicit rule list. If None, rules are loaded from
             the registry on first use.
    """
    self._rules = rules
    self._by_family: dict[LanguageFamily, list[Rule]] = {}

  def rules_for(self, family: LanguageFamily) -> list[Rule]:
    """Rules evaluated for a language family, in evaluation order."""
    if family not in self._by_family:
      if self._rules is not None:
        self._by_family[family] = [r for r in self._rules if r.family == family]
      else:
        RuleRegistry.load_all()
        self._by_family[family] = get_rules_for_family(family)
    return self._by_family[family]

  def detect(self, text: str, language_tag: str, path: str = "") -> list[CodeIssue]:
    """Detect issues in document text.

    Args:
      text: Full document text.
      language_tag: Editor language id (e.g. 'typescript', 'python').
      path: Document identifier used in issue locations.

    Returns:
      Issues in line-ascending order.
    """
    family = resolve_family(language_tag)
    lines = split_lines(text)
    issues: list[CodeIssue] = []

    for rule in self.rules_for(family):
      for match in rule.check(path, text):
        issues.append(self._to_issue(rule, match, lines, path))

    # sort() is stable, so same-line issues keep rule order
    issues.sort(key=lambda issue: issue.line)
    return issues

  def detect_document(self, document: Document) -> list[CodeIssue]:
    """Detect issues in a Document."""
    return self.detect(document.text, document.language_tag, document.path)

  def _to_issue(
    self,
    rule: Rule,
    match: RuleMatch,
    lines: list[str],
    path: str,
  ) -> CodeIssue:
    snippet = match.snippet
    if snippet is None:
      snippet = lines[match.line - 1].strip() if 0 < match.line <= len(lines) else ""

    return CodeIssue(
      kind=rule.kind,
      severity=match.severity,
      file=path,
      line=match.line,
      column=match.column,
      snippet=snippet,
      message=match.message,
      remedy=match.suggestion,
    )


class CooldownGate:
  """Per-document minimum interval between detection passes.

  A pass attempted inside the window is refused and does not move the
  window. Safe to share between threads.
  """

  def __init__(self, cooldown_seconds: float = 20.0, clock: Clock = time.monotonic):
    self._cooldown = cooldown_seconds
    self._clock = clock
    self._last_run: dict[str, float] = {}
    self._lock = threading.Lock()

  @property
  def cooldown_seconds(self) -> float:
    return self._cooldown

  def try_acquire(self, key: str) -> bool:
    """Record a pass for `key` if the cooldown has elapsed.

    Returns:
      True if the pass may run, False if it falls inside the window.
    """
    with self._lock:
      now = self._clock()
      last = self._last_run.get(key)
      if last is not None and now - last < self._cooldown:
        return False
      self._last_run[key] = now
      return True

  def mark(self, key: str) -> None:
    """Record a pass for `key` unconditionally."""
    with self._lock:
      self._last_run[key] = self._clock()

  def remaining(self, key: str) -> float:
    """Seconds left in the window for `key` (0 if none)."""
    with self._lock:
      last = self._last_run.get(key)
      if last is None:
        return 0.0
      return max(0.0, self._cooldown - (self._clock() - last))

  def reset(self, key: str | None = None) -> None:
    """Forget one document's window, or all windows."""
    with self._lock:
      if key is None:
        self._last_run.clear()
      else:
        self._last_run.pop(key, None)


class RateLimitedDetector:
  """IssueDetector behind a per-document CooldownGate.

  A call inside the cooldown window returns an empty list rather than
  raising.
  """

  def __init__(
    self,
    detector: IssueDetector | None = None,
    gate: CooldownGate | None = None,
  ):
    self.detector = detector or IssueDetector()
    self.gate = gate or CooldownGate()

  def detect(self, document: Document) -> list[CodeIssue]:
    """Detect issues unless the document is cooling down."""
    if not self.gate.try_acquire(document.path):
      logger.debug(
        "Skipping %s: cooldown active (%.1fs left)",
        document.path,
        self.gate.remaining(document.path),
      )
      return []
    return self.detector.detect_document(document)

  def detect_now(self, document: Document) -> list[CodeIssue]:
    """Detect issues ignoring the cooldown, still recording the pass."""
    self.gate.mark(document.path)
    return self.detector.detect_document(document)
