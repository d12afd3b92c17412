"""Core domain models for issue detection, interventions and learning."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any


class IssueKind(Enum):
  """Category of a detected issue."""

  BUG = "bug"
  SECURITY = "security"
  PERFORMANCE = "performance"
  STYLE = "style"
  ACCESSIBILITY = "accessibility"
  CODE_SMELL = "code-smell"


class Severity(Enum):
  """Issue severity levels, ordered critical > warning > info."""

  CRITICAL = "critical"
  WARNING = "warning"
  INFO = "info"

  @property
  def rank(self) -> int:
    """Numeric rank for ordering (higher is more severe)."""
    return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
  Severity.CRITICAL: 3,
  Severity.WARNING: 2,
  Severity.INFO: 1,
}


class FrequencyPolicy(Enum):
  """How aggressively detected issues are surfaced."""

  MINIMAL = "minimal"
  BALANCED = "balanced"
  UNRESTRICTED = "unrestricted"


class FeedbackAction(Enum):
  """User reaction to an intervention."""

  ACCEPTED = "accepted"
  DISMISSED = "dismissed"
  MODIFIED = "modified"


class Reaction(Enum):
  """Most recent reaction recorded for a learning pattern."""

  PREFERRED = "preferred"
  REJECTED = "rejected"
  NEUTRAL = "neutral"


class Tone(Enum):
  """Tone of a personality response."""

  DIRECT = "direct"
  SUPPORTIVE = "supportive"
  QUESTIONING = "questioning"
  URGENT = "urgent"
  GENTLE = "gentle"


class PersonalityId(Enum):
  """The six response personalities."""

  DIRECT = "direct"
  SUPPORTIVE = "supportive"
  QUESTIONING = "questioning"
  SECURITY = "security-first"
  PERFORMANCE = "performance-first"
  ACCESSIBILITY = "accessibility-first"


@dataclass(frozen=True)
class Document:
  """A source document handed to the detector."""

  path: str
  text: str
  language_tag: str = ""


@dataclass(frozen=True)
class CodeIssue:
  """A single finding produced by one analysis pass."""

  kind: IssueKind
  severity: Severity
  file: str
  line: int
  snippet: str
  message: str
  remedy: str | None = None
  column: int | None = None

  def with_remedy(self, remedy: str | None) -> "CodeIssue":
    """Return a copy with the remedy text replaced."""
    return replace(self, remedy=remedy)


@dataclass(frozen=True)
class IssueContext:
  """The parts of a CodeIssue a personality and the learning store need."""

  file: str
  line: int
  snippet: str
  kind: IssueKind
  severity: Severity
  description: str
  suggestion: str | None = None

  @classmethod
  def from_issue(cls, issue: CodeIssue) -> "IssueContext":
    return cls(
      file=issue.file,
      line=issue.line,
      snippet=issue.snippet,
      kind=issue.kind,
      severity=issue.severity,
      description=issue.message,
      suggestion=issue.remedy,
    )


@dataclass(frozen=True)
class PersonalityResponse:
  """Presentation payload produced by a personality."""

  message: str
  icon: str
  tone: Tone
  show_example: bool = False
  example: str | None = None


@dataclass
class Intervention:
  """An issue that survived filtering and was given a response.

  `dismissed` and `accepted` start unset and at most one of them is
  ever set. The engine enforces that; this class only reports state.
  """

  id: str
  context: IssueContext
  response: PersonalityResponse
  created_at: datetime
  personality: PersonalityId = PersonalityId.SUPPORTIVE
  dismissed: bool | None = None
  accepted: bool | None = None

  @property
  def resolved(self) -> bool:
    return bool(self.dismissed) or bool(self.accepted)

  @property
  def active(self) -> bool:
    return not self.dismissed


@dataclass(frozen=True)
class FeedbackRecord:
  """One accept/dismiss/modify event."""

  intervention_id: str
  action: FeedbackAction
  timestamp: datetime
  issue_kind: IssueKind
  pattern_key: str
  feedback: str | None = None
  personality: str | None = None

  def to_dict(self) -> dict[str, Any]:
    return {
      "intervention_id": self.intervention_id,
      "action": self.action.value,
      "timestamp": self.timestamp.isoformat(),
      "issue_kind": self.issue_kind.value,
      "pattern_key": self.pattern_key,
      "feedback": self.feedback,
      "personality": self.personality,
    }

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> "FeedbackRecord":
    return cls(
      intervention_id=data["intervention_id"],
      action=FeedbackAction(data["action"]),
      timestamp=datetime.fromisoformat(data["timestamp"]),
      issue_kind=IssueKind(data["issue_kind"]),
      pattern_key=data["pattern_key"],
      feedback=data.get("feedback"),
      personality=data.get("personality"),
    )


@dataclass(frozen=True)
class LearningPattern:
  """Aggregate of all feedback seen for one pattern key."""

  pattern_key: str
  issue_kind: IssueKind
  reaction: Reaction
  occurrence_count: int
  last_updated: datetime

  def to_dict(self) -> dict[str, Any]:
    return {
      "pattern_key": self.pattern_key,
      "issue_kind": self.issue_kind.value,
      "reaction": self.reaction.value,
      "occurrence_count": self.occurrence_count,
      "last_updated": self.last_updated.isoformat(),
    }

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> "LearningPattern":
    return cls(
      pattern_key=data["pattern_key"],
      issue_kind=IssueKind(data["issue_kind"]),
      reaction=Reaction(data["reaction"]),
      occurrence_count=int(data["occurrence_count"]),
      last_updated=datetime.fromisoformat(data["last_updated"]),
    )


@dataclass
class AdaptationRules:
  """Decision state derived from feedback history."""

  suppressed_patterns: set[str] = field(default_factory=set)
  preferred_patterns: set[str] = field(default_factory=set)
  sensitivity_by_kind: dict[IssueKind, float] = field(default_factory=dict)

  def copy(self) -> "AdaptationRules":
    return AdaptationRules(
      suppressed_patterns=set(self.suppressed_patterns),
      preferred_patterns=set(self.preferred_patterns),
      sensitivity_by_kind=dict(self.sensitivity_by_kind),
    )

  def to_dict(self) -> dict[str, Any]:
    return {
      "suppressed_patterns": sorted(self.suppressed_patterns),
      "preferred_patterns": sorted(self.preferred_patterns),
      "sensitivity_by_kind": {
        kind.value: value for kind, value in self.sensitivity_by_kind.items()
      },
    }

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> "AdaptationRules":
    return cls(
      suppressed_patterns=set(data.get("suppressed_patterns", [])),
      preferred_patterns=set(data.get("preferred_patterns", [])),
      sensitivity_by_kind={
        IssueKind(kind): float(value)
        for kind, value in data.get("sensitivity_by_kind", {}).items()
      },
    )
