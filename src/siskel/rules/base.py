"""Rule abstractions for line-oriented issue detection."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from siskel.models import IssueKind, Severity


class LanguageFamily(Enum):
  """Groups of language tags that share a rule set."""

  JAVASCRIPT = "javascript"
  PYTHON = "python"
  MARKUP = "markup"
  GENERIC = "generic"


@dataclass(frozen=True)
class RuleMatch:
  """A single rule match found during analysis.

  This is an intermediate representation that gets converted to
  CodeIssue by the IssueDetector. When `snippet` is None the detector
  uses the trimmed text of the matched line.
  """

  line: int
  severity: Severity
  message: str
  suggestion: str | None = None
  snippet: str | None = None
  column: int | None = None


class Rule(Protocol):
  """Protocol for detection rules.

  Each rule is an independent, stateless predicate over a document's
  lines. Rules belong to exactly one language family and always report
  the same issue kind.

  Example:
    class MyRule:
      @property
      def id(self) -> str:
        return "GEN900"

      @property
      def name(self) -> str:
        return "my-rule"

      @property
      def kind(self) -> IssueKind:
        return IssueKind.STYLE

      @property
      def family(self) -> LanguageFamily:
        return LanguageFamily.GENERIC

      def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
        return []
  """

  @property
  def id(self) -> str:
    """Unique identifier for this rule (e.g., 'JS002')."""
    ...

  @property
  def name(self) -> str:
    """Human-readable rule name (e.g., 'sql-concatenation')."""
    ...

  @property
  def kind(self) -> IssueKind:
    """The issue kind this rule reports."""
    ...

  @property
  def family(self) -> LanguageFamily:
    """The language family this rule applies to."""
    ...

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    """Check content for issues.

    Args:
      file_path: Document identifier (used for test-path detection).
      content: Full document text.

    Returns:
      Sequence of RuleMatch objects in line-ascending order.
    """
    ...


def split_lines(content: str) -> list[str]:
  """Split document text into lines, accepting LF and CRLF endings.

  Only `\\n` separates lines so numbering matches what editors show;
  a trailing `\\r` is dropped from each line.
  """
  return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]
