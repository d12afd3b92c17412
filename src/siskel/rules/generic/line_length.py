"""GEN002: Detection of overly long lines."""

from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class LineLengthRule:
  """Detects lines longer than MAX_LENGTH characters.

  The reported snippet is cut to SNIPPET_LENGTH characters followed by
  an ellipsis.
  """

  MAX_LENGTH = 120
  SNIPPET_LENGTH = 100

  @property
  def id(self) -> str:
    return "GEN002"

  @property
  def name(self) -> str:
    return "long-line"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.STYLE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.GENERIC

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      length = len(line)
      if length > self.MAX_LENGTH:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message=f"Line exceeds {self.MAX_LENGTH} characters ({length}) - consider breaking it up",
          suggestion="Break long lines for better readability",
          snippet=line.strip()[:self.SNIPPET_LENGTH] + "...",
        ))

    return matches


def _create_line_length() -> LineLengthRule:
  return LineLengthRule()


register_rule("GEN002", _create_line_length)
