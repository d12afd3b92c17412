"""MKP003: Inline style attributes."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class InlineStyleRule:
  """Detects `style=` attributes."""

  PATTERN = re.compile(r"(?<![\w-])style\s*=", re.IGNORECASE)

  @property
  def id(self) -> str:
    return "MKP003"

  @property
  def name(self) -> str:
    return "inline-style"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.STYLE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.MARKUP

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      found = self.PATTERN.search(line)
      if found:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message="Inline styles detected - consider using CSS classes",
          suggestion="Move styles to external stylesheet or style tag for better maintainability",
          column=found.start() + 1,
        ))

    return matches


def _create_inline_style() -> InlineStyleRule:
  return InlineStyleRule()


register_rule("MKP003", _create_inline_style)
