"""JS002: SQL built by string concatenation into a query variable."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class SqlConcatenationRule:
  """Detects `query = "..." + value` and `query = prefix + value`.

  Any variable whose name ends in `query` (case-insensitive) is treated
  as a query variable.
  """

  PATTERN = re.compile(
    r"""query\s*=\s*["'`].*\+\s*\w+   # literal followed by concatenation
    |query\s*=\s*\w+\s*\+             # identifier followed by concatenation
    """,
    re.IGNORECASE | re.VERBOSE,
  )

  @property
  def id(self) -> str:
    return "JS002"

  @property
  def name(self) -> str:
    return "sql-concatenation"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.SECURITY

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.JAVASCRIPT

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      found = self.PATTERN.search(line)
      if found:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.CRITICAL,
          message="Potential SQL injection vulnerability detected",
          suggestion="Use parameterized queries or prepared statements instead of string concatenation",
          column=found.start() + 1,
        ))

    return matches


def _create_sql_concat() -> SqlConcatenationRule:
  return SqlConcatenationRule()


register_rule("JS002", _create_sql_concat)
