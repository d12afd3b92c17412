"""PY001: Interpolated strings passed to execute()-style calls."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class SqlInterpolationRule:
  """Detects SQL built with string formatting inside execute calls.

  Covers f-strings with placeholders, `%` formatting, `str.format` and
  `+` concatenation as the first argument of `execute` / `executemany`.
  Parameterized calls (`execute("... %s", (value,))`) are not flagged.
  """

  PATTERN = re.compile(
    r"""\bexecute(?:many)?\s*\(\s*
    (?:
      [rRbB]?[fF][rRbB]?["'].*\{           # f-string with a placeholder
      |[rRbBuU]?(?P<quote>"{3}|'{3}|["']).*?(?P=quote)\s*
      (?:
        %\s*[\w(]                          # percent formatting
        |\.format\s*\(                     # str.format
        |\+\s*\w                           # concatenation
      )
    )
    """,
    re.VERBOSE,
  )

  @property
  def id(self) -> str:
    return "PY001"

  @property
  def name(self) -> str:
    return "sql-interpolation"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.SECURITY

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.PYTHON

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      if line.strip().startswith("#"):
        continue

      found = self.PATTERN.search(line)
      if found:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.CRITICAL,
          message="Potential SQL injection - string formatting in SQL query",
          suggestion=(
            'Use parameterized queries: '
            'cursor.execute("SELECT * FROM table WHERE id = %s", (id,))'
          ),
          column=found.start() + 1,
        ))

    return matches


def _create_sql_execute() -> SqlInterpolationRule:
  return SqlInterpolationRule()


register_rule("PY001", _create_sql_execute)
