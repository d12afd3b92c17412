"""PY002: Bare `except:` clauses."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class BareExceptRule:
  """Detects `except:` with no exception type."""

  PATTERN = re.compile(r"^\s*except\s*:")

  @property
  def id(self) -> str:
    return "PY002"

  @property
  def name(self) -> str:
    return "bare-except"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.BUG

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.PYTHON

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      if self.PATTERN.match(line):
        matches.append(RuleMatch(
          line=i,
          severity=Severity.WARNING,
          message="Bare except clause catches all exceptions including system exits",
          suggestion="Use specific exception types: except ValueError: or except Exception:",
        ))

    return matches


def _create_bare_except() -> BareExceptRule:
  return BareExceptRule()


register_rule("PY002", _create_bare_except)
