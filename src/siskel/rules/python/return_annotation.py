"""PY003: Function definitions without a return type annotation."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class MissingReturnAnnotationRule:
  """Detects single-line `def` headers that lack `->`.

  Headers split across several lines are skipped, since the closing
  parenthesis is not on the `def` line.
  """

  DEF_HEADER = re.compile(r"^\s*(?:async\s+)?def\s+(\w+)\s*\(.*\)\s*(->.*)?:\s*(?:#.*)?$")

  @property
  def id(self) -> str:
    return "PY003"

  @property
  def name(self) -> str:
    return "missing-return-annotation"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.STYLE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.PYTHON

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      header = self.DEF_HEADER.match(line)
      if header and header.group(2) is None:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message=f"Function '{header.group(1)}' is missing a return type annotation",
          suggestion="Add type hints for better code documentation and IDE support",
        ))

    return matches


def _create_return_annotation() -> MissingReturnAnnotationRule:
  return MissingReturnAnnotationRule()


register_rule("PY003", _create_return_annotation)
