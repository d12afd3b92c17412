"""GEN001: Detection of TODO/FIXME/HACK/XXX comments."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class TodoCommentRule:
  """Detects TODO, FIXME, HACK, and XXX markers inside comments."""

  PATTERN = re.compile(
    r"(?:#|//|/\*|\*|<!--|--|;)"  # Comment prefix
    r".*?\b(TODO|FIXME|HACK|XXX)\b",  # Keyword anywhere after it
    re.IGNORECASE,
  )

  @property
  def id(self) -> str:
    return "GEN001"

  @property
  def name(self) -> str:
    return "todo-comment"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.CODE_SMELL

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.GENERIC

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      found = self.PATTERN.search(line)
      if found:
        keyword = found.group(1).upper()
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message=f"{keyword} comment found",
          suggestion="Consider addressing this before merging to production",
          column=found.start(1) + 1,
        ))

    return matches


def _create_todo_comment() -> TodoCommentRule:
  return TodoCommentRule()


register_rule("GEN001", _create_todo_comment)
