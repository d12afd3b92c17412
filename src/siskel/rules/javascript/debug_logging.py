"""JS004: Debug logging left in non-test code."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class DebugLoggingRule:
  """Detects console.log/debug/warn calls outside test files."""

  PATTERN = re.compile(r"console\.(?:log|debug|warn)\b")

  @property
  def id(self) -> str:
    return "JS004"

  @property
  def name(self) -> str:
    return "debug-logging"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.STYLE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.JAVASCRIPT

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    if self._is_test_file(file_path):
      return []

    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      if line.strip().startswith("//"):
        continue

      found = self.PATTERN.search(line)
      if found:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message="Console.log statement found - consider removing for production",
          suggestion="Remove console.log or use a proper logging library",
          column=found.start() + 1,
        ))

    return matches

  def _is_test_file(self, file_path: str) -> bool:
    return "test" in file_path.lower()


def _create_debug_logging() -> DebugLoggingRule:
  return DebugLoggingRule()


register_rule("JS004", _create_debug_logging)
