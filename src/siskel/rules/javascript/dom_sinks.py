"""JS003: Dangerous DOM sinks (innerHTML assignment, document.write, eval)."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class DangerousDomSinkRule:
  """Detects sinks that turn strings into markup or code."""

  PATTERN = re.compile(r"innerHTML\s*=(?!=)|document\.write|\beval\(", re.IGNORECASE)

  @property
  def id(self) -> str:
    return "JS003"

  @property
  def name(self) -> str:
    return "dangerous-dom-sink"

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
          severity=Severity.WARNING,
          message="Potential XSS vulnerability - dangerous DOM manipulation detected",
          suggestion="Use textContent instead of innerHTML, or sanitize user input",
          column=found.start() + 1,
        ))

    return matches


def _create_dom_sinks() -> DangerousDomSinkRule:
  return DangerousDomSinkRule()


register_rule("JS003", _create_dom_sinks)
