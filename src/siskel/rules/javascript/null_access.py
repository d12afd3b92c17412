"""JS001: Property access without optional chaining or a null guard."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class NullAccessRule:
  """Flags member access that ends an expression with no visible guard.

  A line counts as guarded when it uses optional chaining, a logical
  fallback (`||`, `&&`, `??`) or an `if`. This is a heuristic over a
  single line; guards on earlier lines are not seen.
  """

  PROPERTY_ACCESS = re.compile(r"\.\w+\s*[;)}]")
  GUARDS = re.compile(r"\?\.|\|\||&&|\?\?|\bif\b")
  FIRST_MEMBER = re.compile(r"\.(\w+)")

  @property
  def id(self) -> str:
    return "JS001"

  @property
  def name(self) -> str:
    return "unguarded-property-access"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.BUG

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.JAVASCRIPT

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      stripped = line.strip()
      if stripped.startswith("//") or stripped.startswith("*"):
        continue

      if self.PROPERTY_ACCESS.search(line) and not self.GUARDS.search(line):
        guarded = self.FIRST_MEMBER.sub(r"?.\1", stripped, count=1)
        matches.append(RuleMatch(
          line=i,
          severity=Severity.WARNING,
          message="Potential null/undefined access without optional chaining or null check",
          suggestion=f"Consider using optional chaining (?.) or adding a null check: {guarded}",
        ))

    return matches


def _create_null_access() -> NullAccessRule:
  return NullAccessRule()


register_rule("JS001", _create_null_access)
