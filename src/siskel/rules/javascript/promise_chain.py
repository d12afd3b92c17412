"""JS006: Promise chains in files that never use async/await."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class PromiseChainRule:
  """Detects `.then(` / `.catch(` when the file has no `async` keyword.

  Files that already use async/await are assumed to mix styles on
  purpose and are skipped entirely.
  """

  CHAIN = re.compile(r"\.then\(|\.catch\(")
  ASYNC_KEYWORD = re.compile(r"\basync\b")

  @property
  def id(self) -> str:
    return "JS006"

  @property
  def name(self) -> str:
    return "promise-chain"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.STYLE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.JAVASCRIPT

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    if self.ASYNC_KEYWORD.search(content):
      return []

    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      found = self.CHAIN.search(line)
      if found:
        matches.append(RuleMatch(
          line=i,
          severity=Severity.INFO,
          message="Promise chain detected - consider using async/await for better readability",
          suggestion="Convert to async/await syntax for better readability and error handling",
          column=found.start() + 1,
        ))

    return matches


def _create_promise_chain() -> PromiseChainRule:
  return PromiseChainRule()


register_rule("JS006", _create_promise_chain)
