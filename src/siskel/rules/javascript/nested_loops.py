"""JS005: Nested `for` loops."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule

LOOP_OPEN = re.compile(r"\bfor\s*\(")

# How many lines after a loop header are scanned for an inner loop
LOOKAHEAD_LINES = 20


def has_nested_loop(lines: Sequence[str], start: int) -> bool:
  """Check whether the loop opening at `start` contains another loop.

  Scans at most LOOKAHEAD_LINES lines from `start` (inclusive), keeping a
  running brace depth. A second loop header seen while the depth is
  exactly 1 is directly inside the first loop's body. Each line is tested
  for a loop header before its braces are counted.

  Args:
    lines: Document lines.
    start: 0-based index of the candidate outer loop line.

  Returns:
    True if a nested loop was found.
  """
  depth = 0
  found_loop = False

  for line in lines[start:start + LOOKAHEAD_LINES]:
    if LOOP_OPEN.search(line.strip()):
      if found_loop and depth == 1:
        return True
      found_loop = True
    depth += line.count("{")
    depth -= line.count("}")

  return False


class NestedLoopRule:
  """Flags the outer line of a loop that directly contains another loop.

  This is a brace-counting heuristic, not a parser. Braces inside strings
  and loops split across lines can produce false positives or negatives.
  """

  @property
  def id(self) -> str:
    return "JS005"

  @property
  def name(self) -> str:
    return "nested-loop"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.PERFORMANCE

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.JAVASCRIPT

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    lines = split_lines(content)
    matches: list[RuleMatch] = []

    for index, line in enumerate(lines):
      if LOOP_OPEN.search(line.strip()) and has_nested_loop(lines, index):
        matches.append(RuleMatch(
          line=index + 1,
          severity=Severity.WARNING,
          message="Nested loop detected - potential O(n²) complexity",
          suggestion="Consider using a Map or Set for O(1) lookups instead of nested loops",
        ))

    return matches


def _create_nested_loops() -> NestedLoopRule:
  return NestedLoopRule()


register_rule("JS005", _create_nested_loops)
