"""MKP002: Buttons with neither an accessible label nor visible text."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class ButtonLabelRule:
  """Detects `<button>` tags that screen readers cannot name.

  A button passes if the line carries `aria-label` / `aria-labelledby`
  or any non-blank text between a `>` and the next `<`.
  """

  BUTTON_TAG = re.compile(r"<button\b[^>]*>", re.IGNORECASE)
  ARIA_LABEL = re.compile(r"aria-label(?:ledby)?\s*=", re.IGNORECASE)
  VISIBLE_TEXT = re.compile(r">\s*[^<\s][^<]*<")

  @property
  def id(self) -> str:
    return "MKP002"

  @property
  def name(self) -> str:
    return "button-missing-label"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.ACCESSIBILITY

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.MARKUP

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      tag = self.BUTTON_TAG.search(line)
      if tag is None:
        continue
      if self.ARIA_LABEL.search(line) or self.VISIBLE_TEXT.search(line):
        continue

      matches.append(RuleMatch(
        line=i,
        severity=Severity.INFO,
        message="Button may need aria-label for screen readers",
        suggestion="Add aria-label if button text is not descriptive enough",
        column=tag.start() + 1,
      ))

    return matches


def _create_button_label() -> ButtonLabelRule:
  return ButtonLabelRule()


register_rule("MKP002", _create_button_label)
