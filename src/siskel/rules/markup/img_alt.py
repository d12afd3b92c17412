"""MKP001: Images without alt text."""

import re
from typing import Sequence

from siskel.models import IssueKind, Severity
from siskel.rules.base import LanguageFamily, RuleMatch, split_lines
from siskel.rules.registry import register_rule


class ImageAltRule:
  """Detects `<img>` tags with no `alt` attribute.

  Each tag on the line is checked on its own; the first tag missing
  `alt` is reported, once per line.
  """

  IMG_TAG = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
  ALT_ATTR = re.compile(r"\balt\s*=", re.IGNORECASE)

  @property
  def id(self) -> str:
    return "MKP001"

  @property
  def name(self) -> str:
    return "img-missing-alt"

  @property
  def kind(self) -> IssueKind:
    return IssueKind.ACCESSIBILITY

  @property
  def family(self) -> LanguageFamily:
    return LanguageFamily.MARKUP

  def check(self, file_path: str, content: str) -> Sequence[RuleMatch]:
    matches: list[RuleMatch] = []

    for i, line in enumerate(split_lines(content), start=1):
      for tag in self.IMG_TAG.finditer(line):
        if not self.ALT_ATTR.search(tag.group(0)):
          matches.append(RuleMatch(
            line=i,
            severity=Severity.WARNING,
            message="Image missing alt attribute - accessibility issue",
            suggestion='Add alt attribute: <img src="..." alt="descriptive text">',
            column=tag.start() + 1,
          ))
          break

    return matches


def _create_img_alt() -> ImageAltRule:
  return ImageAltRule()


register_rule("MKP001", _create_img_alt)
