"""Rules for HTML and templating languages."""

from siskel.rules.markup.button_label import ButtonLabelRule
from siskel.rules.markup.img_alt import ImageAltRule
from siskel.rules.markup.inline_style import InlineStyleRule

__all__ = [
  "ButtonLabelRule",
  "ImageAltRule",
  "InlineStyleRule",
]
