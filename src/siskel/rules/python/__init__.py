"""Rules for the Python family."""

from siskel.rules.python.bare_except import BareExceptRule
from siskel.rules.python.return_annotation import MissingReturnAnnotationRule
from siskel.rules.python.sql_execute import SqlInterpolationRule

__all__ = [
  "BareExceptRule",
  "MissingReturnAnnotationRule",
  "SqlInterpolationRule",
]
