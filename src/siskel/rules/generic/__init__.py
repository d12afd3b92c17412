"""Fallback rules for languages without a dedicated family."""

from siskel.rules.generic.line_length import LineLengthRule
from siskel.rules.generic.todos import TodoCommentRule

__all__ = [
  "LineLengthRule",
  "TodoCommentRule",
]
