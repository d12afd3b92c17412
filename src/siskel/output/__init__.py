"""Output formatting."""

from siskel.output.formatter import (
  GitHubFormatter,
  JsonFormatter,
  MarkdownFormatter,
  OutputFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "GitHubFormatter",
  "JsonFormatter",
  "MarkdownFormatter",
  "OutputFormatter",
  "TerminalFormatter",
  "get_formatter",
]
