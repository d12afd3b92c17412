"""Output formatting for intervention lists."""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from siskel.models import Intervention, Severity


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, interventions: list[Intervention]) -> str:
    """Format interventions for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, interventions: list[Intervention]) -> str:
    if not interventions:
      self.console.print("\n[green]No issues found.[/green]")
      return ""

    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity", width=10)
    table.add_column("Kind", width=13)
    table.add_column("File", width=30)
    table.add_column("Line", width=6, justify="right")
    table.add_column("Feedback", min_width=40)

    for intervention in interventions:
      ctx = intervention.context
      style = self.SEVERITY_STYLES.get(ctx.severity, "")
      table.add_row(
        Text(ctx.severity.value.upper(), style=style),
        ctx.kind.value,
        self._make_file_link(ctx.file, ctx.line),
        str(ctx.line),
        Text(intervention.response.message),
      )

    self.console.print()
    self.console.print(table)
    self.console.print(f"\n[dim]{len(interventions)} issue(s) found[/dim]")
    return ""

  def _make_file_link(self, file_path: str, line: int) -> str:
    """Create a clickable file link for terminals that support hyperlinks."""
    url = Path(file_path).resolve().as_uri()
    return f"[link={url}:{line}]{file_path}[/link]"


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, interventions: list[Intervention]) -> str:
    data = {
      "interventions": [
        {
          "id": i.id,
          "file": i.context.file,
          "line": i.context.line,
          "kind": i.context.kind.value,
          "severity": i.context.severity.value,
          "message": i.context.description,
          "suggestion": i.context.suggestion,
          "personality": i.personality.value,
          "tone": i.response.tone.value,
          "response": i.response.message,
        }
        for i in interventions
      ],
    }
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, interventions: list[Intervention]) -> str:
    lines = ["# Code Review", ""]

    if not interventions:
      lines.extend(["No issues found.", ""])
      return "\n".join(lines)

    for intervention in interventions:
      ctx = intervention.context
      lines.append(f"### [{ctx.severity.value.upper()}] {ctx.file}:{ctx.line} ({ctx.kind.value})")
      lines.append("")
      lines.append(intervention.response.message)
      if intervention.response.show_example and intervention.response.example:
        lines.append("")
        lines.append(f"**Suggestion:** {intervention.response.example}")
      lines.append("")

    return "\n".join(lines)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  def format(self, interventions: list[Intervention]) -> str:
    lines = []
    for intervention in interventions:
      ctx = intervention.context
      level = self._severity_to_level(ctx.severity)
      message = ctx.description
      if ctx.suggestion:
        message += f"\n{ctx.suggestion}"
      message = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
      lines.append(f"::{level} file={ctx.file},line={ctx.line}::{message}")
    return "\n".join(lines)

  def _severity_to_level(self, severity: Severity) -> str:
    if severity == Severity.CRITICAL:
      return "error"
    if severity == Severity.WARNING:
      return "warning"
    return "notice"


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
