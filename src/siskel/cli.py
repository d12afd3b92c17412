"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from siskel import __version__
from siskel.config import Settings, load_config
from siskel.documents import FileError, load_documents
from siskel.feedback import FeedbackStore, JsonFileStore
from siskel.interventions import Enhancer, InterventionEngine
from siskel.log import setup_logging
from siskel.models import FrequencyPolicy, Intervention, PersonalityId, Severity
from siskel.output import get_formatter
from siskel.personalities import list_profiles
from siskel.providers import ProviderRegistry, detect_available_provider, get_provider
from siskel.providers.registry import ProviderNotFoundError, ProviderUnavailableError
from siskel.rules import RuleRegistry, get_all_rules

app = typer.Typer(
  name="siskel",
  help="Proactive code review mentor that learns from your feedback",
  no_args_is_help=True,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("SISKEL_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"siskel {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Proactive code review mentor."""


@app.command()
def review(
  files: list[str] = typer.Argument(..., help="Files, directories or glob patterns to review"),
  personality: str = typer.Option(
    None, "--personality", "-p", help="Personality: " + ", ".join(p.value for p in PersonalityId)
  ),
  frequency: str = typer.Option(
    None, "--frequency", help="Frequency policy: minimal, balanced, unrestricted"
  ),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, markdown, github"
  ),
  interactive: bool = typer.Option(
    False, "--interactive", "-i", help="Accept or dismiss each suggestion"
  ),
  fail_on: str = typer.Option(
    None, "--fail-on", help="Exit 1 on a suggestion at or above: critical, warning, info"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
) -> None:
  """Review files on demand.

  Learned suppressions are ignored; the frequency policy still applies.
  """
  show_traceback = debug or _is_debug()

  try:
    settings = _load_settings(config, debug=show_traceback)
    if personality:
      settings.active_personality = PersonalityId(personality)
    if frequency:
      settings.intervention_frequency = FrequencyPolicy(frequency)
    threshold = Severity(fail_on) if fail_on else None

    formatter = get_formatter(format_type)
    documents = load_documents(files)
    engine = InterventionEngine(
      settings,
      _build_store(settings),
      enhancer=_build_enhancer(settings),
      on_warning=_print_warning,
    )

    interventions: list[Intervention] = []
    for document in documents:
      interventions.extend(engine.request_review(document))

    output = formatter.format(interventions)
    if output:
      console.print(output, markup=False, highlight=False, soft_wrap=True)

    if interactive:
      _collect_feedback(engine, interventions)
    engine.shutdown()

  except ProviderNotFoundError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except ProviderUnavailableError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except FileError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if threshold is not None and _meets_threshold(interventions, threshold):
    raise typer.Exit(1)


@app.command()
def stats(
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
  """Show what has been learned from your feedback."""
  store = _open_store(config)
  counts = store.get_stats()
  rules = store.get_adaptation_rules()

  table = Table(title="Feedback", show_header=True, header_style="bold")
  table.add_column("Total", justify="right")
  table.add_column("Accepted", justify="right")
  table.add_column("Dismissed", justify="right")
  table.add_column("Modified", justify="right")
  table.add_row(str(counts.total), str(counts.accepted), str(counts.dismissed), str(counts.modified))
  console.print(table)

  if rules.sensitivity_by_kind:
    console.print("\n[bold]Sensitivity by kind[/bold]")
    for kind, value in sorted(rules.sensitivity_by_kind.items(), key=lambda kv: kv[0].value):
      console.print(f"  {kind.value}: {value:.2f}")

  if rules.suppressed_patterns:
    console.print("\n[bold]Suppressed patterns[/bold]")
    for key in sorted(rules.suppressed_patterns):
      console.print(f"  {key}", markup=False)


@app.command()
def reset(
  yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
  """Clear all learned data."""
  if not yes and not typer.confirm("Reset all learning data?"):
    raise typer.Exit()

  _open_store(config).reset()
  console.print("[green]Learning data has been reset.[/green]")


@app.command()
def personalities() -> None:
  """List available personalities."""
  table = Table(show_header=True, header_style="bold")
  table.add_column("Id")
  table.add_column("Name")
  table.add_column("Description")
  table.add_column("Priorities")

  for profile in list_profiles():
    table.add_row(profile.id.value, profile.name, profile.description, ", ".join(profile.priorities))
  console.print(table)


@app.command()
def rules() -> None:
  """List detection rules."""
  RuleRegistry.load_all()

  table = Table(show_header=True, header_style="bold")
  table.add_column("Id")
  table.add_column("Family")
  table.add_column("Kind")
  table.add_column("Name")

  for rule in get_all_rules():
    table.add_row(rule.id, rule.family.value, rule.kind.value, rule.name)
  console.print(table)


def _load_settings(config: Path | None, debug: bool = False) -> Settings:
  settings = load_config(config)
  setup_logging("DEBUG" if debug else settings.log_level)
  return settings


def _build_store(settings: Settings) -> FeedbackStore:
  return FeedbackStore(JsonFileStore(settings.state_path.expanduser()), on_warning=_print_warning)


def _open_store(config: Path | None) -> FeedbackStore:
  try:
    return _build_store(_load_settings(config))
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None


def _build_enhancer(settings: Settings) -> Enhancer | None:
  if not settings.use_ai_enhancement:
    return None
  ProviderRegistry.load_all()
  name = settings.ai_provider
  if name == "auto":
    name = detect_available_provider() or "local"
  return get_provider(name, settings.ai_model).enhance


def _meets_threshold(interventions: list[Intervention], threshold: Severity) -> bool:
  return any(i.context.severity.rank >= threshold.rank for i in interventions)


def _print_warning(message: str) -> None:
  console.print(f"[yellow]Warning:[/yellow] {message}", highlight=False)


def _collect_feedback(engine: InterventionEngine, interventions: list[Intervention]) -> None:
  """Ask for a reaction to each intervention and record it."""
  for intervention in interventions:
    ctx = intervention.context
    console.print(f"\n[bold]{ctx.file}:{ctx.line}[/bold] {ctx.description}", highlight=False)
    choice = typer.prompt("[a]ccept, [d]ismiss, [s]kip", default="s").strip().lower()

    if choice.startswith("a"):
      engine.accept(intervention.id)
    elif choice.startswith("d"):
      reason = typer.prompt("Reason (optional)", default="", show_default=False)
      engine.dismiss(intervention.id, reason or None)


if __name__ == "__main__":
  app()
