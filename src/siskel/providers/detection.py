"""Provider auto-detection."""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
  from siskel.providers.base import EnrichmentProvider


@dataclass(frozen=True)
class ProviderStatus:
  """Availability status for a provider."""

  name: str
  available: bool
  reason: str


class ProviderDetector:
  """Finds usable enrichment providers.

  Remote providers come first; `local` needs no setup and is the last
  resort.
  """

  DETECTION_ORDER = ("anthropic", "openai", "gemini", "ollama", "local")
  ENV_VARS = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
  }

  def __init__(self, providers: dict[str, Callable[[str | None], "EnrichmentProvider"]]):
    self._providers = providers

  def detect(self) -> str | None:
    """Return first available provider, or None."""
    for status in self.get_status():
      if status.available:
        return status.name
    return None

  def get_status(self) -> list[ProviderStatus]:
    """Get status for registered providers in detection order."""
    return [self._check(name) for name in self.DETECTION_ORDER if name in self._providers]

  def format_error(self, failed: str) -> str:
    """Format error message with provider status."""
    lines = [f"Provider '{failed}' is not available.", "", "Provider status:"]
    for s in self.get_status():
      lines.append(f"  {'[ok]' if s.available else '[--]'} {s.name}: {s.reason}")
    if failed in self.ENV_VARS:
      lines.extend(["", f"Set {self.ENV_VARS[failed]} to use {failed}."])
    return "\n".join(lines)

  def _check(self, name: str) -> ProviderStatus:
    env_var = self.ENV_VARS.get(name)
    if env_var is not None:
      has_key = bool(os.environ.get(env_var))
      return ProviderStatus(name, has_key, f"{env_var} {'set' if has_key else 'not set'}")

    try:
      available = self._providers[name](None).is_available()
    except Exception:
      available = False
    return ProviderStatus(name, available, "reachable" if available else "not reachable")
