"""Provider discovery and registration."""

from typing import Callable

from siskel.providers.base import EnrichmentProvider
from siskel.providers.detection import ProviderDetector


class ProviderNotFoundError(Exception):
  """Requested provider not found."""


class ProviderUnavailableError(Exception):
  """Provider found but not available (missing API key, etc)."""


ProviderFactory = Callable[[str | None], EnrichmentProvider]

_providers: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory) -> None:
  """Register a provider factory."""
  _providers[name] = factory


def get_provider(name: str, model: str | None = None) -> EnrichmentProvider:
  """Get an available provider by name.

  Raises:
    ProviderNotFoundError: No provider is registered under `name`.
    ProviderUnavailableError: The provider is not configured or reachable.
  """
  if name not in _providers:
    available = ", ".join(_providers.keys()) or "none"
    raise ProviderNotFoundError(
      f"Provider '{name}' not found. Available: {available}"
    )

  provider = _providers[name](model)

  if not provider.is_available():
    detector = ProviderDetector(_providers)
    raise ProviderUnavailableError(detector.format_error(name))

  return provider


def detect_available_provider() -> str | None:
  """Name of the first available registered provider, or None."""
  return ProviderDetector(_providers).detect()


def list_providers() -> list[str]:
  """List registered provider names."""
  return list(_providers.keys())


class ProviderRegistry:
  """Registry for lazy provider loading."""

  @staticmethod
  def load_all() -> None:
    """Load all provider modules to trigger registration."""
    from siskel.providers import anthropic, gemini, local, ollama, openai  # noqa: F401
