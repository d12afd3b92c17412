"""AI providers that enrich issue remedies."""

from siskel.providers.base import EnrichmentProvider
from siskel.providers.registry import (
  ProviderNotFoundError,
  ProviderRegistry,
  ProviderUnavailableError,
  detect_available_provider,
  get_provider,
  list_providers,
)

__all__ = [
  "EnrichmentProvider",
  "ProviderNotFoundError",
  "ProviderRegistry",
  "ProviderUnavailableError",
  "detect_available_provider",
  "get_provider",
  "list_providers",
]
