"""Base enrichment provider."""

from abc import ABC, abstractmethod

from siskel.models import IssueKind


class EnrichmentProvider(ABC):
  """Abstract base for providers that rewrite an issue's remedy text."""

  @abstractmethod
  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    """Return a replacement remedy for an issue in `text`.

    An empty string means "no better remedy"; the caller keeps the
    original. Network and API errors propagate to the caller.
    """
    ...

  @property
  @abstractmethod
  def name(self) -> str:
    """Provider name."""
    ...

  @property
  @abstractmethod
  def model(self) -> str:
    """Model being used."""
    ...

  @abstractmethod
  def is_available(self) -> bool:
    """Check if provider is configured and available."""
    ...
