"""Anthropic Claude provider."""

import os
from typing import Any

from siskel.models import IssueKind
from siskel.providers.base import EnrichmentProvider
from siskel.providers.prompt import build_system_prompt, build_user_prompt
from siskel.providers.registry import register_provider


class AnthropicProvider(EnrichmentProvider):
  """Anthropic Claude LLM provider."""

  DEFAULT_MODEL = "claude-3-5-haiku-latest"
  MAX_TOKENS = 500

  def __init__(self, model: str | None = None):
    self._model = model or self.DEFAULT_MODEL
    self._api_key = os.environ.get("ANTHROPIC_API_KEY")
    self._client: Any = None

  @property
  def name(self) -> str:
    return "anthropic"

  @property
  def model(self) -> str:
    return self._model

  def is_available(self) -> bool:
    return self._api_key is not None

  def _get_client(self) -> Any:
    if self._client is None:
      try:
        from anthropic import Anthropic
        self._client = Anthropic(api_key=self._api_key)
      except ImportError as e:
        raise ImportError(
          "anthropic not installed. Install with: pip install 'siskel[anthropic]'"
        ) from e
    return self._client

  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    client = self._get_client()

    response = client.messages.create(
      model=self._model,
      max_tokens=self.MAX_TOKENS,
      system=build_system_prompt(),
      messages=[{"role": "user", "content": build_user_prompt(text, language_tag, issue_kind)}],
    )

    return response.content[0].text.strip() if response.content else ""


def _create_anthropic(model: str | None) -> EnrichmentProvider:
  return AnthropicProvider(model)


register_provider("anthropic", _create_anthropic)
