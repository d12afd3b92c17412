"""OpenAI provider."""

import os
from typing import Any

from siskel.models import IssueKind
from siskel.providers.base import EnrichmentProvider
from siskel.providers.prompt import build_system_prompt, build_user_prompt
from siskel.providers.registry import register_provider


class OpenAIProvider(EnrichmentProvider):
  """OpenAI LLM provider."""

  DEFAULT_MODEL = "gpt-4o-mini"
  MAX_TOKENS = 500

  def __init__(self, model: str | None = None):
    self._model = model or self.DEFAULT_MODEL
    self._api_key = os.environ.get("OPENAI_API_KEY")
    self._client: Any = None

  @property
  def name(self) -> str:
    return "openai"

  @property
  def model(self) -> str:
    return self._model

  def is_available(self) -> bool:
    return self._api_key is not None

  def _get_client(self) -> Any:
    if self._client is None:
      try:
        from openai import OpenAI
        self._client = OpenAI(api_key=self._api_key)
      except ImportError as e:
        raise ImportError(
          "openai not installed. Install with: pip install 'siskel[openai]'"
        ) from e
    return self._client

  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    client = self._get_client()

    response = client.chat.completions.create(
      model=self._model,
      max_tokens=self.MAX_TOKENS,
      messages=[
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": build_user_prompt(text, language_tag, issue_kind)},
      ],
    )

    return (response.choices[0].message.content or "").strip()


def _create_openai(model: str | None) -> EnrichmentProvider:
  return OpenAIProvider(model)


register_provider("openai", _create_openai)
