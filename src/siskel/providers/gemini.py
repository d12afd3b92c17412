"""Google Gemini provider."""

import os
from typing import Any

from siskel.models import IssueKind
from siskel.providers.base import EnrichmentProvider
from siskel.providers.prompt import build_system_prompt, build_user_prompt
from siskel.providers.registry import register_provider


class GeminiProvider(EnrichmentProvider):
  """Google Gemini LLM provider."""

  DEFAULT_MODEL = "gemini-1.5-flash"

  def __init__(self, model: str | None = None):
    self._model = model or self.DEFAULT_MODEL
    self._api_key = os.environ.get("GEMINI_API_KEY")
    self._client: Any = None

  @property
  def name(self) -> str:
    return "gemini"

  @property
  def model(self) -> str:
    return self._model

  def is_available(self) -> bool:
    return self._api_key is not None

  def _get_client(self) -> Any:
    if self._client is None:
      try:
        import google.generativeai as genai
        genai.configure(api_key=self._api_key)
        self._client = genai.GenerativeModel(self._model)
      except ImportError as e:
        raise ImportError(
          "google-generativeai not installed. "
          "Install with: pip install 'siskel[gemini]'"
        ) from e
    return self._client

  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    client = self._get_client()

    response = client.generate_content(
      f"{build_system_prompt()}\n\n{build_user_prompt(text, language_tag, issue_kind)}"
    )

    return (response.text or "").strip()


def _create_gemini(model: str | None) -> EnrichmentProvider:
  return GeminiProvider(model)


register_provider("gemini", _create_gemini)
