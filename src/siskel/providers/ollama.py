"""Ollama local LLM provider."""

import os

import httpx

from siskel.models import IssueKind
from siskel.providers.base import EnrichmentProvider
from siskel.providers.prompt import build_system_prompt, build_user_prompt
from siskel.providers.registry import register_provider


class OllamaProvider(EnrichmentProvider):
  """Ollama local LLM provider."""

  DEFAULT_MODEL = "codellama"
  DEFAULT_HOST = "http://localhost:11434"
  DEFAULT_HEALTH_TIMEOUT = 5.0
  REQUEST_TIMEOUT = 60.0

  def __init__(self, model: str | None = None):
    self._model = model or self.DEFAULT_MODEL
    self._host = os.environ.get("OLLAMA_HOST", self.DEFAULT_HOST)
    self._health_timeout = float(
      os.environ.get("OLLAMA_HEALTH_TIMEOUT", self.DEFAULT_HEALTH_TIMEOUT)
    )

  @property
  def name(self) -> str:
    return "ollama"

  @property
  def model(self) -> str:
    return self._model

  def is_available(self) -> bool:
    try:
      response = httpx.get(f"{self._host}/api/tags", timeout=self._health_timeout)
      return response.status_code == 200
    except httpx.RequestError:
      return False

  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    prompt = f"{build_system_prompt()}\n\n{build_user_prompt(text, language_tag, issue_kind)}"
    response = self._request_with_retry(prompt)
    return str(response.json().get("response", "")).strip()

  def _request_with_retry(self, prompt: str, max_retries: int = 2) -> httpx.Response:
    """Make request with retry on transient failures."""
    last_error: Exception | None = None

    for attempt in range(max_retries + 1):
      try:
        response = httpx.post(
          f"{self._host}/api/generate",
          json={
            "model": self._model,
            "prompt": prompt,
            "stream": False,
          },
          timeout=self.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response
      except (httpx.ConnectError, httpx.ReadTimeout) as e:
        last_error = e
        if attempt < max_retries:
          continue
      except httpx.HTTPStatusError:
        raise

    raise last_error or RuntimeError("Request failed")


def _create_ollama(model: str | None) -> EnrichmentProvider:
  return OllamaProvider(model)


register_provider("ollama", _create_ollama)
