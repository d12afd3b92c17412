"""Rule-based provider that works offline."""

from siskel.models import IssueKind
from siskel.providers.base import EnrichmentProvider
from siskel.providers.registry import register_provider

_ADVICE = {
  IssueKind.BUG: "Guard values that can be null or undefined and handle each failure path explicitly.",
  IssueKind.SECURITY: "Validate user input, use parameterized queries, and avoid eval().",
  IssueKind.PERFORMANCE: (
    "Consider algorithm complexity, avoid unnecessary loops, and use efficient data structures."
  ),
  IssueKind.STYLE: "Follow the project's formatting conventions and keep lines and functions short.",
  IssueKind.ACCESSIBILITY: "Give every image alt text and every control an accessible name.",
  IssueKind.CODE_SMELL: "Resolve the marker or move it into a tracked issue.",
}


class LocalProvider(EnrichmentProvider):
  """Returns canned advice per issue kind. Always available."""

  @property
  def name(self) -> str:
    return "local"

  @property
  def model(self) -> str:
    return "rules"

  def is_available(self) -> bool:
    return True

  def enhance(self, text: str, language_tag: str, issue_kind: IssueKind) -> str:
    return _ADVICE[issue_kind]


def _create_local(model: str | None) -> EnrichmentProvider:
  return LocalProvider()


register_provider("local", _create_local)
