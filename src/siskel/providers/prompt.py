"""Shared prompt construction for providers."""

from siskel.models import IssueKind

# Documents longer than this are cut before being sent
MAX_CODE_CHARS = 8000

SYSTEM_PROMPT = (
  "You are a helpful code review assistant. "
  "Reply with one concise, actionable fix suggestion in plain text. "
  "No preamble, no markdown headings."
)


def build_system_prompt() -> str:
  return SYSTEM_PROMPT


def build_user_prompt(text: str, language_tag: str, issue_kind: IssueKind) -> str:
  """Build the user prompt containing the code under review."""
  language = language_tag or "text"
  code = text if len(text) <= MAX_CODE_CHARS else text[:MAX_CODE_CHARS] + "\n... (truncated)"

  return f"""You are an expert {language} code reviewer.
Analyze this code for {issue_kind.value} issues. Provide specific, actionable feedback.

Code:
```{language}
{code}
```"""
