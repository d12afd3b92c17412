"""Response functions for the six personalities.

Each personality is a pure function from IssueContext to
PersonalityResponse. `respond` dispatches on PersonalityId.
"""

from typing import Callable

from siskel.models import IssueContext, IssueKind, PersonalityId, PersonalityResponse, Severity, Tone
from siskel.personalities.profiles import get_profile

Responder = Callable[[IssueContext], PersonalityResponse]

QUESTION_BANK: dict[IssueKind, tuple[str, ...]] = {
  IssueKind.BUG: (
    "What happens if the value on line {line} is null or undefined?",
    "How does this handle edge cases?",
    "What are all possible states this code can be in?",
  ),
  IssueKind.SECURITY: (
    "How would an attacker exploit this?",
    "What data flows through this code path?",
    "Who has access to this functionality?",
  ),
  IssueKind.PERFORMANCE: (
    "How many times will this execute?",
    "What's the worst-case scenario for this code?",
    "How does this scale with larger inputs?",
  ),
  IssueKind.ACCESSIBILITY: (
    "How would a screen reader announce this element?",
    "Can someone reach this using only a keyboard?",
    "What does a user who can't see this image miss?",
  ),
  IssueKind.STYLE: (
    "Would a teammate read this the way you intended?",
    "Is this consistent with the rest of the file?",
    "What would make this easier to change later?",
  ),
  IssueKind.CODE_SMELL: (
    "What are you trying to achieve here?",
    "Why did you choose this approach?",
    "What alternatives did you consider?",
  ),
}

_SEVERITY_LABELS = {
  Severity.CRITICAL: "[CRITICAL]",
  Severity.WARNING: "[WARNING]",
  Severity.INFO: "[INFO]",
}


def _icon(personality: PersonalityId) -> str:
  return get_profile(personality).icon


def _lower_first(text: str) -> str:
  return text[:1].lower() + text[1:]


def direct(ctx: IssueContext) -> PersonalityResponse:
  """No-nonsense feedback. Every issue is framed as must-fix."""
  if ctx.kind == IssueKind.BUG:
    message = (
      f"STOP: {ctx.description}\n"
      f"Line {ctx.line}: This is a bug that will cause issues in production.\n"
      f"{ctx.suggestion or 'Fix this immediately.'}"
    )
  elif ctx.kind == IssueKind.SECURITY:
    message = (
      f"SECURITY RISK: {ctx.description}\n"
      f"Line {ctx.line}: This vulnerability must be addressed before deployment.\n"
      f"{ctx.suggestion or 'Implement proper security measures.'}"
    )
  elif ctx.kind == IssueKind.PERFORMANCE:
    message = (
      f"Unacceptable: {ctx.description}\n"
      f"Line {ctx.line}: This inefficiency will cause performance problems.\n"
      f"{ctx.suggestion or 'Refactor immediately.'}"
    )
  else:
    message = (
      f"MUST FIX {_SEVERITY_LABELS[ctx.severity]}: {ctx.description}\n"
      f"Line {ctx.line}: {ctx.suggestion or 'This needs attention.'}"
    )

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.DIRECT),
    tone=Tone.DIRECT,
    show_example=ctx.suggestion is not None,
    example=ctx.suggestion,
  )


def supportive(ctx: IssueContext) -> PersonalityResponse:
  """Encouraging feedback that offers alternatives."""
  if ctx.kind == IssueKind.BUG:
    message = (
      f"Hey! I noticed {_lower_first(ctx.description)} on line {ctx.line}.\n"
      f"How about this: {ctx.suggestion or 'take another look here'}? "
      "It would make your code more resilient!"
    )
  elif ctx.kind == IssueKind.SECURITY:
    message = (
      f"Interesting approach! For better security, consider: {ctx.description}.\n"
      f"Line {ctx.line}: {ctx.suggestion or 'Want to see an example?'}"
    )
  elif ctx.kind == IssueKind.PERFORMANCE:
    message = (
      f"Nice work so far! There's a performance consideration on line {ctx.line}.\n"
      f"{ctx.description}. Have you considered this: {ctx.suggestion or 'optimizing this part'}?"
    )
  else:
    message = (
      f"{_SEVERITY_LABELS[ctx.severity]} {ctx.description}\n"
      f"Line {ctx.line}: {ctx.suggestion or 'Want to explore alternatives?'}"
    )

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.SUPPORTIVE),
    tone=Tone.SUPPORTIVE,
    show_example=ctx.suggestion is not None,
    example=ctx.suggestion,
  )


def questioning(ctx: IssueContext) -> PersonalityResponse:
  """Asks a clarifying question instead of showing a fix."""
  bank = QUESTION_BANK[ctx.kind]
  question = bank[(ctx.line - 1) % len(bank)].format(line=ctx.line)
  message = (
    f"Question: {question}\n\n"
    f"{ctx.description}\n"
    f"Line {ctx.line}\n\n"
    "Have you considered all the code paths that lead here?\n"
    "Walk me through your logic..."
  )

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.QUESTIONING),
    tone=Tone.QUESTIONING,
    show_example=False,
    example=None,
  )


def security_first(ctx: IssueContext) -> PersonalityResponse:
  """Reads every issue from an attacker's perspective."""
  if ctx.kind == IssueKind.SECURITY or ctx.severity == Severity.CRITICAL:
    message = (
      "STOP! Security Vulnerability Detected:\n\n"
      f"{ctx.description}\n"
      f"Line {ctx.line}\n\n"
      f"This could be exploited by attackers. {ctx.suggestion or 'Immediate action required.'}"
    )
    tone = Tone.URGENT
  else:
    message = (
      f"Security Check: {ctx.description}\n"
      f"Line {ctx.line}\n"
      f"From an attacker's perspective: "
      f"{ctx.suggestion or 'This should be reviewed for potential exploits.'}"
    )
    tone = Tone.DIRECT

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.SECURITY),
    tone=tone,
    show_example=ctx.suggestion is not None,
    example=ctx.suggestion,
  )


def performance_first(ctx: IssueContext) -> PersonalityResponse:
  """Frames every issue by its effect on complexity and throughput."""
  if ctx.kind == IssueKind.PERFORMANCE:
    message = (
      f"Performance Warning: {ctx.description}\n"
      f"Line {ctx.line}: This will hurt throughput as input size grows.\n\n"
      f"Optimization: {ctx.suggestion or 'Consider refactoring for better complexity.'}"
    )
  else:
    message = (
      f"Performance Note: {ctx.description}\n"
      f"Line {ctx.line}: Code that is hard to reason about is hard to optimize. "
      f"{ctx.suggestion or 'This could be tightened up for better performance.'}"
    )

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.PERFORMANCE),
    tone=Tone.DIRECT,
    show_example=ctx.suggestion is not None,
    example=ctx.suggestion,
  )


def accessibility_first(ctx: IssueContext) -> PersonalityResponse:
  """Frames every issue by its effect on inclusive design."""
  if ctx.kind == IssueKind.ACCESSIBILITY:
    message = (
      f"Accessibility Issue: {ctx.description}\n"
      f"Line {ctx.line}\n\n"
      "This affects users with disabilities. WCAG compliance requires: "
      f"{ctx.suggestion or 'Adding proper accessibility attributes.'}"
    )
  else:
    message = (
      f"Inclusive Design Check: {ctx.description}\n"
      f"Line {ctx.line}\n"
      f"For better accessibility: {ctx.suggestion or 'Consider semantic HTML and ARIA labels.'}"
    )

  return PersonalityResponse(
    message=message,
    icon=_icon(PersonalityId.ACCESSIBILITY),
    tone=Tone.GENTLE,
    show_example=ctx.suggestion is not None,
    example=ctx.suggestion,
  )


_RESPONDERS: dict[PersonalityId, Responder] = {
  PersonalityId.DIRECT: direct,
  PersonalityId.SUPPORTIVE: supportive,
  PersonalityId.QUESTIONING: questioning,
  PersonalityId.SECURITY: security_first,
  PersonalityId.PERFORMANCE: performance_first,
  PersonalityId.ACCESSIBILITY: accessibility_first,
}


def get_responder(personality: PersonalityId) -> Responder:
  """Get the response function for a personality."""
  return _RESPONDERS[personality]


def respond(personality: PersonalityId, ctx: IssueContext) -> PersonalityResponse:
  """Format an issue with the given personality."""
  return _RESPONDERS[personality](ctx)
