"""Personality response layer."""

from siskel.personalities.profiles import (
  PROFILES,
  PersonalityProfile,
  get_profile,
  list_profiles,
)
from siskel.personalities.responses import (
  QUESTION_BANK,
  Responder,
  get_responder,
  respond,
)

__all__ = [
  "PROFILES",
  "PersonalityProfile",
  "QUESTION_BANK",
  "Responder",
  "get_profile",
  "get_responder",
  "list_profiles",
  "respond",
]
