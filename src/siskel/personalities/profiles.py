"""Static identity of each personality."""

from dataclasses import dataclass

from siskel.models import PersonalityId


@dataclass(frozen=True)
class PersonalityProfile:
  """Name, description and priority tags of a personality."""

  id: PersonalityId
  name: str
  description: str
  priorities: tuple[str, ...]
  icon: str


PROFILES: dict[PersonalityId, PersonalityProfile] = {
  PersonalityId.DIRECT: PersonalityProfile(
    id=PersonalityId.DIRECT,
    name="Strict Mentor",
    description="Direct, no-nonsense feedback. Enforces best practices rigorously.",
    priorities=("best-practices", "code-quality", "correctness"),
    icon="alert",
  ),
  PersonalityId.SUPPORTIVE: PersonalityProfile(
    id=PersonalityId.SUPPORTIVE,
    name="Creative Collaborator",
    description="Encouraging and supportive. Offers alternative approaches.",
    priorities=("alternatives", "exploration", "creativity"),
    icon="lightbulb",
  ),
  PersonalityId.QUESTIONING: PersonalityProfile(
    id=PersonalityId.QUESTIONING,
    name="Rubber Duck",
    description="Asks clarifying questions. Helps you think through problems.",
    priorities=("understanding", "reasoning", "self-discovery"),
    icon="duck",
  ),
  PersonalityId.SECURITY: PersonalityProfile(
    id=PersonalityId.SECURITY,
    name="Security Guardian",
    description="Hypervigilant about vulnerabilities. Reviews code from an attacker's perspective.",
    priorities=("security", "vulnerabilities", "threat-modeling"),
    icon="shield",
  ),
  PersonalityId.PERFORMANCE: PersonalityProfile(
    id=PersonalityId.PERFORMANCE,
    name="Performance Optimizer",
    description="Obsessed with speed and efficiency. Spots bottlenecks before they happen.",
    priorities=("performance", "efficiency", "optimization"),
    icon="zap",
  ),
  PersonalityId.ACCESSIBILITY: PersonalityProfile(
    id=PersonalityId.ACCESSIBILITY,
    name="Accessibility Advocate",
    description="Ensures inclusive code. Checks WCAG compliance.",
    priorities=("accessibility", "inclusivity", "wcag-compliance"),
    icon="accessibility",
  ),
}


def get_profile(personality: PersonalityId) -> PersonalityProfile:
  """Get the profile of a personality."""
  return PROFILES[personality]


def list_profiles() -> list[PersonalityProfile]:
  """All profiles, in declaration order."""
  return list(PROFILES.values())
