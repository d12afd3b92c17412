"""Rule registration and discovery."""

from typing import Callable

from siskel.rules.base import LanguageFamily, Rule

RuleFactory = Callable[[], Rule]

_rules: dict[str, RuleFactory] = {}


def register_rule(rule_id: str, factory: RuleFactory) -> None:
  """Register a rule factory.

  Args:
    rule_id: Unique identifier for the rule (e.g., 'PY002').
    factory: Callable that returns a Rule instance.
  """
  _rules[rule_id] = factory


def unregister_rule(rule_id: str) -> None:
  """Remove a rule factory if present."""
  _rules.pop(rule_id, None)


def get_all_rules() -> list[Rule]:
  """Get instances of all registered rules, in registration order."""
  return [factory() for factory in _rules.values()]


def get_rules_for_family(family: LanguageFamily) -> list[Rule]:
  """Get rules belonging to a language family, in registration order."""
  return [rule for rule in get_all_rules() if rule.family == family]


def list_rules() -> list[str]:
  """List all registered rule IDs."""
  return list(_rules.keys())


class RuleRegistry:
  """Registry for lazy rule loading."""

  @staticmethod
  def load_all() -> None:
    """Load all rule modules to trigger registration.

    Call this before using get_all_rules() or get_rules_for_family().
    Module import order fixes rule evaluation order, which keeps the
    order of same-line issues stable.
    """
    # Each module registers its rules at import time
    from siskel.rules import (  # noqa: F401
      generic,
      javascript,
      markup,
      python,
    )
