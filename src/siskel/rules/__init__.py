"""Line-oriented, regex-driven issue detection."""

from siskel.rules.base import LanguageFamily, Rule, RuleMatch
from siskel.rules.detector import (
  CooldownGate,
  IssueDetector,
  RateLimitedDetector,
  resolve_family,
)
from siskel.rules.registry import (
  RuleRegistry,
  get_all_rules,
  get_rules_for_family,
  list_rules,
)

__all__ = [
  "CooldownGate",
  "IssueDetector",
  "LanguageFamily",
  "RateLimitedDetector",
  "Rule",
  "RuleMatch",
  "RuleRegistry",
  "get_all_rules",
  "get_rules_for_family",
  "list_rules",
  "resolve_family",
]
