"""Intervention orchestration and debounced scheduling."""

from siskel.interventions.engine import (
  CycleState,
  Enhancer,
  InterventionEngine,
  new_intervention_id,
  passes_frequency_policy,
)
from siskel.interventions.scheduler import DebounceScheduler, TimerFactory, TimerHandle

__all__ = [
  "CycleState",
  "DebounceScheduler",
  "Enhancer",
  "InterventionEngine",
  "TimerFactory",
  "TimerHandle",
  "new_intervention_id",
  "passes_frequency_policy",
]
