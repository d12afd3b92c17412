"""Feedback history and adaptation rules."""

from siskel.feedback.persistence import (
  JsonFileStore,
  KeyValueStore,
  MemoryStore,
  PersistenceError,
)
from siskel.feedback.store import FeedbackStats, FeedbackStore, pattern_key

__all__ = [
  "FeedbackStats",
  "FeedbackStore",
  "JsonFileStore",
  "KeyValueStore",
  "MemoryStore",
  "PersistenceError",
  "pattern_key",
]
