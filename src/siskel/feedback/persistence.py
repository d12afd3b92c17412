"""Durable key-value surfaces for learning state."""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Protocol


class PersistenceError(Exception):
  """Reading or writing persisted state failed."""


class KeyValueStore(Protocol):
  """Get/set by string key with JSON-serializable values."""

  def get(self, key: str) -> Any | None:
    """Return the stored value, or None if the key is missing.

    Raises:
      PersistenceError: If the underlying storage cannot be read.
    """
    ...

  def set(self, key: str, value: Any) -> None:
    """Store a value.

    Raises:
      PersistenceError: If the value cannot be written.
    """
    ...


class MemoryStore:
  """In-process store, lost when the process exits."""

  def __init__(self, initial: dict[str, Any] | None = None):
    self._data: dict[str, Any] = dict(initial or {})

  def get(self, key: str) -> Any | None:
    return self._data.get(key)

  def set(self, key: str, value: Any) -> None:
    self._data[key] = value

  def keys(self) -> list[str]:
    return list(self._data.keys())


class JsonFileStore:
  """All keys in one JSON document on disk.

  The file is read on first access. Every `set` rewrites the whole
  document through a temporary file in the same directory followed by
  an atomic rename.
  """

  def __init__(self, path: Path):
    self._path = Path(path).expanduser()
    self._data: dict[str, Any] | None = None
    self._lock = threading.Lock()

  @property
  def path(self) -> Path:
    return self._path

  def get(self, key: str) -> Any | None:
    with self._lock:
      return self._load().get(key)

  def set(self, key: str, value: Any) -> None:
    with self._lock:
      try:
        data = dict(self._load())
      except PersistenceError:
        # An unreadable file is replaced by what this session knows
        data = {}
      data[key] = value
      self._write(data)
      self._data = data

  def _load(self) -> dict[str, Any]:
    if self._data is not None:
      return self._data

    if not self._path.exists():
      self._data = {}
      return self._data

    try:
      with open(self._path, encoding="utf-8") as f:
        data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
      raise PersistenceError(f"Cannot read state from {self._path}: {e}") from e

    if not isinstance(data, dict):
      raise PersistenceError(f"State file {self._path} does not hold a JSON object")

    self._data = data
    return self._data

  def _write(self, data: dict[str, Any]) -> None:
    try:
      payload = json.dumps(data, indent=2, sort_keys=True)
    except (TypeError, ValueError) as e:
      raise PersistenceError(f"State is not JSON-serializable: {e}") from e

    try:
      self._path.parent.mkdir(parents=True, exist_ok=True)
      fd, tmp_name = tempfile.mkstemp(
        prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
      )
      try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
          f.write(payload)
        os.replace(tmp_name, self._path)
      except BaseException:
        if os.path.exists(tmp_name):
          os.unlink(tmp_name)
        raise
    except OSError as e:
      raise PersistenceError(f"Cannot write state to {self._path}: {e}") from e
