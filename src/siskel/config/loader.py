"""Configuration file loading."""

from pathlib import Path

import yaml

from siskel.config.settings import Settings

CONFIG_FILENAMES = [".siskel.yaml", ".siskel.yml", "siskel.yaml", "siskel.yml"]


def find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists.

  Raises:
    FileNotFoundError: If an explicit path was given and does not exist.
  """
  if config_path is not None:
    if not config_path.exists():
      raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  with open(path) as f:
    data = yaml.safe_load(f) or {}

  if not isinstance(data, dict):
    raise ValueError(f"Config file {path} must contain a mapping")

  return parse_config(data)


def parse_config(data: dict) -> Settings:
  """Parse config dict into Settings.

  Enum-valued options are given as their string values and converted
  by pydantic.
  """
  return Settings.model_validate(data)
