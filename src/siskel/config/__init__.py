"""Configuration management."""

from siskel.config.loader import find_config_file, load_config, parse_config
from siskel.config.settings import Settings

__all__ = ["Settings", "find_config_file", "load_config", "parse_config"]
