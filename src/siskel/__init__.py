"""Regex-driven code mentor with adaptive feedback."""

__version__ = "0.1.0"
