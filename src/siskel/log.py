"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "siskel"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
  """Attach a Rich handler to the package logger.

  Safe to call more than once; earlier handlers are replaced.
  """
  logger = logging.getLogger(LOGGER_NAME)
  logger.handlers = []

  handler = RichHandler(
    console=console or Console(stderr=True),
    show_time=False,
    show_path=False,
    markup=False,
    rich_tracebacks=True,
  )
  handler.setFormatter(logging.Formatter("%(message)s"))

  logger.addHandler(handler)
  logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
  logger.propagate = False
  return logger
