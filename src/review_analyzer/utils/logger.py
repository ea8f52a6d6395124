"""Console logging for Video Review Analyzer."""

import logging

from rich.logging import RichHandler

from ..config import Config

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def setup_logging(level: str = None, console=None) -> logging.Logger:
    """Route the package's log records through rich at ``level`` (default: LOG_LEVEL)."""
    logging_level = LEVELS.get((level or Config.LOG_LEVEL).lower(), logging.INFO)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("{message}", style="{", datefmt="%H:%M:%S"))

    logger = logging.getLogger("review_analyzer")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging_level)
    return logger
