"""Logging configuration for pagematrix."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Package-level logger name
LOGGER_NAME = "pagematrix"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVEL_PREFIXES = {
    logging.DEBUG: "[debug] ",
    logging.WARNING: "Warning: ",
    logging.ERROR: "Error: ",
    logging.CRITICAL: "Error: ",
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for a pagematrix module.

    Args:
        name: Module name (e.g., __name__). If None, returns the root pagematrix logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class ConsoleFormatter(logging.Formatter):
    """Formatter for console output.

    INFO records are printed as-is so that matrix printouts and CLI
    summaries read like plain output; other levels get a short prefix.
    """

    def format(self, record: logging.LogRecord) -> str:
        prefix = _LEVEL_PREFIXES.get(record.levelno, "")
        return f"{prefix}{record.getMessage()}"


class BelowWarningFilter(logging.Filter):
    """Pass only records below WARNING (those go to stdout)."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(
    verbosity: int = 0,
    quiet: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the pagematrix CLI.

    Args:
        verbosity: 0=normal, 1=verbose (-v), 2=debug (-vv)
        quiet: If True, suppress all output except errors
        log_file: Optional file path for logging
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)

    if quiet:
        console_level = logging.ERROR
    elif verbosity >= 2:
        console_level = logging.DEBUG
    else:
        console_level = logging.INFO

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(console_level)
    stdout_handler.setFormatter(ConsoleFormatter())
    stdout_handler.addFilter(BelowWarningFilter())
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(max(console_level, logging.WARNING))
    stderr_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)
