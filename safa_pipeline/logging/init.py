from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Output contract of a pipeline run (stdout, one line per record):
- ``INFO``: progress of the run ("Processing file: ...", problem type breakdown)
- ``WARN``: rows that failed unexpectedly, and the dropped-row count with the
  path of the JSON Lines log written by ``safa_pipeline.logging.error_log``
- ``ERROR``: the fatal condition behind exit code 1 (config, missing file,
  rejected dataset, export failure)
- ``SUMMARY``: exactly one final line,
  ``SUMMARY rows=.. records=.. dropped=.. elapsed_sec=.. throughput_rps=..``
- ``DEBUG``: column map, skipped rows; only with ``--debug``

Expected row drops (blank or unparsable date, blank description) are not
warnings: they go to the dropped-row log and appear here only as a count.

The application logger is ``safa_pipeline``; module loggers
(``logging.getLogger(__name__)`` inside the package) are its children and
propagate to its single stdout handler. Tests call ``reset_logging`` so that
pytest's ``caplog`` sees records again.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "safa_pipeline"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formats records as ``LABEL message``."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the application logger once and return it.

    Output goes to stdout so that the SUMMARY line is part of the CLI
    contract. Calling again returns the already configured logger.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _logger = None
