"""Logging for tfdocs.

Rendered documentation goes to stdout, so every log record is written to
stderr (and optionally a file). Records are tagged with the pipeline
component that emitted them, e.g. `[tfdocs:scanner]`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "tfdocs"
_CONSOLE_FORMAT = "[tfdocs:%(component)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(component)s: %(message)s"


class _ComponentFilter(logging.Filter):
    """Expose the logger name below `tfdocs.` as `record.component`."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{_LOGGER_NAME}."
        if record.name.startswith(prefix):
            record.component = record.name[len(prefix) :]
        else:
            record.component = "main"
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger under the tfdocs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send tfdocs logs to stderr, plus `log_file` when given.

    `quiet` keeps only warnings (skipped elements in lenient mode) and errors;
    `verbose` wins over `quiet`.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.addFilter(_ComponentFilter())
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        # The file sink always records the full debug trail of a run.
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.addFilter(_ComponentFilter())
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
