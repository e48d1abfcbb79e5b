#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semdiff/logging_utils.py
"""Logging setup for applications embedding semdiff.

The library itself only creates module loggers under the ``semdiff``
namespace and never installs handlers on import. Applications that want to
see parser and engine debug output call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "semdiff"

_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Convert a level name or number into a numeric logging level.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the semdiff logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Path to a log file receiving the same records as the console.
    trace_mode : bool, default False
        When true, emit timestamps and logger names.

    Returns
    -------
    logging.Logger
        The configured ``semdiff`` logger.

    """
    level = resolve_log_level(log_level)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(level)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    library_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            library_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            library_logger.addHandler(file_handler)
            library_logger.debug("Logging to file: %s", log_file)

    # Records stay on the semdiff handlers instead of being duplicated by root
    library_logger.propagate = False
    return library_logger
