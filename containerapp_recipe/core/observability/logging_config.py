"""
Logging configuration — one place that decides where recipe logs go.

The CLI calls ``configure_from_cli()`` once at startup.  Handlers are
attached to the ``containerapp_recipe`` package logger, not the root, so
a provisioning host that imports the pipeline keeps its own root setup
and records still propagate to it.

Console level precedence:
    --debug > --verbose > --quiet > RECIPE_LOG_LEVEL > WARNING

A second, usually more detailed, copy can go to RECIPE_LOG_FILE at
RECIPE_LOG_FILE_LEVEL.  Console output is always stderr: stdout carries
the rendered manifest.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

PACKAGE_LOGGER = "containerapp_recipe"

ENV_LOG_LEVEL = "RECIPE_LOG_LEVEL"
ENV_LOG_FILE = "RECIPE_LOG_FILE"
ENV_LOG_FILE_LEVEL = "RECIPE_LOG_FILE_LEVEL"

DEFAULT_LEVEL = "WARNING"

# (threshold, format, datefmt), checked top-down
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(levelname)s %(name)s: %(message)s", None),
)
_FMT_CONSOLE_DEFAULT = "%(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_LEVEL) or DEFAULT_LEVEL


def console_formatter(numeric_level: int) -> logging.Formatter:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if numeric_level <= threshold:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_FMT_CONSOLE_DEFAULT)


def setup_logging(
    level: str = DEFAULT_LEVEL,
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Safe to call more than once: handlers from an earlier call are
    closed and replaced.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file.
        log_file_level: Level for the file; defaults to ``level``.

    Returns:
        The configured package logger.
    """
    numeric_level = _parse_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(console_formatter(numeric_level))
    logger.addHandler(console)

    # Logger level is the lower of the two handler levels
    effective_level = numeric_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective_level)

    # Don't propagate exceptions from logging itself
    logging.raiseExceptions = False
    return logger


def configure_from_cli(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Resolve levels from flags and ``RECIPE_LOG_*`` and set up logging."""
    env = os.environ if environ is None else environ
    return setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet, environ=env),
        log_file=env.get(ENV_LOG_FILE),
        log_file_level=env.get(ENV_LOG_FILE_LEVEL),
    )


def _parse_level(level: str | None) -> int:
    """Level name to its numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
