"""Logging setup for the shelflife CLI and workflows.

Every shelflife module logs under the ``shelflife`` logger, so one stderr
handler covers the engine modules (which use ``logging.getLogger(__name__)``)
as well as the CLI and workflow modules (which use ``get_logger``).

Usage:
    from shelflife.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Keyword %r matched category %s", keyword, category)
    logger.warning("Skipping rule %r: no keywords", category)

Environment variables:
    SHELFLIFE_LOG_LEVEL: DEBUG shows which keyword categorized each item line;
        WARNING hides the per-receipt summary. Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
# DEBUG output adds the line number so rule-matching traces point at the matcher.
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "shelflife"

_LEVELS_BY_NAME = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the ``shelflife`` logger once per process.

    Stdout stays reserved for receipt output (text or JSON), so log records
    never mix with what ``shelflife parse --json`` prints.

    Args:
        level: Log level to use. If None, SHELFLIFE_LOG_LEVEL decides, and an
               unset or unknown value means DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        env_level = os.environ.get("SHELFLIFE_LOG_LEVEL", "").upper()
        level = _LEVELS_BY_NAME.get(env_level, DEFAULT_LOG_LEVEL)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already inside the package (``shelflife.receipt...``) are
    used as is; anything else is nested under the package namespace.
    """
    configure_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int) -> None:
    """Change the package log level, as ``shelflife -v`` does for DEBUG."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT
    for handler in package_logger.handlers:
        handler.setFormatter(logging.Formatter(log_format))
