"""Runtime infrastructure for shelflife.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Config path resolution via get_paths(), ProjectPaths
- Rule table loading via load_item_category_rule_table()

Usage:
    from shelflife.runtime import get_logger, load_item_category_rule_table

    logger = get_logger(__name__)
    rules = load_item_category_rule_table()
"""

from shelflife.runtime.item_category_rules import load_item_category_rule_table
from shelflife.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from shelflife.runtime.paths import (
    ProjectPaths,
    get_paths,
    reset_paths,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_item_category_rule_table",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
