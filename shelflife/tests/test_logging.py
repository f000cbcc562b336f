from __future__ import annotations

import logging

from shelflife.runtime.logging import LOG_FORMAT, LOG_FORMAT_DEBUG, ROOT_LOGGER_NAME, get_logger, set_log_level


def test_get_logger_nests_under_package_namespace() -> None:
    assert get_logger("shelflife.receipt.item_categories").name == "shelflife.receipt.item_categories"
    assert get_logger("scripts.tool").name == "shelflife.scripts.tool"


def test_set_log_level_switches_format() -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    previous = root.level
    try:
        set_log_level(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert all(h.formatter is not None and h.formatter._fmt == LOG_FORMAT_DEBUG for h in root.handlers)

        set_log_level(logging.WARNING)
        assert root.level == logging.WARNING
        assert all(h.formatter is not None and h.formatter._fmt == LOG_FORMAT for h in root.handlers)
    finally:
        set_log_level(previous)
