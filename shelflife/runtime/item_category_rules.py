"""Runtime loader for item category rules."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from shelflife.receipt.item_categories import ItemCategoryRuleTable, build_item_category_rule_table
from shelflife.runtime.logging import get_logger
from shelflife.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_item_category_rule_table(rule_paths: tuple[str, ...] | None = None) -> ItemCategoryRuleTable:
    """
    Load item category rules into an immutable, ordered rule table.

    Args:
        rule_paths: TOML files to layer ahead of the built-in rules, in order.
            If None, uses the user config file when it exists (built-ins only otherwise).

    Raises:
        FileNotFoundError: An explicitly given file does not exist.
        ValueError: An explicitly given file defines no valid rules.
    """
    if rule_paths is None:
        default_path = get_paths().item_category_rules
        if not default_path.exists():
            logger.debug("No user rules at %s, using built-in rules", default_path)
            return build_item_category_rule_table()
        configs = (_load_toml(default_path),)
        table = build_item_category_rule_table(configs)
        logger.debug("Loaded %d rules (with %s)", len(table.rules), default_path)
        return table

    configs_list: list[dict[str, Any]] = []
    for raw_path in rule_paths:
        path = Path(raw_path)
        if not path.exists():
            raise FileNotFoundError(f"Item category rules file not found: {path}")
        config = _load_toml(path)
        if not build_item_category_rule_table([config], base_rules=()).rules:
            raise ValueError(f"No valid item category rules found in {path}")
        configs_list.append(config)

    table = build_item_category_rule_table(configs_list)
    logger.debug("Loaded %d rules from %s", len(table.rules), ", ".join(rule_paths))
    return table
