"""Item categorization rules for Japanese receipt lines.

Maps an item line to a food category and a shelf-life in days.
Rules are evaluated top to bottom and the first rule with a keyword
contained in the normalized line wins. Order is the tie-break: specific
meat/seafood rules sit above broader ones, so a line matching several
rules always resolves to the earliest one.

To add new rules:
1. Find the appropriate position below (earlier = higher precedence)
2. Add keywords to an existing rule, or add a new ItemCategoryRule
3. Keywords may be written in katakana/full-width; they are normalized
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from shelflife.domain.receipt import CategoryMatch

from .text_normalization import normalize
from .vocabulary import normalize_keywords

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "other"
FALLBACK_DAYS = 7
# Upper bound for configured shelf-life days (about 100 years).
MAX_SHELF_LIFE_DAYS = 36500


@dataclass(frozen=True)
class ItemCategoryRule:
    """One row of the category decision table."""

    category: str
    days: int
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.days < 0:
            raise ValueError(f"Shelf-life days must be >= 0, got {self.days} for {self.category!r}")
        object.__setattr__(self, "keywords", normalize_keywords(self.keywords))

    def first_match(self, normalized_line: str) -> str | None:
        """Return the first keyword contained in an already-normalized line."""
        for keyword in self.keywords:
            if keyword in normalized_line:
                return keyword
        return None


@dataclass(frozen=True)
class ItemCategoryRuleTable:
    """Ordered, immutable rule table with its fallback."""

    rules: tuple[ItemCategoryRule, ...]
    fallback: CategoryMatch = CategoryMatch(FALLBACK_CATEGORY, FALLBACK_DAYS)


# Built-in table. Order matters: first match wins.
ITEM_RULES: tuple[ItemCategoryRule, ...] = (
    ItemCategoryRule("鶏肉", 7, ("とり", "ちきん", "鶏", "鶏肉")),
    ItemCategoryRule("牛肉", 7, ("ぎゅう", "牛", "牛肉", "びーふ")),
    ItemCategoryRule("豚肉", 7, ("ぶた", "豚", "豚肉", "ぽーく")),
    ItemCategoryRule("挽肉", 3, ("ひき", "みんち", "挽肉")),
    ItemCategoryRule(
        "魚介",
        2,
        ("さしみ", "鮮魚", "さーもん", "まぐろ", "たい", "いか", "えび", "ほたて", "さんま", "さば", "ぶり"),
    ),
    ItemCategoryRule("牛乳", 7, ("ぎゅうにゅう", "牛乳", "みるく")),
    ItemCategoryRule("ヨーグルト", 10, ("よーぐると", "ヨーグルト")),
    ItemCategoryRule("パン", 4, ("ぱん", "パン", "食パン", "ろーる", "菓子パン")),
    ItemCategoryRule(
        "惣菜",
        2,
        ("そうざい", "惣菜", "弁当", "おかず", "サラダ", "ころっけ", "ふらい", "唐揚げ", "からあげ", "総菜"),
    ),
    ItemCategoryRule("冷凍食品", 90, ("れいとう", "冷凍", "ふろーずん")),
    ItemCategoryRule(
        "野菜",
        5,
        ("やさい", "野菜", "れたす", "きゅうり", "にんじん", "だいこん", "たまねぎ", "じゃがいも", "ねぎ", "ほうれんそう"),
    ),
    ItemCategoryRule("豆腐", 5, ("とうふ", "豆腐")),
    ItemCategoryRule("卵", 14, ("たまご", "卵", "玉子")),
)


def _parse_rule(raw: Mapping[str, Any]) -> ItemCategoryRule | None:
    """Build a rule from a TOML table entry; invalid entries yield None."""
    category = str(raw.get("category") or "").strip()
    if not category:
        logger.warning("Skipping rule without category: %r", dict(raw))
        return None

    days = raw.get("days")
    if isinstance(days, bool) or not isinstance(days, int) or not 0 <= days <= MAX_SHELF_LIFE_DAYS:
        logger.warning(
            "Skipping rule %r: days must be an integer from 0 to %d, got %r", category, MAX_SHELF_LIFE_DAYS, days
        )
        return None

    raw_keywords = raw.get("keywords")
    if isinstance(raw_keywords, str):
        raw_keywords = [raw_keywords]
    if not isinstance(raw_keywords, list):
        raw_keywords = []
    keywords = normalize_keywords(raw_keywords)
    if not keywords:
        logger.warning("Skipping rule %r: no keywords", category)
        return None

    return ItemCategoryRule(category, days, keywords)


def _parse_fallback(raw: Mapping[str, Any], current: CategoryMatch) -> CategoryMatch:
    """Build the no-match result from a ``[fallback]`` table, keeping ``current`` if invalid."""
    category = str(raw.get("category") or current.category).strip()
    days = raw.get("days", current.days)
    if isinstance(days, bool) or not isinstance(days, int) or not 0 <= days <= MAX_SHELF_LIFE_DAYS:
        logger.warning("Ignoring fallback: days must be an integer from 0 to %d, got %r", MAX_SHELF_LIFE_DAYS, days)
        return current
    return CategoryMatch(category, days)


def build_item_category_rule_table(
    rule_configs: Sequence[Mapping[str, Any]] | None = None,
    *,
    base_rules: Iterable[ItemCategoryRule] = ITEM_RULES,
) -> ItemCategoryRuleTable:
    """Build an ordered rule table from in-memory configs.

    Each config contributes its ``[[rules]]`` in file order, ahead of the
    built-in rules. A config with ``replace_defaults = true`` drops the
    built-in rules entirely. An optional ``[fallback]`` table overrides the
    no-match result.
    """
    configured: list[ItemCategoryRule] = []
    include_base = True
    fallback = CategoryMatch(FALLBACK_CATEGORY, FALLBACK_DAYS)

    for config in rule_configs or ():
        if bool(config.get("replace_defaults", False)):
            include_base = False

        for raw_rule in config.get("rules", []):
            if not isinstance(raw_rule, Mapping):
                continue
            rule = _parse_rule(raw_rule)
            if rule is not None:
                configured.append(rule)

        raw_fallback = config.get("fallback")
        if isinstance(raw_fallback, Mapping):
            fallback = _parse_fallback(raw_fallback, fallback)

    rules = tuple(configured) + (tuple(base_rules) if include_base else ())
    return ItemCategoryRuleTable(rules=rules, fallback=fallback)


@lru_cache(maxsize=1)
def _get_default_rule_table() -> ItemCategoryRuleTable:
    """Built-in-only default rules (no file I/O, no runtime deps)."""
    return ItemCategoryRuleTable(rules=ITEM_RULES)


def categorize(line: str, rule_table: ItemCategoryRuleTable | None = None) -> CategoryMatch:
    """
    Return the category and shelf-life days for a receipt item line.

    Args:
        line: Item line from the receipt (e.g., "とり もも肉 498")
        rule_table: Preloaded rule table (typically from the runtime loader).
            When omitted, only built-in rules apply.

    Returns:
        CategoryMatch of the first matching rule, or the table's fallback
        (``other``, 7 days by default).
    """
    table = rule_table or _get_default_rule_table()
    normalized = normalize(line)

    for rule in table.rules:
        keyword = rule.first_match(normalized)
        if keyword is not None:
            logger.debug("Rule %s matched %r (keyword: %s)", rule.category, line, keyword)
            return CategoryMatch(rule.category, rule.days)

    logger.debug("No rule matched %r, using fallback", line)
    return table.fallback


def categorize_debug(
    line: str,
    rule_table: ItemCategoryRuleTable | None = None,
) -> list[tuple[str, int, str]]:
    """Debug version that returns every matching rule in table order.

    Useful for understanding why a particular category was chosen: the
    first entry is what ``categorize`` returns.

    Returns:
        List of (category, days, matched_keyword) tuples
    """
    table = rule_table or _get_default_rule_table()
    normalized = normalize(line)

    matches = []
    for rule in table.rules:
        keyword = rule.first_match(normalized)
        if keyword is not None:
            matches.append((rule.category, rule.days, keyword))
    return matches
