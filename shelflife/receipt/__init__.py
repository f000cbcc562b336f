"""Japanese receipt text parsing and shelf-life categorization.

Usage:
    from shelflife.receipt import parse_receipt

    receipt = parse_receipt(ocr_text)
    for item in receipt.items:
        print(item.display_name, item.category, item.expiry_date)
"""

from .date_utils import add_days, fallback_purchase_datetime
from .item_categories import (
    ITEM_RULES,
    ItemCategoryRule,
    ItemCategoryRuleTable,
    build_item_category_rule_table,
    categorize,
    categorize_debug,
)
from .ocr_parser import extract_item_lines, extract_purchase_date, is_likely_item_line
from .ocr_result_parser import parse_receipt
from .text_normalization import normalize, to_hiragana

__all__ = [
    "ITEM_RULES",
    "ItemCategoryRule",
    "ItemCategoryRuleTable",
    "add_days",
    "build_item_category_rule_table",
    "categorize",
    "categorize_debug",
    "extract_item_lines",
    "extract_purchase_date",
    "fallback_purchase_datetime",
    "is_likely_item_line",
    "normalize",
    "parse_receipt",
    "to_hiragana",
]
