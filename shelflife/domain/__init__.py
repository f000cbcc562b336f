"""Core domain models for shelflife.

- DateMatch: timestamp found in receipt text
- CategoryMatch: (category, shelf-life days) for one item line
- CategorizedItem, ParsedReceipt: parse results

Usage:
    from shelflife.domain import CategorizedItem, ParsedReceipt
"""

from shelflife.domain.receipt import CategorizedItem, CategoryMatch, DateMatch, ParsedReceipt

__all__ = [
    "CategorizedItem",
    "CategoryMatch",
    "DateMatch",
    "ParsedReceipt",
]
