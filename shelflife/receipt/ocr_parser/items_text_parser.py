"""Text-line based receipt item extraction."""

import re
from collections.abc import Sequence

from ..text_normalization import normalize
from ..vocabulary import (
    EXCLUDE_WORDS,
    NORMALIZED_FOOD_KEYWORDS,
    TAX_MARKERS,
    contains_any,
    normalize_keywords,
)

LINE_SPLIT = re.compile(r"\r?\n")
WHITESPACE_RUN = re.compile(r"\s{2,}")

# Optional yen sign, then 2-6 digits (optionally .dd) at end of line.
TRAILING_PRICE = re.compile(r"(?:¥|￥)?\s*\d{2,6}(?:\.\d{2})?$")
# Bare subtotal/number lines like "1200" or "03-1234-5678".
DIGITS_ONLY = re.compile(r"^[\s\d-]+$")


def split_receipt_lines(text: str) -> list[str]:
    """Split OCR text into trimmed lines with column whitespace collapsed."""
    return [WHITESPACE_RUN.sub(" ", line).strip() for line in LINE_SPLIT.split(text)]


def _prepare_vocabularies(
    exclude_words: Sequence[str] | None,
    food_keywords: Sequence[str] | None,
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    # Exclusion words match the raw line verbatim; food keywords match its normalized form.
    if exclude_words is None:
        excludes = EXCLUDE_WORDS
    else:
        excludes = tuple(word for word in dict.fromkeys(str(w) for w in exclude_words) if word)
    foods = NORMALIZED_FOOD_KEYWORDS if food_keywords is None else normalize_keywords(food_keywords)
    return excludes, foods


def _looks_like_price_line(line: str) -> bool:
    if TRAILING_PRICE.search(line):
        return True
    return any(marker in line for marker in TAX_MARKERS)


def _has_excluded_word(line: str, exclude_words: Sequence[str]) -> bool:
    return any(word in line for word in exclude_words)


def _is_item_line(line: str, excludes: Sequence[str], foods: Sequence[str]) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if _has_excluded_word(stripped, excludes):
        return False
    if not _looks_like_price_line(stripped):
        return False
    # A price-like line made only of digits is a subtotal, phone or date fragment
    if DIGITS_ONLY.match(stripped):
        return False

    return contains_any(normalize(stripped), foods)


def is_likely_item_line(
    line: str,
    *,
    exclude_words: Sequence[str] | None = None,
    food_keywords: Sequence[str] | None = None,
) -> bool:
    """
    Return True if a line plausibly describes one purchased food item plus its price.

    Exclusion words are case-sensitive substrings of the trimmed line; food
    keywords are compared after normalization.

    Args:
        line: A single receipt line
        exclude_words: Override for the boilerplate vocabulary
        food_keywords: Override for the food keyword vocabulary
    """
    excludes, foods = _prepare_vocabularies(exclude_words, food_keywords)
    return _is_item_line(line, excludes, foods)


def extract_item_lines(
    text: str,
    *,
    exclude_words: Sequence[str] | None = None,
    food_keywords: Sequence[str] | None = None,
) -> list[str]:
    """
    Extract candidate item lines from raw receipt text.

    Product names that wrap onto their own line are joined with the priced
    line below them: when the previous line is non-empty and not boilerplate,
    the item becomes "<previous> <current>". The previous line is only looked
    at, never consumed, so it may also be emitted on its own if it qualifies.
    """
    excludes, foods = _prepare_vocabularies(exclude_words, food_keywords)

    lines = split_receipt_lines(text)
    items: list[str] = []
    for i in range(len(lines)):
        current = lines[i]
        if not _is_item_line(current, excludes, foods):
            continue

        previous = lines[i - 1] if i > 0 else ""
        # Only the previous line is checked here; the current one already passed.
        if not previous or _has_excluded_word(previous, excludes):
            items.append(current)
        else:
            items.append(f"{previous} {current}")
    return items
