"""Parse raw OCR text into structured ParsedReceipt data."""

import logging
from datetime import datetime

from shelflife.domain.receipt import CategorizedItem, ParsedReceipt

from .date_utils import add_days, fallback_purchase_datetime
from .item_categories import ItemCategoryRuleTable, categorize
from .ocr_parser import extract_item_lines, extract_purchase_date

logger = logging.getLogger(__name__)


def _resolve_purchase_date(text: str, now: datetime | None) -> tuple[datetime, bool]:
    """Return (purchase datetime, is_placeholder)."""
    match = extract_purchase_date(text)
    if match is None:
        logger.debug("No purchase date found, using fallback")
        return fallback_purchase_datetime(now), True

    try:
        return match.to_datetime(), False
    except ValueError:
        logger.warning("Ignoring impossible purchase date %s", match)
        return fallback_purchase_datetime(now), True


def _expiry_date(purchase_date: datetime, days: int) -> datetime | None:
    try:
        return add_days(purchase_date, days)
    except OverflowError:
        logger.warning("Expiry for %s plus %d days is out of range", purchase_date.date(), days)
        return None


def parse_receipt(
    text: str,
    *,
    now: datetime | None = None,
    rule_table: ItemCategoryRuleTable | None = None,
) -> ParsedReceipt:
    """
    Parse OCR text into a ParsedReceipt.

    Args:
        text: Full OCR text of one receipt
        now: Timestamp used when the receipt has no usable date (default: current time)
        rule_table: Category rules; built-in rules when omitted

    Returns:
        ParsedReceipt. A receipt without item lines has an empty ``items``
        tuple; that is a normal result, not an error. Items whose expiry
        falls past the last representable date have ``expiry_date=None``.
    """
    purchase_date, date_is_placeholder = _resolve_purchase_date(text, now)

    items: list[CategorizedItem] = []
    for line in extract_item_lines(text):
        match = categorize(line, rule_table=rule_table)
        items.append(
            CategorizedItem(
                name=line,
                category=match.category,
                shelf_life_days=match.days,
                expiry_date=_expiry_date(purchase_date, match.days),
            )
        )

    if not items:
        logger.debug("No item lines found in %d characters of text", len(text))

    return ParsedReceipt(
        purchase_date=purchase_date,
        date_is_placeholder=date_is_placeholder,
        items=tuple(items),
        raw_text=text,
    )
