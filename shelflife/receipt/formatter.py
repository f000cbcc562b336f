"""Format ParsedReceipt data for display."""

import json
from datetime import datetime
from typing import Any

from shelflife.domain.receipt import CategorizedItem, ParsedReceipt

# Raw text shown when no items were found is capped at this many characters.
RAW_TEXT_PREVIEW_CHARS = 2000

NO_ITEMS_MESSAGE = "商品行を特定できませんでした。価格がはっきり写るように撮影してください。"


def _format_datetime(value: datetime) -> str:
    return value.strftime("%Y/%m/%d %H:%M")


def _format_item(item: CategorizedItem) -> str:
    line = f"{item.display_name} [{item.category}] 目安: {item.shelf_life_days}日後"
    if item.expiry_date is not None:
        line += f" → {item.expiry_date.strftime('%Y/%m/%d')}"
    return line


def format_parsed_receipt(receipt: ParsedReceipt) -> str:
    """
    Render a parsed receipt as plain text.

    Lists one item per line with its category, shelf-life and expiry date.
    When nothing was recognized, prints a recapture hint followed by the
    beginning of the raw OCR text so the user can see what was read.
    """
    date_str = _format_datetime(receipt.purchase_date)
    if receipt.date_is_placeholder:
        date_str += " (不明)"

    lines = [f"購入日時: {date_str}", ""]
    if not receipt.has_items:
        lines.append(NO_ITEMS_MESSAGE)
        raw_preview = receipt.raw_text[:RAW_TEXT_PREVIEW_CHARS].strip()
        if raw_preview:
            lines.append("")
            lines.append(raw_preview)
        return "\n".join(lines)

    lines.append(f"抽出された商品 ({len(receipt.items)}):")
    for i, item in enumerate(receipt.items, 1):
        lines.append(f"  {i}. {_format_item(item)}")
    return "\n".join(lines)


def receipt_to_dict(receipt: ParsedReceipt) -> dict[str, Any]:
    """Convert a parsed receipt to JSON-serializable primitives."""
    return {
        "purchase_date": receipt.purchase_date.isoformat(),
        "date_is_placeholder": receipt.date_is_placeholder,
        "items": [
            {
                "name": item.name,
                "display_name": item.display_name,
                "category": item.category,
                "shelf_life_days": item.shelf_life_days,
                "expiry_date": item.expiry_date.isoformat() if item.expiry_date is not None else None,
            }
            for item in receipt.items
        ],
    }


def format_parsed_receipt_json(receipt: ParsedReceipt) -> str:
    """Render a parsed receipt as indented JSON (non-ASCII kept as is)."""
    return json.dumps(receipt_to_dict(receipt), ensure_ascii=False, indent=2)
