from __future__ import annotations

import json
from datetime import datetime

from shelflife.receipt.formatter import (
    NO_ITEMS_MESSAGE,
    RAW_TEXT_PREVIEW_CHARS,
    format_parsed_receipt,
    format_parsed_receipt_json,
)
from shelflife.receipt.ocr_result_parser import parse_receipt

NOW = datetime(2024, 1, 1, 9, 0)


def test_format_lists_items_with_expiry() -> None:
    receipt = parse_receipt("2024年5月1日 12:30\n\nとり もも肉 498\n\nたまご 198", now=NOW)

    output = format_parsed_receipt(receipt)

    assert output.splitlines()[0] == "購入日時: 2024/05/01 12:30"
    assert "  2. たまご [卵] 目安: 14日後 → 2024/05/15" in output


def test_format_marks_placeholder_date() -> None:
    receipt = parse_receipt("\nとり もも肉 498", now=NOW)

    assert format_parsed_receipt(receipt).splitlines()[0] == "購入日時: 2024/01/01 09:00 (不明)"


def test_format_without_items_shows_hint_and_raw_text() -> None:
    raw = "2024/3/5\n" + "よみとれない文字列 " * 500
    receipt = parse_receipt(raw, now=NOW)

    output = format_parsed_receipt(receipt)

    assert NO_ITEMS_MESSAGE in output
    assert "よみとれない文字列" in output
    assert len(output) < RAW_TEXT_PREVIEW_CHARS + 200


def test_format_json() -> None:
    receipt = parse_receipt("2024年5月1日 12:30\n\nとり もも肉 498", now=NOW)

    data = json.loads(format_parsed_receipt_json(receipt))

    assert data == {
        "purchase_date": "2024-05-01T12:30:00",
        "date_is_placeholder": False,
        "items": [
            {
                "name": "とり もも肉 498",
                "display_name": "とり もも肉",
                "category": "鶏肉",
                "shelf_life_days": 7,
                "expiry_date": "2024-05-08T12:30:00",
            }
        ],
    }
