"""End-to-end parsing of OCR text into categorized items."""

from __future__ import annotations

from datetime import datetime

from shelflife.domain.receipt import CategorizedItem
from shelflife.receipt.item_categories import ItemCategoryRule, ItemCategoryRuleTable
from shelflife.receipt.ocr_result_parser import parse_receipt

SUPERMARKET_RECEIPT = """スーパーまるや　駅前店
TEL 03-1234-5678
2024年5月1日 12:30  レジ#2
担当 山田

とり もも肉     498
小計            498
消費税等         39
合計            537
お預り         1000
お釣り          463
ありがとうございました
"""

NOW = datetime(2024, 1, 1, 9, 0)


def test_supermarket_receipt() -> None:
    receipt = parse_receipt(SUPERMARKET_RECEIPT, now=NOW)

    assert receipt.purchase_date == datetime(2024, 5, 1, 12, 30)
    assert not receipt.date_is_placeholder
    assert receipt.items == (
        CategorizedItem(
            name="とり もも肉 498",
            category="鶏肉",
            shelf_life_days=7,
            expiry_date=datetime(2024, 5, 8, 12, 30),
        ),
    )
    assert receipt.items[0].display_name == "とり もも肉"
    assert receipt.raw_text == SUPERMARKET_RECEIPT


def test_multiple_items_with_wrapped_name() -> None:
    text = "2024/3/5 18:02\n\n国産 豚 こま 398\n北海道産\nじゃがいも 3個 198\n\n冷凍 えだまめ 198\n合計 794"
    receipt = parse_receipt(text, now=NOW)

    assert receipt.purchase_date == datetime(2024, 3, 5, 18, 2)
    assert [(item.name, item.category, item.shelf_life_days) for item in receipt.items] == [
        ("国産 豚 こま 398", "豚肉", 7),
        ("北海道産 じゃがいも 3個 198", "野菜", 5),
        ("冷凍 えだまめ 198", "冷凍食品", 90),
    ]
    assert receipt.items[2].expiry_date == datetime(2024, 6, 3, 18, 2)


def test_missing_date_uses_fallback() -> None:
    receipt = parse_receipt("\nたまご 10個 198", now=NOW)

    assert receipt.date_is_placeholder
    assert receipt.purchase_date == NOW
    assert receipt.items[0].category == "卵"
    assert receipt.items[0].expiry_date == datetime(2024, 1, 15, 9, 0)


def test_impossible_date_uses_fallback() -> None:
    receipt = parse_receipt("2024/13/40\n\nとり むね肉 298", now=NOW)

    assert receipt.date_is_placeholder
    assert receipt.purchase_date == NOW
    assert [item.name for item in receipt.items] == ["とり むね肉 298"]


def test_no_items_is_a_normal_result() -> None:
    receipt = parse_receipt("2024/3/5\n合計 1000\nお釣り 0", now=NOW)

    assert receipt.items == ()
    assert not receipt.has_items
    assert receipt.purchase_date == datetime(2024, 3, 5, 12, 0)


def test_injected_rule_table_is_used() -> None:
    table = ItemCategoryRuleTable(rules=(ItemCategoryRule("肉", 3, ("とり",)),))
    receipt = parse_receipt("2024/3/5\n\nとり もも肉 498", rule_table=table)

    assert receipt.items[0].category == "肉"
    assert receipt.items[0].expiry_date == datetime(2024, 3, 8, 12, 0)


def test_expiry_past_last_representable_date_is_none() -> None:
    receipt = parse_receipt("9999/12/31\n\nとり もも肉 498", now=NOW)

    assert receipt.purchase_date == datetime(9999, 12, 31, 12, 0)
    assert receipt.items[0].category == "鶏肉"
    assert receipt.items[0].expiry_date is None


def test_huge_shelf_life_in_rule_table_does_not_raise() -> None:
    table = ItemCategoryRuleTable(rules=(ItemCategoryRule("保存食", 10**10, ("とり",)),))
    receipt = parse_receipt("2024/3/5\n\nとり もも肉 498", rule_table=table)

    assert receipt.items[0].shelf_life_days == 10**10
    assert receipt.items[0].expiry_date is None
