from shelflife.domain.receipt import DateMatch
from shelflife.receipt.ocr_parser.fields_parser import extract_purchase_date


def test_slash_date_without_time_defaults_to_noon() -> None:
    assert extract_purchase_date("2024/3/5 の購入") == DateMatch(2024, 3, 5, 12, 0)


def test_slash_timestamp_beats_kanji_date() -> None:
    text = "2024年5月1日\nお買上げ\n2023/12/31 18:05"
    assert extract_purchase_date(text) == DateMatch(2023, 12, 31, 18, 5)


def test_kanji_timestamp_beats_slash_date_only() -> None:
    text = "発行 2024/5/1\n2024年6月2日 9:15"
    assert extract_purchase_date(text) == DateMatch(2024, 6, 2, 9, 15)


def test_kanji_timestamp() -> None:
    assert extract_purchase_date("2024年5月1日 12:30 レジ2") == DateMatch(2024, 5, 1, 12, 30)


def test_kanji_date_only() -> None:
    assert extract_purchase_date("ご来店日 2024年11月20日(水)") == DateMatch(2024, 11, 20, 12, 0)


def test_single_digit_minute_is_not_a_time() -> None:
    assert extract_purchase_date("2024/5/1 9:5") == DateMatch(2024, 5, 1, 12, 0)


def test_two_digit_year_is_ignored() -> None:
    assert extract_purchase_date("24/5/1 10:00") is None


def test_no_date_returns_none() -> None:
    assert extract_purchase_date("とり もも肉 498\n合計 498") is None
    assert extract_purchase_date("") is None


def test_structural_match_is_not_calendar_validated() -> None:
    assert extract_purchase_date("2024/13/40") == DateMatch(2024, 13, 40, 12, 0)


def test_fullwidth_digits_are_read() -> None:
    assert extract_purchase_date("２０２４/３/５") == DateMatch(2024, 3, 5, 12, 0)
