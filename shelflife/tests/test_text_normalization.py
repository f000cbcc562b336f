"""Tests for Japanese text normalization."""

import pytest
from shelflife.receipt.text_normalization import normalize, to_hiragana


def test_katakana_becomes_hiragana() -> None:
    assert to_hiragana("トリモモ") == "とりもも"
    assert normalize("ヨーグルト") == "よーぐると"


def test_katakana_block_edges() -> None:
    # ァ (U+30A1) and ヶ (U+30F6) are the ends of the converted range.
    assert to_hiragana("ァヶ") == "ぁゖ"
    # ヷ (U+30F7) and half-width katakana are outside it.
    assert to_hiragana("ヷｱ") == "ヷｱ"


def test_fullwidth_alnum_becomes_ascii_lowercase() -> None:
    assert normalize("ＴＥＬ０３") == "tel03"
    assert normalize("ａｂｃＸＹＺ１２３") == "abcxyz123"


def test_whitespace_and_punctuation_untouched() -> None:
    assert normalize("　とり  もも！ ¥498 ") == "　とり  もも！ ¥498 "


@pytest.mark.parametrize(
    "text",
    [
        "",
        "とり もも肉 498",
        "トリモモ　ＡＢＣ１２",
        "ヴァイオリン ヶ月",
        "ÄÖÜ ß İstanbul",
        "ｶﾞﾘｶﾞﾘ ￥１９８",
        "Mixed Ｃａｓｅ ﾃｽﾄ テスト",
    ],
)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once
