"""Keyword vocabularies for Japanese receipt line classification.

Food keywords go through ``normalize`` on both sides, so katakana and
full-width spellings match their hiragana/half-width forms. Exclusion words
are matched verbatim against the printed line and must be spelled the way
the receipt prints them.
"""

from __future__ import annotations

from collections.abc import Iterable

from .text_normalization import normalize

# Receipt boilerplate: totals, tax, discounts/points, payment and change,
# register/staff/membership, barcode/inquiry/returns, contact and store info.
EXCLUDE_WORDS: tuple[str, ...] = (
    "合計",
    "小計",
    "消費税",
    "内税",
    "外税",
    "値引",
    "割引",
    "ポイント",
    "現金",
    "クレジット",
    "お預り",
    "お預かり",
    "お釣り",
    "レジ",
    "担当",
    "会員",
    "バーコード",
    "問合せ",
    "返品",
    "再発行",
    "tel",
    "phone",
    "thank",
    "ご購入",
    "ご利用",
    "営業時間",
    "住所",
    "店舗",
    "加盟",
    "当店",
)

# Markers for "tax included" / "tax excluded" prices.
TAX_MARKERS: tuple[str, ...] = ("税込", "税抜")

# Meat, seafood, dairy, bread, deli, frozen, vegetables, soy, eggs,
# noodles, preserved goods.
FOOD_KEYWORDS: tuple[str, ...] = (
    # meat
    "とり",
    "ちきん",
    "鶏",
    "ぎゅう",
    "牛",
    "ぶた",
    "豚",
    "ひき",
    "みんち",
    "挽肉",
    # seafood
    "さしみ",
    "鮮魚",
    "さーもん",
    "まぐろ",
    "たい",
    "いか",
    "えび",
    "ほたて",
    "さんま",
    "さば",
    "ぶり",
    # dairy
    "ぎゅうにゅう",
    "牛乳",
    "みるく",
    "よーぐると",
    "ヨーグルト",
    "チーズ",
    "バター",
    # bread
    "ぱん",
    "パン",
    "食パン",
    "ろーる",
    "菓子パン",
    # deli
    "そうざい",
    "惣菜",
    "総菜",
    "弁当",
    "おかず",
    "サラダ",
    "ころっけ",
    "ふらい",
    "唐揚げ",
    "からあげ",
    "ハム",
    "ソーセージ",
    "ベーコン",
    # frozen
    "れいとう",
    "冷凍",
    "ふろーずん",
    # vegetables
    "やさい",
    "野菜",
    "れたす",
    "きゅうり",
    "にんじん",
    "だいこん",
    "たまねぎ",
    "じゃがいも",
    "ねぎ",
    "ほうれんそう",
    # soy and eggs
    "とうふ",
    "豆腐",
    "たまご",
    "卵",
    "玉子",
    # noodles
    "うどん",
    "ラーメン",
    "そば",
    "スパゲッティ",
    # preserved
    "缶詰",
    "瓶詰",
    "ジャム",
)


def normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Normalize keywords, dropping blanks and duplicates while keeping order."""
    seen: set[str] = set()
    normalized: list[str] = []
    for keyword in keywords:
        value = normalize(str(keyword).strip())
        if value and value not in seen:
            seen.add(value)
            normalized.append(value)
    return tuple(normalized)


def contains_any(normalized_text: str, normalized_keywords: Iterable[str]) -> bool:
    """Return True if any keyword is a substring of the (already normalized) text."""
    return any(keyword in normalized_text for keyword in normalized_keywords)


NORMALIZED_FOOD_KEYWORDS = normalize_keywords(FOOD_KEYWORDS)
