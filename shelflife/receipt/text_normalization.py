"""Canonical form of Japanese receipt text for keyword matching."""

import re

# Katakana and hiragana are offset by 0x60 across this contiguous block.
KATAKANA_PATTERN = re.compile("[ァ-ヶ]")
KATAKANA_HIRAGANA_OFFSET = 0x60

FULLWIDTH_ALNUM_PATTERN = re.compile("[Ａ-Ｚａ-ｚ０-９]")
FULLWIDTH_OFFSET = 0xFEE0


def to_hiragana(text: str) -> str:
    """Convert katakana (ァ..ヶ) to hiragana, leaving everything else untouched."""
    return KATAKANA_PATTERN.sub(lambda m: chr(ord(m.group(0)) - KATAKANA_HIRAGANA_OFFSET), text)


def to_halfwidth_alnum(text: str) -> str:
    """Convert full-width Latin letters and digits to ASCII."""
    return FULLWIDTH_ALNUM_PATTERN.sub(lambda m: chr(ord(m.group(0)) - FULLWIDTH_OFFSET), text)


def normalize(text: str) -> str:
    """
    Normalize a text fragment for substring keyword matching.

    Steps, in order: katakana -> hiragana, full-width alphanumerics ->
    half-width, lowercase. Whitespace and punctuation are left alone.

    >>> normalize("トリモモ　ＡＢＣ１２")
    'とりもも　abc12'
    """
    return to_halfwidth_alnum(to_hiragana(text)).lower()
