"""Purchase date/time extraction from Japanese receipt text."""

import re

from shelflife.domain.receipt import DateMatch

# Receipts reliably print a date but not always a time.
# Noon keeps a date-only timestamp on the same calendar day in any display timezone.
DEFAULT_HOUR = 12
DEFAULT_MINUTE = 0

# Fixed priority order: full timestamps first, slash dates before kanji dates.
PURCHASE_DATE_PATTERNS = (
    # 2024/3/5 9:41
    re.compile(r"(?P<y>\d{4})/(?P<m>\d{1,2})/(?P<d>\d{1,2})\s+(?P<H>\d{1,2}):(?P<M>\d{2})"),
    # 2024年3月5日 9:41
    re.compile(r"(?P<y>\d{4})年(?P<m>\d{1,2})月(?P<d>\d{1,2})日\s+(?P<H>\d{1,2}):(?P<M>\d{2})"),
    # 2024/3/5
    re.compile(r"(?P<y>\d{4})/(?P<m>\d{1,2})/(?P<d>\d{1,2})"),
    # 2024年3月5日
    re.compile(r"(?P<y>\d{4})年(?P<m>\d{1,2})月(?P<d>\d{1,2})日"),
)


def extract_purchase_date(text: str) -> DateMatch | None:
    """
    Find the first recognizable purchase timestamp in raw receipt text.

    Patterns are tried in priority order against the whole, non-normalized
    text; the first pattern that matches anywhere wins. The match is purely
    structural: calendar validity is checked later by ``DateMatch.to_datetime``.

    Returns:
        DateMatch, or None when no pattern matches (caller picks a fallback).
    """
    for pattern in PURCHASE_DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        groups = match.groupdict()
        hour = groups.get("H")
        minute = groups.get("M")
        return DateMatch(
            year=int(groups["y"]),
            month=int(groups["m"]),
            day=int(groups["d"]),
            hour=int(hour) if hour is not None else DEFAULT_HOUR,
            minute=int(minute) if minute is not None else DEFAULT_MINUTE,
        )
    return None
