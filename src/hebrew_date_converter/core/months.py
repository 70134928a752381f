"""Month name resolution."""

from typing import Optional

from hebrew_date_converter.core.entities import HebrewMonth
from hebrew_date_converter.core.errors import InvalidMonthName

_BY_LABEL: dict[str, HebrewMonth] = {month.label: month for month in HebrewMonth}

# Longest first, so "מנחם אב" is tried before "אב" and "אדר ב" before "אדר"
MONTHS_LONGEST_FIRST: tuple[HebrewMonth, ...] = tuple(
    sorted(HebrewMonth, key=lambda month: len(month.label), reverse=True)
)


def resolve_month(token: Optional[str]) -> Optional[HebrewMonth]:
    """Exact lookup of a month token."""
    if not token:
        return None
    return _BY_LABEL.get(" ".join(token.split()))


def require_month(token: Optional[str]) -> HebrewMonth:
    """Resolve a month token or raise InvalidMonthName."""
    month = resolve_month(token)
    if month is None:
        raise InvalidMonthName(token or "")
    return month


def find_month(text: str) -> Optional[tuple[HebrewMonth, int]]:
    """Find the month named inside free text.

    Returns:
        Tuple of (month, start index) for the longest label present, or None
    """
    for month in MONTHS_LONGEST_FIRST:
        index = text.find(month.label)
        if index != -1:
            return month, index
    return None
