"""Free-text Hebrew date parsing."""

import re
import unicodedata
from typing import Optional

from hebrew_date_converter.core.entities import HebrewDate
from hebrew_date_converter.core.errors import InvalidDateFormat, MissingParameters
from hebrew_date_converter.core.months import MONTHS_LONGEST_FIRST, find_month
from hebrew_date_converter.core.numerals import decode_day, strip_separators
from hebrew_date_converter.core.years import year_from_token
from hebrew_date_converter.logging_config import get_logger

logger = get_logger(__name__)

# Vowel points, cantillation and bidi marks
_MARKS_RE = re.compile("[\u0591-\u05C7\u200e\u200f]")

# "ב" glued to a month name: "בניסן" -> "ניסן"
_PREFIX_RE = re.compile(
    r"(?<!\S)ב(?=(?:"
    + "|".join(re.escape(month.label) for month in MONTHS_LONGEST_FIRST)
    + "))"
)

# Standalone "ב" after another word, unless it belongs to "אדר ב"
_STANDALONE_RE = re.compile(r"(?<=\S)(?<!אדר)\s+ב\s+")


def clean_date_text(text: str) -> str:
    """Strip marks, numeral punctuation and the preposition "ב"."""
    cleaned = unicodedata.normalize("NFD", text)
    cleaned = _MARKS_RE.sub("", cleaned)
    cleaned = strip_separators(cleaned)
    cleaned = _STANDALONE_RE.sub(" ", cleaned)
    cleaned = _PREFIX_RE.sub("", cleaned)
    return " ".join(cleaned.split())


def parse_hebrew_date(text: Optional[str]) -> Optional[HebrewDate]:
    """Parse free text such as 'ה' בניסן תשפ"ה' into a HebrewDate.

    The text before the month is the day and the text after it is the year.
    Returns None unless day, month and year all resolve.
    """
    if not text:
        return None

    cleaned = clean_date_text(text)
    logger.debug("date_text_cleaned", original=text, cleaned=cleaned)

    found = find_month(cleaned)
    if found is None:
        logger.warning("parse_failed", reason="no_month", original=text, cleaned=cleaned)
        return None

    month, index = found
    day_part = cleaned[:index].strip()
    year_part = cleaned[index + len(month.label):].strip()

    day = decode_day(day_part)
    year = year_from_token(year_part)

    if day is None or day < 1 or year is None:
        logger.warning(
            "parse_failed",
            reason="unresolved_day" if day is None or day < 1 else "unresolved_year",
            original=text,
            day_part=day_part,
            month=month.label,
            year_part=year_part,
        )
        return None

    parsed = HebrewDate(day=day, month=month, year=year)
    logger.debug("date_text_parsed", day=day, month=month.label, year=year)
    return parsed


def parse_free_text(text: Optional[str]) -> HebrewDate:
    """Parse free text or raise a typed error."""
    if not text or not text.strip():
        raise MissingParameters(["dateString"])

    parsed = parse_hebrew_date(text)
    if parsed is None:
        raise InvalidDateFormat(text)
    return parsed
