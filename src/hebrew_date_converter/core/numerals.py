"""Hebrew numeral (gematria) decoding and encoding."""

import re
from typing import Optional

import hebrew_numbers

from hebrew_date_converter.core.errors import InvalidNumeralToken

GERESH = "׳"
GERSHAYIM = "״"

NUMERAL_VALUES: dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
}

# Geresh/gershayim, ASCII and typographic quotes, guillemets and separators
SEPARATOR_MARKS = (
    "'\"׳״’“”«»‹›"
    "‼‽‾‿⁀/-"
)
_SEPARATOR_RE = re.compile(f"[{re.escape(SEPARATOR_MARKS)}]")


def strip_separators(text: str) -> str:
    """Remove geresh, gershayim and look-alike punctuation."""
    return _SEPARATOR_RE.sub("", text)


def decode_gematria(token: Optional[str]) -> Optional[int]:
    """Decode an additive gematria token.

    Returns None when the token is empty after stripping punctuation or
    contains any character outside the numeral alphabet.
    """
    if not token:
        return None

    cleaned = strip_separators(token)
    if not cleaned:
        return None

    total = 0
    for char in cleaned:
        value = NUMERAL_VALUES.get(char)
        if value is None:
            return None
        total += value
    return total


def decode_gematria_strict(token: str, field: str = "numeral") -> int:
    """Decode a gematria token or raise InvalidNumeralToken for the field."""
    value = decode_gematria(token)
    if value is None:
        raise InvalidNumeralToken(token, field=field)
    return value


def decode_day(token: Optional[str]) -> Optional[int]:
    """Decode a day token written either in gematria or in digits."""
    if not token:
        return None
    token = token.strip()

    value = decode_gematria(token)
    if value is not None:
        return value
    if token.isdecimal():
        return int(token)
    return None


def _punctuate(letters: str) -> str:
    return letters.replace("'", GERESH).replace('"', GERSHAYIM)


def encode_gematria(number: int, thousands: bool = True) -> str:
    """Render a positive integer as Hebrew numerals.

    Args:
        number: Value to encode
        thousands: Whether to prefix the millennium letter (e.g. "ה׳")

    Returns:
        Numeral string with geresh/gershayim, e.g. 5785 -> "ה׳תשפ״ה"
    """
    if number <= 0:
        raise ValueError(f"Cannot encode non-positive number: {number}")

    millennia, rest = divmod(number, 1000)
    prefix = ""
    if millennia and thousands:
        prefix = hebrew_numbers.int_to_gematria(millennia, gershayim=False) + GERESH

    if not rest:
        return prefix or _punctuate(hebrew_numbers.int_to_gematria(millennia))
    return prefix + _punctuate(hebrew_numbers.int_to_gematria(rest))


def format_hebrew_year(year: int) -> str:
    """Format a Hebrew year, omitting the conventional fifth-millennium marker."""
    return encode_gematria(year, thousands=year // 1000 != 5)
