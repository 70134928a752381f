"""Hebrew year reconstruction from numeral tokens."""

from typing import Optional, Union

from hebrew_date_converter.core.entities import SplitYearFields
from hebrew_date_converter.core.errors import (
    InvalidNumeralToken,
    InvalidYearPart,
    MissingParameters,
    MissingYearParts,
)
from hebrew_date_converter.core.numerals import NUMERAL_VALUES, decode_gematria, strip_separators

# Letters that may open a year as an explicit millennium (1000-6000)
MILLENNIUM_LETTERS = "אבגדהו"

# Millennium assumed when a long token carries no explicit marker
DEFAULT_MILLENNIUM = 5000

ABSENT_MARKERS = ("", "0")


def year_from_token(token: Optional[str]) -> Optional[int]:
    """Resolve a single year token.

    Digits are taken as the absolute year. Otherwise the token is gematria:
    a leading millennium letter followed by more letters contributes its
    value times 1000; without one, tokens longer than three letters are
    placed in the sixth millennium (5000). This default is a heuristic and
    misreads years below 5000 written without a millennium letter.
    """
    if not token:
        return None
    token = token.strip()

    if token.isdecimal():
        year = int(token)
        return year if year > 0 else None

    letters = "".join(strip_separators(token).split())
    if not letters:
        return None

    millennium = 0
    remainder = letters
    if letters[0] in MILLENNIUM_LETTERS and len(letters) > 1:
        millennium = NUMERAL_VALUES[letters[0]] * 1000
        remainder = letters[1:]
    elif len(letters) > 3:
        millennium = DEFAULT_MILLENNIUM

    value = decode_gematria(remainder)
    if value is None:
        return None
    return millennium + value


def _is_absent(token: Optional[str]) -> bool:
    return token is None or token.strip() in ABSENT_MARKERS


def year_from_parts(fields: SplitYearFields) -> int:
    """Combine split thousands/hundreds/tens/ones numerals into one year.

    Raises:
        InvalidYearPart: A present field failed to decode
        MissingYearParts: Every field was absent or zero
    """
    total = 0
    for part, token in fields.items():
        if _is_absent(token):
            continue

        value = decode_gematria(token.strip())
        if value is None:
            raise InvalidYearPart(part, token)

        total += value * 1000 if part == "thousands" else value

    if total == 0:
        raise MissingYearParts()
    return total


def reconstruct_year(parts: Union[SplitYearFields, str, None]) -> int:
    """Resolve a year from either split fields or a single token."""
    if isinstance(parts, SplitYearFields):
        return year_from_parts(parts)

    if not parts or not parts.strip():
        raise MissingParameters(["year"])

    year = year_from_token(parts)
    if year is None:
        raise InvalidNumeralToken(parts, field="year")
    return year
