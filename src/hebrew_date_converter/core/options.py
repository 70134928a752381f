"""Choice lists for date-picker style input."""

from typing import Callable

from hebrew_date_converter.core.entities import DateOptions, HebrewMonth

DAY_NUMERALS = [
    "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט", "י",
    "יא", "יב", "יג", "יד", "טו", "טז", "יז", "יח", "יט", "כ",
    "כא", "כב", "כג", "כד", "כה", "כו", "כז", "כח", "כט", "ל",
]

# Listed ahead of the alphabetical months
LEADING_MONTHS = [
    HebrewMonth.ADAR_I,
    HebrewMonth.ADAR_II,
    HebrewMonth.ADAR,
    HebrewMonth.MARCHESHVAN,
    HebrewMonth.MENACHEM_AV,
]

YEAR_PARTS = {
    "thousands": ["ה", "ד", "ג", "ב", "א"],
    "hundreds": ["תתק", "תת", "תש", "תר", "תק", "ת", "ש", "ר", "ק", "0"],
    "tens": ["צ", "פ", "ע", "ס", "נ", "מ", "ל", "כ", "י", "0"],
    "ones": ["ט", "ח", "ז", "ו", "ה", "ד", "ג", "ב", "א", "0"],
}


def month_choices() -> list[str]:
    leading = [month.label for month in LEADING_MONTHS]
    rest = sorted(month.label for month in HebrewMonth if month not in LEADING_MONTHS)
    return leading + rest


def build_options(
    current_year: int,
    format_year: Callable[[int], str],
    span: int = 50,
) -> DateOptions:
    """Build day, month, year and split-year choices around the current year."""
    start = max(1, current_year - span)
    years = [format_year(year) for year in range(start, current_year + span + 1)]

    return DateOptions(
        days=list(DAY_NUMERALS),
        months=month_choices(),
        years=years,
        year_parts={part: list(values) for part, values in YEAR_PARTS.items()},
    )
