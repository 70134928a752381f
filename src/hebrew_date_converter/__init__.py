"""Hebrew and Gregorian date conversion with Hebrew date text parsing."""

from hebrew_date_converter.core import (
    ConversionResult,
    HebrewDate,
    HebrewDateError,
    HebrewMonth,
    SplitYearFields,
    parse_free_text,
    reconstruct_year,
    resolve_month,
)
from hebrew_date_converter.use_cases import ConversionService

__all__ = [
    "ConversionResult",
    "ConversionService",
    "HebrewDate",
    "HebrewDateError",
    "HebrewMonth",
    "SplitYearFields",
    "parse_free_text",
    "reconstruct_year",
    "resolve_month",
]
