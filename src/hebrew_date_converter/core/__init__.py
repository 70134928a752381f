"""Core domain layer."""

from hebrew_date_converter.core.entities import (
    ConversionResult,
    ConversionSource,
    DateOptions,
    GregorianConversion,
    GregorianDate,
    HebrewConversion,
    HebrewDate,
    HebrewMonth,
    HistoricalEntry,
    SplitYearFields,
)
from hebrew_date_converter.core.errors import (
    ExternalConversionError,
    HebrewDateError,
    InvalidDateFormat,
    InvalidMonthName,
    InvalidNumeralToken,
    InvalidYearPart,
    MissingParameters,
    MissingYearParts,
)
from hebrew_date_converter.core.historical import HistoricalTable, load_historical_table
from hebrew_date_converter.core.interfaces import CalendarConverter
from hebrew_date_converter.core.months import find_month, require_month, resolve_month
from hebrew_date_converter.core.numerals import (
    decode_day,
    decode_gematria,
    decode_gematria_strict,
    encode_gematria,
    format_hebrew_year,
)
from hebrew_date_converter.core.options import build_options
from hebrew_date_converter.core.parser import parse_free_text, parse_hebrew_date
from hebrew_date_converter.core.years import reconstruct_year, year_from_parts, year_from_token

__all__ = [
    "ConversionResult",
    "ConversionSource",
    "DateOptions",
    "GregorianConversion",
    "GregorianDate",
    "HebrewConversion",
    "HebrewDate",
    "HebrewMonth",
    "HistoricalEntry",
    "SplitYearFields",
    "HebrewDateError",
    "MissingParameters",
    "InvalidNumeralToken",
    "InvalidYearPart",
    "MissingYearParts",
    "InvalidMonthName",
    "InvalidDateFormat",
    "ExternalConversionError",
    "HistoricalTable",
    "load_historical_table",
    "CalendarConverter",
    "find_month",
    "require_month",
    "resolve_month",
    "decode_day",
    "decode_gematria",
    "decode_gematria_strict",
    "encode_gematria",
    "format_hebrew_year",
    "build_options",
    "parse_free_text",
    "parse_hebrew_date",
    "reconstruct_year",
    "year_from_parts",
    "year_from_token",
]
