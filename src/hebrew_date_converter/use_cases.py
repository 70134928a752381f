"""Business logic use cases."""

import asyncio
from typing import Awaitable, Optional, TypeVar, Union

from hebrew_date_converter.core import (
    CalendarConverter,
    ConversionResult,
    ConversionSource,
    DateOptions,
    ExternalConversionError,
    GregorianDate,
    HebrewDate,
    HebrewMonth,
    HistoricalTable,
    InvalidNumeralToken,
    MissingParameters,
    SplitYearFields,
    build_options,
    decode_day,
    load_historical_table,
    parse_free_text,
    reconstruct_year,
    require_month,
)
from hebrew_date_converter.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

FieldValue = Union[str, int, None]


def _missing(**fields: FieldValue) -> list[str]:
    return [name for name, value in fields.items() if value is None or str(value).strip() == ""]


def _resolve_day(day: FieldValue) -> int:
    value = day if isinstance(day, int) else decode_day(day)
    if value is None or value < 1:
        raise InvalidNumeralToken(str(day), field="day")
    return value


class ConversionService:
    """Service converting between Hebrew and Gregorian dates.

    Hebrew dates found in the historical table are answered from it without
    touching the calendar; everything else is delegated to the calendar
    capability under a bounded wait. Failures are never retried.
    """

    def __init__(
        self,
        calendar: CalendarConverter,
        historical_table: Optional[HistoricalTable] = None,
        timeout: float = 10.0,
        year_span: int = 50,
    ) -> None:
        self.calendar = calendar
        self.historical_table = (
            historical_table if historical_table is not None else load_historical_table()
        )
        self.timeout = timeout
        self.year_span = year_span

    async def convert(self, hebrew_date: HebrewDate) -> ConversionResult:
        """Convert a resolved Hebrew date to Gregorian."""
        entry = self.historical_table.lookup(hebrew_date)
        if entry is not None:
            logger.info("historical_override_hit", key=entry.key)
            return ConversionResult(
                hebrew=hebrew_date,
                gregorian=entry.gregorian,
                hebrew_formatted=entry.hebrew_formatted,
                gregorian_formatted=entry.gregorian.formatted,
                source=ConversionSource.HISTORICAL,
            )

        conversion = await self._delegate(
            "hebrew_to_gregorian",
            self.calendar.hebrew_to_gregorian(
                hebrew_date.day, hebrew_date.month.external_label, hebrew_date.year
            ),
        )

        try:
            gregorian = GregorianDate(
                day=conversion.gregorian_day,
                month=conversion.gregorian_month,
                year=conversion.gregorian_year,
            )
        except ValueError as e:
            raise ExternalConversionError(
                "Calendar service returned an invalid date", details=str(e)
            ) from e

        return ConversionResult(
            hebrew=hebrew_date,
            gregorian=gregorian,
            hebrew_formatted=conversion.formatted_hebrew or hebrew_date.formatted,
            gregorian_formatted=conversion.formatted_gregorian,
            source=ConversionSource.CALENDAR,
        )

    async def convert_hebrew(
        self, day: FieldValue, month: Optional[str], year: FieldValue
    ) -> ConversionResult:
        """Convert explicit day/month/year fields (digits or gematria)."""
        missing = _missing(hday=day, hmonth=month, hyear=year)
        if missing:
            raise MissingParameters(missing)

        hebrew_date = HebrewDate(
            day=_resolve_day(day),
            month=require_month(month),
            year=reconstruct_year(str(year)),
        )
        return await self.convert(hebrew_date)

    async def convert_split(
        self, day: FieldValue, month: Optional[str], fields: SplitYearFields
    ) -> ConversionResult:
        """Convert a date whose year arrives as split numeral groups."""
        missing = _missing(hday=day, hmonth=month)
        if missing:
            raise MissingParameters(missing)

        numeric_day = _resolve_day(day)
        year = reconstruct_year(fields)
        hebrew_date = HebrewDate(day=numeric_day, month=require_month(month), year=year)
        return await self.convert(hebrew_date)

    async def parse_and_convert(self, text: Optional[str]) -> ConversionResult:
        """Parse free Hebrew date text and convert it."""
        return await self.convert(parse_free_text(text))

    async def convert_gregorian(
        self, day: FieldValue, month: FieldValue, year: FieldValue
    ) -> ConversionResult:
        """Convert a Gregorian date to Hebrew. No historical override applies."""
        missing = _missing(year=year, month=month, day=day)
        if missing:
            raise MissingParameters(missing)

        try:
            gregorian = GregorianDate(day=int(day), month=int(month), year=int(year))
        except ValueError as e:
            raise InvalidNumeralToken(f"{day}/{month}/{year}", field="Gregorian date") from e

        conversion = await self._delegate(
            "gregorian_to_hebrew",
            self.calendar.gregorian_to_hebrew(gregorian.day, gregorian.month, gregorian.year),
        )

        month_member = HebrewMonth.from_external_label(conversion.hebrew_month_label)
        if month_member is None:
            raise ExternalConversionError(
                "Calendar service returned an unknown month",
                details=conversion.hebrew_month_label,
            )

        try:
            hebrew_date = HebrewDate(
                day=conversion.hebrew_day, month=month_member, year=conversion.hebrew_year
            )
        except ValueError as e:
            raise ExternalConversionError(
                "Calendar service returned an invalid date", details=str(e)
            ) from e

        return ConversionResult(
            hebrew=hebrew_date,
            gregorian=gregorian,
            hebrew_formatted=conversion.formatted_hebrew,
            gregorian_formatted=gregorian.formatted,
            source=ConversionSource.CALENDAR,
        )

    async def list_options(self) -> DateOptions:
        """Build date-picker choices around the current Hebrew year."""
        current_year = await self._delegate(
            "current_hebrew_year", self.calendar.current_hebrew_year()
        )
        return build_options(current_year, self.calendar.format_hebrew_year, self.year_span)

    async def _delegate(self, operation: str, call: Awaitable[T]) -> T:
        """Await a calendar call with a bounded wait."""
        try:
            return await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("calendar_timeout", operation=operation, timeout=self.timeout)
            raise ExternalConversionError(
                "Calendar service timed out",
                details=f"{operation} exceeded {self.timeout}s",
            ) from e
        except ExternalConversionError as e:
            logger.error("calendar_failed", operation=operation, error=e.message, details=e.details)
            raise
