"""Offline calendar conversion backed by convertdate."""

from datetime import date

from convertdate import hebrew

from hebrew_date_converter.core import (
    CalendarConverter,
    ExternalConversionError,
    GregorianConversion,
    HebrewConversion,
    HebrewDate,
    HebrewMonth,
    format_hebrew_year,
)


class LocalCalendar(CalendarConverter):
    """Calendar conversion computed in-process.

    Months use convertdate's numbering, which matches HebrewMonth ordinals
    (Nisan = 1, Adar or Adar I = 12, Adar II = 13).
    """

    name = "convertdate"

    async def gregorian_to_hebrew(self, day: int, month: int, year: int) -> HebrewConversion:
        try:
            hebrew_year, hebrew_month, hebrew_day = hebrew.from_gregorian(year, month, day)
        except ValueError as e:
            raise ExternalConversionError("Invalid Gregorian date", details=str(e)) from e

        try:
            resolved = HebrewDate(
                day=hebrew_day,
                month=self._month_for_ordinal(hebrew_year, hebrew_month),
                year=hebrew_year,
            )
        except ValueError as e:
            raise ExternalConversionError(
                "Gregorian date is outside the Hebrew calendar", details=str(e)
            ) from e

        return HebrewConversion(
            hebrew_year=resolved.year,
            hebrew_month_label=resolved.month.external_label,
            hebrew_day=resolved.day,
            formatted_hebrew=resolved.formatted,
        )

    async def hebrew_to_gregorian(self, day: int, month_label: str, year: int) -> GregorianConversion:
        month = HebrewMonth.from_external_label(month_label)
        if month is None:
            raise ExternalConversionError("Unknown month", details=month_label)

        if month.ordinal == 13 and not hebrew.leap(year):
            raise ExternalConversionError(
                "Invalid Hebrew date", details=f"{year} is not a leap year, {month_label} does not exist"
            )

        days_in_month = hebrew.month_length(year, month.ordinal)
        if not 1 <= day <= days_in_month:
            raise ExternalConversionError(
                "Invalid Hebrew date", details=f"{month_label} {year} has {days_in_month} days"
            )

        gregorian_year, gregorian_month, gregorian_day = hebrew.to_gregorian(year, month.ordinal, day)
        return GregorianConversion(
            gregorian_year=gregorian_year,
            gregorian_month=gregorian_month,
            gregorian_day=gregorian_day,
            formatted_gregorian=f"{gregorian_day}/{gregorian_month}/{gregorian_year}",
            formatted_hebrew=HebrewDate(day=day, month=month, year=year).formatted,
        )

    async def current_hebrew_year(self) -> int:
        today = date.today()
        return hebrew.from_gregorian(today.year, today.month, today.day)[0]

    def format_hebrew_year(self, year: int) -> str:
        return format_hebrew_year(year)

    def _month_for_ordinal(self, year: int, ordinal: int) -> HebrewMonth:
        if ordinal == 12 and hebrew.leap(year):
            return HebrewMonth.ADAR_I
        return next(month for month in HebrewMonth if month.ordinal == ordinal)
