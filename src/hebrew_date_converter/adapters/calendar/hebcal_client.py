"""Hebcal converter API client."""

from datetime import date
from typing import Any

import httpx

from hebrew_date_converter.core import (
    CalendarConverter,
    ExternalConversionError,
    GregorianConversion,
    HebrewConversion,
    format_hebrew_year,
)
from hebrew_date_converter.logging_config import get_logger

logger = get_logger(__name__)


class HebcalClient(CalendarConverter):
    """Calendar conversion through the Hebcal REST converter."""

    name = "Hebcal"

    def __init__(
        self,
        base_url: str = "https://www.hebcal.com/converter",
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout

    async def gregorian_to_hebrew(self, day: int, month: int, year: int) -> HebrewConversion:
        """Convert a Gregorian date via `g2h=1`."""
        data = await self._request({"cfg": "json", "gy": year, "gm": month, "gd": day, "g2h": 1})

        try:
            return HebrewConversion(
                hebrew_year=int(data["hy"]),
                hebrew_month_label=str(data["hm"]),
                hebrew_day=int(data["hd"]),
                formatted_hebrew=str(data["hebrew"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("calendar_payload_malformed", direction="g2h", payload=data)
            raise ExternalConversionError(
                "Malformed response from calendar service", details=f"{type(e).__name__}: {e}"
            ) from e

    async def hebrew_to_gregorian(self, day: int, month_label: str, year: int) -> GregorianConversion:
        """Convert a Hebrew date via `h2g=1`."""
        data = await self._request(
            {"cfg": "json", "hy": year, "hm": month_label, "hd": day, "h2g": 1}
        )

        try:
            gregorian_year = int(data["gy"])
            gregorian_month = int(data["gm"])
            gregorian_day = int(data["gd"])
        except (KeyError, TypeError, ValueError) as e:
            logger.error("calendar_payload_malformed", direction="h2g", payload=data)
            raise ExternalConversionError(
                "Malformed response from calendar service", details=f"{type(e).__name__}: {e}"
            ) from e

        return GregorianConversion(
            gregorian_year=gregorian_year,
            gregorian_month=gregorian_month,
            gregorian_day=gregorian_day,
            formatted_gregorian=f"{gregorian_day}/{gregorian_month}/{gregorian_year}",
            formatted_hebrew=data.get("hebrew"),
        )

    async def current_hebrew_year(self) -> int:
        today = date.today()
        conversion = await self.gregorian_to_hebrew(today.day, today.month, today.year)
        return conversion.hebrew_year

    def format_hebrew_year(self, year: int) -> str:
        return format_hebrew_year(year)

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        """Execute converter request and return the JSON payload."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(self.base_url, params=params)
            except httpx.HTTPError as e:
                logger.error("calendar_request_failed", url=self.base_url, params=params, error=str(e))
                raise ExternalConversionError(
                    "Calendar service request failed", details=str(e)
                ) from e

        if response.status_code != 200:
            logger.error("calendar_request_failed", url=self.base_url, status=response.status_code)
            raise ExternalConversionError(
                "Calendar service request failed",
                details=f"HTTP {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalConversionError(
                "Failed to parse JSON from calendar service", details=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ExternalConversionError(
                "Malformed response from calendar service", details=repr(data)[:200]
            )

        if data.get("error"):
            logger.error("calendar_error_payload", params=params, error=data["error"])
            raise ExternalConversionError(
                "Calendar service returned an error", details=str(data["error"])
            )

        return data
