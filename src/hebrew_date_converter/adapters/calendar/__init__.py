"""Calendar capability adapters."""

from hebrew_date_converter.adapters.calendar.hebcal_client import HebcalClient
from hebrew_date_converter.adapters.calendar.local_calendar import LocalCalendar

__all__ = ["HebcalClient", "LocalCalendar"]
