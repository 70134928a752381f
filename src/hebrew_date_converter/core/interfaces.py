"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from hebrew_date_converter.core.entities import GregorianConversion, HebrewConversion


class CalendarConverter(ABC):
    """Interface for the external Gregorian/Hebrew calendar capability."""

    @abstractmethod
    async def gregorian_to_hebrew(self, day: int, month: int, year: int) -> HebrewConversion:
        """Convert a Gregorian date to its Hebrew equivalent."""
        pass

    @abstractmethod
    async def hebrew_to_gregorian(self, day: int, month_label: str, year: int) -> GregorianConversion:
        """Convert a Hebrew date, month given by its external label."""
        pass

    @abstractmethod
    async def current_hebrew_year(self) -> int:
        """Hebrew year of today's date."""
        pass

    @abstractmethod
    def format_hebrew_year(self, year: int) -> str:
        """Render a Hebrew year in Hebrew numerals."""
        pass
