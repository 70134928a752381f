"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from hebrew_date_converter.core.numerals import encode_gematria, format_hebrew_year


class HebrewMonth(Enum):
    """Canonical Hebrew month spellings.

    Alternate spellings are separate members sharing an ordinal, so a parsed
    date keeps the spelling it was written with.
    """

    NISAN = ("ניסן", 1, "Nisan")
    IYYAR = ("אייר", 2, "Iyyar")
    SIVAN = ("סיון", 3, "Sivan")
    TAMMUZ = ("תמוז", 4, "Tammuz")
    AV = ("אב", 5, "Av")
    MENACHEM_AV = ("מנחם אב", 5, "Av")
    ELUL = ("אלול", 6, "Elul")
    TISHREI = ("תשרי", 7, "Tishrei")
    CHESHVAN = ("חשון", 8, "Cheshvan")
    MARCHESHVAN = ("מרחשון", 8, "Cheshvan")
    KISLEV = ("כסלו", 9, "Kislev")
    TEVET = ("טבת", 10, "Tevet")
    SHVAT = ("שבט", 11, "Shvat")
    ADAR = ("אדר", 12, "Adar")
    ADAR_I = ("אדר א", 12, "Adar I")
    ADAR_II = ("אדר ב", 13, "Adar II")

    def __init__(self, label: str, ordinal: int, external_label: str) -> None:
        self.label = label
        self.ordinal = ordinal
        self.external_label = external_label

    @classmethod
    def from_external_label(cls, label: str) -> Optional["HebrewMonth"]:
        """Map a calendar service month name back to a member.

        The first member declared with the label wins, which is the common
        spelling for months that have an alternate one.
        """
        normalized = _EXTERNAL_ALIASES.get(label.strip(), label.strip())
        for month in cls:
            if month.external_label == normalized:
                return month
        return None


# Spellings returned by Hebcal that differ from the request labels
_EXTERNAL_ALIASES = {
    "Tamuz": "Tammuz",
    "Sh'vat": "Shvat",
    "Shevat": "Shvat",
    "Iyar": "Iyyar",
    "Tishrey": "Tishrei",
    "Heshvan": "Cheshvan",
    "Teves": "Tevet",
}


@dataclass(frozen=True)
class HebrewDate:
    """Resolved Hebrew date ready for calendar math."""

    day: int
    month: HebrewMonth
    year: int

    def __post_init__(self) -> None:
        if self.day < 1:
            raise ValueError(f"Day must be positive, got {self.day}")
        if self.year < 1:
            raise ValueError(f"Year must be positive, got {self.year}")

    @property
    def lookup_key(self) -> str:
        """Exact key into the historical override table."""
        return f"{self.year}-{self.month.label}-{self.day}"

    @property
    def formatted(self) -> str:
        """Hebrew rendering, e.g. "ה׳ בניסן תשפ״ה"."""
        return f"{encode_gematria(self.day)} ב{self.month.label} {format_hebrew_year(self.year)}"

    def to_dict(self) -> dict[str, Any]:
        return {"year": self.year, "month": self.month.label, "day": self.day}


@dataclass(frozen=True)
class GregorianDate:
    """Gregorian date; BCE years are negative."""

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12, got {self.month}")
        if self.day < 1:
            raise ValueError(f"Day must be positive, got {self.day}")

    @classmethod
    def from_formatted(cls, text: str) -> "GregorianDate":
        """Parse the "day/month/year" form, e.g. "16/3/-1812"."""
        day, month, year = (int(part) for part in text.split("/"))
        return cls(day=day, month=month, year=year)

    @property
    def formatted(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def to_dict(self) -> dict[str, Any]:
        return {"year": self.year, "month": self.month, "day": self.day}


@dataclass(frozen=True)
class SplitYearFields:
    """Year submitted as separate thousands/hundreds/tens/ones numerals."""

    thousands: Optional[str] = None
    hundreds: Optional[str] = None
    tens: Optional[str] = None
    ones: Optional[str] = None

    def items(self) -> list[tuple[str, Optional[str]]]:
        return [
            ("thousands", self.thousands),
            ("hundreds", self.hundreds),
            ("tens", self.tens),
            ("ones", self.ones),
        ]


@dataclass(frozen=True)
class HistoricalEntry:
    """Curated conversion for a date outside trusted proleptic range."""

    key: str
    hebrew_formatted: str
    gregorian: GregorianDate


@dataclass(frozen=True)
class HebrewConversion:
    """Calendar capability result for Gregorian to Hebrew."""

    hebrew_year: int
    hebrew_month_label: str
    hebrew_day: int
    formatted_hebrew: str


@dataclass(frozen=True)
class GregorianConversion:
    """Calendar capability result for Hebrew to Gregorian."""

    gregorian_year: int
    gregorian_month: int
    gregorian_day: int
    formatted_gregorian: str
    formatted_hebrew: Optional[str] = None


class ConversionSource(str, Enum):
    """Where a conversion result came from."""

    HISTORICAL = "historical"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class ConversionResult:
    """Normalized conversion output."""

    hebrew: HebrewDate
    gregorian: GregorianDate
    hebrew_formatted: str
    gregorian_formatted: str
    source: ConversionSource

    def to_dict(self) -> dict[str, Any]:
        return {
            "hebrew": self.hebrew.to_dict(),
            "gregorian": self.gregorian.to_dict(),
            "hebrewFormatted": self.hebrew_formatted,
            "gregorianFormatted": self.gregorian_formatted,
        }


@dataclass
class DateOptions:
    """Choices offered to a date-picker UI."""

    days: list[str]
    months: list[str]
    years: list[str]
    year_parts: dict[str, list[str]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "days": self.days,
            "months": self.months,
            "years": self.years,
            "hebrewYearParts": self.year_parts,
        }
