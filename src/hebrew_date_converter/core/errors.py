"""Error taxonomy for parsing and conversion failures."""

from typing import Any, Optional


class HebrewDateError(Exception):
    """Base error reported back to the caller."""

    error_code = "HEBREW_DATE_ERROR"

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Render error as response payload."""
        payload: dict[str, Any] = {"error": self.message, "errorCode": self.error_code}
        if self.details:
            payload["details"] = self.details
        return payload


class MissingParameters(HebrewDateError):
    """A required field or the free-text date string is absent."""

    error_code = "MISSING_PARAMETERS"

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required parameters: {', '.join(missing)}")


class InvalidNumeralToken(HebrewDateError):
    """A gematria token contains a character outside the numeral alphabet."""

    error_code = "INVALID_NUMERAL"

    def __init__(self, token: str, field: str = "numeral") -> None:
        self.token = token
        self.field = field
        if field == "day":
            self.error_code = "INVALID_HEBREW_DAY"
        super().__init__(f"Invalid Hebrew {field}: '{token}'")


class InvalidYearPart(InvalidNumeralToken):
    """One split-year field was present but could not be decoded."""

    def __init__(self, part: str, token: str) -> None:
        self.part = part
        super().__init__(token, field=f"{part} part")
        self.error_code = f"INVALID_{part.upper()}_PART"


class MissingYearParts(HebrewDateError):
    """All split-year fields were absent or zero."""

    error_code = "MISSING_YEAR_PARTS"

    def __init__(self) -> None:
        super().__init__("At least one Hebrew year part must be provided")


class InvalidMonthName(HebrewDateError):
    """Month token does not match any canonical name."""

    error_code = "INVALID_HEBREW_MONTH"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid Hebrew month name: '{token}'")


class InvalidDateFormat(HebrewDateError):
    """Free text could not be resolved into day, month and year."""

    error_code = "INVALID_HEBREW_DATE_FORMAT"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse Hebrew date string: '{text}'")


class ExternalConversionError(HebrewDateError):
    """Calendar capability failed, timed out or returned an error payload."""

    error_code = "EXTERNAL_API_ERROR"

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message, details)
