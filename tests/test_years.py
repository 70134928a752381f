"""Tests for year reconstruction."""

import pytest

from hebrew_date_converter.core import (
    InvalidNumeralToken,
    InvalidYearPart,
    MissingParameters,
    MissingYearParts,
    SplitYearFields,
    reconstruct_year,
    year_from_parts,
    year_from_token,
)


def test_year_from_digits() -> None:
    """Test numeric years are used directly."""
    assert year_from_token("5785") == 5785
    assert year_from_token("1948") == 1948
    assert year_from_token("0") is None


def test_year_default_millennium() -> None:
    """Tokens longer than three letters land in the sixth millennium."""
    assert year_from_token("תשפה") == 5785
    assert year_from_token("תשפ\"ה") == 5785
    assert year_from_token("תשפ״ה") == 5785


def test_year_short_token_has_no_default_millennium() -> None:
    """Three letters or fewer without a millennium letter stay as written."""
    assert year_from_token("תשח") == 708


def test_year_explicit_millennium() -> None:
    """Test a leading millennium letter multiplies by 1000."""
    assert year_from_token("ה'תשפ\"ה") == 5785
    assert year_from_token("ג'תקמ\"ו") == 3546
    assert year_from_token("א׳תתקמ״ח") == 1948
    assert year_from_token("ב׳תמ״ח") == 2448


def test_year_with_inner_space() -> None:
    """Test millennium separated by a space."""
    assert year_from_token("ה' תשפ\"ה") == 5785


def test_year_invalid() -> None:
    """Test undecodable tokens."""
    assert year_from_token("abc") is None
    assert year_from_token("") is None
    assert year_from_token(None) is None
    assert year_from_token("ה'abc") is None


def test_year_from_parts_thousands_only() -> None:
    """Test thousands are scaled by 1000."""
    assert year_from_parts(SplitYearFields("ה", "0", "0", "0")) == 5000


def test_year_from_parts_mixed() -> None:
    """Test parts with a zero marker."""
    assert year_from_parts(SplitYearFields("א", "ק", "0", "ה")) == 1105
    assert year_from_parts(SplitYearFields("ה", "תש", "פ", "ה")) == 5785
    assert year_from_parts(SplitYearFields("א", "תתק", "מ", "ח")) == 1948


def test_year_from_parts_order_and_magnitude() -> None:
    """Non-thousands fields sum the same in any order; thousands scale."""
    assert year_from_parts(SplitYearFields(hundreds="ק", tens="כ", ones="ה")) == year_from_parts(
        SplitYearFields(hundreds="ה", tens="ק", ones="כ")
    )
    assert year_from_parts(SplitYearFields(thousands="ה")) != year_from_parts(
        SplitYearFields(ones="ה")
    )


def test_year_from_parts_missing() -> None:
    """Test absent or zero fields give MissingYearParts."""
    with pytest.raises(MissingYearParts):
        year_from_parts(SplitYearFields())

    with pytest.raises(MissingYearParts):
        year_from_parts(SplitYearFields("0", "0", "0", "0"))

    with pytest.raises(MissingYearParts):
        year_from_parts(SplitYearFields("", None, " ", "0"))


def test_year_from_parts_invalid_field() -> None:
    """Test invalid field raises with the field identity."""
    with pytest.raises(InvalidYearPart) as exc_info:
        year_from_parts(SplitYearFields("ה", "xx", "פ", "ה"))

    error = exc_info.value
    assert error.part == "hundreds"
    assert error.token == "xx"
    assert error.error_code == "INVALID_HUNDREDS_PART"
    assert isinstance(error, InvalidNumeralToken)


@pytest.mark.parametrize("part", ["thousands", "hundreds", "tens", "ones"])
def test_year_from_parts_error_code_per_field(part: str) -> None:
    """Test each field reports its own error code."""
    with pytest.raises(InvalidYearPart) as exc_info:
        year_from_parts(SplitYearFields(**{part: "?"}))

    assert exc_info.value.error_code == f"INVALID_{part.upper()}_PART"


def test_reconstruct_year_dispatch() -> None:
    """Test reconstruct_year handles both input shapes."""
    assert reconstruct_year("תשפ\"ה") == 5785
    assert reconstruct_year(SplitYearFields("א", "ק", "0", "ה")) == 1105


def test_reconstruct_year_errors() -> None:
    """Test reconstruct_year raises typed errors."""
    with pytest.raises(MissingParameters):
        reconstruct_year("")

    with pytest.raises(InvalidNumeralToken) as exc_info:
        reconstruct_year("xyz")
    assert exc_info.value.field == "year"

    with pytest.raises(MissingYearParts):
        reconstruct_year(SplitYearFields())


def test_year_rejects_non_decimal_digits() -> None:
    """Test digit-like characters that are not decimal digits."""
    assert year_from_token("²") is None
    assert year_from_token("5785²") is None
