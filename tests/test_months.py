"""Tests for month resolution."""

import pytest

from hebrew_date_converter.core import (
    HebrewMonth,
    InvalidMonthName,
    find_month,
    require_month,
    resolve_month,
)


def test_resolve_exact() -> None:
    """Test exact label lookup."""
    assert resolve_month("ניסן") is HebrewMonth.NISAN
    assert resolve_month("מנחם אב") is HebrewMonth.MENACHEM_AV
    assert resolve_month(" אדר  ב ") is HebrewMonth.ADAR_II


def test_resolve_unknown() -> None:
    """Test unknown tokens resolve to None."""
    assert resolve_month("Nisan") is None
    assert resolve_month("") is None
    assert resolve_month(None) is None


def test_require_month_raises() -> None:
    """Test require_month raises InvalidMonthName."""
    with pytest.raises(InvalidMonthName) as exc_info:
        require_month("ניסנ")

    assert exc_info.value.token == "ניסנ"
    assert exc_info.value.error_code == "INVALID_HEBREW_MONTH"


def test_alternate_spellings_share_ordinal() -> None:
    """Test alternate spellings are distinct members with one ordinal."""
    assert HebrewMonth.CHESHVAN is not HebrewMonth.MARCHESHVAN
    assert HebrewMonth.CHESHVAN.ordinal == HebrewMonth.MARCHESHVAN.ordinal == 8
    assert HebrewMonth.AV.ordinal == HebrewMonth.MENACHEM_AV.ordinal == 5
    assert HebrewMonth.ADAR.ordinal == HebrewMonth.ADAR_I.ordinal == 12
    assert HebrewMonth.ADAR_II.ordinal == 13


def test_find_month_prefers_longest_label() -> None:
    """A label contained in a longer label never shadows it."""
    labels = [month for month in HebrewMonth]
    pairs = [
        (short, long)
        for short in labels
        for long in labels
        if short.label in long.label and len(long.label) > len(short.label)
    ]
    assert pairs

    for short, long in pairs:
        found = find_month(f"ה {long.label} תשפה")
        assert found is not None
        assert found[0] is long


def test_find_month_index() -> None:
    """Test start index of the matched label."""
    month, index = find_month("טו מנחם אב תשפה")
    assert month is HebrewMonth.MENACHEM_AV
    assert index == 3


def test_find_month_none() -> None:
    """Test text without a month."""
    assert find_month("ה תשפה") is None


def test_from_external_label() -> None:
    """Test mapping calendar service labels back to months."""
    assert HebrewMonth.from_external_label("Nisan") is HebrewMonth.NISAN
    assert HebrewMonth.from_external_label("Sh'vat") is HebrewMonth.SHVAT
    assert HebrewMonth.from_external_label("Tamuz") is HebrewMonth.TAMMUZ
    assert HebrewMonth.from_external_label("Adar II") is HebrewMonth.ADAR_II
    # Common spelling wins for shared labels
    assert HebrewMonth.from_external_label("Av") is HebrewMonth.AV
    assert HebrewMonth.from_external_label("Cheshvan") is HebrewMonth.CHESHVAN
    assert HebrewMonth.from_external_label("Brumaire") is None
