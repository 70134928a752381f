"""Tests for Hebcal calendar adapter."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from hebrew_date_converter.adapters.calendar import HebcalClient
from hebrew_date_converter.core import ExternalConversionError


def _response(payload: object, status_code: int = 200) -> Mock:
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.json = Mock(return_value=payload)
    return mock_response


@pytest.mark.asyncio
async def test_hebrew_to_gregorian_success() -> None:
    """Test successful Hebrew to Gregorian conversion."""
    client = HebcalClient("https://hebcal.test/converter")

    with patch("httpx.AsyncClient") as mock_client:
        mock_get = AsyncMock(
            return_value=_response(
                {"gy": 2025, "gm": 4, "gd": 3, "hy": 5785, "hm": "Nisan", "hd": 5,
                 "hebrew": "ה׳ בְּנִיסָן תשפ״ה"}
            )
        )
        mock_client.return_value.__aenter__.return_value.get = mock_get

        conversion = await client.hebrew_to_gregorian(5, "Nisan", 5785)

        assert conversion.gregorian_year == 2025
        assert conversion.gregorian_month == 4
        assert conversion.gregorian_day == 3
        assert conversion.formatted_gregorian == "3/4/2025"
        assert conversion.formatted_hebrew == "ה׳ בְּנִיסָן תשפ״ה"

        # Verify API call
        call_args = mock_get.call_args
        assert call_args.args[0] == "https://hebcal.test/converter"
        params = call_args.kwargs["params"]
        assert params == {"cfg": "json", "hy": 5785, "hm": "Nisan", "hd": 5, "h2g": 1}


@pytest.mark.asyncio
async def test_gregorian_to_hebrew_success() -> None:
    """Test successful Gregorian to Hebrew conversion."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_get = AsyncMock(
            return_value=_response(
                {"gy": 2024, "gm": 3, "gd": 15, "hy": 5784, "hm": "Adar II", "hd": 5,
                 "hebrew": "ה׳ בַּאֲדָר ב׳ תשפ״ד"}
            )
        )
        mock_client.return_value.__aenter__.return_value.get = mock_get

        conversion = await client.gregorian_to_hebrew(15, 3, 2024)

        assert conversion.hebrew_year == 5784
        assert conversion.hebrew_month_label == "Adar II"
        assert conversion.hebrew_day == 5
        assert conversion.formatted_hebrew == "ה׳ בַּאֲדָר ב׳ תשפ״ד"

        params = mock_get.call_args.kwargs["params"]
        assert params["g2h"] == 1
        assert (params["gy"], params["gm"], params["gd"]) == (2024, 3, 15)


@pytest.mark.asyncio
async def test_error_payload() -> None:
    """Test error field in payload is surfaced as details."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            return_value=_response({"error": "Hebrew day out of valid range"})
        )

        with pytest.raises(ExternalConversionError) as exc_info:
            await client.hebrew_to_gregorian(31, "Nisan", 5785)

    assert exc_info.value.error_code == "EXTERNAL_API_ERROR"
    assert exc_info.value.details == "Hebrew day out of valid range"


@pytest.mark.asyncio
async def test_http_status_error() -> None:
    """Test non-200 responses."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            return_value=_response({}, status_code=500)
        )

        with pytest.raises(ExternalConversionError) as exc_info:
            await client.hebrew_to_gregorian(5, "Nisan", 5785)

    assert exc_info.value.details == "HTTP 500"


@pytest.mark.asyncio
async def test_invalid_json() -> None:
    """Test body that is not JSON."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.json = Mock(side_effect=ValueError("Expecting value"))
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=mock_response)

        with pytest.raises(ExternalConversionError, match="Failed to parse JSON"):
            await client.hebrew_to_gregorian(5, "Nisan", 5785)


@pytest.mark.asyncio
async def test_missing_fields() -> None:
    """Test payload without the converted date."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            return_value=_response({"hy": 5785})
        )

        with pytest.raises(ExternalConversionError, match="Malformed response"):
            await client.hebrew_to_gregorian(5, "Nisan", 5785)

        with pytest.raises(ExternalConversionError, match="Malformed response"):
            await client.gregorian_to_hebrew(3, 4, 2025)


@pytest.mark.asyncio
async def test_connection_error() -> None:
    """Test transport failures."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(ExternalConversionError) as exc_info:
            await client.gregorian_to_hebrew(3, 4, 2025)

    assert exc_info.value.details == "Connection refused"


@pytest.mark.asyncio
async def test_current_hebrew_year() -> None:
    """Test current year comes from a g2h call for today."""
    client = HebcalClient()

    with patch("httpx.AsyncClient") as mock_client:
        mock_get = AsyncMock(
            return_value=_response({"hy": 5787, "hm": "Tishrei", "hd": 8, "hebrew": "ח׳ בְּתִשְׁרֵי תשפ״ז"})
        )
        mock_client.return_value.__aenter__.return_value.get = mock_get

        assert await client.current_hebrew_year() == 5787
        assert mock_get.call_args.kwargs["params"]["g2h"] == 1


def test_format_hebrew_year() -> None:
    """Test year rendering."""
    assert HebcalClient().format_hebrew_year(5785) == "תשפ״ה"
