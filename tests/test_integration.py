"""
Integration tests against the live OpenWeather API.

These tests make real requests to verify end-to-end functionality.
They're slower but catch real issues such as payload drift.

Run with: OPENWEATHER_API_KEY=... pytest tests/test_integration.py -v

Note: Tests marked with @pytest.mark.external are skipped unless
OPENWEATHER_API_KEY is set.
"""

import pytest

from weather_report.config import OPENWEATHER_API_KEY
from weather_report.reporter import create_live_reporter
from weather_report.service import create_live_weather_service

from fakes import SAN_FRANCISCO

skip_without_api_key = pytest.mark.skipif(
    not OPENWEATHER_API_KEY,
    reason="OPENWEATHER_API_KEY is not set",
)


@pytest.mark.external
@skip_without_api_key
class TestLiveService:
    """Integration tests using the service directly. Requires network access."""

    @pytest.mark.asyncio
    async def test_current_weather(self):
        service = create_live_weather_service(require_api_key=True)
        try:
            result = await service.fetch_current_weather(SAN_FRANCISCO)
        finally:
            await service.close()

        assert result.is_success
        assert result.value.weather

    @pytest.mark.asyncio
    async def test_forecast(self):
        service = create_live_weather_service(require_api_key=True)
        try:
            result = await service.fetch_forecast(SAN_FRANCISCO)
        finally:
            await service.close()

        assert result.is_success
        assert result.value.entries


@pytest.mark.external
@skip_without_api_key
class TestLiveReporter:

    @pytest.mark.asyncio
    async def test_address_to_report(self):
        reporter = create_live_reporter()
        try:
            report = await reporter.retrieve_current_weather_and_forecast("London, GB")
        finally:
            await reporter.close()

        assert report.errors == []
        assert report.is_complete
