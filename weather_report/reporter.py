"""
Weather Reporter

The single entry point callers use: address in, report out.

Flow:
    retrieve_current_weather_and_forecast(address)
      -> geocoder.resolve_coordinates(address)
      -> asyncio.gather(fetch_current_weather, fetch_forecast)
      -> WeatherReport (display data and/or user-facing error messages)

The two fetches are independent: each contributes its own data or its own
message, and neither waits on the other. Only fixed messages reach the
report; technical causes stay in the logs.
"""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel, Field, computed_field

from .config import NO_FORECAST_MESSAGE, NO_WEATHER_REPORT_MESSAGE
from .display import CurrentWeatherDisplayData, ForecastDisplayData
from .errors import WeatherReportFailure
from .geocoding import Geocoder, OpenWeatherGeocoder
from .models import Coordinates, CurrentWeatherData, Failure, ForecastData, Outcome, Success
from .network import NetworkClient
from .service import WeatherService

logger = logging.getLogger(__name__)


class WeatherReport(BaseModel):
    """Result of one address lookup."""

    address: str
    coordinates: Coordinates | None = None
    weather: CurrentWeatherDisplayData | None = None
    forecast: ForecastDisplayData | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.weather is not None and self.forecast is not None

    @computed_field
    @property
    def weather_placeholder(self) -> str | None:
        """Text shown in place of the current weather when it is missing."""
        return NO_WEATHER_REPORT_MESSAGE if self.weather is None else None

    @computed_field
    @property
    def forecast_placeholder(self) -> str | None:
        return NO_FORECAST_MESSAGE if self.forecast is None else None


def _message_for(error: WeatherReportFailure) -> str:
    message = getattr(error, "message", None)
    return message if isinstance(message, str) else str(error)


class WeatherReporter:
    """Combines a Geocoder and a WeatherService into one lookup."""

    def __init__(self, geocoder: Geocoder, weather_service: WeatherService) -> None:
        self.geocoder = geocoder
        self.weather_service = weather_service

    async def close(self) -> None:
        await self.weather_service.close()

    async def retrieve_current_weather_and_forecast(self, address: str) -> WeatherReport:
        """Resolve ``address`` and fetch both current weather and forecast."""
        report = WeatherReport(address=address)

        located = await self.geocoder.resolve_coordinates(address)
        if isinstance(located, Failure):
            logger.info(
                "Address lookup failed for %r (%s): %r",
                address,
                located.error.failure_category,
                located.error.cause,
            )
            report.errors.append(_message_for(located.error))
            return report

        coordinates = located.value
        report.coordinates = coordinates

        weather_result, forecast_result = await asyncio.gather(
            self.weather_service.fetch_current_weather(coordinates),
            self.weather_service.fetch_forecast(coordinates),
        )
        self._apply_weather(report, weather_result)
        self._apply_forecast(report, forecast_result)
        return report

    def _apply_weather(
        self, report: WeatherReport, result: Outcome[CurrentWeatherData]
    ) -> None:
        match result:
            case Success(value=data):
                report.weather = CurrentWeatherDisplayData.from_data(
                    data, self.weather_service.units
                )
            case Failure(error=error):
                logger.info(
                    "Current weather failed for %r (%s): %r",
                    report.address,
                    error.failure_category,
                    error,
                )
                report.errors.append(_message_for(error))

    def _apply_forecast(self, report: WeatherReport, result: Outcome[ForecastData]) -> None:
        match result:
            case Success(value=data):
                report.forecast = ForecastDisplayData.from_data(
                    data, self.weather_service.units
                )
            case Failure(error=error):
                logger.info(
                    "Forecast failed for %r (%s): %r",
                    report.address,
                    error.failure_category,
                    error,
                )
                report.errors.append(_message_for(error))


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_live_reporter() -> WeatherReporter:
    """Create a reporter whose geocoder and service share one live NetworkClient."""
    network_client = NetworkClient()
    return WeatherReporter(
        geocoder=OpenWeatherGeocoder(network_client),
        weather_service=WeatherService(network_client),
    )
