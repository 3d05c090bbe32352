"""
Weather Service

Retrieves current weather and forecast records for coordinates.

For each operation the service:
1. Builds the endpoint URL (invalid coordinates short-circuit with INVALID_URL)
2. Delegates the GET to the injected NetworkClient
3. Decodes the body into a frozen domain model

Transport failures are propagated unchanged. The only error the service adds
is WRAPPED around a decode failure.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .config import OPENWEATHER_API_KEY, OPENWEATHER_BASE_URL, OPENWEATHER_UNITS
from .endpoints import CURRENT_WEATHER_ENDPOINT, FORECAST_ENDPOINT, WeatherEndpoint
from .errors import ConfigurationError, NetworkError
from .models import (
    Coordinates,
    CurrentWeatherData,
    Failure,
    ForecastData,
    Outcome,
    Success,
)
from .network import NetworkClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_payload(data: bytes, model: type[ModelT]) -> Outcome[ModelT]:
    """Strictly decode JSON bytes into ``model``; failures become WRAPPED."""
    try:
        return Success(model.model_validate_json(data))
    except ValidationError as e:
        logger.warning(
            "Could not decode %s payload: %d validation error(s)",
            model.__name__,
            e.error_count(),
        )
        return Failure(NetworkError.wrapped(e))


class WeatherService:
    """
    Service for retrieving weather and forecast data through a NetworkClient.

    The NetworkClient is always injected; use create_live_weather_service()
    for the default live configuration.
    """

    def __init__(
        self,
        network_client: NetworkClient,
        *,
        api_key: str = OPENWEATHER_API_KEY,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = OPENWEATHER_UNITS,
    ) -> None:
        self.network_client = network_client
        self.units = units
        self._api_key = api_key
        self._base_url = base_url

    async def close(self) -> None:
        await self.network_client.close()

    def current_weather_url(self, coordinates: Coordinates) -> str | None:
        return self._url_for(CURRENT_WEATHER_ENDPOINT, coordinates)

    def forecast_url(self, coordinates: Coordinates) -> str | None:
        return self._url_for(FORECAST_ENDPOINT, coordinates)

    async def fetch_current_weather(
        self, coordinates: Coordinates
    ) -> Outcome[CurrentWeatherData]:
        """Retrieve the current weather for ``coordinates``."""
        return await self._fetch(
            self.current_weather_url(coordinates), CurrentWeatherData
        )

    async def fetch_forecast(self, coordinates: Coordinates) -> Outcome[ForecastData]:
        """Retrieve the multi-day forecast for ``coordinates``."""
        return await self._fetch(self.forecast_url(coordinates), ForecastData)

    def _url_for(self, endpoint: WeatherEndpoint, coordinates: Coordinates) -> str | None:
        return endpoint.build_coordinate_url(
            coordinates,
            units=self.units,
            base_url=self._base_url,
            api_key=self._api_key,
        )

    async def _fetch(self, url: str | None, model: type[ModelT]) -> Outcome[ModelT]:
        if url is None:
            logger.warning("Could not build %s URL", model.__name__)
            return Failure(NetworkError.invalid_url())

        result = await self.network_client.fetch_data(url)
        match result:
            case Success(value=data):
                return decode_payload(data, model)
            case Failure():
                return result


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_live_weather_service(*, require_api_key: bool = False) -> WeatherService:
    """
    Create a service wired to the live provider with a default NetworkClient.

    With ``require_api_key`` a missing OPENWEATHER_API_KEY raises
    ConfigurationError instead of letting the provider answer 401.
    """
    if require_api_key and not OPENWEATHER_API_KEY:
        raise ConfigurationError("OPENWEATHER_API_KEY is not set")
    return WeatherService(NetworkClient())
