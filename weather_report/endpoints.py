"""
Endpoint definitions for the weather report client.

This module contains:
- Core type: WeatherEndpoint
- The provider endpoints the service and geocoder call

URLs are built with httpx.URL so query encoding matches what the
transport sends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .config import (
    CURRENT_WEATHER_PATH,
    FORECAST_PATH,
    GEOCODING_PATH,
    OPENWEATHER_BASE_URL,
)
from .models import Coordinates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherEndpoint:
    """
    Definition of a provider endpoint.

    - name: identifier used in logs
    - path: URL path appended to the base URL
    - fixed_params: query parameters sent on every call
    """

    name: str
    path: str
    fixed_params: dict[str, str] = field(default_factory=dict)

    def build_url(
        self,
        params: dict[str, Any],
        *,
        base_url: str = OPENWEATHER_BASE_URL,
        api_key: str = "",
    ) -> str | None:
        """
        Build the absolute URL for this endpoint.

        Returns None when the result is not an absolute http(s) URL.
        """
        query: dict[str, str] = dict(self.fixed_params)
        query.update({key: str(value) for key, value in params.items()})
        if api_key:
            query["appid"] = api_key

        try:
            url = httpx.URL(base_url.rstrip("/") + self.path, params=query)
        except httpx.InvalidURL:
            logger.debug("Rejected base URL %r for %s", base_url, self.name)
            return None

        if url.scheme not in ("http", "https") or not url.host:
            return None
        return str(url)

    def build_coordinate_url(
        self,
        coordinates: Coordinates,
        *,
        units: str,
        base_url: str = OPENWEATHER_BASE_URL,
        api_key: str = "",
    ) -> str | None:
        """Build the URL for a coordinate lookup; None for invalid coordinates."""
        if not coordinates.is_valid:
            return None
        return self.build_url(
            {
                "lat": f"{coordinates.latitude:.4f}",
                "lon": f"{coordinates.longitude:.4f}",
                "units": units,
            },
            base_url=base_url,
            api_key=api_key,
        )


# -----------------------------------------------------------------------------
# Provider Endpoints
# -----------------------------------------------------------------------------

CURRENT_WEATHER_ENDPOINT = WeatherEndpoint(
    name="current_weather",
    path=CURRENT_WEATHER_PATH,
)

FORECAST_ENDPOINT = WeatherEndpoint(
    name="forecast",
    path=FORECAST_PATH,
)

GEOCODING_ENDPOINT = WeatherEndpoint(
    name="geocoding",
    path=GEOCODING_PATH,
    fixed_params={"limit": "1"},
)
