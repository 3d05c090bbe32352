"""
Shared fakes and payloads for the weather report tests.

Provides reusable mock transports, stub collaborators, and test data.
Fixtures built from these live in conftest.py.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from weather_report.errors import GeocodeError
from weather_report.models import Coordinates, Failure, Outcome, Success
from weather_report.network import NetworkClient


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


MockReply = tuple[int, bytes] | Exception


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses.

    Useful for testing HTTP interactions without hitting real APIs.
    """

    def __init__(self, responses: dict[str, MockReply]):
        """
        Initialize mock transport with predefined responses.

        Args:
            responses: Dict mapping URL paths to (status_code, body) tuples,
                or to an exception the transport raises instead.
        """
        self.responses = responses
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle an async request by returning a predefined response."""
        self.requests.append(request)

        path = request.url.path
        if path not in self.responses:
            return httpx.Response(404, content=b'{"cod": "404"}')

        reply = self.responses[path]
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        return httpx.Response(status, content=body)


class StubNetworkClient(NetworkClient):
    """NetworkClient returning a preset outcome per URL path, without any I/O."""

    def __init__(self, outcomes: dict[str, Outcome[bytes]] | Outcome[bytes]):
        super().__init__(session=None)
        self.outcomes = outcomes
        self.urls: list[str] = []

    async def fetch_data(self, url: str) -> Outcome[bytes]:
        self.urls.append(url)
        if isinstance(self.outcomes, dict):
            return self.outcomes[httpx.URL(url).path]
        return self.outcomes


class FakeGeocoder:
    """Geocoder resolving from a fixed table; unknown addresses fail."""

    def __init__(self, places: dict[str, Coordinates]):
        self.places = places
        self.calls: list[str] = []

    async def resolve_coordinates(self, address: str) -> Outcome[Coordinates]:
        self.calls.append(address)
        if address in self.places:
            return Success(self.places[address])
        return Failure(GeocodeError(address))


def make_client(transport: httpx.AsyncBaseTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODING_PATH = "/geo/1.0/direct"

SAN_FRANCISCO = Coordinates(latitude=37.7749, longitude=-122.4194)

MOCK_CURRENT_WEATHER: dict[str, Any] = {
    "coord": {"lon": -122.4194, "lat": 37.7749},
    "weather": [
        {"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}
    ],
    "base": "stations",
    "main": {
        "temp": 21.5,
        "feels_like": 21.1,
        "temp_min": 19.8,
        "temp_max": 23.0,
        "pressure": 1015,
        "humidity": 60,
    },
    "visibility": 10000,
    "dt": 1719570000,
    "id": 5391959,
    "name": "San Francisco",
    "cod": 200,
}

MOCK_FORECAST: dict[str, Any] = {
    "cod": "200",
    "cnt": 3,
    "list": [
        {
            "dt": 1719576000,
            "main": {"temp": 18.2, "humidity": 70},
            "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
            "dt_txt": "2024-06-28 12:00:00",
        },
        {
            "dt": 1719586800,
            "main": {"temp": 20.4},
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
            "dt_txt": "2024-06-28 15:00:00",
        },
        {
            "dt": 1719597600,
            "main": {"temp": 16.9},
            "weather": [],
            "dt_txt": "2024-06-28 18:00:00",
        },
    ],
    "city": {"id": 5391959, "name": "San Francisco", "country": "US"},
}

MOCK_GEOCODING: list[dict[str, Any]] = [
    {
        "name": "San Francisco",
        "lat": 37.7749,
        "lon": -122.4194,
        "country": "US",
        "state": "California",
    }
]


def as_bytes(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")
