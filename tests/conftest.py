"""
Shared test fixtures for the weather report tests.

Fakes and payloads live in fakes.py; this module wires them into fixtures.
"""

import pytest

from fakes import (
    FORECAST_PATH,
    GEOCODING_PATH,
    MOCK_CURRENT_WEATHER,
    MOCK_FORECAST,
    MOCK_GEOCODING,
    WEATHER_PATH,
    MockTransport,
    as_bytes,
    make_client,
)
from weather_report.network import NetworkClient
from weather_report.service import WeatherService


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create a mock transport answering all three provider endpoints."""
    return MockTransport({
        WEATHER_PATH: (200, as_bytes(MOCK_CURRENT_WEATHER)),
        FORECAST_PATH: (200, as_bytes(MOCK_FORECAST)),
        GEOCODING_PATH: (200, as_bytes(MOCK_GEOCODING)),
    })


@pytest.fixture
def network_client(mock_transport: MockTransport) -> NetworkClient:
    """Create a NetworkClient over the mock transport."""
    return NetworkClient(session=make_client(mock_transport))


@pytest.fixture
def weather_service(network_client: NetworkClient) -> WeatherService:
    """Create a WeatherService with a mock-backed NetworkClient."""
    return WeatherService(
        network_client,
        api_key="test-key",
        base_url="https://api.example.com",
        units="metric",
    )
