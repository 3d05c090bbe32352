"""
Centralized configuration for the weather report client.

All API URLs, HTTP settings, and user-facing strings in one place.
Supports environment variable overrides for deployment flexibility.
"""

from __future__ import annotations

import os

# -----------------------------------------------------------------------------
# Provider
# Reference: https://openweathermap.org/api
# -----------------------------------------------------------------------------

OPENWEATHER_BASE_URL = os.environ.get(
    "OPENWEATHER_BASE_URL",
    "https://api.openweathermap.org",
)

OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY", "")

# "standard" (kelvin), "metric" (celsius) or "imperial" (fahrenheit)
OPENWEATHER_UNITS = os.environ.get("OPENWEATHER_UNITS", "metric")

CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODING_PATH = "/geo/1.0/direct"

TEMPERATURE_SYMBOLS: dict[str, str] = {
    "standard": "K",
    "metric": "°C",
    "imperial": "°F",
}

# -----------------------------------------------------------------------------
# HTTP Configuration
# -----------------------------------------------------------------------------

HTTP_SUCCESS_MIN = 200
HTTP_SUCCESS_MAX = 299
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "30.0"))
HTTP_USER_AGENT = os.environ.get("HTTP_USER_AGENT", "weather-report/0.1")

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------

LOG_LEVEL = os.environ.get("WEATHER_REPORT_LOG_LEVEL", "INFO").upper()

# -----------------------------------------------------------------------------
# User-facing messages
# -----------------------------------------------------------------------------

INVALID_URL_MESSAGE = "The URL provided was invalid. Please try again with a different URL."
INVALID_DATA_MESSAGE = "The data received was invalid. Please try again later."
INVALID_RESPONSE_MESSAGE = "The server response was invalid. Please try again."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred. Please try again."
NO_INTERNET_MESSAGE = "Please check your connection and try again."

ADDRESS_FETCH_ERROR_MESSAGE = "Unable to fetch address"
NO_WEATHER_REPORT_MESSAGE = "No weather report available"
NO_FORECAST_MESSAGE = "No forecast available"

# -----------------------------------------------------------------------------
# Server Configuration
# -----------------------------------------------------------------------------

SERVER_NAME = "weather-report"
SERVER_VERSION = "0.1.0"


def get_temperature_symbol(units: str) -> str:
    """Get the display symbol for a provider unit system."""
    return TEMPERATURE_SYMBOLS.get(units, "")
