"""Weather Report package."""

from .config import (
    HTTP_SUCCESS_MAX,
    HTTP_SUCCESS_MIN,
    HTTP_TIMEOUT_SECONDS,
    OPENWEATHER_BASE_URL,
    OPENWEATHER_UNITS,
    SERVER_NAME,
    SERVER_VERSION,
)
from .display import (
    CurrentWeatherDisplayData,
    ForecastDisplayData,
    ForecastItemDisplayData,
)
from .endpoints import (
    CURRENT_WEATHER_ENDPOINT,
    FORECAST_ENDPOINT,
    GEOCODING_ENDPOINT,
    WeatherEndpoint,
)
from .errors import (
    ConfigurationError,
    GeocodeError,
    NetworkError,
    NetworkErrorKind,
    WeatherReportFailure,
)
from .geocoding import Geocoder, OpenWeatherGeocoder
from .log_setup import setup_logger
from .models import (
    Coordinates,
    CurrentWeatherData,
    Failure,
    ForecastCity,
    ForecastData,
    ForecastEntry,
    MainReadings,
    Outcome,
    Success,
    WeatherCondition,
)
from .network import HttpSession, NetworkClient
from .reporter import WeatherReport, WeatherReporter, create_live_reporter
from .service import WeatherService, create_live_weather_service

__all__ = [
    # Network
    "HttpSession",
    "NetworkClient",
    # Service
    "WeatherService",
    "create_live_weather_service",
    # Geocoding
    "Geocoder",
    "OpenWeatherGeocoder",
    # Orchestration
    "WeatherReport",
    "WeatherReporter",
    "create_live_reporter",
    # Endpoints
    "WeatherEndpoint",
    "CURRENT_WEATHER_ENDPOINT",
    "FORECAST_ENDPOINT",
    "GEOCODING_ENDPOINT",
    # Errors
    "WeatherReportFailure",
    "NetworkError",
    "NetworkErrorKind",
    "GeocodeError",
    "ConfigurationError",
    # Models
    "Coordinates",
    "CurrentWeatherData",
    "ForecastData",
    "ForecastEntry",
    "ForecastCity",
    "MainReadings",
    "WeatherCondition",
    "Outcome",
    "Success",
    "Failure",
    # Display
    "CurrentWeatherDisplayData",
    "ForecastDisplayData",
    "ForecastItemDisplayData",
    # Config
    "OPENWEATHER_BASE_URL",
    "OPENWEATHER_UNITS",
    "HTTP_SUCCESS_MIN",
    "HTTP_SUCCESS_MAX",
    "HTTP_TIMEOUT_SECONDS",
    "SERVER_NAME",
    "SERVER_VERSION",
    # Logging
    "setup_logger",
]
