"""
Weather Report Models

Pydantic schemas mirroring the OpenWeatherMap current-weather and 5 day /
3 hour forecast payloads, plus the Outcome type every fetch returns.

Domain records are frozen: they are created by a successful decode and never
mutated afterwards. Unknown keys are ignored, missing required keys fail the
decode.

Reference: https://openweathermap.org/current, https://openweathermap.org/forecast5
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .errors import WeatherReportFailure

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Outcome
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying a typed failure."""

    error: WeatherReportFailure

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


# Exactly one of a success value or a typed failure
Outcome = Success[T] | Failure


# -----------------------------------------------------------------------------
# Location
# -----------------------------------------------------------------------------


class Coordinates(BaseModel):
    """A latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """True when both values are finite and inside the WGS84 ranges."""
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class GeocodedPlace(BaseModel):
    """One entry of the direct geocoding response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    lat: float
    lon: float
    country: str | None = None
    state: str | None = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.lat, longitude=self.lon)


# -----------------------------------------------------------------------------
# Shared payload parts
# -----------------------------------------------------------------------------


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class WeatherCondition(_Record):
    """One entry of the provider's ``weather`` array."""

    id: int | None = None
    main: str | None = None
    description: str
    icon: str | None = None


class MainReadings(_Record):
    """The provider's ``main`` block. Only ``temp`` is required."""

    temp: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = None
    humidity: float | None = None


# -----------------------------------------------------------------------------
# Current weather
# -----------------------------------------------------------------------------


class CurrentWeatherData(_Record):
    """Decoded ``/data/2.5/weather`` response."""

    name: str
    weather: list[WeatherCondition]
    main: MainReadings
    id: int | None = None
    dt: int | None = None

    @property
    def location_name(self) -> str:
        return self.name

    @property
    def temperature(self) -> float:
        return self.main.temp

    @property
    def description(self) -> str | None:
        return self.weather[0].description if self.weather else None


# -----------------------------------------------------------------------------
# Forecast
# -----------------------------------------------------------------------------


class ForecastEntry(_Record):
    """One timestamped interval of the forecast ``list``."""

    dt: int
    main: MainReadings
    weather: list[WeatherCondition]
    dt_txt: str | None = None

    @property
    def timestamp(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)

    @property
    def temperature(self) -> float:
        return self.main.temp

    @property
    def description(self) -> str | None:
        return self.weather[0].description if self.weather else None


class ForecastCity(_Record):
    """The forecast's ``city`` block."""

    name: str | None = None
    country: str | None = None


class ForecastData(_Record):
    """Decoded ``/data/2.5/forecast`` response."""

    entries: list[ForecastEntry] = Field(alias="list")
    city: ForecastCity | None = None

    @property
    def location_name(self) -> str | None:
        return self.city.name if self.city else None
