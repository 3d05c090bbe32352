"""
Display Data

Text-only views of the decoded records, ready to bind to labels or serialize
from the HTTP surface.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .config import OPENWEATHER_UNITS, get_temperature_symbol
from .models import CurrentWeatherData, ForecastData, ForecastEntry

UNKNOWN_CONDITION = "Unknown conditions"
TIME_FORMAT = "%a %d %b %H:%M UTC"


def format_temperature(value: float, units: str = OPENWEATHER_UNITS) -> str:
    return f"{value:.1f}{get_temperature_symbol(units)}"


def format_condition(description: str | None) -> str:
    if not description:
        return UNKNOWN_CONDITION
    return description[:1].upper() + description[1:]


class CurrentWeatherDisplayData(BaseModel):
    """Labels for the current weather report."""

    model_config = ConfigDict(frozen=True)

    name_of_location_text: str
    current_weather_text: str
    temperature_text: str

    @classmethod
    def from_data(
        cls, data: CurrentWeatherData, units: str = OPENWEATHER_UNITS
    ) -> CurrentWeatherDisplayData:
        return cls(
            name_of_location_text=data.location_name,
            current_weather_text=format_condition(data.description),
            temperature_text=format_temperature(data.temperature, units),
        )


class ForecastItemDisplayData(BaseModel):
    """Labels for one forecast row."""

    model_config = ConfigDict(frozen=True)

    time_date_text: str
    temperature_text: str
    weather_text: str

    @classmethod
    def from_entry(
        cls, entry: ForecastEntry, units: str = OPENWEATHER_UNITS
    ) -> ForecastItemDisplayData:
        return cls(
            time_date_text=entry.timestamp.strftime(TIME_FORMAT),
            temperature_text=format_temperature(entry.temperature, units),
            weather_text=format_condition(entry.description),
        )


class ForecastDisplayData(BaseModel):
    """Rows for the forecast list, in provider order."""

    model_config = ConfigDict(frozen=True)

    location_text: str | None = None
    forecast_items: list[ForecastItemDisplayData] = Field(default_factory=list)

    @classmethod
    def from_data(
        cls, data: ForecastData, units: str = OPENWEATHER_UNITS
    ) -> ForecastDisplayData:
        return cls(
            location_text=data.location_name,
            forecast_items=[
                ForecastItemDisplayData.from_entry(entry, units) for entry in data.entries
            ],
        )
