"""
Address Geocoding

Resolves free-text addresses into Coordinates. The reporter only depends on
the Geocoder protocol; OpenWeatherGeocoder is the live implementation backed
by the provider's direct geocoding endpoint.

Every failure (blank address, transport error, undecodable body, no match)
becomes a GeocodeError. The network cause is kept for diagnostics only.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from .config import OPENWEATHER_API_KEY, OPENWEATHER_BASE_URL
from .endpoints import GEOCODING_ENDPOINT
from .errors import GeocodeError, NetworkError
from .models import Coordinates, Failure, GeocodedPlace, Outcome, Success
from .network import NetworkClient

logger = logging.getLogger(__name__)

_PLACES = TypeAdapter(list[GeocodedPlace])


class Geocoder(Protocol):
    """Resolves an address into coordinates."""

    async def resolve_coordinates(self, address: str) -> Outcome[Coordinates]: ...


class OpenWeatherGeocoder:
    """Geocoder using the provider's ``/geo/1.0/direct`` endpoint."""

    def __init__(
        self,
        network_client: NetworkClient,
        *,
        api_key: str = OPENWEATHER_API_KEY,
        base_url: str = OPENWEATHER_BASE_URL,
    ) -> None:
        self.network_client = network_client
        self._api_key = api_key
        self._base_url = base_url

    async def resolve_coordinates(self, address: str) -> Outcome[Coordinates]:
        query = address.strip()
        if not query:
            return Failure(GeocodeError(address))

        url = GEOCODING_ENDPOINT.build_url(
            {"q": query}, base_url=self._base_url, api_key=self._api_key
        )
        if url is None:
            return Failure(GeocodeError(address, cause=NetworkError.invalid_url()))

        result = await self.network_client.fetch_data(url)
        if isinstance(result, Failure):
            return Failure(GeocodeError(address, cause=result.error))

        try:
            places = _PLACES.validate_json(result.value)
        except ValidationError as e:
            return Failure(GeocodeError(address, cause=NetworkError.wrapped(e)))

        if not places:
            logger.info("No geocoding match for %r", query)
            return Failure(GeocodeError(address))

        place = places[0]
        logger.debug("Resolved %r to %s (%s)", query, place.name, place.country)
        return Success(place.coordinates)
