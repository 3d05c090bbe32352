"""
Weather Report Failure Types

Canonical failure taxonomy for the client. Every failure on the network and
service paths is reduced to a NetworkError before it reaches a caller; the
geocoding step has its own GeocodeError.

Failures are values: they travel inside a Failure outcome and are never
raised across the network or service boundary. They still derive from
Exception so callers that prefer exceptions can raise them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .config import (
    ADDRESS_FETCH_ERROR_MESSAGE,
    INVALID_DATA_MESSAGE,
    INVALID_RESPONSE_MESSAGE,
    INVALID_URL_MESSAGE,
    NO_INTERNET_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)


class WeatherReportFailure(Exception):
    """Base class for all weather report failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkErrorKind(str, Enum):
    """Closed set of network failure kinds."""

    INVALID_URL = "invalid_url"
    INVALID_DATA = "invalid_data"
    INVALID_RESPONSE = "invalid_response"
    NO_INTERNET_CONNECTION = "no_internet_connection"
    WRAPPED = "wrapped"


_MESSAGES: dict[NetworkErrorKind, str] = {
    NetworkErrorKind.INVALID_URL: INVALID_URL_MESSAGE,
    NetworkErrorKind.INVALID_DATA: INVALID_DATA_MESSAGE,
    NetworkErrorKind.INVALID_RESPONSE: INVALID_RESPONSE_MESSAGE,
    NetworkErrorKind.NO_INTERNET_CONNECTION: NO_INTERNET_MESSAGE,
    NetworkErrorKind.WRAPPED: UNKNOWN_ERROR_MESSAGE,
}


def classification_of(cause: BaseException | None) -> tuple[str, Any] | None:
    """
    Return the (domain, code) identity of an underlying cause.

    The domain is the fully qualified exception class. The code is the first
    of ``errno``, ``code`` or ``status_code`` the cause carries, else None.
    """
    if cause is None:
        return None
    cls = type(cause)
    domain = f"{cls.__module__}.{cls.__qualname__}"
    code = None
    for attr in ("errno", "code", "status_code"):
        value = getattr(cause, attr, None)
        if value is not None:
            code = value
            break
    return domain, code


def _hashable(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


class NetworkError(WeatherReportFailure):
    """
    A network or decode failure, classified into a NetworkErrorKind.

    Equality:
    - Two errors of the same non-wrapped kind are always equal.
    - Two WRAPPED errors are equal iff their causes share the same
      classification (domain and code). Two missing causes are equal;
      a missing cause never equals a present one.
    """

    failure_category = "network_error"

    def __init__(self, kind: NetworkErrorKind, cause: BaseException | None = None) -> None:
        if kind is not NetworkErrorKind.WRAPPED:
            cause = None
        super().__init__(_MESSAGES[kind], cause=cause)
        self.kind = kind

    @classmethod
    def invalid_url(cls) -> NetworkError:
        return cls(NetworkErrorKind.INVALID_URL)

    @classmethod
    def invalid_data(cls) -> NetworkError:
        return cls(NetworkErrorKind.INVALID_DATA)

    @classmethod
    def invalid_response(cls) -> NetworkError:
        return cls(NetworkErrorKind.INVALID_RESPONSE)

    @classmethod
    def no_internet_connection(cls) -> NetworkError:
        return cls(NetworkErrorKind.NO_INTERNET_CONNECTION)

    @classmethod
    def wrapped(cls, cause: BaseException | None) -> NetworkError:
        return cls(NetworkErrorKind.WRAPPED, cause)

    @property
    def message(self) -> str:
        """Fixed user-facing message for this kind."""
        return _MESSAGES[self.kind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is NetworkErrorKind.WRAPPED:
            return classification_of(self.cause) == classification_of(other.cause)
        return True

    def __hash__(self) -> int:
        classification = classification_of(self.cause)
        if classification is not None:
            domain, code = classification
            classification = (domain, _hashable(code))
        return hash((self.kind, classification))

    def __reduce__(self):
        return type(self), (self.kind, self.cause)

    def __repr__(self) -> str:
        if self.kind is NetworkErrorKind.WRAPPED:
            return f"NetworkError({self.kind.name}, cause={self.cause!r})"
        return f"NetworkError({self.kind.name})"


class GeocodeError(WeatherReportFailure):
    """
    An address could not be resolved into coordinates.

    Not part of the network taxonomy: callers always present the fixed
    address-fetch message, whatever the underlying cause.
    """

    failure_category = "geocode_error"

    def __init__(self, address: str, *, cause: BaseException | None = None) -> None:
        super().__init__(ADDRESS_FETCH_ERROR_MESSAGE, cause=cause)
        self.address = address

    def __reduce__(self):
        return _rebuild_geocode_error, (type(self), self.address, self.cause)

    @property
    def message(self) -> str:
        return ADDRESS_FETCH_ERROR_MESSAGE


def _rebuild_geocode_error(cls, address, cause):
    return cls(address, cause=cause)


class ConfigurationError(WeatherReportFailure):
    """
    The system is misconfigured and cannot operate correctly.

    Raised only at construction time by factories asked to enforce their
    configuration, never from a fetch.
    """

    failure_category = "configuration_error"
