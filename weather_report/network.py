"""
Network Client

Issues a single HTTP GET and reduces every possible result to an Outcome:
the raw response bytes on success, or a classified NetworkError.

The client:
1. Delegates the request to an injected HttpSession (httpx.AsyncClient by default)
2. Classifies transport exceptions into the NetworkErrorKind taxonomy
3. Rejects non-2xx statuses and empty bodies

There is no retry, no caching and no cancellation. One call, one request,
one outcome. No exception escapes fetch_data.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from .config import (
    HTTP_SUCCESS_MAX,
    HTTP_SUCCESS_MIN,
    HTTP_TIMEOUT_SECONDS,
    HTTP_USER_AGENT,
)
from .errors import NetworkError
from .models import Failure, Outcome, Success

logger = logging.getLogger(__name__)

# Transport failures meaning "not connected" or "connection lost"
CONNECTIVITY_ERRORS: tuple[type[Exception], ...] = (
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
)

# Transport failures meaning "malformed or unsupported URL"
URL_ERRORS: tuple[type[Exception], ...] = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
)


class HttpSession(Protocol):
    """Anything able to perform an async HTTP GET. httpx.AsyncClient qualifies."""

    async def get(self, url: str) -> httpx.Response: ...


def classify_transport_error(error: Exception) -> NetworkError:
    """Map a transport exception to exactly one NetworkError."""
    if isinstance(error, CONNECTIVITY_ERRORS):
        return NetworkError.no_internet_connection()
    if isinstance(error, URL_ERRORS):
        return NetworkError.invalid_url()
    return NetworkError.wrapped(error)


def redact_url(url: str) -> str:
    """Hide the API key in a URL before it is logged."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return "<invalid url>"
    if "appid" not in parsed.params:
        return url
    return str(parsed.copy_set_param("appid", "***"))


class NetworkClient:
    """
    Fetches raw bytes from a URL.

    The HTTP session is injectable so tests can substitute a mock
    transport without real I/O. When none is given the client builds
    (and owns) an httpx.AsyncClient on first use.
    """

    def __init__(self, session: HttpSession | None = None) -> None:
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> HttpSession:
        """Lazy-initialize HTTP session."""
        if self._session is None:
            self._session = httpx.AsyncClient(
                timeout=HTTP_TIMEOUT_SECONDS,
                headers={"User-Agent": HTTP_USER_AGENT},
            )
        return self._session

    async def close(self) -> None:
        """Clean up the HTTP session if this client created it."""
        if self._owns_session and isinstance(self._session, httpx.AsyncClient):
            await self._session.aclose()
            self._session = None

    async def fetch_data(self, url: str) -> Outcome[bytes]:
        """
        Fetch the body at ``url``.

        Precedence:
        1. Transport error -> classified failure
        2. Status outside 200-299 -> INVALID_RESPONSE
        3. Empty body -> INVALID_DATA
        4. Otherwise the body bytes, untouched
        """
        try:
            response = await self.session.get(url)
        except Exception as e:
            error = classify_transport_error(e)
            logger.warning(
                "GET %s failed: %s (%s)",
                redact_url(url),
                error.kind.value,
                type(e).__name__,
            )
            return Failure(error)

        if not HTTP_SUCCESS_MIN <= response.status_code <= HTTP_SUCCESS_MAX:
            logger.warning(
                "GET %s returned status %d", redact_url(url), response.status_code
            )
            return Failure(NetworkError.invalid_response())

        data = response.content
        if not data:
            logger.warning("GET %s returned an empty body", redact_url(url))
            return Failure(NetworkError.invalid_data())

        logger.debug("GET %s returned %d bytes", redact_url(url), len(data))
        return Success(data)
