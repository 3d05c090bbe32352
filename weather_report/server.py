"""
Weather Report Server

FastAPI application exposing the weather reporter over HTTP.

Every lookup answers 200 with a WeatherReport; failed steps show up as
user-facing messages in ``errors``, never as raw technical text.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query

from .config import SERVER_NAME, SERVER_VERSION
from .log_setup import setup_logger
from .reporter import WeatherReport, WeatherReporter, create_live_reporter

# -----------------------------------------------------------------------------
# Application Lifecycle
# -----------------------------------------------------------------------------

reporter: WeatherReporter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage reporter lifecycle - startup and shutdown."""
    global reporter
    setup_logger()
    if reporter is None:
        reporter = create_live_reporter()
    yield
    if reporter:
        await reporter.close()
        reporter = None


# -----------------------------------------------------------------------------
# FastAPI Application
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Weather Report",
    description="Current weather and forecast for a free-text address.",
    version=SERVER_VERSION,
    lifespan=lifespan,
)


@app.get("/weather", response_model=WeatherReport)
async def weather(address: str = Query(..., description="Free-text address")) -> WeatherReport:
    """Geocode ``address`` and return its current weather and forecast."""
    if reporter is None:
        raise HTTPException(status_code=503, detail="Reporter not initialized")
    return await reporter.retrieve_current_weather_and_forecast(address)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": SERVER_NAME}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
