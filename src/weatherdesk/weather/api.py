"""Weather API client for OpenWeather."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Final

import requests
from pydantic import ValidationError

from weatherdesk.settings import UserSettings

from .errors import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ParseError,
    WeatherAPIError,
)
from .models import CurrentResponse, CurrentWeather, ForecastResponse, ForecastSample

logger = logging.getLogger(__name__)

# API endpoints
CURRENT_URL: Final = "https://api.openweathermap.org/data/2.5/weather"
FORECAST_URL: Final = "https://api.openweathermap.org/data/2.5/forecast"

# Data is always requested metric; display conversion happens locally
UNITS: Final = "metric"

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the city name",
    401: "Invalid or missing API key",
    403: "Account blocked / key revoked",
    404: "City not found",
    429: "Rate limit exceeded",
    500: "OpenWeather internal error",
    502: "Bad gateway at OpenWeather",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


def _status_of(body: Dict[str, Any], fallback: int) -> int:
    """Read the ``cod`` field, which OpenWeather sends as int or string."""
    try:
        return int(body.get("cod", fallback))
    except (TypeError, ValueError):
        return fallback


class WeatherAPI:
    """OpenWeather API client for the 2.5 current and forecast endpoints.

    Handles API requests, network error handling and the translation of
    raw JSON responses into strongly-typed records. Blocking calls have
    ``*_async`` counterparts that run in a worker thread.

    Requires a valid API key from user settings.
    """

    def __init__(self, config: UserSettings, timeout: float | None = None) -> None:
        """Initialize the weather API client.

        Args:
            config: User settings with API key and display preferences
            timeout: Timeout for API requests in seconds (default: from settings)
        """
        self.config = config
        self.timeout = timeout if timeout is not None else config.request_timeout

    # ── public API ──────────────────────────────────────────────────────────

    def fetch_current(self, city: str) -> CurrentWeather:
        """Retrieve current conditions for a city.

        Returns:
            Validated CurrentWeather snapshot

        Raises:
            AuthenticationError: When no API key is configured
            NotFoundError: When OpenWeather does not know the city
            NetworkError: On connectivity issues or unexpected HTTP status
            ParseError: When required fields are missing from the response
        """
        status, body = self._get(CURRENT_URL, city)

        code = _status_of(body, status) if status == 200 else status
        if code != 200:
            error = WeatherAPIError.from_response(
                {"message": body.get("message") or HTTP_ERROR_MAP.get(code, "")}, code
            )
            if isinstance(error, NotFoundError):
                logger.info("City not found: %s", city)
            else:
                logger.error("Weather API error: %s - %s", code, error.message)
            raise error

        try:
            parsed = CurrentResponse.model_validate(body)
        except ValidationError as exc:
            logger.warning("Could not parse current weather for %s: %s", city, exc)
            raise ParseError(f"Unexpected current weather response: {exc}", exc) from exc

        return parsed.to_current(self.config.time_format_general, self.config.get_timezone())

    def fetch_forecast(self, city: str) -> list[ForecastSample]:
        """Retrieve the 5-day / 3-hour forecast samples for a city.

        A non-success status or an unparseable body yields an empty list;
        the forecast is optional and must never abort a search.

        Raises:
            AuthenticationError: When no API key is configured
            NetworkError: When the request could not be completed
        """
        try:
            status, body = self._get(FORECAST_URL, city)
        except ParseError as exc:
            logger.warning("Could not parse forecast for %s: %s", city, exc.message)
            return []

        code = _status_of(body, status) if status == 200 else status
        if code != 200:
            logger.info("Forecast unavailable for %s (status %s)", city, code)
            return []

        try:
            return ForecastResponse.model_validate(body).to_samples()
        except ValidationError as exc:
            logger.warning("Could not parse forecast for %s: %s", city, exc)
            return []

    async def fetch_current_async(self, city: str) -> CurrentWeather:
        """``fetch_current`` without blocking the event loop."""
        return await asyncio.to_thread(self.fetch_current, city)

    async def fetch_forecast_async(self, city: str) -> list[ForecastSample]:
        """``fetch_forecast`` without blocking the event loop."""
        return await asyncio.to_thread(self.fetch_forecast, city)

    # ── private helpers ─────────────────────────────────────────────────────

    def _params(self, city: str) -> dict[str, str]:
        return {"q": city, "appid": self.config.api_key, "units": UNITS}

    def _get(self, url: str, city: str) -> tuple[int, Dict[str, Any]]:
        """Issue a GET and decode the JSON body.

        Error bodies that are not JSON decode to ``{}`` so the caller can
        still branch on the HTTP status.

        Returns:
            Tuple of (HTTP status, decoded body)
        """
        if not self.config.has_api_key:
            logger.error("No OpenWeather API key configured")
            raise AuthenticationError(
                "API key missing! Set api_key in config.yaml or OWM_API_KEY."
            )

        try:
            resp = requests.get(url, params=self._params(city), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Weather API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        try:
            body = resp.json()
        except ValueError as exc:
            if resp.status_code == 200:
                raise ParseError("Response body is not valid JSON", exc) from exc
            return resp.status_code, {}

        if not isinstance(body, dict):
            if resp.status_code == 200:
                raise ParseError("Response body is not a JSON object")
            return resp.status_code, {}
        return resp.status_code, body
