# filepath: src/weatherdesk/controller.py
"""Core controller for the weather desktop application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Final
from unittest.mock import AsyncMock, MagicMock

from weatherdesk.settings import UserSettings
from weatherdesk.state import AppState
from weatherdesk.utils.formatting import capitalize_words
from weatherdesk.utils.time import TimeUtils
from weatherdesk.weather.api import WeatherAPI
from weatherdesk.weather.errors import AuthenticationError, NotFoundError, WeatherAPIError
from weatherdesk.weather.forecast import reduce_forecast
from weatherdesk.weather.models import CurrentWeather, ForecastDay, ForecastSample

logger: Final = logging.getLogger(__name__)

StateListener = Callable[[AppState], None]


class WeatherController:
    """Owns the application state and the actions that change it.

    This class orchestrates the weather workflow:
    - Searching a city (current conditions, then the forecast)
    - Switching the display unit
    - Managing the in-memory favorites list
    - Publishing every state change to subscribed views

    Fetches are awaited on the caller's event loop; the blocking HTTP
    work happens in worker threads, state changes never do.
    """

    def __init__(
        self,
        settings: UserSettings,
        weather_api: WeatherAPI | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            settings: User configuration
            weather_api: Optional custom weather API client
        """
        self.settings = settings
        self.weather_api = weather_api or WeatherAPI(settings)
        self.state = AppState(
            city=capitalize_words(settings.default_city.strip()),
            unit=settings.temperature_unit,
            favorites=list(settings.favorites),
        )
        self._listeners: list[StateListener] = []
        # Bumped by every search; results of an older search are dropped
        self._generation = 0

    # ── subscriptions ───────────────────────────────────────────────────────

    def subscribe(self, listener: StateListener) -> None:
        """Call ``listener`` with the state after every change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ── actions ─────────────────────────────────────────────────────────────

    async def search(self, city: str) -> bool:
        """Fetch current conditions, then the forecast, for ``city``.

        The current view is published as soon as it arrives; the forecast
        follows in a second update. A failing current fetch puts the
        state into its error form and skips the forecast.
        Results that arrive after a newer search has started are dropped.

        Returns:
            True if current conditions were fetched
        """
        query = city.strip()
        if not query:
            self.state.status = "Please enter a city name."
            self._notify()
            return False

        self._generation += 1
        generation = self._generation
        display_name = capitalize_words(query)
        self.state.loading = display_name
        self.state.error = None
        self._notify()

        try:
            current = await self.weather_api.fetch_current_async(query)
        except WeatherAPIError as err:
            logger.error("OpenWeather error (%s): %s", err.code, err.message)
            if self._is_current(generation):
                self._apply_error(err, display_name)
            return False

        if not self._is_current(generation):
            logger.debug("Dropping superseded result for %s", display_name)
            return False

        self._apply_current(current, display_name)
        forecast = await self._fetch_forecast(display_name)
        if not self._is_current(generation):
            logger.debug("Dropping superseded forecast for %s", display_name)
            return True
        self.state.forecast = forecast
        self._notify()
        return True

    async def refresh(self) -> bool:
        """Re-run the search for the city currently displayed."""
        return await self.search(self.state.city)

    async def select_favorite(self, city: str) -> bool:
        """Search a city picked from the favorites list."""
        return await self.search(city)

    def toggle_unit(self) -> None:
        """Switch between Celsius and Fahrenheit without refetching."""
        self.state.unit = self.state.unit.toggled()
        self._notify()

    def add_favorite(self) -> bool:
        """Add the displayed city to favorites.

        Returns:
            True if the city was added, False if already present
        """
        city = self.state.city
        if not city:
            return False
        if self.state.has_favorite(city):
            self.state.status = f"{city} is already in favorites"
            added = False
        else:
            self.state.favorites.append(city)
            self.state.status = f"Added {city} to favorites"
            added = True
        self._notify()
        return added

    def remove_favorite(self, city: str) -> bool:
        """Remove ``city`` from favorites; returns False if it was not there."""
        if not self.state.has_favorite(city):
            return False
        self.state.favorites.remove(city)
        self.state.status = f"Removed {city} from favorites"
        self._notify()
        return True

    def mark_auto_refresh(self, enabled: bool) -> None:
        """Record the auto-refresh flag and report it on the status line."""
        self.state.auto_refresh = enabled
        if enabled:
            self.state.status = (
                f"Auto-refresh enabled (every {self.settings.refresh_seconds}s)"
            )
        else:
            self.state.status = "Auto-refresh stopped"
        self._notify()

    # ── private helpers ─────────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _apply_current(self, current: CurrentWeather, display_name: str) -> None:
        now = TimeUtils.now_localized()
        self.state.current = current
        self.state.city = display_name
        self.state.forecast = []
        self.state.loading = None
        self.state.error = None
        self.state.last_updated = now
        self.state.status = f"Last updated: {self.settings.format_time(now, updated=True)}"
        self._notify()

    def _apply_error(self, err: WeatherAPIError, display_name: str) -> None:
        if isinstance(err, AuthenticationError):
            message = "API Key Missing! Set api_key in config.yaml or OWM_API_KEY."
        elif isinstance(err, NotFoundError):
            message = f"Unable to fetch weather data for {display_name}. Please check the city name."
        else:
            message = f"Unable to fetch weather data for {display_name}: {err.message}"

        self.state.current = None
        self.state.forecast = []
        self.state.loading = None
        self.state.error = message
        self.state.status = "Update failed"
        self._notify()

    async def _fetch_forecast(self, city: str) -> list[ForecastDay]:
        try:
            samples = await self.weather_api.fetch_forecast_async(city)
        except WeatherAPIError as err:
            logger.warning("Forecast error for %s: %s", city, err.message)
            return []
        return reduce_forecast(samples, tz=self.settings.get_timezone())

    @classmethod
    def create_for_testing(
        cls,
        settings: UserSettings | None = None,
        current: CurrentWeather | None = None,
        forecast: list[ForecastSample] | None = None,
        current_error: WeatherAPIError | None = None,
        forecast_error: WeatherAPIError | None = None,
    ) -> WeatherController:
        """Create a controller backed by a mocked WeatherAPI.

        Args:
            settings: Settings to use (defaults with a dummy API key if None)
            current: CurrentWeather the mock returns
            forecast: Forecast samples the mock returns
            current_error: Error raised by the current weather call instead
            forecast_error: Error raised by the forecast call instead

        Returns:
            WeatherController instance configured for testing
        """
        settings = settings or UserSettings(api_key="test-api-key", timezone="UTC")

        mock_api: Any = MagicMock(spec=WeatherAPI)
        mock_api.fetch_current_async = AsyncMock(
            return_value=current, side_effect=current_error
        )
        mock_api.fetch_forecast_async = AsyncMock(
            return_value=forecast or [], side_effect=forecast_error
        )
        return cls(settings, weather_api=mock_api)
