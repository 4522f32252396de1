"""Explicit application state for the weather window."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from weatherdesk.common.enums import TemperatureUnit
from weatherdesk.weather.models import CurrentWeather, ForecastDay


@dataclass
class AppState:
    """Everything the window shows, owned by the controller.

    Rendering functions only read this; the controller's action handlers
    are the only writers. Nothing here is saved between runs.
    """

    city: str
    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    favorites: list[str] = field(default_factory=list)

    # Last results
    current: CurrentWeather | None = None
    forecast: list[ForecastDay] = field(default_factory=list)
    last_updated: datetime | None = None

    # Transient UI flags
    loading: str | None = None  # city being fetched
    error: str | None = None
    status: str = ""
    auto_refresh: bool = False

    def has_favorite(self, city: str) -> bool:
        return city in self.favorites
