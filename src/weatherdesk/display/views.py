"""Label-ready view records produced by the render functions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentView:
    """Strings for the current-conditions card."""

    city: str
    temperature: str
    feels_like: str
    description: str
    icon: str
    humidity: str
    wind: str
    pressure: str
    visibility: str
    sunrise: str
    sunset: str
    status: str


@dataclass(frozen=True)
class ForecastCardView:
    """Strings for one day of the forecast strip."""

    day: str
    icon: str
    temperature: str
