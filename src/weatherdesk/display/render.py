"""View builders: turn application state into label-ready strings.

Everything here is a pure function of ``AppState``; the tkinter window
only copies the resulting strings into widgets.
"""

from __future__ import annotations

from weatherdesk.display.error_ui import ErrorRenderer
from weatherdesk.display.utils import (
    format_humidity,
    format_pressure,
    format_temp,
    format_visibility,
    format_wind,
)
from weatherdesk.display.views import CurrentView, ForecastCardView
from weatherdesk.state import AppState
from weatherdesk.utils.formatting import capitalize_words
from weatherdesk.weather.models import ForecastDay
from weatherdesk.weather.utils import WeatherIcons


def placeholder_view(city: str = "--", status: str = "") -> CurrentView:
    """Blank card shown before the first result."""
    return CurrentView(
        city=city,
        temperature="--°",
        feels_like="Feels like: --°",
        description="--",
        icon="",
        humidity="-- %",
        wind="-- m/s",
        pressure="-- hPa",
        visibility="-- km",
        sunrise="--",
        sunset="--",
        status=status,
    )


def loading_view(state: AppState) -> CurrentView:
    """Card shown while a search is in flight."""
    base = render_loaded(state) if state.current else placeholder_view(status=state.status)
    return CurrentView(
        city=f"Loading {state.loading}...",
        temperature="--°",
        feels_like="Please wait",
        description="Fetching data...",
        icon=WeatherIcons.LOADING,
        humidity=base.humidity,
        wind=base.wind,
        pressure=base.pressure,
        visibility=base.visibility,
        sunrise=base.sunrise,
        sunset=base.sunset,
        status=base.status,
    )


def render_loaded(state: AppState) -> CurrentView:
    """Card for a successfully fetched city.

    Requires ``state.current``.
    """
    current = state.current
    assert current is not None
    unit = state.unit
    return CurrentView(
        city=state.city,
        temperature=format_temp(current.temperature, unit),
        feels_like=f"Feels like: {format_temp(current.feels_like, unit)}",
        description=capitalize_words(current.description),
        icon=WeatherIcons.get_icon(current.condition_code),
        humidity=format_humidity(current.humidity),
        wind=format_wind(current.wind_speed),
        pressure=format_pressure(current.pressure),
        visibility=format_visibility(current.visibility),
        sunrise=current.sunrise,
        sunset=current.sunset,
        status=state.status,
    )


def render_current(state: AppState) -> CurrentView:
    """Pick the card for the state: loading, error, loaded or blank."""
    if state.loading:
        return loading_view(state)
    if state.error:
        return ErrorRenderer.render_error(state.error, state.status)
    if state.current:
        return render_loaded(state)
    return placeholder_view(state.city, state.status)


def render_forecast_day(day: ForecastDay, state: AppState) -> ForecastCardView:
    return ForecastCardView(
        day=day.day,
        icon=WeatherIcons.get_icon(day.condition_code),
        temperature=format_temp(day.temp, state.unit),
    )


def render_forecast(state: AppState) -> list[ForecastCardView]:
    """Forecast strip; empty while in the error state."""
    if state.error:
        return []
    return [render_forecast_day(day, state) for day in state.forecast]


def unit_toggle_label(state: AppState) -> str:
    """Caption of the unit button: the unit it switches *to*."""
    return state.unit.toggled().symbol
