"""Display-specific formatting utilities."""

from __future__ import annotations

from weatherdesk.common.enums import TemperatureUnit
from weatherdesk.utils.formatting import format_percentage, format_temperature
from weatherdesk.weather.utils.units import UnitConverter


def format_temp(celsius: float, unit: TemperatureUnit) -> str:
    """Format a Celsius reading in the display unit, e.g. ``"72°F"``."""
    return format_temperature(UnitConverter.convert_temperature(celsius, unit), unit.symbol)


def format_humidity(humidity: float) -> str:
    return format_percentage(humidity)


def format_wind(speed_mps: float) -> str:
    """Format wind speed in m/s (1 dp)."""
    return f"{speed_mps:.1f} m/s"


def format_pressure(pressure_hpa: float) -> str:
    """Format pressure in hPa.

    Args:
        pressure_hpa: Pressure in hPa

    Returns:
        Formatted pressure string with units
    """
    return f"{round(pressure_hpa)} hPa"


def format_visibility(meters: float) -> str:
    """Format visibility in kilometers (1 dp)."""
    return f"{UnitConverter.meters_to_km(meters):.1f} km"
