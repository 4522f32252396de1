"""Weather unit conversion utilities."""

from __future__ import annotations

from weatherdesk.common.enums import TemperatureUnit
from weatherdesk.utils.formatting import round_half_up


class UnitConverter:
    """Weather unit conversion utilities.

    OpenWeather data is always requested in metric; these helpers convert
    for display:
    - Temperature (°C/°F)
    - Visibility (m → km)
    """

    @staticmethod
    def celsius_to_fahrenheit(celsius: float) -> float:
        """Convert °C to °F."""
        return celsius * 9.0 / 5.0 + 32.0

    @classmethod
    def convert_temperature(cls, celsius: float, unit: TemperatureUnit) -> float:
        """Express a Celsius reading in the requested display unit."""
        if unit is TemperatureUnit.FAHRENHEIT:
            return cls.celsius_to_fahrenheit(celsius)
        return celsius

    @classmethod
    def display_temperature(cls, celsius: float, unit: TemperatureUnit) -> int:
        """Temperature in ``unit`` rounded half-up to a whole degree."""
        return round_half_up(cls.convert_temperature(celsius, unit))

    @staticmethod
    def meters_to_km(meters: float) -> float:
        """Convert meters to kilometers (1 dp)."""
        return round(meters / 1000.0, 1)
