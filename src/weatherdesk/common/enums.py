from enum import Enum


class TemperatureUnit(Enum):
    """Temperature scale used for display.

    Data is always fetched in metric; the unit only changes rendering.
    """

    CELSIUS = "°C"
    FAHRENHEIT = "°F"

    @property
    def symbol(self) -> str:
        return self.value

    def toggled(self) -> "TemperatureUnit":
        """Return the other unit."""
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS

    @classmethod
    def from_units(cls, units: str) -> "TemperatureUnit":
        """Map an OpenWeather ``units`` setting to a display unit."""
        return cls.FAHRENHEIT if units == "imperial" else cls.CELSIUS


class ConditionCategory(Enum):
    """Display category for an OpenWeather condition code."""

    SEVERE_STORM = "severe-storm"
    LIGHT_PRECIPITATION = "light-precipitation"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERIC_HAZE = "atmospheric-haze"
    CLEAR = "clear"
    FEW_CLOUDS = "few-clouds"
    SCATTERED_CLOUDS = "scattered-clouds"
    OVERCAST = "overcast"
    UNKNOWN = "unknown"
