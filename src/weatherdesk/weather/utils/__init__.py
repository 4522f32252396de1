"""Weather utility classes."""

from weatherdesk.weather.utils.icons import WeatherIcons
from weatherdesk.weather.utils.units import UnitConverter

__all__ = ["UnitConverter", "WeatherIcons"]
