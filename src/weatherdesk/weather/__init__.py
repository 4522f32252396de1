"""Weather package - holds API client, forecast reducer, models and errors."""

__version__ = "0.1.0"

from .api import WeatherAPI
from .errors import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ParseError,
    WeatherAPIError,
)
from .forecast import reduce_forecast
from .models import CurrentWeather, ForecastDay, ForecastSample
from .utils import UnitConverter, WeatherIcons

# Define what gets imported with: from weatherdesk.weather import *
__all__ = [
    "AuthenticationError",
    "CurrentWeather",
    "ForecastDay",
    "ForecastSample",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "UnitConverter",
    "WeatherAPI",
    "WeatherAPIError",
    "WeatherIcons",
    "reduce_forecast",
]
