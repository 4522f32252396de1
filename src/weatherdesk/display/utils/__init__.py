"""Display-specific utility functions."""

from weatherdesk.display.utils.formatting import (
    format_humidity,
    format_pressure,
    format_temp,
    format_visibility,
    format_wind,
)

__all__ = [
    "format_humidity",
    "format_pressure",
    "format_temp",
    "format_visibility",
    "format_wind",
]
