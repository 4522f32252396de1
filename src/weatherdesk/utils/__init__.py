"""Common utility functions and helpers for the weatherdesk package."""

from weatherdesk.utils.formatting import (
    capitalize_words,
    format_percentage,
    format_temperature,
    round_half_up,
)
from weatherdesk.utils.time import MISSING_TIME, TimeUtils

__all__ = [
    "MISSING_TIME",
    "TimeUtils",
    "capitalize_words",
    "format_percentage",
    "format_temperature",
    "round_half_up",
]
