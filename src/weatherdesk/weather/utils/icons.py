"""Weather condition categories and glyphs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from weatherdesk.common.enums import ConditionCategory
from weatherdesk.types.weather import ConditionObj


class WeatherIcons:
    """Map OpenWeatherMap condition codes to display categories and glyphs.

    Codes are grouped in the provider's bands (2xx thunderstorm, 3xx
    drizzle, 5xx rain, 6xx snow, 7xx atmosphere, 80x clouds). Anything
    outside those bands is ``UNKNOWN``; a bad code never raises.
    """

    _glyphs: ClassVar[dict[ConditionCategory, str]] = {
        ConditionCategory.SEVERE_STORM: "⛈️",
        ConditionCategory.LIGHT_PRECIPITATION: "🌦️",
        ConditionCategory.RAIN: "🌧️",
        ConditionCategory.SNOW: "❄️",
        ConditionCategory.ATMOSPHERIC_HAZE: "🌫️",
        ConditionCategory.CLEAR: "☀️",
        ConditionCategory.FEW_CLOUDS: "🌤️",
        ConditionCategory.SCATTERED_CLOUDS: "⛅",
        ConditionCategory.OVERCAST: "☁️",
        ConditionCategory.UNKNOWN: "🌡️",
    }

    # Placeholder glyphs for the loading and error states
    LOADING: ClassVar[str] = "⏳"
    ERROR: ClassVar[str] = "❌"

    @staticmethod
    def category(code: int) -> ConditionCategory:
        """Get the display category for a condition code."""
        if 200 <= code < 300:
            return ConditionCategory.SEVERE_STORM
        if 300 <= code < 400:
            return ConditionCategory.LIGHT_PRECIPITATION
        if 500 <= code < 600:
            return ConditionCategory.RAIN
        if 600 <= code < 700:
            return ConditionCategory.SNOW
        if 700 <= code < 800:
            return ConditionCategory.ATMOSPHERIC_HAZE
        if code == 800:
            return ConditionCategory.CLEAR
        if code == 801:
            return ConditionCategory.FEW_CLOUDS
        if code == 802:
            return ConditionCategory.SCATTERED_CLOUDS
        if 803 <= code < 900:
            return ConditionCategory.OVERCAST
        return ConditionCategory.UNKNOWN

    @classmethod
    def get_icon(cls, item: int | Mapping[str, Any] | ConditionObj) -> str:
        """Get the glyph for a code, a raw ``weather[0]`` entry or a record.

        Args:
            item: Condition code, mapping with an ``id`` key, or an object
                exposing ``condition_code``

        Returns:
            Emoji glyph for the matching category
        """
        if isinstance(item, Mapping):
            raw: Any = item.get("id", 0)
        elif isinstance(item, ConditionObj):
            raw = item.condition_code
        else:
            raw = item
        try:
            code = int(raw)
        except (TypeError, ValueError):
            return cls._glyphs[ConditionCategory.UNKNOWN]
        return cls._glyphs[cls.category(code)]

    @classmethod
    def get_label(cls, code: int) -> str:
        """Category label, e.g. ``"few-clouds"``."""
        return cls.category(code).value
