"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from datetime import datetime, tzinfo
from pathlib import Path
from typing import ClassVar, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from weatherdesk.common.enums import TemperatureUnit
from weatherdesk.utils.time import TimeUtils

# Load environment variables from .env file(s)
load_dotenv()

# Value shipped in sample configs; treated the same as no key at all
API_KEY_PLACEHOLDER = "YOUR_API_KEY"

DEFAULT_FAVORITES = ["London", "New York", "Tokyo", "Paris", "Mumbai"]


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for the weather application.

    Every field has a default so the application starts without a config
    file; only the API key is needed to actually fetch anything.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/weatherdesk/config.yaml").expanduser(),
        Path("/etc/weatherdesk/config.yaml"),
    ]

    api_key: str = Field(API_KEY_PLACEHOLDER, description="OpenWeather API key")
    default_city: str = Field("Noida", min_length=1, description="City shown at startup")
    favorites: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FAVORITES),
        description="Cities offered in the favorites menu at startup",
    )
    units: Literal["imperial", "metric"] = Field(
        "metric", description="Initial display unit (data is always fetched metric)"
    )

    # Refresh / network
    refresh_seconds: int = Field(30, gt=0, description="Auto-refresh interval (seconds)")
    request_timeout: float = Field(10, gt=0, description="HTTP timeout (seconds)")

    # Time formatting
    time_format_general: str = Field(
        "%I:%M %p", description="Sunrise/sunset display format (e.g. 06:04 AM)"
    )
    time_format_updated: str = Field(
        "%I:%M:%S %p", description="'Last updated' display format (e.g. 06:04:12 PM)"
    )
    timezone: str | None = Field(
        None, description="IANA timezone for display; system local when unset"
    )

    # ---- validators ----
    @field_validator("favorites")
    @classmethod
    def dedupe_favorites(cls, v: list[str]) -> list[str]:
        """Drop blanks and duplicates while keeping order."""
        seen: dict[str, None] = {}
        for city in v:
            city = city.strip()
            if city:
                seen.setdefault(city, None)
        return list(seen)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str | None) -> str | None:
        """Reject names the IANA database does not know."""
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {v!r}") from exc
        return v

    # ---- convenience methods ----
    @property
    def has_api_key(self) -> bool:
        """Whether a non-placeholder API key is configured."""
        key = self.api_key.strip()
        return bool(key) and key != API_KEY_PLACEHOLDER

    @property
    def temperature_unit(self) -> TemperatureUnit:
        return TemperatureUnit.from_units(self.units)

    def get_timezone(self) -> tzinfo | None:
        """Get configured timezone, or None for the system local zone."""
        return TimeUtils.resolve_timezone(self.timezone)

    def format_time(self, dt: datetime, updated: bool = False) -> str:
        """Format a datetime according to configured time format.

        Args:
            dt: Datetime to format
            updated: If True, use the 'last updated' format

        Returns:
            Formatted time string
        """
        fmt = self.time_format_updated if updated else self.time_format_general
        return TimeUtils.format_local(dt, fmt, self.get_timezone())

    @classmethod
    def from_env(cls) -> UserSettings:
        """Defaults with the API key taken from ``OWM_API_KEY``."""
        return cls(api_key=os.getenv("OWM_API_KEY") or API_KEY_PLACEHOLDER)

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("WEATHERDESK_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from WEATHERDESK_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set WEATHERDESK_CONFIG."
                    )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        if not isinstance(data, dict):
            raise RuntimeError("Invalid configuration: top level must be a mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> UserSettings:
        """Load a config file if one exists, otherwise fall back to ``from_env``.

        An explicit ``path`` (or ``WEATHERDESK_CONFIG``) must exist; only the
        default search is allowed to miss.
        """
        if path is not None or os.environ.get("WEATHERDESK_CONFIG"):
            return cls.load(path)
        try:
            return cls.load()
        except FileNotFoundError:
            return cls.from_env()
