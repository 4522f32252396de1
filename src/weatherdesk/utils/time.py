# src/weatherdesk/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

# Shown in place of a time that the provider did not report
MISSING_TIME = "--"


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with dates and times:
    - Epoch conversions with explicit timezone handling
    - Datetime formatting with user preferences
    - Current time retrieval with proper timezone handling
    """

    @staticmethod
    def resolve_timezone(timezone_name: str | None) -> tzinfo | None:
        """Resolve an IANA timezone name.

        Args:
            timezone_name: Timezone name, or None for the system local zone

        Returns:
            ZoneInfo object, or None meaning "system local"
        """
        return ZoneInfo(timezone_name) if timezone_name else None

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def format_local(dt: datetime | None, format_string: str, tz: tzinfo | None = None) -> str:
        """Format a datetime in the display timezone.

        Args:
            dt: Datetime to format, None when the provider sent nothing
            format_string: strftime format string
            tz: Display timezone (system local when None)

        Returns:
            Formatted string, or "--" for a missing value
        """
        if dt is None:
            return MISSING_TIME
        return dt.astimezone(tz).strftime(format_string)

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone."""
        return datetime.now(UTC).astimezone()
