"""Exception classes for weather API interactions.

This module defines the hierarchy of exceptions raised by the
OpenWeatherMap client. Every failure the client reports is a
WeatherAPIError so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class WeatherAPIError(Exception):
    """Error during OpenWeather API request or response parsing.

    Includes the status code (0 when no HTTP response was received)
    and the raw response body when available.
    """

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or custom error code
            message: Human-readable error message
            response: Optional raw API response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def is_client_error(self) -> bool:
        """Check if this is a client-side error (4xx)."""
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """Check if this is a server-side error (5xx)."""
        return self.code >= 500

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> WeatherAPIError:
        """Create an error from an API error body.

        OpenWeather reports unknown cities as 404, everything else that
        is not a success is surfaced as a network-level failure.

        Args:
            response: API response dictionary
            status_code: HTTP status code (or the body's ``cod``)

        Returns:
            NotFoundError for 404, NetworkError otherwise
        """
        message = str(response.get("message") or "")
        if status_code == 404:
            return NotFoundError(status_code, message or "city not found", response)
        return NetworkError(
            message or f"HTTP response code: {status_code}",
            code=status_code,
            response=response,
        )


class AuthenticationError(WeatherAPIError):
    """Raised when no usable API key is configured."""

    def __init__(self, message: str = "API key missing") -> None:
        super().__init__(401, message)


class NotFoundError(WeatherAPIError):
    """Raised when OpenWeather does not know the requested city."""

    pass


class NetworkError(WeatherAPIError):
    """Raised on transport failure or an unexpected HTTP status."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        code: int = 0,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
            code: HTTP status code, 0 when the request never completed
            response: Optional raw API response for debugging
        """
        super().__init__(code, message, response)
        self.original_error = original_error


class ParseError(WeatherAPIError):
    """Raised when API response parsing fails."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error
