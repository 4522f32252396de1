"""Error state of the current-conditions card."""

from weatherdesk.display.views import CurrentView
from weatherdesk.weather.utils import WeatherIcons


class ErrorRenderer:
    """Renderer for the error card.

    Every field is reset to its placeholder and the message takes the
    description slot, so no stale value from a previous city survives.
    """

    TITLE = "Error"

    @classmethod
    def render_error(cls, error_message: str, status: str = "Update failed") -> CurrentView:
        """Build the error card.

        Args:
            error_message: Message to display
            status: Status line text

        Returns:
            CurrentView in its error form
        """
        return CurrentView(
            city=cls.TITLE,
            temperature="--°",
            feels_like="",
            description=error_message,
            icon=WeatherIcons.ERROR,
            humidity="-- %",
            wind="-- m/s",
            pressure="-- hPa",
            visibility="-- km",
            sunrise="--",
            sunset="--",
            status=status or "Update failed",
        )
