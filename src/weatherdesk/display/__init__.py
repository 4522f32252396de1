"""Display package - view builders and the tkinter window.

The window lives in ``weatherdesk.display.app`` and is imported lazily so
the rest of the package works without a display server.
"""

from weatherdesk.display.render import render_current, render_forecast
from weatherdesk.display.views import CurrentView, ForecastCardView

__all__ = ["CurrentView", "ForecastCardView", "render_current", "render_forecast"]
