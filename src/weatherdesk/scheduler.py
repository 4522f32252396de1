"""Auto-refresh timer for the weather window."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weatherdesk.controller import WeatherController

logger = logging.getLogger(__name__)


class AutoRefresh:
    """Re-issues the current search at a fixed interval while enabled.

    The timer runs as a task on the controller's event loop. ``enable``
    and ``disable`` are idempotent; at any moment the timer is either
    running or not, never both.
    """

    def __init__(
        self,
        controller: "WeatherController",
        interval_seconds: float | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.controller = controller
        self._loop = loop
        self.interval = (
            interval_seconds
            if interval_seconds is not None
            else controller.settings.refresh_seconds
        )
        self._task: asyncio.Task[None] | None = None

    @property
    def enabled(self) -> bool:
        return self._task is not None and not self._task.done()

    def enable(self) -> bool:
        """Start the timer on the given loop, or the running one.

        Returns:
            True if the timer was started, False if it was already running
        """
        if self.enabled:
            return False
        loop = self._loop or asyncio.get_running_loop()
        self._task = loop.create_task(self._run())
        self._task.add_done_callback(self._on_done)
        self.controller.mark_auto_refresh(True)
        logger.info("Auto-refresh every %ss", self.interval)
        return True

    def disable(self) -> bool:
        """Stop the timer.

        Returns:
            True if a running timer was stopped
        """
        if not self.enabled:
            return False
        assert self._task is not None
        self._task.cancel()
        self._task = None
        self.controller.mark_auto_refresh(False)
        logger.info("Auto-refresh stopped")
        return True

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            logger.debug("Auto-refresh → %s", self.controller.state.city)
            await self.controller.refresh()

    def _on_done(self, task: asyncio.Task[None]) -> None:
        """Clear the flag when the timer dies from an unexpected error."""
        if self._task is task:
            self._task = None
        if task.cancelled() or task.exception() is None:
            return
        logger.error("Auto-refresh stopped by error", exc_info=task.exception())
        self.controller.mark_auto_refresh(False)
