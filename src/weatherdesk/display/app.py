"""Tkinter window for the weather application.

The window is a thin shell: widgets call controller actions, and a
state listener copies the output of the render functions into labels.
An asyncio loop is pumped from the Tk event loop so awaited fetches
complete on the main thread while HTTP runs in worker threads.
"""

from __future__ import annotations

import asyncio
import logging
import tkinter as tk
from collections.abc import Coroutine
from tkinter import messagebox, ttk
from typing import Any, Final

from weatherdesk.controller import WeatherController
from weatherdesk.display.render import render_current, render_forecast, unit_toggle_label
from weatherdesk.scheduler import AutoRefresh
from weatherdesk.state import AppState

logger: Final = logging.getLogger(__name__)

TITLE: Final = "Weather Monitoring System • Live Forecast"
FAVORITES_PROMPT: Final = "Favorites"
POLL_MS: Final = 50

# Labels of the current-conditions card that map 1:1 to CurrentView fields
_CARD_FIELDS: Final = (
    "city",
    "icon",
    "temperature",
    "feels_like",
    "description",
    "humidity",
    "wind",
    "pressure",
    "visibility",
    "sunrise",
    "sunset",
    "status",
)


class WeatherWindow(tk.Tk):
    """Main application window."""

    def __init__(
        self,
        controller: WeatherController,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        super().__init__()
        self.controller = controller
        self.loop = loop or asyncio.new_event_loop()
        self.auto_refresh = AutoRefresh(controller, loop=self.loop)
        self._tasks: set[asyncio.Task[Any]] = set()
        self._pump_id: str | None = None

        self.title(TITLE)
        self.geometry("900x700")

        self.vars = {name: tk.StringVar(self) for name in _CARD_FIELDS}
        self.search_var = tk.StringVar(self, value=controller.state.city)
        self.unit_var = tk.StringVar(self)

        self._build_ui()
        controller.subscribe(self._on_state)
        self._on_state(controller.state)

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._pump_id = self.after(POLL_MS, self._pump)
        self._spawn(controller.search(controller.state.city))

    # ── layout ──────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        header = ttk.Frame(self, padding=12)
        header.pack(fill="x")
        ttk.Label(header, text="Weather Station Pro", font=("Segoe UI", 20, "bold")).pack(
            side="left"
        )
        ttk.Button(header, text="Search", command=self._on_search).pack(side="right")
        entry = ttk.Entry(header, textvariable=self.search_var, width=28)
        entry.pack(side="right", padx=6)
        entry.bind("<Return>", lambda _event: self._on_search())
        self.favorites_combo = ttk.Combobox(header, state="readonly", width=14)
        self.favorites_combo.pack(side="right", padx=6)
        self.favorites_combo.bind("<<ComboboxSelected>>", self._on_favorite_selected)
        ttk.Label(header, text="Quick:").pack(side="right")

        body = ttk.Frame(self, padding=12)
        body.pack(fill="both", expand=True)

        card = ttk.Frame(body)
        card.pack(side="left", fill="both", expand=True)
        ttk.Label(card, textvariable=self.vars["city"], font=("Segoe UI", 22, "bold")).pack()
        ttk.Label(card, textvariable=self.vars["icon"], font=("Segoe UI Emoji", 56)).pack()
        ttk.Label(card, textvariable=self.vars["temperature"], font=("Segoe UI", 40, "bold")).pack()
        ttk.Label(card, textvariable=self.vars["feels_like"]).pack()
        ttk.Label(card, textvariable=self.vars["description"], wraplength=420).pack(pady=(0, 12))

        stats = ttk.Frame(card)
        stats.pack(fill="x")
        for index, (title, key) in enumerate(
            (
                ("💧 Humidity", "humidity"),
                ("💨 Wind Speed", "wind"),
                ("🔽 Pressure", "pressure"),
                ("👁 Visibility", "visibility"),
            )
        ):
            cell = ttk.LabelFrame(stats, text=title, padding=8)
            cell.grid(row=index // 2, column=index % 2, sticky="nsew", padx=4, pady=4)
            ttk.Label(cell, textvariable=self.vars[key], font=("Segoe UI", 16, "bold")).pack()
        stats.columnconfigure((0, 1), weight=1)

        ttk.Label(card, text="5-Day Forecast", font=("Segoe UI", 13, "bold")).pack(
            anchor="w", pady=(12, 4)
        )
        self.forecast_frame = ttk.Frame(card)
        self.forecast_frame.pack(fill="x")

        detail = ttk.LabelFrame(body, text="Additional Info", padding=12)
        detail.pack(side="right", fill="y", padx=(12, 0))
        for title, key in (("🌅 Sunrise", "sunrise"), ("🌇 Sunset", "sunset")):
            row = ttk.Frame(detail)
            row.pack(fill="x", pady=4)
            ttk.Label(row, text=title).pack(side="left")
            ttk.Label(row, textvariable=self.vars[key]).pack(side="right")
        unit_row = ttk.Frame(detail)
        unit_row.pack(fill="x", pady=12)
        ttk.Label(unit_row, text="Temperature Unit:").pack(side="left")
        ttk.Button(
            unit_row, textvariable=self.unit_var, width=4, command=self.controller.toggle_unit
        ).pack(side="right")
        ttk.Button(detail, text="★ Add Favorite", command=self.controller.add_favorite).pack(
            fill="x"
        )
        ttk.Button(detail, text="Remove Favorite", command=self._on_remove_favorite).pack(
            fill="x", pady=(6, 0)
        )

        bottom = ttk.Frame(self, padding=12)
        bottom.pack(fill="x")
        self.auto_button = ttk.Button(bottom, text="Auto Refresh", command=self.auto_refresh.enable)
        self.auto_button.pack(side="left")
        self.stop_button = ttk.Button(bottom, text="Stop", command=self.auto_refresh.disable)
        self.stop_button.pack(side="left", padx=8)
        ttk.Label(bottom, textvariable=self.vars["status"]).pack(side="left", padx=16)

    # ── state → widgets ─────────────────────────────────────────────────────

    def _on_state(self, state: AppState) -> None:
        view = render_current(state)
        for name in _CARD_FIELDS:
            self.vars[name].set(getattr(view, name))
        self.unit_var.set(unit_toggle_label(state))
        self.favorites_combo["values"] = [FAVORITES_PROMPT, *state.favorites]
        if self.favorites_combo.get() not in state.favorites:
            self.favorites_combo.set(FAVORITES_PROMPT)
        self.auto_button.state(["disabled"] if state.auto_refresh else ["!disabled"])
        self.stop_button.state(["!disabled"] if state.auto_refresh else ["disabled"])
        if not state.loading and state.current and not state.error:
            self.search_var.set(state.city)
        self._render_forecast(state)

    def _render_forecast(self, state: AppState) -> None:
        for child in self.forecast_frame.winfo_children():
            child.destroy()
        for column, card in enumerate(render_forecast(state)):
            cell = ttk.Frame(self.forecast_frame, padding=6, relief="groove")
            cell.grid(row=0, column=column, sticky="nsew", padx=4)
            ttk.Label(cell, text=card.day, font=("Segoe UI", 10, "bold")).pack()
            ttk.Label(cell, text=card.icon, font=("Segoe UI Emoji", 22)).pack()
            ttk.Label(cell, text=card.temperature).pack()
            self.forecast_frame.columnconfigure(column, weight=1)

    # ── widget callbacks ────────────────────────────────────────────────────

    def _on_search(self) -> None:
        query = self.search_var.get().strip()
        if not query:
            messagebox.showwarning("Input Required", "Please enter a city name.", parent=self)
            return
        self._spawn(self.controller.search(query))

    def _on_favorite_selected(self, _event: tk.Event) -> None:  # type: ignore[type-arg]
        city = self.favorites_combo.get()
        if city and city != FAVORITES_PROMPT:
            self.search_var.set(city)
            self._spawn(self.controller.select_favorite(city))

    def _on_remove_favorite(self) -> None:
        selected = self.favorites_combo.get()
        city = selected if selected != FAVORITES_PROMPT else self.controller.state.city
        self.controller.remove_favorite(city)

    # ── asyncio plumbing ────────────────────────────────────────────────────

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = self.loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background task failed", exc_info=task.exception())

    def _pump(self) -> None:
        """Run every ready asyncio callback once, then yield back to Tk."""
        self.loop.call_soon(self.loop.stop)
        self.loop.run_forever()
        self._pump_id = self.after(POLL_MS, self._pump)

    def _on_close(self) -> None:
        self.auto_refresh.disable()
        if self._pump_id is not None:
            self.after_cancel(self._pump_id)
        shutdown_loop(self.loop)
        self.destroy()


def shutdown_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Cancel pending tasks, let them unwind, then close ``loop``.

    Waits for in-flight worker threads, so a fetch may hold shutdown up to
    the request timeout.
    """
    pending = asyncio.all_tasks(loop)
    for task in pending:
        task.cancel()
    if pending:
        loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
    loop.run_until_complete(loop.shutdown_default_executor())
    loop.close()


def run_gui(controller: WeatherController) -> None:
    """Create the window and block in the Tk main loop."""
    window = WeatherWindow(controller)
    window.mainloop()
