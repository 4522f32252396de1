"""Weather desktop application CLI.

This module provides the command-line interface for weatherdesk: the
GUI launcher, one-shot terminal queries and configuration utilities.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from weatherdesk.common.enums import TemperatureUnit
from weatherdesk.controller import WeatherController
from weatherdesk.display.render import render_current, render_forecast
from weatherdesk.settings import UserSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Weather desktop application", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "weatherdesk.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FAHRENHEIT_OPTION = typer.Option(False, "--fahrenheit", "-f", help="Show °F")
CITY_ARGUMENT = typer.Argument(..., help="City name, e.g. 'New York'")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> UserSettings:
    try:
        return UserSettings.load_or_default(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _build_controller(config: Path | None, fahrenheit: bool) -> WeatherController:
    controller = WeatherController(_load_settings(config))
    if fahrenheit and controller.state.unit is TemperatureUnit.CELSIUS:
        controller.toggle_unit()
    return controller


def _search_or_exit(controller: WeatherController, city: str) -> None:
    if not asyncio.run(controller.search(city)):
        typer.secho(controller.state.error or controller.state.status, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def gui(config: Path | None = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Open the weather window."""
    configure_logging(debug)
    controller = WeatherController(_load_settings(config))

    from weatherdesk.display.app import run_gui  # tkinter only when needed

    run_gui(controller)


@app.command()
def current(
    city: str = CITY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    fahrenheit: bool = FAHRENHEIT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print current conditions for CITY."""
    configure_logging(debug)
    controller = _build_controller(config, fahrenheit)
    _search_or_exit(controller, city)

    view = render_current(controller.state)
    typer.secho(f"{view.city}  {view.icon}  {view.temperature}", bold=True)
    typer.echo(f"{view.description} - {view.feels_like}")
    typer.echo(f"Humidity:   {view.humidity}")
    typer.echo(f"Wind:       {view.wind}")
    typer.echo(f"Pressure:   {view.pressure}")
    typer.echo(f"Visibility: {view.visibility}")
    typer.echo(f"Sunrise:    {view.sunrise}")
    typer.echo(f"Sunset:     {view.sunset}")


@app.command()
def forecast(
    city: str = CITY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    fahrenheit: bool = FAHRENHEIT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the 5-day forecast for CITY."""
    configure_logging(debug)
    controller = _build_controller(config, fahrenheit)
    _search_or_exit(controller, city)

    cards = render_forecast(controller.state)
    if not cards:
        typer.echo("No forecast available")
        return
    typer.secho(f"5-Day Forecast for {controller.state.city}", bold=True)
    for card in cards:
        typer.echo(f"{card.day:<4} {card.icon}  {card.temperature}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "api_key": typer.prompt("OpenWeather API key", hide_input=True),
            "default_city": typer.prompt("Startup city", default="Noida"),
            "units": typer.prompt("Units [metric|imperial]", default="metric"),
            "refresh_seconds": int(typer.prompt("Auto-refresh seconds", default="30")),
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False, allow_unicode=True), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
