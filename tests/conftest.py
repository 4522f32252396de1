import json
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from weatherdesk.settings import UserSettings
from weatherdesk.weather.models import CurrentWeather, ForecastSample

DATA_DIR = Path(__file__).parent / "data"

# Saturday 2025-05-03 15:00 UTC, the first slot of a typical afternoon fetch
FORECAST_START = datetime(2025, 5, 3, 15, 0, tzinfo=UTC)


def make_forecast_item(dt: datetime, temp: float, code: int = 800) -> dict[str, Any]:
    """One ``list[]`` entry of the forecast payload."""
    return {
        "dt": int(dt.timestamp()),
        "dt_txt": dt.strftime("%Y-%m-%d %H:%M:%S"),
        "main": {"temp": temp, "humidity": 50},
        "weather": [{"id": code, "main": "", "description": "", "icon": ""}],
    }


def make_forecast_payload(count: int = 40, start: datetime = FORECAST_START) -> dict[str, Any]:
    """Forecast body with ``count`` 3-hourly slots; temp encodes the slot index."""
    items = [make_forecast_item(start + timedelta(hours=3 * i), float(i)) for i in range(count)]
    return {"cod": "200", "message": 0, "cnt": count, "list": items}


def make_sample(dt: datetime, temp: float, code: int = 800) -> ForecastSample:
    return ForecastSample(
        dt=dt, dt_txt=dt.strftime("%Y-%m-%d %H:%M:%S"), temp=temp, condition_code=code
    )


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings(
        api_key="fake-api-key",
        default_city="Noida",
        units="metric",
        refresh_seconds=30,
        request_timeout=5,
        time_format_general="%I:%M %p",
        time_format_updated="%H:%M:%S",
        timezone="UTC",
    )


@pytest.fixture
def current_payload() -> dict[str, Any]:
    return json.loads((DATA_DIR / "current_sample.json").read_text())


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return make_forecast_payload()


@pytest.fixture
def current_weather() -> CurrentWeather:
    return CurrentWeather(
        temperature=21.4,
        feels_like=20.9,
        humidity=58,
        wind_speed=3.6,
        pressure=1016,
        visibility=10000,
        condition_code=801,
        description="few clouds",
        sunrise="05:30 AM",
        sunset="07:15 PM",
        city="New York",
    )
