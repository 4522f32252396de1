import asyncio
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from weatherdesk.settings.user import UserSettings
from weatherdesk.weather.api import CURRENT_URL, FORECAST_URL, WeatherAPI
from weatherdesk.weather.errors import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ParseError,
    WeatherAPIError,
)
from weatherdesk.weather.models import CurrentWeather


@pytest.fixture
def api(settings: UserSettings) -> WeatherAPI:
    return WeatherAPI(settings)


def mock_response(status_code: int = 200, body: Any = None, invalid_json: bool = False) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value")
        resp.text = "<html>oops</html>"
    else:
        resp.json.return_value = body
    return resp


# ── current weather ─────────────────────────────────────────────────────────


def test_fetch_current_success(api: WeatherAPI, current_payload: dict[str, Any]) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body=current_payload)

        result = api.fetch_current("New York")

    assert isinstance(result, CurrentWeather)
    assert result.temperature == 21.4
    assert result.feels_like == 20.9
    assert result.humidity == 58
    assert result.pressure == 1016
    assert result.wind_speed == 3.6
    assert result.visibility == 10000
    assert result.condition_code == 801
    assert result.description == "few clouds"
    assert result.sunrise == "05:30 AM"
    assert result.sunset == "07:15 PM"


def test_fetch_current_builds_metric_query(api: WeatherAPI, current_payload: dict[str, Any]) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body=current_payload)
        api.fetch_current("São Paulo")

    args, kwargs = mock_get.call_args
    assert args[0] == CURRENT_URL
    assert kwargs["params"] == {"q": "São Paulo", "appid": "fake-api-key", "units": "metric"}
    assert kwargs["timeout"] == 5


def test_fetch_current_applies_defaults_for_missing_optional_fields(api: WeatherAPI) -> None:
    body = {"cod": 200, "main": {"temp": 12.5}}
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body=body)
        result = api.fetch_current("Reykjavik")

    assert result.feels_like == 12.5
    assert result.humidity == 0
    assert result.pressure == 0
    assert result.wind_speed == 0
    assert result.visibility == 0
    assert result.condition_code == 800
    assert result.description == "Unknown"
    assert result.sunrise == "--"
    assert result.sunset == "--"


def test_fetch_current_not_found_http_404(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(404, {"cod": "404", "message": "city not found"})

        with pytest.raises(NotFoundError) as excinfo:
            api.fetch_current("Atlantis")

    assert excinfo.value.code == 404
    assert "city not found" in str(excinfo.value)


def test_fetch_current_not_found_cod_in_body(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(200, {"cod": 404, "message": "city not found"})

        with pytest.raises(NotFoundError):
            api.fetch_current("Atlantis")


@pytest.mark.parametrize("status", [401, 429, 500, 503])
def test_fetch_current_other_status_is_network_error(api: WeatherAPI, status: int) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(status, invalid_json=True)

        with pytest.raises(NetworkError) as excinfo:
            api.fetch_current("London")

    assert excinfo.value.code == status


def test_fetch_current_uses_upstream_message(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(401, {"cod": 401, "message": "Invalid API key"})

        with pytest.raises(WeatherAPIError) as excinfo:
            api.fetch_current("London")

    assert "Invalid API key" in str(excinfo.value)


def test_fetch_current_transport_failure(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("BOOM")

        with pytest.raises(NetworkError) as excinfo:
            api.fetch_current("London")

    assert excinfo.value.code == 0
    assert isinstance(excinfo.value.original_error, requests.ConnectionError)


def test_fetch_current_missing_main_is_parse_error(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body={"cod": 200, "weather": []})

        with pytest.raises(ParseError):
            api.fetch_current("London")


def test_fetch_current_invalid_json_is_parse_error(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(200, invalid_json=True)

        with pytest.raises(ParseError):
            api.fetch_current("London")


@pytest.mark.parametrize("key", ["YOUR_API_KEY", "", "   "])
def test_missing_api_key_fails_before_network(key: str) -> None:
    api = WeatherAPI(UserSettings(api_key=key))
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        with pytest.raises(AuthenticationError):
            api.fetch_current("London")
        with pytest.raises(AuthenticationError):
            api.fetch_forecast("London")

    mock_get.assert_not_called()


# ── forecast ────────────────────────────────────────────────────────────────


def test_fetch_forecast_success(api: WeatherAPI, forecast_payload: dict[str, Any]) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body=forecast_payload)
        samples = api.fetch_forecast("New York")

    assert mock_get.call_args.args[0] == FORECAST_URL
    assert len(samples) == 40
    assert samples[0].temp == 0.0
    assert samples[0].dt_txt == "2025-05-03 15:00:00"
    assert samples[0].condition_code == 800


@pytest.mark.parametrize(
    "status, body",
    [
        (200, {"cod": "401", "message": "Invalid API key"}),
        (404, {"cod": "404", "message": "city not found"}),
        (500, None),
    ],
)
def test_fetch_forecast_non_success_returns_empty(
    api: WeatherAPI, status: int, body: dict[str, Any] | None
) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(status, body, invalid_json=body is None)
        assert api.fetch_forecast("London") == []


def test_fetch_forecast_parse_failure_returns_empty(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body={"cod": "200", "list": [{"dt_txt": "x"}]})
        assert api.fetch_forecast("London") == []

        mock_get.return_value = mock_response(200, invalid_json=True)
        assert api.fetch_forecast("London") == []


def test_fetch_forecast_transport_failure_raises(api: WeatherAPI) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.side_effect = requests.Timeout("slow")
        with pytest.raises(NetworkError):
            api.fetch_forecast("London")


def test_async_wrappers(api: WeatherAPI, current_payload: dict[str, Any]) -> None:
    with patch("weatherdesk.weather.api.requests.get") as mock_get:
        mock_get.return_value = mock_response(body=current_payload)
        result = asyncio.run(api.fetch_current_async("New York"))

    assert result.city == "New York"
