import pytest
from weatherdesk.weather.errors import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    ParseError,
    WeatherAPIError,
)


def test_weather_api_error_str_and_flags() -> None:
    err = WeatherAPIError(code=404, message="Not Found")
    assert str(err) == "[404] Not Found"
    assert err.is_client_error is True
    assert err.is_server_error is False


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (404, NotFoundError),
        (401, NetworkError),
        (429, NetworkError),
        (500, NetworkError),
    ],
)
def test_from_response_creates_expected_error(
    code: int, expected_type: type[WeatherAPIError]
) -> None:
    resp = {"message": "test error"}
    err = WeatherAPIError.from_response(resp, code)
    assert isinstance(err, expected_type)
    assert err.code == code
    assert "test error" in str(err)


def test_from_response_without_message() -> None:
    err = WeatherAPIError.from_response({}, 502)
    assert err.message == "HTTP response code: 502"
    assert err.is_server_error is True


def test_authentication_error_defaults() -> None:
    err = AuthenticationError()
    assert isinstance(err, WeatherAPIError)
    assert err.code == 401
    assert "API key missing" in str(err)


def test_network_error_wraps_exception() -> None:
    try:
        raise ConnectionError("BOOM")
    except ConnectionError as e:
        err = NetworkError(message="Connection error", original_error=e)
        assert isinstance(err, NetworkError)
        assert str(err) == "[0] Connection error"
        assert isinstance(err.original_error, Exception)


def test_parse_error_wraps_exception() -> None:
    try:
        raise ValueError("bad parse")
    except ValueError as e:
        err = ParseError(message="Parse error", original_error=e)
        assert isinstance(err, ParseError)
        assert str(err) == "[0] Parse error"
        assert isinstance(err.original_error, Exception)
