"""Tests for ForecastRelay — Open-Meteo pass-through."""

from unittest.mock import MagicMock

import pytest
import requests

from station_lookup.exceptions import TransportError
from station_lookup.relay.forecast import ForecastRelay


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code


def make_session(content=b"", status_code=200):
    session = MagicMock()
    session.headers = {}
    session.get.return_value = MockResponse(content, status_code)
    return session


def test_request_parameters():
    session = make_session(b'{"hourly": {}}')
    relay = ForecastRelay(base_url="https://api.example/v1/forecast", session=session)

    relay.fetch("51.47", "-0.46", "wind_speed_10m,wind_direction_10m")

    args, kwargs = session.get.call_args
    assert args[0] == "https://api.example/v1/forecast"
    assert kwargs["params"] == {
        "latitude": "51.47",
        "longitude": "-0.46",
        "hourly": "wind_speed_10m,wind_direction_10m",
        "wind_speed_unit": "kn",
        "forecast_days": 1,
    }


def test_success_passed_through():
    body = b'{"latitude": 51.5, "hourly": {"time": []}}'
    response = ForecastRelay(session=make_session(body)).fetch("51.47", "-0.46", "temperature_2m")

    assert response.status_code == 200
    assert response.body == body
    assert response.content_type == "application/json"


def test_upstream_error_passed_through():
    body = b'{"error": true, "reason": "Cannot initialize WeatherVariable"}'
    response = ForecastRelay(session=make_session(body, 400)).fetch("51.47", "-0.46", "bogus")

    assert response.status_code == 400
    assert response.body == body


def test_network_failure():
    session = make_session()
    session.get.side_effect = requests.Timeout("timed out")

    with pytest.raises(TransportError) as excinfo:
        ForecastRelay(session=session).fetch("51.47", "-0.46", "temperature_2m")
    assert excinfo.value.message == "Proxy Connection Failed"
