"""Tests for WeatherProxy — allow-listed relay."""

from unittest.mock import MagicMock

import pytest
import requests

from station_lookup.exceptions import TransportError, UrlNotAllowed
from station_lookup.relay.proxy import WeatherProxy

METAR_URL = "https://aviationweather.gov/api/data/metar?ids=EGLL&format=raw"


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, content=b"", status_code=200, headers=None):
        self.content = content
        self.status_code = status_code
        self.headers = headers or {}


def make_session(content=b"", status_code=200, headers=None):
    """Create a mock session returning a fixed response."""
    session = MagicMock()
    session.headers = {}
    session.get.return_value = MockResponse(content, status_code, headers)
    return session


class TestAllowlist:

    def test_rejected_before_network(self):
        session = make_session()
        proxy = WeatherProxy(session=session)

        with pytest.raises(UrlNotAllowed):
            proxy.fetch("https://example.com/api/data/metar")
        session.get.assert_not_called()

    def test_prefix_must_match_from_start(self):
        proxy = WeatherProxy(session=make_session())
        assert not proxy.is_allowed("https://evil.example/?u=https://aviationweather.gov/api/data/metar")
        assert proxy.is_allowed("https://tgftp.nws.noaa.gov/data/observations/metar/stations/EGLL.TXT")

    def test_custom_prefixes(self):
        proxy = WeatherProxy(allowed_prefixes=["https://example.com/wx"], session=make_session())
        assert proxy.is_allowed("https://example.com/wx/metar")
        assert not proxy.is_allowed(METAR_URL)

    def test_prefixes_from_environment(self, monkeypatch):
        monkeypatch.setenv("PROXY_ALLOWED_PREFIXES", "https://a.example/, https://b.example/")
        proxy = WeatherProxy(session=make_session())
        assert proxy.allowed_prefixes == ["https://a.example/", "https://b.example/"]


class TestFetch:

    def test_passes_through_upstream_response(self):
        raw = b"METAR EGLL 211250Z 27010KT 9999 SCT030 15/08 Q1020"
        session = make_session(raw, 200, {"Content-Type": "text/plain"})
        proxy = WeatherProxy(session=session)

        response = proxy.fetch(METAR_URL)

        assert response.status_code == 200
        assert response.content_type == "text/plain"
        assert response.body == raw

    def test_upstream_error_status_passed_through(self):
        session = make_session(b"bad request", 400, {"Content-Type": "text/html"})
        response = WeatherProxy(session=session).fetch(METAR_URL)
        assert response.status_code == 400
        assert response.body == b"bad request"

    def test_default_content_type(self):
        response = WeatherProxy(session=make_session(b"x")).fetch(METAR_URL)
        assert response.content_type == "text/plain; charset=utf-8"

    def test_cache_buster_appended(self):
        session = make_session()
        WeatherProxy(session=session).fetch(METAR_URL)

        url = session.get.call_args[0][0]
        assert url.startswith(METAR_URL + "&_nocache=")
        headers = session.get.call_args[1]["headers"]
        assert headers["Cache-Control"] == "no-cache, no-store"

    def test_cache_buster_without_query(self):
        session = make_session()
        WeatherProxy(session=session).fetch("https://aviationweather.gov/api/data/taf")
        assert "/taf?_nocache=" in session.get.call_args[0][0]

    def test_network_failure(self):
        session = make_session()
        session.get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(TransportError):
            WeatherProxy(session=session).fetch(METAR_URL)
        assert session.get.call_count == 1
