"""Relay to the Open-Meteo hourly forecast API."""

import logging
from typing import Optional

import requests

from station_lookup import config
from station_lookup.exceptions import TransportError
from station_lookup.relay.base import RelayResponse

logger = logging.getLogger(__name__)


class ForecastRelay:
    """
    Fetch an hourly point forecast on behalf of the client.

    The upstream status code and body are passed through verbatim, error
    payloads included. Wind speeds are requested in knots.
    """

    USER_AGENT = "StationLookup/1.0"
    CONTENT_TYPE = "application/json"

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: int = config.FORECAST_TIMEOUT,
    ):
        self.base_url = base_url or config.get_forecast_base_url()
        self._session = session or requests.Session()
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def fetch(self, lat: str, lon: str, variables: str) -> RelayResponse:
        """
        Fetch the forecast for one point.

        Args:
            lat: Latitude in decimal degrees.
            lon: Longitude in decimal degrees.
            variables: Comma separated list of hourly variables.

        Returns:
            RelayResponse with the upstream status and body.

        Raises:
            TransportError: If the upstream server cannot be reached.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": variables,
            "wind_speed_unit": "kn",
            "forecast_days": 1,
        }
        try:
            response = self._session.get(self.base_url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Forecast fetch failed for %s,%s: %s", lat, lon, e)
            raise TransportError("Proxy Connection Failed") from e

        if response.status_code >= 400:
            logger.info("Forecast upstream returned %s", response.status_code)
        return RelayResponse(
            status_code=response.status_code,
            content_type=self.CONTENT_TYPE,
            body=response.content,
        )
