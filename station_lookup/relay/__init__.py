"""Outbound relays for browser clients that cannot call upstream APIs directly."""

from station_lookup.relay.base import RelayResponse
from station_lookup.relay.proxy import WeatherProxy
from station_lookup.relay.forecast import ForecastRelay

__all__ = ['RelayResponse', 'WeatherProxy', 'ForecastRelay']
