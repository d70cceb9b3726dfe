"""
Configuration for the station lookup service.

Values come from the environment. Accessors are functions so the
environment is read when the application starts, not when this module is
imported.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

# Reference data
DEFAULT_AIRPORTS_FILE = "airports.csv"
DEFAULT_RUNWAYS_FILE = "runways.csv"
DEFAULT_FREQUENCIES_FILE = "frequencies.csv"

OURAIRPORTS_BASE_URL = "https://davidmegginson.github.io/ourairports-data"

# Relay allowlist: only these base URLs may be fetched
DEFAULT_PROXY_ALLOWED_PREFIXES = [
    "https://aviationweather.gov/api/data/metar",
    "https://aviationweather.gov/api/data/taf",
    "https://tgftp.nws.noaa.gov/data/observations/metar/",
]

DEFAULT_FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"

PROXY_TIMEOUT = 12  # seconds
FORECAST_TIMEOUT = 30  # seconds

# Input validation limits
MAX_ICAO_LENGTH = 8
MAX_URL_LENGTH = 2048

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Kill any caching at the browser, proxy, and CDN level
NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _get_list(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


def get_data_dir() -> Path:
    """Directory holding the reference CSV files."""
    return Path(os.getenv("STATION_DATA_DIR", "."))


def get_airports_file(data_dir: Optional[Path] = None) -> Path:
    """Path of the airports file, in the configured data directory unless one is given."""
    return (data_dir or get_data_dir()) / os.getenv("STATION_AIRPORTS_FILE", DEFAULT_AIRPORTS_FILE)


def get_runways_file(data_dir: Optional[Path] = None) -> Path:
    return (data_dir or get_data_dir()) / os.getenv("STATION_RUNWAYS_FILE", DEFAULT_RUNWAYS_FILE)


def get_frequencies_file(data_dir: Optional[Path] = None) -> Path:
    return (data_dir or get_data_dir()) / os.getenv("STATION_FREQUENCIES_FILE", DEFAULT_FREQUENCIES_FILE)


def get_allowed_origins() -> List[str]:
    """CORS origins; the service is public by default."""
    return _get_list("ALLOWED_ORIGINS", ["*"])


def get_proxy_allowed_prefixes() -> List[str]:
    return _get_list("PROXY_ALLOWED_PREFIXES", DEFAULT_PROXY_ALLOWED_PREFIXES)


def get_forecast_base_url() -> str:
    return os.getenv("FORECAST_BASE_URL", DEFAULT_FORECAST_BASE_URL)


def get_log_level() -> int:
    """Logging level from LOG_LEVEL, INFO when the name is not a known level."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
