"""Allow-listed relay for aviation weather text products (METAR, TAF)."""

import logging
import time
from typing import List, Optional

import requests

from station_lookup import config
from station_lookup.exceptions import TransportError, UrlNotAllowed
from station_lookup.relay.base import DEFAULT_CONTENT_TYPE, RelayResponse

logger = logging.getLogger(__name__)


class WeatherProxy:
    """
    Fetch allow-listed URLs server to server.

    Only URLs starting with one of the allowed prefixes are fetched; any
    other URL is rejected before a connection is attempted. Responses are
    never cached: a cache-busting parameter is appended so upstream edge
    caches are bypassed as well.

    Example:
        proxy = WeatherProxy()
        response = proxy.fetch("https://aviationweather.gov/api/data/metar?ids=EGLL")
        print(response.status_code, response.body)
    """

    USER_AGENT = "Mozilla/5.0 (compatible; StationLookupProxy/1.0)"
    REQUEST_HEADERS = {
        "Accept": "application/json, text/plain, */*",
        "Cache-Control": "no-cache, no-store",
        "Pragma": "no-cache",
    }

    def __init__(
        self,
        allowed_prefixes: Optional[List[str]] = None,
        session: Optional[requests.Session] = None,
        timeout: int = config.PROXY_TIMEOUT,
    ):
        """
        Args:
            allowed_prefixes: URL prefixes that may be fetched.
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
        """
        if allowed_prefixes is None:
            allowed_prefixes = config.get_proxy_allowed_prefixes()
        self.allowed_prefixes = list(allowed_prefixes)
        self._session = session or requests.Session()
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def is_allowed(self, url: str) -> bool:
        return any(url.startswith(prefix) for prefix in self.allowed_prefixes)

    @staticmethod
    def _cache_busted(url: str) -> str:
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}_nocache={int(time.time())}"

    def fetch(self, url: str) -> RelayResponse:
        """
        Fetch an allow-listed URL.

        Args:
            url: Absolute URL to fetch.

        Returns:
            RelayResponse with the upstream status, content type and body.

        Raises:
            UrlNotAllowed: If the URL does not match an allowed prefix.
            TransportError: If the upstream server cannot be reached.
        """
        url = url.strip()
        if not self.is_allowed(url):
            logger.warning("Rejected relay request for %s", url)
            raise UrlNotAllowed()

        try:
            response = self._session.get(
                self._cache_busted(url),
                headers=self.REQUEST_HEADERS,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("Relay fetch failed for %s: %s", url, e)
            raise TransportError() from e

        return RelayResponse(
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type", DEFAULT_CONTENT_TYPE),
            body=response.content,
        )
