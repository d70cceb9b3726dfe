import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, Response

from station_lookup import config
from station_lookup.exceptions import ParamMissing, StationLookupError, TransportError
from station_lookup.relay.forecast import ForecastRelay
from station_lookup.relay.proxy import WeatherProxy

logger = logging.getLogger(__name__)

router = APIRouter()

# Global relay references
proxy: Optional[WeatherProxy] = None
forecast: Optional[ForecastRelay] = None


def set_proxy(p: WeatherProxy):
    """Set the global proxy reference."""
    global proxy
    proxy = p


def set_forecast(f: ForecastRelay):
    """Set the global forecast relay reference."""
    global forecast
    forecast = f


def _error(e: StationLookupError, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=e.status_code, content=e.to_dict(), headers=headers)


@router.get("/proxy")
def relay_url(url: Optional[str] = Query(None, description="Allow-listed URL to fetch", max_length=config.MAX_URL_LENGTH)):
    """Fetch an allow-listed weather URL on behalf of the browser."""
    if proxy is None:
        set_proxy(WeatherProxy())
    try:
        if not url or not url.strip():
            raise ParamMissing("Missing url parameter")
        upstream = proxy.fetch(url)
    except StationLookupError as e:
        return _error(e, headers=config.NO_CACHE_HEADERS)

    return Response(
        content=upstream.body,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
        headers=config.NO_CACHE_HEADERS,
    )


@router.get("/forecast")
def relay_forecast(
    lat: Optional[str] = Query(None, description="Latitude in decimal degrees"),
    lon: Optional[str] = Query(None, description="Longitude in decimal degrees"),
    vars: Optional[str] = Query(None, description="Comma separated hourly variables"),
):
    """Fetch an hourly forecast, passing the upstream answer through verbatim."""
    if forecast is None:
        set_forecast(ForecastRelay())
    if not lat or not lon or not vars:
        return _error(ParamMissing("Missing required parameters: lat, lon, or vars"))

    try:
        upstream = forecast.fetch(lat, lon, vars)
    except TransportError as e:
        return JSONResponse(
            status_code=500,
            content={"error": e.message, "details": str(e.__cause__)},
        )

    return Response(
        content=upstream.body,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )
