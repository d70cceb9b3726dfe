import logging
from typing import Optional

from fastapi import APIRouter, Query

from station_lookup import config
from station_lookup.resolver import StationResolver
from .models import ErrorResponse, StationResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Global resolver reference
resolver: Optional[StationResolver] = None


def set_resolver(r: StationResolver):
    """Set the global resolver reference."""
    global resolver
    resolver = r


@router.get(
    "",
    response_model=StationResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def get_station(
    icao: Optional[str] = Query(None, description="ICAO airport code", max_length=config.MAX_ICAO_LENGTH),
):
    """Get an airport with its runways and radio frequencies."""
    if resolver is None:
        set_resolver(StationResolver.from_config())
    station = resolver.resolve(icao)
    return StationResponse.from_airport(station)
