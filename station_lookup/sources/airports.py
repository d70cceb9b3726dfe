"""
Airport lookup in an OurAirports ``airports.csv`` dataset.
"""

import logging

from ..exceptions import MalformedRow, NotFound
from ..models.airport import Airport
from ..utils.conversions import is_blank, parse_numeric
from .dataset import Dataset, Row

logger = logging.getLogger(__name__)

IDENT = 'ident'
NAME = 'name'
LATITUDE = 'latitude_deg'
LONGITUDE = 'longitude_deg'
ELEVATION = 'elevation_ft'


def _airport_from_row(dataset: Dataset, row: Row) -> Airport:
    raw_lat = dataset.column(LATITUDE).get(row)
    raw_lon = dataset.column(LONGITUDE).get(row)
    lat = parse_numeric(raw_lat)
    lon = parse_numeric(raw_lon)
    if lat is None or lon is None:
        raise MalformedRow(f"invalid position ({raw_lat!r}, {raw_lon!r})")

    raw_elevation = dataset.column(ELEVATION).get(row)
    if is_blank(raw_elevation):
        elevation = 0
    else:
        parsed = parse_numeric(raw_elevation)
        if parsed is None:
            raise MalformedRow(f"invalid elevation {raw_elevation!r}")
        elevation = int(parsed)

    return Airport(
        icao=dataset.column(IDENT).get(row),
        name=dataset.column(NAME).get(row),
        lat=lat,
        lon=lon,
        elev_ft=elevation,
    )


def find_airport(identifier: str, dataset: Dataset) -> Airport:
    """
    Find the airport matching an identifier.

    The first matching row wins: the reference data is append-only and
    duplicate identifiers resolve to their first occurrence. Rows with an
    unusable position or elevation are skipped.

    Args:
        identifier: ICAO code, matched ignoring case
        dataset: Airports dataset

    Returns:
        Airport with no runways or frequencies attached

    Raises:
        NotFound: If no usable row matches the identifier
    """
    for row in dataset.find(IDENT, identifier):
        try:
            return _airport_from_row(dataset, row)
        except MalformedRow as e:
            logger.warning(f"Skipping airport row for {identifier} in {dataset.source}: {e}")

    logger.info(f"Airport {identifier} not found in {dataset.source}")
    raise NotFound()
