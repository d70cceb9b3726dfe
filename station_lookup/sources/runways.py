"""
Runway lookup in an OurAirports ``runways.csv`` dataset.

Headings missing from the file are derived from the runway designators,
and threshold coordinates are attached when the low end latitude is known.
"""

import logging
from typing import List, Optional

from ..exceptions import MalformedRow
from ..models.runway import DEFAULT_WIDTH_FT, Geometry, Heading, Runway
from ..utils.conversions import heading_from_ident, is_blank, parse_numeric
from .dataset import Dataset, Row

logger = logging.getLogger(__name__)

AIRPORT_IDENT = 'airport_ident'
LENGTH = 'length_ft'
WIDTH = 'width_ft'
LE_IDENT = 'le_ident'
HE_IDENT = 'he_ident'
LE_HEADING = 'le_heading_degT'
HE_HEADING = 'he_heading_degT'
LE_LATITUDE = 'le_latitude_deg'
LE_LONGITUDE = 'le_longitude_deg'
HE_LATITUDE = 'he_latitude_deg'
HE_LONGITUDE = 'he_longitude_deg'


def _dimension(dataset: Dataset, row: Row, name: str, default: int) -> int:
    # default only when the value is missing, an empty cell reads as 0
    raw = dataset.column(name).get(row)
    if raw is None:
        return default
    if is_blank(raw):
        return 0
    value = parse_numeric(raw)
    if value is None:
        raise MalformedRow(f"invalid {name} {raw!r}")
    return int(value)


def _heading(raw: Optional[str], ident: Optional[str]) -> Heading:
    heading = parse_numeric(raw)
    if heading is None:
        return heading_from_ident(ident)
    return heading


def _geometry(dataset: Dataset, row: Row) -> Optional[Geometry]:
    le_lat = parse_numeric(dataset.column(LE_LATITUDE).get(row))
    if le_lat is None:
        return None
    return Geometry(
        le_lat=le_lat,
        le_lon=parse_numeric(dataset.column(LE_LONGITUDE).get(row)),
        he_lat=parse_numeric(dataset.column(HE_LATITUDE).get(row)),
        he_lon=parse_numeric(dataset.column(HE_LONGITUDE).get(row)),
    )


def runway_from_row(dataset: Dataset, row: Row) -> Runway:
    """
    Build a runway from a dataset row.

    Raises:
        MalformedRow: If the length or width is present but not numeric
    """
    le_ident = dataset.column(LE_IDENT).get(row)
    he_ident = dataset.column(HE_IDENT).get(row)
    return Runway(
        ident1=le_ident,
        ident2=he_ident,
        length_ft=_dimension(dataset, row, LENGTH, 0),
        width_ft=_dimension(dataset, row, WIDTH, DEFAULT_WIDTH_FT),
        heading1=_heading(dataset.column(LE_HEADING).get(row), le_ident),
        heading2=_heading(dataset.column(HE_HEADING).get(row), he_ident),
        geometry=_geometry(dataset, row),
    )


def find_runways(identifier: str, dataset: Dataset) -> List[Runway]:
    """
    Find all runways of an airport, in file order.

    Args:
        identifier: ICAO code, matched ignoring case
        dataset: Runways dataset

    Returns:
        List of runways, empty if the airport has none
    """
    runways = []
    for row in dataset.find(AIRPORT_IDENT, identifier):
        try:
            runways.append(runway_from_row(dataset, row))
        except MalformedRow as e:
            logger.warning(f"Skipping runway row for {identifier} in {dataset.source}: {e}")
    return runways
