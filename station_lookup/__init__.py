"""
Airport station lookup.

Resolves an airport identifier against the OurAirports reference
datasets into one record with its runways and radio frequencies.
"""

from .exceptions import (
    DatasetUnavailable,
    MalformedRow,
    NotFound,
    ParamMissing,
    StationLookupError,
    TransportError,
    UrlNotAllowed,
)
from .models import Airport, Frequency, Geometry, Runway
from .resolver import StationResolver

__version__ = "0.1.0"

__all__ = [
    'StationResolver',
    'Airport',
    'Runway',
    'Geometry',
    'Frequency',
    'StationLookupError',
    'ParamMissing',
    'DatasetUnavailable',
    'NotFound',
    'MalformedRow',
    'UrlNotAllowed',
    'TransportError',
]
