"""
Pydantic models for API responses built from the station domain models.
"""

from typing import List, Optional, Union

from pydantic import BaseModel

from station_lookup.models.airport import Airport
from station_lookup.models.frequency import Frequency
from station_lookup.models.runway import Geometry, Runway


class GeometryResponse(BaseModel):
    """Threshold coordinates of a runway."""

    le_lat: float
    le_lon: Optional[float]
    he_lat: Optional[float]
    he_lon: Optional[float]

    @classmethod
    def from_geometry(cls, geometry: Geometry):
        return cls(
            le_lat=geometry.le_lat,
            le_lon=geometry.le_lon,
            he_lat=geometry.he_lat,
            he_lon=geometry.he_lon,
        )


class RunwayResponse(BaseModel):
    """Pydantic model for runway responses."""

    ident1: Optional[str]
    ident2: Optional[str]
    length_ft: int
    width_ft: int
    heading1: Union[int, float]
    heading2: Union[int, float]
    geometry: Optional[GeometryResponse]

    @classmethod
    def from_runway(cls, runway: Runway):
        """Create RunwayResponse from Runway domain model."""
        return cls(
            ident1=runway.ident1,
            ident2=runway.ident2,
            length_ft=runway.length_ft,
            width_ft=runway.width_ft,
            heading1=runway.heading1,
            heading2=runway.heading2,
            geometry=GeometryResponse.from_geometry(runway.geometry) if runway.geometry else None,
        )


class FrequencyResponse(BaseModel):
    """Pydantic model for frequency responses."""

    type: Optional[str]
    desc: Optional[str]
    mhz: Optional[str]

    @classmethod
    def from_frequency(cls, frequency: Frequency):
        return cls(type=frequency.type, desc=frequency.desc, mhz=frequency.mhz)


class StationResponse(BaseModel):
    """Pydantic model for a resolved station."""

    icao: str
    name: Optional[str]
    lat: Optional[float]
    lon: Optional[float]
    elev_ft: int
    elev_m: int
    runways: List[RunwayResponse]
    freqs: List[FrequencyResponse]

    @classmethod
    def from_airport(cls, airport: Airport):
        """Create StationResponse from Airport domain model."""
        return cls(
            icao=airport.icao,
            name=airport.name,
            lat=airport.lat,
            lon=airport.lon,
            elev_ft=airport.elev_ft,
            elev_m=airport.elev_m,
            runways=[RunwayResponse.from_runway(r) for r in airport.runways],
            freqs=[FrequencyResponse.from_frequency(f) for f in airport.freqs],
        )


class ErrorResponse(BaseModel):
    """Single error payload returned instead of a station."""

    error: str
