from dataclasses import dataclass
from typing import Optional, Union

DEFAULT_WIDTH_FT = 100

Heading = Union[int, float]


@dataclass(frozen=True)
class Geometry:
    """Coordinates of both runway thresholds."""

    le_lat: float
    le_lon: Optional[float] = None
    he_lat: Optional[float] = None
    he_lon: Optional[float] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'le_lat': self.le_lat,
            'le_lon': self.le_lon,
            'he_lat': self.he_lat,
            'he_lon': self.he_lon,
        }


@dataclass(frozen=True)
class Runway:
    """Data class for storing runway information."""

    # Low end (LE) and high end (HE) designators
    ident1: Optional[str]
    ident2: Optional[str]
    length_ft: int = 0
    width_ft: int = DEFAULT_WIDTH_FT

    # Degrees true, explicit or derived from the designators
    heading1: Heading = 0
    heading2: Heading = 0

    geometry: Optional[Geometry] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'ident1': self.ident1,
            'ident2': self.ident2,
            'length_ft': self.length_ft,
            'width_ft': self.width_ft,
            'heading1': self.heading1,
            'heading2': self.heading2,
            'geometry': self.geometry.to_dict() if self.geometry else None,
        }
