from dataclasses import dataclass, field, replace
from typing import List, Optional

from station_lookup.models.runway import Runway
from station_lookup.models.frequency import Frequency
from station_lookup.utils.conversions import feet_to_meters


@dataclass(frozen=True)
class Airport:
    """
    Data class for a resolved station.

    Runways and frequencies are joined on the identifier; they are empty
    until the airport has been assembled with ``with_details``.
    """

    icao: str  # ICAO code as written in the reference file
    name: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    elev_ft: int = 0

    # Relationships
    runways: List[Runway] = field(default_factory=list)
    freqs: List[Frequency] = field(default_factory=list)

    @property
    def elev_m(self) -> int:
        """Elevation in meters, always derived from the elevation in feet."""
        return feet_to_meters(self.elev_ft)

    def with_details(self, runways: List[Runway], freqs: List[Frequency]) -> 'Airport':
        """Return a copy of this airport with runways and frequencies attached."""
        return replace(self, runways=list(runways), freqs=list(freqs))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'icao': self.icao,
            'name': self.name,
            'lat': self.lat,
            'lon': self.lon,
            'elev_ft': self.elev_ft,
            'elev_m': self.elev_m,
            'runways': [runway.to_dict() for runway in self.runways],
            'freqs': [freq.to_dict() for freq in self.freqs],
        }
