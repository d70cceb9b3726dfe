"""
Station resolution.

Joins the airport, runway and frequency reference datasets into one
consolidated station record.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from . import config
from .exceptions import ParamMissing
from .models.airport import Airport
from .sources.airports import IDENT, find_airport
from .sources.cached import DatasetCache
from .sources.dataset import Dataset
from .sources.frequencies import find_frequencies
from .sources.runways import AIRPORT_IDENT, find_runways

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class StationResolver:
    """
    Resolve an airport identifier into a complete station.

    The airport dataset gates the lookup; runways and frequencies are then
    resolved concurrently and attached to the airport. Either a complete
    station is returned or a single error is raised.

    Example:
        resolver = StationResolver.from_config()
        station = resolver.resolve("kjfk")
        print(station.to_dict())
    """

    def __init__(
        self,
        airports_file: PathLike,
        runways_file: PathLike,
        frequencies_file: Optional[PathLike] = None,
        cache: Optional[DatasetCache] = None,
        max_workers: int = 4,
    ):
        """
        Args:
            airports_file: Path to airports.csv
            runways_file: Path to runways.csv
            frequencies_file: Optional path to frequencies.csv
            cache: Dataset cache, shared between resolvers if given
            max_workers: Size of the thread pool used for the joins
        """
        self.airports_file = Path(airports_file)
        self.runways_file = Path(runways_file)
        self.frequencies_file = Path(frequencies_file) if frequencies_file else None
        self.cache = cache or DatasetCache()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="station")

    @classmethod
    def from_config(cls, cache: Optional[DatasetCache] = None) -> 'StationResolver':
        """Create a resolver for the files named by the environment."""
        return cls(
            config.get_airports_file(),
            config.get_runways_file(),
            config.get_frequencies_file(),
            cache=cache,
        )

    def _frequencies_dataset(self) -> Optional[Dataset]:
        if self.frequencies_file is None or not self.frequencies_file.exists():
            logger.debug("No frequencies dataset installed")
            return None
        return self.cache.get(self.frequencies_file, key=AIRPORT_IDENT)

    def resolve(self, identifier: Optional[str]) -> Airport:
        """
        Resolve an identifier into a station.

        Args:
            identifier: ICAO code, any case, surrounding whitespace ignored

        Returns:
            Airport with its runways and frequencies

        Raises:
            ParamMissing: If no identifier is given
            DatasetUnavailable: If the airport or runway dataset cannot be read
            NotFound: If the identifier is not in the airport dataset
        """
        icao = (identifier or "").strip().upper()
        if not icao:
            raise ParamMissing()

        airports = self.cache.get(self.airports_file, key=IDENT)
        runways = self.cache.get(self.runways_file, key=AIRPORT_IDENT)
        frequencies = self._frequencies_dataset()

        airport = find_airport(icao, airports)

        runways_future = self._executor.submit(find_runways, icao, runways)
        frequencies_future = self._executor.submit(find_frequencies, icao, frequencies)
        station = airport.with_details(runways_future.result(), frequencies_future.result())

        logger.debug(f"Resolved {icao}: {len(station.runways)} runways, {len(station.freqs)} frequencies")
        return station

    def close(self) -> None:
        """Shut down the worker threads."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> 'StationResolver':
        return self

    def __exit__(self, *exc) -> None:
        self.close()
