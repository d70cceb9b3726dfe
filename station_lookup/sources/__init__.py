"""
Reference data sources for station resolution.

This package loads the OurAirports airports, runways and frequencies
tables and looks up the records of a single airport in each of them.
"""

from .dataset import Column, Dataset, load_dataset
from .cached import DatasetCache
from .airports import find_airport
from .runways import find_runways
from .frequencies import find_frequencies

__all__ = [
    'Column',
    'Dataset',
    'load_dataset',
    'DatasetCache',
    'find_airport',
    'find_runways',
    'find_frequencies',
]
