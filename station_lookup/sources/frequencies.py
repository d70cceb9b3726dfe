from typing import List, Optional

from ..models.frequency import Frequency
from .dataset import Dataset

AIRPORT_IDENT = 'airport_ident'
TYPE = 'type'
DESCRIPTION = 'description'
FREQUENCY = 'frequency_mhz'


def find_frequencies(identifier: str, dataset: Optional[Dataset]) -> List[Frequency]:
    """
    Find all radio frequencies of an airport, in file order.

    Args:
        identifier: ICAO code, matched ignoring case
        dataset: Frequencies dataset, or None when the file is not installed

    Returns:
        List of frequencies, empty when there are none or no dataset
    """
    if dataset is None:
        return []
    type_column = dataset.column(TYPE)
    desc_column = dataset.column(DESCRIPTION)
    mhz_column = dataset.column(FREQUENCY)
    return [
        Frequency(
            type=type_column.get(row),
            desc=desc_column.get(row),
            mhz=mhz_column.get(row),
        )
        for row in dataset.find(AIRPORT_IDENT, identifier)
    ]
