"""
Tabular reference datasets.

A dataset is a delimited table with a header row, loaded once into an
immutable structure. Columns are looked up by header name; a column the
file does not carry is reported as absent rather than failing, so callers
can work with partial schemas.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, NamedTuple, Optional, Tuple, Union

import pandas as pd

from ..exceptions import DatasetUnavailable

logger = logging.getLogger(__name__)

Row = Tuple[Optional[str], ...]


class Column(NamedTuple):
    """A named column, either present at a position or absent."""

    name: str
    position: Optional[int] = None

    @property
    def present(self) -> bool:
        return self.position is not None

    def get(self, row: Row) -> Optional[str]:
        """
        Read this column from a row.

        Returns:
            The raw cell value, or None if the column is absent or the row
            is too short to hold it
        """
        if self.position is None or self.position >= len(row):
            return None
        return row[self.position]


class Dataset:
    """
    Read-only view of a loaded reference table.

    When built with a ``key`` column, rows are also indexed by the
    upper-cased key value, preserving file order within each key.
    """

    def __init__(self, source: str, columns: Tuple[str, ...], rows: Tuple[Row, ...], key: Optional[str] = None):
        self.source = source
        self.columns = columns
        self.rows = rows
        self.key = key

        positions = {}
        for position, name in enumerate(columns):
            # first occurrence wins for repeated header names
            positions.setdefault(name, position)
        self._positions: Mapping[str, int] = MappingProxyType(positions)
        self._index: Mapping[str, Tuple[int, ...]] = MappingProxyType(self._build_index(key))

    def _build_index(self, key: Optional[str]) -> dict:
        if key is None:
            return {}
        column = self.column(key)
        if not column.present:
            logger.warning(f"Column '{key}' missing from {self.source}, no rows can be matched")
            return {}
        index = {}
        for number, row in enumerate(self.rows):
            value = column.get(row)
            if value is None:
                continue
            index.setdefault(value.upper(), []).append(number)
        return {value: tuple(numbers) for value, numbers in index.items()}

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> Column:
        """Look up a column by header name."""
        return Column(name, self._positions.get(name))

    def find(self, column_name: str, identifier: str) -> Iterator[Row]:
        """
        Iterate over the rows whose column equals the identifier, ignoring case.

        Uses the key index when the column is the dataset key, otherwise
        scans the whole table. Rows come back in file order.

        Args:
            column_name: Column to match on
            identifier: Value to match

        Returns:
            Iterator over matching rows
        """
        wanted = identifier.upper()
        if column_name == self.key:
            for number in self._index.get(wanted, ()):
                yield self.rows[number]
            return

        column = self.column(column_name)
        if not column.present:
            return
        for row in self.rows:
            value = column.get(row)
            if value is not None and value.upper() == wanted:
                yield row


def load_dataset(source: Union[str, Path], key: Optional[str] = None) -> Dataset:
    """
    Load a delimited reference table.

    Every cell is kept as the literal string found in the file. Rows with
    more fields than the header are dropped.

    Args:
        source: Path to the CSV file
        key: Optional column to index rows by

    Returns:
        The loaded Dataset

    Raises:
        DatasetUnavailable: If the file cannot be opened or has no header
    """
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            encoding='utf-8-sig',
            on_bad_lines='skip',
        )
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error(f"Cannot read dataset {source}: {e}")
        raise DatasetUnavailable() from e

    columns = tuple(str(name) for name in df.columns)
    rows = tuple(
        tuple(None if pd.isna(value) else value for value in row)
        for row in df.itertuples(index=False, name=None)
    )
    logger.info(f"Loaded {len(rows)} rows from {source}")
    return Dataset(str(source), columns, rows, key=key)
