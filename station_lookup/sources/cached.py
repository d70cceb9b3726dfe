import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ..exceptions import DatasetUnavailable
from .dataset import Dataset, load_dataset

logger = logging.getLogger(__name__)


class DatasetCache:
    """
    Process-wide cache of loaded datasets.

    A dataset is loaded once and shared by every reader until the file's
    modification time changes, at which point the next reader reloads it.
    Loading is serialised by a lock; readers of an up-to-date entry never
    take the lock. Cached datasets are immutable.
    """

    def __init__(self):
        self._entries: Dict[Tuple[Path, Optional[str]], Tuple[int, Dataset]] = {}
        self._lock = threading.Lock()

    def _modification_time(self, path: Path) -> int:
        try:
            return path.stat().st_mtime_ns
        except OSError as e:
            logger.error(f"Dataset {path} is not available: {e}")
            raise DatasetUnavailable() from e

    def get(self, source: Union[str, Path], key: Optional[str] = None) -> Dataset:
        """
        Get a dataset from cache or load it if missing or stale.

        Args:
            source: Path to the CSV file
            key: Optional column to index rows by

        Returns:
            The loaded Dataset

        Raises:
            DatasetUnavailable: If the file does not exist or cannot be read
        """
        path = Path(source)
        cache_key = (path, key)
        mtime = self._modification_time(path)

        entry = self._entries.get(cache_key)
        if entry is not None and entry[0] == mtime:
            return entry[1]

        with self._lock:
            entry = self._entries.get(cache_key)
            if entry is not None and entry[0] == mtime:
                return entry[1]
            reason = "missing" if entry is None else "modified"
            dataset = load_dataset(path, key=key)
            self._entries[cache_key] = (mtime, dataset)
            logger.info(f"{path.name} [{reason}] loaded into cache")
            return dataset

    def clear(self) -> None:
        """Drop every cached dataset."""
        with self._lock:
            self._entries = {}
