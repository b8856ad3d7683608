import logging
from pathlib import Path
from typing import Optional, Dict, Any, Tuple, Union

from .data_sources import CsvListingSource, ListingSource
from .models import ListingRecord

logger = logging.getLogger(__name__)


class ListingCache:
    """In-memory holder of the listings file, loaded once per process"""

    def __init__(self, data_file: Union[str, Path], source: Optional[ListingSource] = None):
        """Initialize an empty cache for the given data file"""
        self.data_file = Path(data_file)
        self.source = source or CsvListingSource()
        self.load_error: Optional[Exception] = None
        self._records: Optional[Tuple[ListingRecord, ...]] = None
        self._discarded = 0

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    def preload(self):
        """
        Load all listing records from the data file

        The source is read at most once. If it cannot be read the error is
        logged and kept on `load_error`, and the cache holds no records.
        """
        if self.is_loaded:
            logger.info(f"Listings already loaded from {self.data_file}, skipping reload")
            return

        try:
            result = self.source.load(self.data_file)
            self._records = tuple(result.records)
            self._discarded = result.discarded
            logger.info(f"Cached {len(self._records)} listings from {self.data_file}")

        except OSError as e:
            logger.error(f"Failed to load listings from {self.data_file}: {str(e)}")
            self.load_error = e
            self._records = ()

    def get(self) -> Tuple[ListingRecord, ...]:
        """
        Get the cached listing records

        Never reads the data file. Returns an empty tuple before `preload`
        has finished.
        """
        if self._records is None:
            return ()
        return self._records

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        return {
            'data_file': str(self.data_file),
            'source': self.source.name,
            'loaded': self.is_loaded,
            'total_records': len(self.get()),
            'discarded_rows': self._discarded,
            'error': str(self.load_error) if self.load_error else None,
        }
