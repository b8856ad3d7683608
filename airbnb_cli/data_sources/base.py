from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..models import LoadResult


class ListingSourceError(IOError):
    """Raised when a listings file can be opened but not parsed as a whole"""


class ListingSource(ABC):
    """Abstract base class for rental listing record sources"""

    @abstractmethod
    def load(self, path: Union[str, Path]) -> LoadResult:
        """
        Load and validate listing records from the given path

        Args:
            path: Location of the listings data

        Returns:
            LoadResult with the valid records and the number of dropped rows

        Raises:
            IOError: If the path cannot be read or its contents cannot be parsed
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the listing source"""
        pass
