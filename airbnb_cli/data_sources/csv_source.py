import csv
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from .base import ListingSource, ListingSourceError
from ..config import CSV_DELIMITER, REQUIRED_FIELDS
from ..models import ListingRecord, LoadResult

logger = logging.getLogger(__name__)


def validate_row(row: Dict[str, Optional[str]], required_fields: Sequence[str] = REQUIRED_FIELDS) -> bool:
    """Check that every required field is present and non-empty"""
    return all(row.get(name) for name in required_fields)


def _clean_row(row: Dict[Optional[str], Optional[str]]) -> ListingRecord:
    """Trim header names and values, dropping cells that have no header"""
    cleaned = {}
    for key, value in row.items():
        # DictReader files surplus cells under a None key
        if key is None:
            continue
        cleaned[key.strip()] = value.strip() if isinstance(value, str) else value
    return cleaned


class CsvListingSource(ListingSource):
    """Listing source backed by a delimited text file with a header row"""

    def __init__(self, delimiter: str = CSV_DELIMITER, required_fields: Sequence[str] = REQUIRED_FIELDS):
        self.delimiter = delimiter
        self.required_fields = tuple(required_fields)

    @property
    def name(self) -> str:
        return "CSV"

    def load(self, path: Union[str, Path]) -> LoadResult:
        """
        Read every row of the file, keeping only rows with all required fields

        Args:
            path: Path to the delimited file

        Returns:
            LoadResult with the kept records in file order and the dropped row count

        Raises:
            OSError: If the file cannot be opened or read
            ListingSourceError: If the file is not valid delimited text
        """
        result = LoadResult()

        try:
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                reader = csv.DictReader(f, delimiter=self.delimiter)

                for row in reader:
                    record = _clean_row(row)
                    if validate_row(record, self.required_fields):
                        result.records.append(record)
                    else:
                        result.discarded += 1
        except csv.Error as e:
            raise ListingSourceError(f"CSV parsing error in {path}: {str(e)}") from e
        except UnicodeDecodeError as e:
            raise ListingSourceError(f"Cannot decode {path}: {str(e)}") from e

        logger.info(f"Loaded {len(result.records)} listings from {path} ({result.discarded} rows dropped)")
        return result


def load_listings(path: Union[str, Path], delimiter: str = CSV_DELIMITER) -> LoadResult:
    """Load listing records from a delimited file using the default required fields"""
    return CsvListingSource(delimiter=delimiter).load(path)
