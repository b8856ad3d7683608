# Sources of rental listing records

from .base import ListingSource, ListingSourceError
from .csv_source import CsvListingSource, load_listings, validate_row

__all__ = [
    'ListingSource',
    'ListingSourceError',
    'CsvListingSource',
    'load_listings',
    'validate_row',
]
