"""Airbnb CLI - rank rental listings from a CSV file by price."""

from .config import VERSION

__version__ = VERSION
