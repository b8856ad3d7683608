"""Shared pytest fixtures for airbnb-cli."""

import pytest
from click.testing import CliRunner

from airbnb_cli.cache import ListingCache
from airbnb_cli.cli.context import AppContext
from airbnb_cli.data_sources import ListingSource
from airbnb_cli.models import LoadResult


SCENARIO_CSV = (
    "listing_id,date,available,price,minimum_nights\n"
    "1,2024-01-01,t,$300,2\n"
    '2,2024-01-01,f,"$1,200.50",3\n'
    "3,2024-01-02,t,$50,1\n"
    "4,2024-01-02,t,,2\n"
)


class FakeListingSource(ListingSource):
    """In-memory listing source that counts how often it is loaded."""

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = 0

    @property
    def name(self) -> str:
        return "Fake"

    def load(self, path) -> LoadResult:
        self.calls += 1
        if self.error:
            raise self.error
        return LoadResult(records=[dict(r) for r in self.records], discarded=0)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def listings_csv(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(SCENARIO_CSV, encoding="utf-8")
    return path


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "data" / ".airbnb_cli_history"


@pytest.fixture
def sample_records():
    return [
        {"listing_id": "a", "date": "2024-01-01", "available": "t", "price": "$120"},
        {"listing_id": "b", "date": "2024-01-01", "available": "f", "price": "$2,000"},
        {"listing_id": "c", "date": "2024-01-02", "available": "t", "price": "abc"},
        {"listing_id": "d", "date": "2024-01-02", "available": "t", "price": "$120.00"},
        {"listing_id": "e", "date": "2024-01-03", "available": "f", "price": "75.5"},
    ]


@pytest.fixture
def loaded_app(sample_records, history_file):
    """AppContext whose cache was preloaded from an in-memory source."""
    cache = ListingCache("unused.csv", source=FakeListingSource(sample_records))
    cache.preload()
    return AppContext(cache=cache, history_file=history_file)


@pytest.fixture
def fake_source():
    """Factory for FakeListingSource instances."""
    return FakeListingSource
