"""Tests for the CSV listing source."""

import pytest

from airbnb_cli.data_sources import CsvListingSource, ListingSourceError, load_listings, validate_row


class TestValidateRow:

    def test_all_required_fields_present(self):
        row = {"listing_id": "1", "date": "2024-01-01", "available": "t", "price": "$10"}
        assert validate_row(row)

    @pytest.mark.parametrize("missing", ["listing_id", "date", "available", "price"])
    def test_missing_field_rejected(self, missing):
        row = {"listing_id": "1", "date": "2024-01-01", "available": "t", "price": "$10"}
        del row[missing]
        assert not validate_row(row)

    def test_empty_value_rejected(self):
        row = {"listing_id": "1", "date": "", "available": "t", "price": "$10"}
        assert not validate_row(row)

    def test_none_value_rejected(self):
        row = {"listing_id": "1", "date": "2024-01-01", "available": None, "price": "$10"}
        assert not validate_row(row)


class TestLoadListings:

    def test_drops_row_missing_price(self, listings_csv):
        result = load_listings(listings_csv)

        assert [r["listing_id"] for r in result.records] == ["1", "2", "3"]
        assert result.discarded == 1
        assert len(result) == 3

    def test_keeps_extra_columns(self, listings_csv):
        result = load_listings(listings_csv)
        assert result.records[0]["minimum_nights"] == "2"

    def test_quoted_price_with_comma(self, listings_csv):
        result = load_listings(listings_csv)
        assert result.records[1]["price"] == "$1,200.50"

    def test_loading_twice_is_idempotent(self, listings_csv):
        assert load_listings(listings_csv) == load_listings(listings_csv)

    def test_trims_headers_and_values(self, tmp_path):
        path = tmp_path / "spaced.csv"
        path.write_text(
            " listing_id , date ,available, price \n"
            " 10 , 2024-01-01 , t ,  $99 \n",
            encoding="utf-8",
        )

        result = load_listings(path)

        assert result.records == [
            {"listing_id": "10", "date": "2024-01-01", "available": "t", "price": "$99"}
        ]

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text(
            "listing_id,date,available,price\n"
            "\n"
            "1,2024-01-01,t,$10\n"
            "\n"
            "2,2024-01-01,f,$20\n",
            encoding="utf-8",
        )

        result = load_listings(path)

        assert len(result.records) == 2
        assert result.discarded == 0

    def test_short_rows_dropped(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text(
            "listing_id,date,available,price\n"
            "1,2024-01-01\n"
            "2,2024-01-01,t,$20,surplus\n",
            encoding="utf-8",
        )

        result = load_listings(path)

        assert result.records == [
            {"listing_id": "2", "date": "2024-01-01", "available": "t", "price": "$20"}
        ]
        assert result.discarded == 1

    def test_utf8_bom_header(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufefflisting_id,date,available,price\n1,2024-01-01,t,$10\n".encode("utf-8"))

        result = load_listings(path)

        assert result.records[0]["listing_id"] == "1"

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "semicolon.csv"
        path.write_text(
            "listing_id;date;available;price\n"
            "1;2024-01-01;t;$1,500\n",
            encoding="utf-8",
        )

        result = CsvListingSource(delimiter=";").load(path)

        assert result.records[0]["price"] == "$1,500"

    def test_missing_file_raises_ioerror(self, tmp_path):
        with pytest.raises(IOError):
            load_listings(tmp_path / "nope.csv")

    def test_undecodable_file_raises_source_error(self, tmp_path):
        path = tmp_path / "binary.csv"
        path.write_bytes(b"listing_id,date,available,price\n\xff\xfe\xfa,x,y,z\n")

        with pytest.raises(ListingSourceError):
            load_listings(path)

    def test_source_error_is_ioerror(self):
        assert issubclass(ListingSourceError, IOError)

    def test_source_name(self):
        assert CsvListingSource().name == "CSV"
