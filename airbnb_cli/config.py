"""
Static configuration for the Airbnb CLI.

Paths are relative to the working directory the CLI is started from.
"""

from pathlib import Path

APP_NAME = "airbnb-cli"
VERSION = "1.0.0"

DATA_FILE = Path("data") / "listings.csv"
CSV_DELIMITER = ","

# Every loaded record must carry a non-empty value for each of these
REQUIRED_FIELDS = ("listing_id", "date", "available", "price")

HISTORY_FILE = Path("data") / ".airbnb_cli_history"
HISTORY_SIZE = 50

DEFAULT_COUNT = 10
PROMPT = "> "
