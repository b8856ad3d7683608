"""
Price ranking for listing records.

Pure functions: no I/O and no shared state. Records are borrowed read-only and
a fresh list of RankedListing objects is built on every call.
"""

import math
from typing import Iterable, List, Optional

from .models import ListingRecord, RankedListing


def parse_price(raw: Optional[str]) -> Optional[float]:
    """
    Parse a price string such as "$1,234.50" into a float.

    Every "$" and "," is removed before parsing.

    Args:
        raw: Raw price text from the listings file

    Returns:
        The price as a float, or None if it is not a finite number
    """
    if raw is None:
        return None

    try:
        price = float(str(raw).replace("$", "").replace(",", ""))
    except ValueError:
        return None

    if not math.isfinite(price):
        return None
    return price


def rank_listings(records: Iterable[ListingRecord], count: int) -> List[RankedListing]:
    """
    Return the `count` highest-priced listings, most expensive first.

    Records whose price does not parse are dropped. Listings with equal prices
    keep their load order. If fewer than `count` valid records exist, all of
    them are returned.

    Args:
        records: Listing records to rank
        count: Maximum number of listings to return, must be positive

    Raises:
        ValueError: If count is not a positive integer
    """
    if count < 1:
        raise ValueError(f"count must be a positive integer, got {count}")

    ranked = []
    for record in records:
        price = parse_price(record.get("price"))
        if price is None:
            continue
        ranked.append(RankedListing(record=dict(record), price=price))

    # sorted() is stable with reverse=True, so ties stay in load order
    ranked = sorted(ranked, key=lambda listing: listing.price, reverse=True)
    return ranked[:count]
