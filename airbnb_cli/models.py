from dataclasses import dataclass, field
from typing import Dict, List

# One validated row of the listings file, field name -> trimmed string value
ListingRecord = Dict[str, str]


@dataclass
class LoadResult:
    """Records kept by a listing source plus the number of rows it dropped"""
    records: List[ListingRecord] = field(default_factory=list)
    discarded: int = 0

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class RankedListing:
    """A listing record annotated with its parsed numeric price"""
    record: ListingRecord
    price: float

    @property
    def listing_id(self) -> str:
        return self.record.get("listing_id", "")

    def to_display_row(self) -> Dict[str, str]:
        """Convert the listing to display-ready strings, keeping the file's column order"""
        row = dict(self.record)
        row["price"] = f"{self.price:.2f}"
        return row
