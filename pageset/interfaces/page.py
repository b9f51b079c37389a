from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Page:
    """One contiguous slice of the item universe [0, length)."""

    index: int = 0       # zero-based page number
    count: int = 0       # items actually on this page
    begin: int = 0       # first item index (inclusive)
    end: int = 0         # last item index (inclusive), 0 when empty
    artifact: Any = ""   # rendered output, "" when nothing was rendered

    # ------------- helpers -------------
    def is_empty(self) -> bool:
        return self.count == 0

    def item_range(self) -> range:
        """Half-open range of the item indices on this page."""
        return range(self.begin, self.begin + self.count)
