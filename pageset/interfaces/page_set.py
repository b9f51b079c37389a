# pageset/interfaces/page_set.py

from typing import Any, Callable, Iterator

from .page import Page

# (begin, count) -> artifact
RenderFunction = Callable[[int, int], Any]


class PageSetInterface:
    """Interface for computing page boundaries over a collection of known size"""

    def page_count(self) -> int:
        """Number of pages needed to hold every item"""
        raise NotImplementedError("Subclasses must implement page_count")

    def lookup(self, index: int) -> Page:
        """
        Compute the page at a zero-based index.

        Args:
            index: Page number to resolve

        Returns:
            The Page covering that index

        Raises:
            OutOfBoundError: If index is not within [0, page_count())
        """
        raise NotImplementedError("Subclasses must implement lookup")

    def sequence(self) -> Iterator[Page]:
        """Return a fresh lazy iterator over every page, starting at index 0"""
        raise NotImplementedError("Subclasses must implement sequence")

    def total_length(self) -> int:
        """Total number of items being paginated"""
        raise NotImplementedError("Subclasses must implement total_length")

    def page_capacity(self) -> int:
        """Maximum number of items per page"""
        raise NotImplementedError("Subclasses must implement page_capacity")
