from typing import Iterator, Dict, Any

from .page import Page


class PageIteratorInterface:
    """Interface for walking the pages of a page set in order"""

    def __iter__(self) -> Iterator[Page]:
        """Return iterator over pages"""
        raise NotImplementedError("Subclasses must implement __iter__")

    def __next__(self) -> Page:
        """Get next page"""
        raise NotImplementedError("Subclasses must implement __next__")

    def get_progress(self) -> Dict[str, Any]:
        """Get progress information about the iteration"""
        raise NotImplementedError("Subclasses must implement get_progress")
