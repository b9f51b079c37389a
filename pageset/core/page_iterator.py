import logging
from typing import Any, Dict, TYPE_CHECKING

from ..interfaces.page import Page
from ..interfaces.page_iterator import PageIteratorInterface
from ..errors import OutOfBoundError

if TYPE_CHECKING:
    from .page_set import PageSet

logger = logging.getLogger(__name__)


class PageIterator(PageIteratorInterface):
    """Forward-only cursor over the pages of a PageSet"""

    def __init__(self, page_set: "PageSet"):
        self.page_set = page_set
        self.current_index = 0
        self.total_pages = page_set.page_count()
        logger.debug(f"PageIterator initialized with {self.total_pages} pages")

    def __iter__(self) -> "PageIterator":
        """Return self as iterator"""
        return self

    def __next__(self) -> Page:
        """Get the page at the cursor and advance"""
        try:
            page = self.page_set.lookup(self.current_index)
        except OutOfBoundError:
            logger.debug(f"PageIterator exhausted at index {self.current_index}")
            raise StopIteration()
        self.current_index += 1
        return page

    def get_progress(self) -> Dict[str, Any]:
        """Get progress information"""
        yielded = min(self.current_index, self.total_pages)
        return {
            "total": self.total_pages,
            "yielded": yielded,
            "remaining": self.total_pages - yielded,
        }
