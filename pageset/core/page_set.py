import logging
from typing import Any, Optional

from ..interfaces.page import Page
from ..interfaces.page_set import PageSetInterface, RenderFunction
from ..errors import ConfigError, OutOfBoundError, RenderError
from .page_iterator import PageIterator

logger = logging.getLogger(__name__)


def _require_count(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ConfigError(f"{name} must be non-negative, got {value}")
    return value


class PageSet(PageSetInterface):
    """
    Pagination engine over a fixed total length and page capacity.

    The PageSet never sees the collection itself, only its size. Pages are
    computed on demand and use an inclusive ``end`` index, so a page holding
    items 0..4 reports ``begin=0, end=4, count=5``.

    A capacity of 0 is accepted and simply yields no pages.
    """

    def __init__(self, length: int, capacity: int, render: Optional[RenderFunction] = None):
        self._length = _require_count("length", length)
        self._capacity = _require_count("capacity", capacity)
        if render is not None and not callable(render):
            raise ConfigError(f"render must be callable, got {type(render).__name__}")
        self._render = render
        logger.debug(f"PageSet initialized: length={length}, capacity={capacity}, "
                     f"render={'yes' if render else 'no'}")

    def total_length(self) -> int:
        return self._length

    def page_capacity(self) -> int:
        return self._capacity

    def has_render(self) -> bool:
        return self._render is not None

    def page_count(self) -> int:
        """Number of pages, 0 for an empty collection or a zero capacity."""
        if self._capacity == 0:
            return 0
        return (self._length + self._capacity - 1) // self._capacity

    def lookup(self, index: int) -> Page:
        """
        Compute the boundaries of the page at ``index``.

        Args:
            index: Zero-based page number

        Returns:
            Page with inclusive begin/end, item count and rendered artifact

        Raises:
            OutOfBoundError: If index is not within [0, page_count())
            RenderError: If the render function fails for this page
        """
        page_count = self.page_count()
        if index < 0 or index >= page_count:
            logger.debug(f"Lookup of page {index} rejected, page_count={page_count}")
            raise OutOfBoundError(index, page_count)

        begin = min(index * self._capacity, self._length)
        raw_end = min(begin + self._capacity, self._length)
        count = raw_end - begin

        if count == 0:
            begin = 0
            end = 0
        else:
            end = raw_end - 1

        artifact = ""
        if self._render is not None and count > 0:
            artifact = self._render_page(begin, count)

        return Page(index=index, count=count, begin=begin, end=end, artifact=artifact)

    def _render_page(self, begin: int, count: int) -> Any:
        try:
            return self._render(begin, count)
        except Exception as e:
            logger.error(f"Render function failed for begin={begin}, count={count}: {e}")
            raise RenderError(begin, count, str(e)) from e

    def sequence(self) -> PageIterator:
        """Return a fresh iterator over every page, starting at index 0."""
        return PageIterator(self)

    def __iter__(self) -> PageIterator:
        return self.sequence()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageSet):
            return NotImplemented
        return (self._length, self._capacity, self._render) == (
            other._length, other._capacity, other._render)

    def __hash__(self) -> int:
        return hash((self._length, self._capacity, self._render))

    def __repr__(self) -> str:
        return (f"PageSet(length={self._length}, capacity={self._capacity}, "
                f"pages={self.page_count()})")
