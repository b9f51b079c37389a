"""Page boundary computation over collections of known size."""

from pageset.core.page_set import PageSet
from pageset.core.page_iterator import PageIterator
from pageset.interfaces.page import Page
from pageset.interfaces.page_set import RenderFunction
from pageset.errors import PageSetError, OutOfBoundError, RenderError, ConfigError

__all__ = [
    "PageSet",
    "PageIterator",
    "Page",
    "RenderFunction",
    "PageSetError",
    "OutOfBoundError",
    "RenderError",
    "ConfigError",
]
