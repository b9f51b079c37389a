# pageset/core/__init__.py
from .page_iterator import PageIterator
from .page_set import PageSet

__all__ = [
    "PageIterator",
    "PageSet",
]
