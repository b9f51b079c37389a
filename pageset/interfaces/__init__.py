"""
Interfaces and value types for the pageset package.
"""

from .page import Page
from .page_set import PageSetInterface, RenderFunction
from .page_iterator import PageIteratorInterface

__all__ = [
    "Page",
    "PageSetInterface",
    "RenderFunction",
    "PageIteratorInterface",
]
