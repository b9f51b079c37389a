# pageset/errors.py

class PageSetError(Exception):
    """Base class for all pagination errors."""
    pass


class OutOfBoundError(PageSetError, IndexError):
    """A page index outside [0, page_count) was requested."""

    def __init__(self, index: int, page_count: int):
        self.index = index
        self.page_count = page_count
        if page_count:
            message = f"Page {index} out of bounds. Available pages: 0-{page_count - 1}"
        else:
            message = f"Page {index} out of bounds. No pages available"
        super().__init__(message)


class RenderError(PageSetError):
    """Error raised by a render function while materializing a page."""

    def __init__(self, begin: int, count: int, message: str):
        self.begin = begin
        self.count = count
        super().__init__(f"Render failed for items {begin}+{count}: {message}")


class ConfigError(PageSetError):
    """Error related to configuration."""
    pass
