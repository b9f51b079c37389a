# File: pageset/ui/components.py

"""
Rich components for displaying page boundaries.
"""

import logging
from typing import Iterable, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..interfaces.page import Page
from ..utils.html_links import count_links

logger = logging.getLogger(__name__)


def format_range(page: Page) -> str:
    """
    Format the inclusive item range of a page.

    Args:
        page: Page to describe

    Returns:
        "begin-end", or "-" for an empty page
    """
    if page.is_empty():
        return "-"
    return f"{page.begin}-{page.end}"


def create_pages_table(pages: Iterable[Page], title: Optional[str] = None) -> Table:
    """
    Create a table with one row per page.

    Args:
        pages: Pages to list, in display order
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Page", justify="right")
    table.add_column("Begin", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Range", style="dim")
    table.add_column("Links", justify="right")

    rows = 0
    for page in pages:
        table.add_row(
            str(page.index),
            str(page.begin),
            str(page.end),
            str(page.count),
            format_range(page),
            str(count_links(page.artifact)) if isinstance(page.artifact, str) else "-",
        )
        rows += 1

    logger.debug(f"Created pages table with {rows} rows")
    return table


def create_page_panel(page: Page) -> Panel:
    """Create a panel describing a single page and its artifact."""
    details = Table(show_header=False, box=None, padding=(0, 1))
    details.add_column("Key", style="dim", width=10)
    details.add_column("Value", ratio=1)
    details.add_row("Begin:", str(page.begin))
    details.add_row("End:", str(page.end))
    details.add_row("Count:", str(page.count))
    details.add_row("Range:", format_range(page))
    artifact = page.artifact
    if isinstance(artifact, str) and not artifact:
        artifact = "(none)"
    details.add_row("Artifact:", Text(str(artifact), overflow="fold"))

    return Panel(details, title=f"Page {page.index}", border_style="blue")
