# File: pageset/utils/html_links.py

import logging
from typing import List

from bs4 import BeautifulSoup

from ..interfaces.page_set import RenderFunction

logger = logging.getLogger(__name__)

LINK_TEMPLATE = '<a href="{base_url}{index}"></a></br>'


def link_renderer(base_url: str) -> RenderFunction:
    """
    Build a render function that emits one anchor per item on a page.

    Args:
        base_url: Prefix placed before each item index in the href

    Returns:
        Function taking (begin, count) and returning the concatenated anchors
        for items begin..begin+count-1
    """
    def render(begin: int, count: int) -> str:
        return "".join(
            LINK_TEMPLATE.format(base_url=base_url, index=index)
            for index in range(begin, begin + count)
        )

    return render


def extract_link_targets(html_content: str) -> List[str]:
    """Return the href of every anchor in a rendered fragment, in document order."""
    if not html_content:
        return []
    soup = BeautifulSoup(html_content, 'html.parser')
    targets = [a.get('href', '') for a in soup.find_all('a')]
    logger.debug(f"Found {len(targets)} links in rendered fragment.")
    return targets


def count_links(html_content: str) -> int:
    """Number of anchors in a rendered fragment."""
    return len(extract_link_targets(html_content))
