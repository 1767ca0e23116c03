# extractors/navigation/fixture_links.py
"""
Match report links from a season fixtures page.
"""

import logging
from typing import List, Optional

from configurations import FBrefConfig
from exceptions import NavigationError

from ..document import Document
from .navigation_config import NavigationConfig
from .url_parser import URLParser

logger = logging.getLogger(__name__)


class FixtureLinkCollector:
    """
    Reads match report addresses out of a fixtures document.

    The "Match Report" column is used when present; otherwise score links,
    which point at the same reports on older fixture pages.
    """

    def __init__(self, fbref_config: Optional[FBrefConfig] = None):
        self.config = NavigationConfig.from_fbref_config(fbref_config or FBrefConfig())
        self.url_parser = URLParser(self.config)

    def collect(self, document: Document) -> List[str]:
        """
        Collect absolute match report URLs in document order.

        Args:
            document: Parsed fixtures page

        Returns:
            De-duplicated list of match report URLs (possibly empty)
        """
        links = document.select(self.config.MATCH_REPORT_SELECTOR)
        if not links:
            logger.debug("No match report column, falling back to score links")
            links = document.select(self.config.SCORE_LINK_SELECTOR)

        urls: List[str] = []
        seen = set()
        for link in links:
            href = link.get("href")
            if not href:
                continue
            url = self.url_parser.make_absolute_url(href)
            if not self.url_parser.is_match_report_url(url) or url in seen:
                continue
            seen.add(url)
            urls.append(url)

        logger.info("Found %d match report links", len(urls))
        return urls

    def require(self, document: Document) -> List[str]:
        """
        Like ``collect`` but fails when the page lists no reports.

        Raises:
            NavigationError: If no match report link was found
        """
        urls = self.collect(document)
        if not urls:
            raise NavigationError(
                "No match report links on "
                f"{self.url_parser.truncate_url_for_display(document.url)}"
            )
        return urls
