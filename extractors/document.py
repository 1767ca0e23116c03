# extractors/document.py
"""
Parsed match report page handed to every extractor.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

# FBref ships most secondary tables inside HTML comments; a match never
# crosses the end of its own comment
COMMENTED_BLOCK_PATTERN = re.compile(
    r"<!--\s*(<(?:table|div|section)[^>]*>(?:(?!-->).)*?"
    r"</(?:table|div|section)>)\s*-->",
    re.DOTALL,
)


def uncomment_html(html: str) -> str:
    """Replace commented-out tables and panels with their markup."""
    return COMMENTED_BLOCK_PATTERN.sub(r"\1", html)


@dataclass(frozen=True)
class Document:
    """
    A rendered match report. Extractors only read from ``soup``.
    """

    url: str
    soup: BeautifulSoup

    @classmethod
    def from_html(
        cls, html: str, url: str = "", unwrap_comments: bool = True
    ) -> "Document":
        """
        Parse raw page source into a document.

        Args:
            html: Page source
            url: Address the page was loaded from
            unwrap_comments: Expose tables hidden in HTML comments

        Returns:
            Parsed document
        """
        if unwrap_comments:
            html = uncomment_html(html)
        return cls(url=url, soup=BeautifulSoup(html, "html.parser"))

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    @property
    def body_text(self) -> str:
        body = self.soup.body or self.soup
        return body.get_text(" ", strip=True)
