# extractors/navigation/url_parser.py
"""
URL parsing and manipulation utilities.
Handles absolute URL conversion and match report recognition.
"""

from urllib.parse import urljoin, urlparse

from .navigation_config import NavigationConfig


class URLParser:
    """
    Handles URL parsing and manipulation operations.
    """

    def __init__(self, config: NavigationConfig):
        """
        Initialize URL parser with configuration.

        Args:
            config: NavigationConfig instance with URL settings
        """
        self.config = config

    def make_absolute_url(self, url: str) -> str:
        """
        Convert relative URL to absolute URL.

        Args:
            url: URL to convert (can be relative or absolute)

        Returns:
            Absolute URL
        """
        return urljoin(f"{self.config.BASE_URL}/", url.strip())

    def is_match_report_url(self, url: str) -> bool:
        return self.config.MATCH_PATH_KEYWORD in urlparse(url).path

    def truncate_url_for_display(self, url: str) -> str:
        """
        Truncate URL for display purposes.

        Args:
            url: URL to truncate

        Returns:
            Truncated URL with ellipsis if needed
        """
        if len(url) > self.config.URL_DISPLAY_LIMIT:
            return f"{url[: self.config.URL_DISPLAY_LIMIT]}..."
        return url
