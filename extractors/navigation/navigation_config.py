# extractors/navigation/navigation_config.py
"""
Configuration settings for fixture list navigation.
Centralizes all navigation-related constants and settings.
"""

from dataclasses import dataclass

from configurations import FBrefConfig


@dataclass
class NavigationConfig:
    """
    Configuration class for navigation operations.

    Contains the selectors and URL settings used to turn a fixtures page
    into a list of match report addresses.
    """

    # URL display limits
    URL_DISPLAY_LIMIT: int = 80

    # Fixture table selectors
    MATCH_REPORT_SELECTOR: str = 'td[data-stat="match_report"] a'
    SCORE_LINK_SELECTOR: str = 'td[data-stat="score"] a'

    # Only links under this path are match reports
    MATCH_PATH_KEYWORD: str = "/matches/"

    BASE_URL: str = "https://fbref.com"

    @classmethod
    def from_fbref_config(cls, fbref_config: FBrefConfig) -> "NavigationConfig":
        """
        Create configuration from the site settings.

        Args:
            fbref_config: FBrefConfig instance

        Returns:
            NavigationConfig instance with values from the site settings
        """
        config = cls()
        config.BASE_URL = fbref_config.base_url.rstrip("/")
        config.MATCH_PATH_KEYWORD = fbref_config.match_path_keyword
        return config
