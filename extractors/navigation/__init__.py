from .fixture_links import FixtureLinkCollector
from .navigation_config import NavigationConfig
from .url_parser import URLParser

__all__ = [
    "NavigationConfig",
    "URLParser",
    "FixtureLinkCollector",
]
