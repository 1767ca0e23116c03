from .extractor import (
    ConfigurationError,
    DocumentUnavailableError,
    MatchScrapingError,
    NavigationError,
)
from .parsers import InsufficientDataError, ParsingError, TableNotFoundError

__all__ = [
    "MatchScrapingError",
    "DocumentUnavailableError",
    "NavigationError",
    "ConfigurationError",
    "ParsingError",
    "TableNotFoundError",
    "InsufficientDataError",
]
