# exceptions/extractor.py
"""
Exceptions for match scraping outside the parsing layer.
"""


class MatchScrapingError(Exception):
    """
    Base exception for match scraping errors
    """

    pass


class DocumentUnavailableError(MatchScrapingError):
    """
    Raised when a match report document cannot be produced at all
    """

    def __init__(self, url: str, original_error: Exception = None):
        message = f"Could not retrieve match report: {url}"
        if original_error:
            message = f"{message} ({original_error})"
        super().__init__(message)
        self.url = url
        self.original_error = original_error


class NavigationError(MatchScrapingError):
    """
    Raised when fixture list navigation fails
    """

    pass


class ConfigurationError(MatchScrapingError):
    """
    Raised when configuration is invalid
    """

    pass
