# exceptions/parsers.py
"""
Custom exceptions for match report parsing components.
Provides specific error types for structure and shape mismatches.
"""


class ParsingError(Exception):
    """
    Exception raised when a match report parsing operation fails.

    Extractors raise this (or a subclass) internally to abandon their
    primary strategy; it never leaves the pipeline.
    """

    def __init__(self, message: str, original_error: Exception = None):
        """
        Initialize parsing error with message and optional original error.

        Args:
            message: Human-readable error message describing the parsing failure
            original_error: Original exception that caused this parsing error
        """
        super().__init__(message)
        self.original_error = original_error
        self.message = message

    def __str__(self) -> str:
        """
        Return string representation of the parsing error.

        Returns:
            Formatted error message with original error if available
        """
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class TableNotFoundError(ParsingError):
    """
    Exception raised when an expected panel or table is not in the document.
    """

    def __init__(self, table_type: str = "table"):
        """
        Initialize table not found error.

        Args:
            table_type: Selector or name of the structure that was not found
        """
        message = f"Expected {table_type} not found in match report"
        super().__init__(message)
        self.table_type = table_type


class InsufficientDataError(ParsingError):
    """
    Exception raised when a structure exists but has too few rows or cells.
    """

    def __init__(self, data_type: str, minimum_required: int, actual: int):
        """
        Initialize insufficient data error.

        Args:
            data_type: Type of data that was insufficient (e.g., "rows", "cells")
            minimum_required: Minimum number of items required
            actual: Actual number of items found
        """
        message = (
            f"Insufficient {data_type}: found {actual}, "
            f"minimum required {minimum_required}"
        )
        super().__init__(message)
        self.data_type = data_type
        self.minimum_required = minimum_required
        self.actual = actual
