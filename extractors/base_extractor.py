# extractors/base_extractor.py
"""
Base data extraction utilities with common extraction methods.
Provides the reusable cell/row helpers and the fault-isolated stage contract
shared by all match report extractors.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from bs4 import Tag

from exceptions import InsufficientDataError, ParsingError, TableNotFoundError
from logger import MatchItems

from .document import Document
from .extraction_config import ExtractionConfig
from .match_record import MatchRecord

logger = logging.getLogger(__name__)


class BaseDataExtractor:
    """
    Base class providing common data extraction methods.

    The helpers never raise on malformed cells: a value that cannot be read
    comes back as ``None`` so the caller can leave the field unset.
    """

    def __init__(self):
        """
        Initialize the base extractor with configuration
        """
        self.config = ExtractionConfig()

    def extract_text_from_cell(self, cell: Tag) -> str:
        """
        Extract clean text content from a table cell.

        Args:
            cell: BeautifulSoup Tag containing text data

        Returns:
            Clean text string or empty string if extraction fails
        """
        if not isinstance(cell, Tag):
            return ""

        text = cell.get_text(" ", strip=True)
        return normalize_space(text)

    def inner_text(self, tag: Tag) -> str:
        """
        Approximate the rendered text of a panel: one line per child block.

        Args:
            tag: Panel whose children are block elements

        Returns:
            Lines joined with newlines
        """
        if not isinstance(tag, Tag):
            return ""

        lines = []
        for child in tag.children:
            # inline markup inside a block joins without separators
            text = normalize_space(
                child.get_text() if isinstance(child, Tag) else str(child)
            )
            if text:
                lines.append(text)
        return "\n".join(lines)

    def extract_float(self, cell: Tag) -> Optional[float]:
        """
        Extract float number from table cell.

        Args:
            cell: BeautifulSoup Tag containing float data

        Returns:
            Extracted float or None if extraction fails
        """
        text = self.extract_text_from_cell(cell)
        if text in self.config.BLANK_VALUES:
            return None

        match = re.search(self.config.FLOAT_PATTERN, text)
        try:
            return float(match.group(1)) if match else None
        except ValueError:
            return None

    def parse_n_of_m(self, text: str) -> Optional[Tuple[str, str]]:
        """
        Read an "N of M" phrase such as "5 of 12".

        Returns:
            (N, M) as strings, or None if the phrase is absent
        """
        if not text:
            return None
        match = re.search(self.config.N_OF_M_PATTERN, text)
        return (match.group(1), match.group(2)) if match else None

    def table_rows(self, table: Tag) -> List[Tag]:
        """
        Body rows of a table; every row when the markup has no tbody.
        """
        if not isinstance(table, Tag):
            raise ParsingError(self.config.ERROR_MESSAGES["invalid_cell"])

        body = table.find(MatchItems.TBODY)
        container = body if isinstance(body, Tag) else table
        return container.find_all(MatchItems.TREE)

    def row_after_label(self, table: Tag, label: str) -> Optional[Tag]:
        """
        Find the row that follows the header row reading ``label``.

        Args:
            table: Team stats table
            label: Header text, e.g. "Passing Accuracy"

        Returns:
            The following row, or None if the label row is absent
        """
        rows = self.table_rows(table)
        for index, row in enumerate(rows[:-1]):
            if label.lower() in self.extract_text_from_cell(row).lower():
                return rows[index + 1]
        return None

    def tfoot_value(self, table: Tag, data_stat: str) -> Optional[str]:
        """
        Read a footer total cell by its data-stat attribute.
        """
        footer = table.find(MatchItems.TFOOT) if isinstance(table, Tag) else None
        if not isinstance(footer, Tag):
            return None

        cell = footer.find(
            [MatchItems.TREE_DATE, MatchItems.TREE_HEAD],
            attrs={MatchItems.DATA_STAT_ATTR: data_stat},
        )
        if not isinstance(cell, Tag):
            return None
        text = self.extract_text_from_cell(cell)
        return text if text not in self.config.BLANK_VALUES else MatchItems.DEFAULT_ZERO

    def validate_cell_count(
        self, cells: list, required_count: int, context: str = "cells"
    ) -> bool:
        """
        Validate that the cell list has the required number of cells.

        Args:
            cells: List of table cells
            required_count: Minimum required number of cells
            context: Context information for error reporting

        Returns:
            True if validation passes

        Raises:
            InsufficientDataError: If validation fails
        """
        if not isinstance(cells, list):
            raise ParsingError(self.config.ERROR_MESSAGES["invalid_cell"])
        if len(cells) < required_count:
            raise InsufficientDataError(context, required_count, len(cells))

        return True

    def require(self, node: Optional[Tag], description: str) -> Tag:
        """
        Return ``node`` or raise when the structure is missing.

        Raises:
            TableNotFoundError: If node is not a Tag
        """
        if not isinstance(node, Tag):
            raise TableNotFoundError(description)
        return node


class FieldExtractor(BaseDataExtractor, ABC):
    """
    One pipeline stage that fills a group of record fields.

    Subclasses implement ``extract``; callers use ``run``, which isolates
    failures so a broken stage leaves its fields unset.
    """

    name = "extractor"

    def run(self, document: Document, record: MatchRecord) -> MatchRecord:
        try:
            return self.extract(document, record)
        except Exception as error:
            logger.warning(
                self.config.ERROR_MESSAGES["extractor_failed"],
                self.name,
                document.url or "<document>",
                error,
            )
            return record

    @abstractmethod
    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        """
        Return a new record with this stage's fields populated.
        """

    def log_fallback(self, error: Exception) -> None:
        logger.debug(self.config.ERROR_MESSAGES["fallback_used"], self.name, error)


def normalize_space(text: str) -> str:
    """Collapse whitespace, including non-breaking spaces."""
    return re.sub(r"\s+", " ", text.replace(MatchItems.NBSP, " ")).strip()
