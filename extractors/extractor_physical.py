# extractors/extractor_physical.py
"""
Touches and dribbles totals from the footer rows of the possession tables.
"""

from typing import Dict, List, Tuple

from logger import MatchItems

from .base_extractor import BaseDataExtractor
from .document import Document
from .extraction_config import PhysicalColumns


class PhysicalStatsExtractor(BaseDataExtractor):
    """
    Sub-extractor used by the reconciliation pass. The first possession
    table belongs to the home side, the second to the away side.
    """

    def collect(self, document: Document) -> Dict[str, Tuple[str, str]]:
        """
        Read footer totals for every physical statistic present in both tables.

        Args:
            document: Parsed match report

        Returns:
            Mapping of record stat name to (home, away) values
        """
        tables = document.select(MatchItems.POSSESSION_TABLE_SELECTOR)
        found: Dict[str, Tuple[str, str]] = {}

        for column, stat_name in PhysicalColumns.MAPPING.items():
            values: List[str] = []
            for table in tables:
                value = self.tfoot_value(table, column)
                if value is not None:
                    values.append(value)
            if len(values) >= 2:
                found[stat_name] = (values[0], values[1])

        return found
