# extractors/label_lookup.py
"""
Synonym-aware label lookup over the advanced team statistics panel.

The panel lays each statistic out as three sibling divs: home value, label,
away value. A statistic may appear under several labels depending on the
competition, so callers pass an ordered tuple of synonyms.
"""

from typing import List, Optional, Sequence, Tuple

from bs4 import Tag

from logger import MatchItems

from .base_extractor import normalize_space
from .document import Document


class StatLabelLookup:
    """
    Finds home/away values next to a label in ``#team_stats_extra``.
    """

    def __init__(self, document: Document):
        panel = document.soup.find(id=MatchItems.TEAM_STATS_EXTRA_ID)
        self._divs: List[Tag] = (
            panel.find_all(MatchItems.DIV) if isinstance(panel, Tag) else []
        )

    @property
    def available(self) -> bool:
        return bool(self._divs)

    def find(self, synonyms: Sequence[str]) -> Optional[Tuple[str, str]]:
        """
        Look up the first synonym present in the panel.

        Labels match case-insensitively on the whole trimmed text of a div.

        Args:
            synonyms: Label variants in priority order

        Returns:
            (home, away) texts, or None if no synonym labels a value pair
        """
        for label in synonyms:
            wanted = label.strip().lower()
            label_div = next(
                (d for d in self._divs if _text(d).lower() == wanted), None
            )
            if label_div is None:
                continue

            home = label_div.find_previous_sibling()
            away = label_div.find_next_sibling()
            if isinstance(home, Tag) and isinstance(away, Tag):
                return _text(home), _text(away)
        return None


def _text(tag: Tag) -> str:
    return normalize_space(tag.get_text(" ", strip=True))
