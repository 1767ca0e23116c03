# extractors/extractor_stats.py
"""
Aggregate team statistics from the team stats panels.

PrimaryStatsExtractor reads possession and shots from ``#team_stats``;
SecondaryStatsExtractor reads xG, passes, cards, saves and the advanced
statistics listed in ``#team_stats_extra``.
"""

import re
from typing import Dict, List, Optional, Tuple

from bs4 import Tag

from exceptions import ParsingError
from logger import MatchItems

from .base_extractor import FieldExtractor
from .document import Document
from .extraction_config import StatSynonyms
from .label_lookup import StatLabelLookup
from .match_record import MatchRecord, StatPair

TEAM_STATS_TABLE = f"#{MatchItems.TEAM_STATS_ID} {MatchItems.BRANCH}"
SCOREBOX = f".{MatchItems.SCOREBOX_CLASS}"
SCORE_XG = f".{MatchItems.SCORE_XG_CLASS}"


class TeamStatsMixin:
    """Access to the two value cells of a team stats row."""

    def _team_stats_table(self, document: Document) -> Tag:
        return self.require(document.select_one(TEAM_STATS_TABLE), "team stats table")

    def _side_cells(self, row: Optional[Tag]) -> List[Tag]:
        if row is None:
            return []
        cells = row.find_all(MatchItems.TREE_DATE)
        return cells if len(cells) >= 2 else []


class PrimaryStatsExtractor(TeamStatsMixin, FieldExtractor):
    """
    Possession, total shots and shots on target.
    """

    name = "primary_stats"

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        pairs: Dict[str, StatPair] = {}

        try:
            rows = self.table_rows(self._team_stats_table(document))
            pairs["possession"] = self._possession(rows)
            pairs.update(self._shots(rows))
        except ParsingError as error:
            self.log_fallback(error)

        possession = pairs.get("possession")
        if possession is None or not possession.is_set:
            pairs["possession"] = self._possession_from_text(document.body_text)

        return record.with_stats(**pairs)

    def _possession(self, rows: List[Tag]) -> StatPair:
        self.validate_cell_count(rows, MatchItems.POSSESSION_ROW_IDX + 1, "team stats rows")
        strongs = rows[MatchItems.POSSESSION_ROW_IDX].find_all(MatchItems.STRONG)
        if len(strongs) < 2:
            return StatPair.unset()
        return StatPair.reported(
            self.extract_text_from_cell(strongs[0]),
            self.extract_text_from_cell(strongs[1]),
        )

    def _shots(self, rows: List[Tag]) -> Dict[str, StatPair]:
        if len(rows) <= MatchItems.SHOTS_ROW_IDX:
            return {}

        cells = self._side_cells(rows[MatchItems.SHOTS_ROW_IDX])
        if not cells:
            return {}

        home = self.parse_n_of_m(self.extract_text_from_cell(cells[0])) or (None, None)
        away = self.parse_n_of_m(self.extract_text_from_cell(cells[1])) or (None, None)
        return {
            "shots_on_target": StatPair.reported(home[0], away[0]),
            "total_shots": StatPair.reported(home[1], away[1]),
        }

    def _possession_from_text(self, text: str) -> StatPair:
        found = re.search(MatchItems.POSSESSION_PAIR_REGEX, text, re.IGNORECASE)
        if not found:
            found = re.search(MatchItems.POSSESSION_LOOSE_REGEX, text, re.IGNORECASE)
        if not found:
            return StatPair.unset()
        return StatPair.reported(f"{found.group(1)}%", f"{found.group(2)}%")


class SecondaryStatsExtractor(TeamStatsMixin, FieldExtractor):
    """
    xG, passes, cards, saves and the synonym-labelled advanced statistics.
    """

    name = "secondary_stats"

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        pairs: Dict[str, StatPair] = {"xg": self._xg(document)}

        try:
            table = self._team_stats_table(document)
            pairs["passes"] = self._passes(table)
            pairs.update(self._cards(table))
            pairs["saves"] = self._saves(table)
        except ParsingError as error:
            self.log_fallback(error)

        # labels only default to "0" when the panel itself is present
        lookup = StatLabelLookup(document)
        if not lookup.available:
            return record.with_stats(**pairs)

        for stat_name, synonyms in StatSynonyms.ADVANCED.items():
            found = lookup.find(synonyms)
            pairs[stat_name] = (
                StatPair.reported(*found) if found else StatPair.defaulted()
            )

        return record.with_stats(**pairs)

    def _xg(self, document: Document) -> StatPair:
        cells = document.select(SCORE_XG)
        if len(cells) >= 2:
            return StatPair.reported(
                self.extract_text_from_cell(cells[0]),
                self.extract_text_from_cell(cells[1]),
            )

        values = self._xg_from_label(document)
        if values:
            return StatPair.reported(*values)
        return StatPair.unset()

    def _xg_from_label(self, document: Document) -> Optional[Tuple[str, str]]:
        scorebox = document.select_one(SCOREBOX)
        if scorebox is None:
            return None

        label = next(
            (
                div
                for div in scorebox.find_all(MatchItems.DIV)
                if self.extract_text_from_cell(div) == MatchItems.XG_LABEL
            ),
            None,
        )
        if label is None or not isinstance(label.parent, Tag):
            return None

        values = [
            text
            for text in (
                self.extract_text_from_cell(div)
                for div in label.parent.find_all(MatchItems.DIV)
            )
            if re.match(MatchItems.XG_VALUE_REGEX, text)
        ]
        return (values[0], values[1]) if len(values) >= 2 else None

    def _passes(self, table: Tag) -> StatPair:
        cells = self._side_cells(
            self.row_after_label(table, MatchItems.PASSING_ACCURACY_LABEL)
        )
        if not cells:
            return StatPair.unset()

        home = self.parse_n_of_m(self.extract_text_from_cell(cells[0]))
        away = self.parse_n_of_m(self.extract_text_from_cell(cells[1]))
        if not home or not away:
            return StatPair.unset()
        return StatPair.reported(f"{home[0]} of {home[1]}", f"{away[0]} of {away[1]}")

    def _cards(self, table: Tag) -> Dict[str, StatPair]:
        cells = self._side_cells(self.row_after_label(table, MatchItems.CARDS_LABEL))
        if not cells:
            return {}

        def count(cell: Tag, css_class: str) -> str:
            return str(len(cell.select(f".{css_class}")))

        return {
            "yellow_cards": StatPair.reported(
                count(cells[0], MatchItems.YELLOW_CARD_CLASS),
                count(cells[1], MatchItems.YELLOW_CARD_CLASS),
            ),
            "red_cards": StatPair.reported(
                count(cells[0], MatchItems.RED_CARD_CLASS),
                count(cells[1], MatchItems.RED_CARD_CLASS),
            ),
        }

    def _saves(self, table: Tag) -> StatPair:
        cells = self._side_cells(self.row_after_label(table, MatchItems.SAVES_LABEL))
        if not cells:
            return StatPair.unset()

        home = re.search(MatchItems.SAVES_REGEX, self.extract_text_from_cell(cells[0]))
        away = re.search(MatchItems.SAVES_REGEX, self.extract_text_from_cell(cells[1]))
        return StatPair.reported(
            home.group(1) if home else None,
            away.group(1) if away else None,
        )
