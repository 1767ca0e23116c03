# extractors/extractor_identity.py
"""
Team names and full-time score from the scorebox.
"""

from typing import List, Optional, Tuple

from exceptions import InsufficientDataError, ParsingError
from logger import MatchItems

from .base_extractor import FieldExtractor
from .document import Document
from .match_record import MatchRecord

SCOREBOX = f"{MatchItems.DIV}.{MatchItems.SCOREBOX_CLASS}"
TEAM_PANELS = f"{SCOREBOX} > {MatchItems.DIV}"
TEAM_LINK = f"{MatchItems.STRONG} {MatchItems.LINK}"
SCORES = f"{SCOREBOX} {MatchItems.DIV}.{MatchItems.SCORE_CLASS}"


class IdentityExtractor(FieldExtractor):
    """
    Home/away team names and the "A - B" full-time score.
    """

    name = "identity"

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        try:
            home, away = self._teams_from_panels(document)
        except ParsingError as error:
            self.log_fallback(error)
            home, away = self._teams_from_scorebox(document)

        changes = {"home_team": home, "away_team": away}

        score = self._full_time_score(document)
        if score:
            changes["full_time_score"] = score

        return record.with_fields(**changes)

    def _teams_from_panels(self, document: Document) -> Tuple[str, str]:
        panels = document.select(TEAM_PANELS)
        self.validate_cell_count(panels, 2, "scorebox team panels")

        names = []
        for panel in panels[:2]:
            link = self.require(panel.select_one(TEAM_LINK), "team link")
            names.append(self.extract_text_from_cell(link))

        if not all(names):
            raise ParsingError("Empty team name in scorebox panel")
        return names[0], names[1]

    def _teams_from_scorebox(
        self, document: Document
    ) -> Tuple[Optional[str], Optional[str]]:
        scorebox = document.select_one(SCOREBOX)
        if scorebox is None:
            return None, None

        names: List[str] = [
            self.extract_text_from_cell(link) for link in scorebox.select(TEAM_LINK)
        ]
        home = names[0] if len(names) > 0 and names[0] else None
        away = names[1] if len(names) > 1 and names[1] else None
        return home, away

    def _full_time_score(self, document: Document) -> Optional[str]:
        scores = [
            self.extract_text_from_cell(cell) for cell in document.select(SCORES)
        ]
        try:
            self.validate_cell_count(scores, 2, "scores")
        except InsufficientDataError:
            return None

        home, away = scores[0], scores[1]
        if not home or not away:
            return None
        return f"{home} - {away}"
