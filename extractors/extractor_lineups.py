# extractors/extractor_lineups.py
"""
Starting elevens, substitutes (timed and unused bench) and managers.
"""

from typing import Dict, List, Optional, Tuple

from bs4 import Tag

from exceptions import ParsingError
from logger import MatchItems, Side, SubstituteEntry

from .base_extractor import FieldExtractor, normalize_space
from .document import Document
from .extractor_timeline import event_minute, event_side, timeline_events
from .match_record import MatchRecord

LINEUP_BLOCKS = f"{MatchItems.DIV}.{MatchItems.LINEUP_CLASS}"
SUMMARY_PLAYER_LINKS = (
    f"{MatchItems.TBODY} {MatchItems.TREE} {MatchItems.TREE_HEAD} {MatchItems.LINK}"
)
SUBSTITUTION_ICON = f".{MatchItems.SUBSTITUTE_IN_CLASS}"
SCOREBOX_STRONG = f".{MatchItems.SCOREBOX_CLASS} {MatchItems.STRONG}"


class LineupsExtractor(FieldExtractor):
    """
    Rosters for both sides. Each part (starting XI, substitutes, managers)
    is read independently so one missing panel does not blank the others.
    """

    name = "lineups"

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        changes = {}

        try:
            home_xi, away_xi = self._starting_from_lineups(document)
        except ParsingError as error:
            self.log_fallback(error)
            home_xi, away_xi = self._starting_from_summary(document)
        if home_xi:
            changes["home_starting_xi"] = home_xi
        if away_xi:
            changes["away_starting_xi"] = away_xi

        substitutes = self._substitutes(document)
        if substitutes is not None:
            changes["home_substitutes"] = substitutes[Side.HOME]
            changes["away_substitutes"] = substitutes[Side.AWAY]

        managers = self._managers(document)
        if managers:
            changes["home_manager"], changes["away_manager"] = managers

        return record.with_fields(**changes)

    # Starting XI

    def _names(self, links: List[Tag]) -> Tuple[str, ...]:
        names = [normalize_space(link.get_text()) for link in links]
        return tuple(name for name in names if name)[: MatchItems.STARTING_XI_SIZE]

    def _starting_from_lineups(
        self, document: Document
    ) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        blocks = document.select(LINEUP_BLOCKS)
        self.validate_cell_count(blocks, 2, "lineup blocks")

        home = self._names(blocks[0].find_all(MatchItems.LINK))
        away = self._names(blocks[1].find_all(MatchItems.LINK))
        if not home or not away:
            raise ParsingError("Lineup blocks hold no player links")
        return home, away

    def _starting_from_summary(
        self, document: Document
    ) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        tables = document.select(MatchItems.SUMMARY_TABLE_SELECTOR)
        if len(tables) < 2:
            return (), ()
        return (
            self._names(tables[0].select(SUMMARY_PLAYER_LINKS)),
            self._names(tables[1].select(SUMMARY_PLAYER_LINKS)),
        )

    # Substitutes

    def _substitutes(
        self, document: Document
    ) -> Optional[Dict[Side, Tuple[SubstituteEntry, ...]]]:
        events = timeline_events(document)
        blocks = document.select(LINEUP_BLOCKS)
        if not events and not blocks:
            return None

        entries: Dict[Side, List[SubstituteEntry]] = {Side.HOME: [], Side.AWAY: []}

        substitutions = [
            (index, event)
            for index, event in enumerate(events)
            if event.select_one(SUBSTITUTION_ICON)
        ]
        if not substitutions:
            substitutions = [
                (index, event)
                for index, event in enumerate(events)
                if MatchItems.SUBSTITUTION_TEXT in f" {event.get_text(' ')} "
            ]

        for index, event in substitutions:
            link = event.find(MatchItems.LINK)
            player = normalize_space(link.get_text()) if isinstance(link, Tag) else ""
            minute = event_minute(event)
            if player and minute:
                entries[event_side(event, index)].append(
                    SubstituteEntry(player=player, minute=minute)
                )

        for side, block in zip((Side.HOME, Side.AWAY), blocks):
            known = {entry.player for entry in entries[side]}
            for player in self._bench_players(block):
                if player not in known:
                    entries[side].append(SubstituteEntry(player=player))
                    known.add(player)

        return {side: tuple(found) for side, found in entries.items()}

    def _bench_players(self, block: Tag) -> List[str]:
        """
        Player names listed after the "Bench" header of a lineup block.
        """
        players: List[str] = []
        past_header = False
        for node in block.descendants:
            if not isinstance(node, Tag):
                continue
            if not past_header:
                is_header = node.name in (MatchItems.TREE_HEAD, MatchItems.DIV)
                if is_header and normalize_space(node.get_text()) == MatchItems.BENCH_LABEL:
                    past_header = True
                continue
            if node.name == MatchItems.LINK and MatchItems.PLAYER_HREF_KEYWORD in node.get(
                "href", ""
            ):
                name = normalize_space(node.get_text())
                if name:
                    players.append(name)
        return players

    # Managers

    def _managers(self, document: Document) -> Optional[Tuple[str, str]]:
        managers: List[str] = []
        for strong in document.select(SCOREBOX_STRONG):
            if MatchItems.MANAGER_LABEL not in strong.get_text():
                continue
            parent = strong.parent
            link = parent.find(MatchItems.LINK)
            if isinstance(link, Tag):
                name = normalize_space(link.get_text())
            else:
                name = normalize_space(
                    parent.get_text().replace(f"{MatchItems.MANAGER_LABEL}:", "")
                )
            if name:
                managers.append(name)

        # both or neither
        if len(managers) < 2:
            return None
        return managers[0], managers[1]
