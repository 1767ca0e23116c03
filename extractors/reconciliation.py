# extractors/reconciliation.py
"""
Global reconciliation: last-resort backfill of aggregate statistics from the
granular per-player and per-shot tables.

Which values may be replaced is decided by an overwrite policy; which side
a shot belongs to is decided by a team-side matcher. Both are injectable.
"""

from abc import ABC, abstractmethod
from difflib import SequenceMatcher
from typing import Dict, List, Optional, Tuple

from bs4 import Tag

from configurations import ReconciliationConfig
from logger import MatchItems, Side

from .base_extractor import FieldExtractor
from .document import Document
from .extractor_physical import PhysicalStatsExtractor
from .match_record import FieldState, MatchRecord, StatPair

SHOTS_TABLE = f"#{MatchItems.SHOTS_TABLE_ID}"


# ***> Overwrite policies <***


class OverwritePolicy(ABC):
    """Decides whether a reconciled pair may replace the current one."""

    @abstractmethod
    def should_replace(self, existing: StatPair, found: StatPair) -> bool:
        """Return True when ``found`` may overwrite ``existing``."""


class TriStateOverwritePolicy(OverwritePolicy):
    """
    Fill only gaps: the existing pair is UNSET or DEFAULTED and the found
    pair is complete and not all zeros. A reported value, zero included,
    is never replaced.
    """

    REPLACEABLE = (FieldState.UNSET, FieldState.DEFAULTED)

    def should_replace(self, existing: StatPair, found: StatPair) -> bool:
        return (
            existing.state in self.REPLACEABLE
            and found.is_set
            and not found.is_zero
        )


class LegacyZeroOverwritePolicy(OverwritePolicy):
    """
    Replace when the existing home value is blank or "0" and the found home
    value is non-blank and non-zero. Can replace a genuinely reported zero.
    """

    def should_replace(self, existing: StatPair, found: StatPair) -> bool:
        existing_home = (existing.home or "").strip()
        found_home = (found.home or "").strip()
        return (
            existing_home in ("", MatchItems.DEFAULT_ZERO)
            and found.is_set
            and found_home not in ("", MatchItems.DEFAULT_ZERO)
        )


# ***> Team-side matchers <***


class TeamSideMatcher(ABC):
    """Attributes a team name found in a table row to a side."""

    @abstractmethod
    def side(self, team: str, home_team: str, away_team: Optional[str]) -> Side:
        """Return the side ``team`` plays for."""


class PrefixTeamMatcher(TeamSideMatcher):
    """
    Case-insensitive prefix test against the home team name, in both
    directions. Everything that does not look like the home team is away.
    """

    def __init__(self, prefix_length: int = 4):
        self.prefix_length = prefix_length

    def side(self, team: str, home_team: str, away_team: Optional[str]) -> Side:
        team = team.lower().strip()
        home = home_team.lower().strip()
        if home[: self.prefix_length] in team or team[: self.prefix_length] in home:
            return Side.HOME
        return Side.AWAY


class SimilarityTeamMatcher(TeamSideMatcher):
    """
    Pick the side whose name is most similar to the row's team name.
    Without an away name, the home name must reach ``threshold``.
    """

    def __init__(self, threshold: float = 0.5):
        self.threshold = threshold

    @staticmethod
    def _ratio(left: str, right: str) -> float:
        return SequenceMatcher(None, left.lower().strip(), right.lower().strip()).ratio()

    def side(self, team: str, home_team: str, away_team: Optional[str]) -> Side:
        home_score = self._ratio(team, home_team)
        if not away_team:
            return Side.HOME if home_score >= self.threshold else Side.AWAY
        return Side.HOME if home_score >= self._ratio(team, away_team) else Side.AWAY


def build_overwrite_policy(name: str) -> OverwritePolicy:
    if name == "tri_state":
        return TriStateOverwritePolicy()
    elif name == "legacy_zero":
        return LegacyZeroOverwritePolicy()
    else:
        raise ValueError(f"Unknown overwrite policy: {name}")


def build_team_matcher(config: ReconciliationConfig) -> TeamSideMatcher:
    if config.team_matcher == "prefix":
        return PrefixTeamMatcher(config.team_prefix_length)
    elif config.team_matcher == "similarity":
        return SimilarityTeamMatcher(config.similarity_threshold)
    else:
        raise ValueError(f"Unknown team matcher: {config.team_matcher}")


# ***> The pass itself <***


class GlobalReconciliationPass(FieldExtractor):
    """
    Backfills through balls, blocks, big chances, woodwork and the physical
    statistics.
    """

    name = "reconciliation"

    def __init__(
        self,
        config: Optional[ReconciliationConfig] = None,
        policy: Optional[OverwritePolicy] = None,
        matcher: Optional[TeamSideMatcher] = None,
        physical: Optional[PhysicalStatsExtractor] = None,
    ):
        super().__init__()
        self.rec_config = config or ReconciliationConfig()
        self.policy = policy or build_overwrite_policy(self.rec_config.overwrite_policy)
        self.matcher = matcher or build_team_matcher(self.rec_config)
        self.physical = physical or PhysicalStatsExtractor()

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        found = self.collect(document, record)

        updates: Dict[str, StatPair] = {}
        for stat_name, (home, away) in found.items():
            candidate = StatPair.reported(home, away, FieldState.RECONCILED)
            if self.policy.should_replace(record.stat(stat_name), candidate):
                updates[stat_name] = candidate

        if not updates:
            return record
        return record.with_stats(**updates)

    def collect(
        self, document: Document, record: MatchRecord
    ) -> Dict[str, Tuple[str, str]]:
        """
        Gather candidate values from the granular tables, before any policy.
        """
        found: Dict[str, Tuple[str, str]] = {}

        through_balls = self._footer_pair(
            document, MatchItems.PASSING_TYPES_TABLE_SELECTOR, MatchItems.STAT_THROUGH_BALLS
        )
        if through_balls:
            found["through_balls"] = through_balls

        blocks = self._footer_pair(
            document, MatchItems.DEFENSE_TABLE_SELECTOR, MatchItems.STAT_BLOCKS
        )
        if blocks:
            found["blocks"] = blocks

        found.update(self._shot_counts(document, record))
        found.update(self.physical.collect(document))
        return found

    def _footer_pair(
        self, document: Document, selector: str, data_stat: str
    ) -> Optional[Tuple[str, str]]:
        values: List[str] = []
        for table in document.select(selector):
            value = self.tfoot_value(table, data_stat)
            if value is not None:
                values.append(value)
        return (values[0], values[1]) if len(values) >= 2 else None

    def _shot_counts(
        self, document: Document, record: MatchRecord
    ) -> Dict[str, Tuple[str, str]]:
        table = document.select_one(SHOTS_TABLE)
        # attribution needs the home team name
        if table is None or not record.home_team:
            return {}

        big_chances = {Side.HOME: 0, Side.AWAY: 0}
        woodwork = {Side.HOME: 0, Side.AWAY: 0}

        for row in self._shot_rows(table):
            team = self._cell_text(row, MatchItems.STAT_TEAM)
            if not team:
                continue
            side = self.matcher.side(team, record.home_team, record.away_team)

            xg = self.extract_float(self._cell(row, MatchItems.STAT_XG_SHOT))
            if xg is not None and xg >= self.rec_config.big_chance_xg_threshold:
                big_chances[side] += 1

            outcome = self._cell_text(row, MatchItems.STAT_OUTCOME).lower()
            if any(marker in outcome for marker in MatchItems.WOODWORK_OUTCOMES):
                woodwork[side] += 1

        return {
            "big_chances": (str(big_chances[Side.HOME]), str(big_chances[Side.AWAY])),
            "woodwork": (str(woodwork[Side.HOME]), str(woodwork[Side.AWAY])),
        }

    def _shot_rows(self, table: Tag) -> List[Tag]:
        rows = []
        for row in self.table_rows(table):
            classes = row.get("class") or []
            if any(skip in classes for skip in MatchItems.SKIP_ROW_CLASSES):
                continue
            rows.append(row)
        return rows

    def _cell(self, row: Tag, data_stat: str) -> Optional[Tag]:
        return row.find(
            [MatchItems.TREE_DATE, MatchItems.TREE_HEAD],
            attrs={MatchItems.DATA_STAT_ATTR: data_stat},
        )

    def _cell_text(self, row: Tag, data_stat: str) -> str:
        cell = self._cell(row, data_stat)
        return self.extract_text_from_cell(cell) if cell is not None else ""
