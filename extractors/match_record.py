# extractors/match_record.py
"""
Immutable match record populated stage by stage by the extraction pipeline.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from logger import CardEvent, GoalEvent, SubstituteEntry

STAT_NAMES: Tuple[str, ...] = (
    "possession",
    "total_shots",
    "shots_on_target",
    "xg",
    "passes",
    "tackles",
    "corners",
    "fouls",
    "offsides",
    "yellow_cards",
    "red_cards",
    "saves",
    "clearances",
    "interceptions",
    "blocks",
    "aerials_won",
    "big_chances",
    "woodwork",
    "crosses",
    "long_balls",
    "through_balls",
    "touches",
    "touches_opp_box",
    "dribbles",
    "dribbles_completed",
)


class FieldState(Enum):
    """Where an aggregate value came from."""

    UNSET = "unset"
    DEFAULTED = "defaulted"
    REPORTED = "reported"
    RECONCILED = "reconciled"


@dataclass(frozen=True)
class StatPair:
    """
    Home/away values of one aggregate statistic, kept as document strings.
    """

    home: Optional[str] = None
    away: Optional[str] = None
    state: FieldState = FieldState.UNSET

    @classmethod
    def unset(cls) -> "StatPair":
        return cls()

    @classmethod
    def defaulted(cls) -> "StatPair":
        return cls("0", "0", FieldState.DEFAULTED)

    @classmethod
    def reported(
        cls,
        home: Optional[str],
        away: Optional[str],
        state: FieldState = FieldState.REPORTED,
    ) -> "StatPair":
        """
        Build a pair, or an unset pair when either side is missing.

        Args:
            home: Home value as found in the document
            away: Away value as found in the document
            state: State to record for a complete pair

        Returns:
            A complete pair with both sides stripped, else an UNSET pair
        """
        home = home.strip() if home else ""
        away = away.strip() if away else ""
        if not home or not away:
            return cls.unset()
        return cls(home, away, state)

    @property
    def is_set(self) -> bool:
        return self.state is not FieldState.UNSET

    @property
    def is_zero(self) -> bool:
        return _is_zero(self.home) and _is_zero(self.away)


def _is_zero(value: Optional[str]) -> bool:
    if value is None:
        return False
    try:
        return float(value.replace(",", "")) == 0
    except ValueError:
        return False


def _empty_stats() -> Mapping[str, StatPair]:
    return MappingProxyType({name: StatPair.unset() for name in STAT_NAMES})


@dataclass(frozen=True)
class MatchRecord:
    """
    One match report. ``None`` marks a scalar or sequence that no stage set;
    aggregates use ``StatPair`` states instead.
    """

    # Identity
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    full_time_score: Optional[str] = None
    half_time_score: Optional[str] = None

    # Meta
    date_time: Optional[str] = None
    venue: Optional[str] = None
    attendance: Optional[str] = None
    referee: Optional[str] = None
    assistant_referee_1: Optional[str] = None
    assistant_referee_2: Optional[str] = None
    fourth_official: Optional[str] = None
    var_official: Optional[str] = None

    # Timeline
    goals: Optional[Tuple[GoalEvent, ...]] = None
    cards: Optional[Tuple[CardEvent, ...]] = None

    # Roster
    home_manager: Optional[str] = None
    away_manager: Optional[str] = None
    home_starting_xi: Optional[Tuple[str, ...]] = None
    away_starting_xi: Optional[Tuple[str, ...]] = None
    home_substitutes: Optional[Tuple[SubstituteEntry, ...]] = None
    away_substitutes: Optional[Tuple[SubstituteEntry, ...]] = None

    # Aggregates
    stats: Mapping[str, StatPair] = field(default_factory=_empty_stats)

    source_url: Optional[str] = None

    def stat(self, name: str) -> StatPair:
        if name not in STAT_NAMES:
            raise KeyError(f"Unknown statistic: {name}")
        return self.stats[name]

    def with_fields(self, **changes) -> "MatchRecord":
        return replace(self, **changes)

    def with_stats(self, **pairs: StatPair) -> "MatchRecord":
        """
        Return a copy with the given statistics replaced.

        Raises:
            KeyError: For a name outside the known statistics
        """
        unknown = set(pairs) - set(STAT_NAMES)
        if unknown:
            raise KeyError(f"Unknown statistics: {sorted(unknown)}")
        merged = dict(self.stats)
        merged.update(pairs)
        return replace(self, stats=MappingProxyType(merged))

    def __eq__(self, other):
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self._comparable() == other._comparable()

    def __hash__(self):
        return hash(self._comparable())

    def _comparable(self):
        scalars = tuple(
            getattr(self, name)
            for name in self.__dataclass_fields__
            if name != "stats"
        )
        return scalars + (tuple(sorted(self.stats.items())),)
