from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MatchItems:
    # HTML Elements
    BRANCH = "table"
    DIV = "div"
    TREE = "tr"
    TREE_DATE = "td"
    TREE_HEAD = "th"
    TBODY = "tbody"
    TFOOT = "tfoot"
    LINK = "a"
    SPAN = "span"
    STRONG = "strong"

    # Scorebox panel
    SCOREBOX_CLASS = "scorebox"
    SCORE_CLASS = "score"
    SCORE_XG_CLASS = "score_xg"
    SCOREBOX_META_CLASS = "scorebox_meta"
    MANAGER_LABEL = "Manager"
    XG_LABEL = "xG"

    # Timeline
    EVENTS_WRAP_ID = "events_wrap"
    EVENT_CLASS = "event"
    HOME_SIDE_CLASS = "a"
    AWAY_SIDE_CLASS = "b"
    GOAL_MARKER = "goal"
    PENALTY_MISS_TEXT = "Penalty miss"
    YELLOW_CARD_CLASS = "yellow_card"
    YELLOW_RED_CARD_CLASS = "yellow_red_card"
    RED_CARD_CLASS = "red_card"
    SUBSTITUTE_IN_CLASS = "substitute_in"
    SUBSTITUTION_TEXT = " for "
    TEXT_ALIGN_STYLE = "text-align"

    # Lineups
    LINEUP_CLASS = "lineup"
    BENCH_LABEL = "Bench"
    PLAYER_HREF_KEYWORD = "/players/"
    SUMMARY_TABLE_SELECTOR = 'table[id*="stats"][id*="summary"]'
    STARTING_XI_SIZE = 11

    # Team stats panels
    TEAM_STATS_ID = "team_stats"
    TEAM_STATS_EXTRA_ID = "team_stats_extra"
    POSSESSION_ROW_IDX = 2
    SHOTS_ROW_IDX = 6
    PASSING_ACCURACY_LABEL = "Passing Accuracy"
    CARDS_LABEL = "Cards"
    SAVES_LABEL = "Saves"

    # Granular tables used by reconciliation
    SHOTS_TABLE_ID = "shots_all"
    POSSESSION_TABLE_SELECTOR = 'table[id*="possession"]'
    PASSING_TYPES_TABLE_SELECTOR = 'table[id*="passing_types"]'
    DEFENSE_TABLE_SELECTOR = 'table[id*="defense"]'
    SKIP_ROW_CLASSES = ("spacer", "thead")

    # data-stat attribute values
    DATA_STAT_ATTR = "data-stat"
    STAT_XG_SHOT = "xg_shot"
    STAT_TEAM = "team"
    STAT_OUTCOME = "outcome"
    STAT_THROUGH_BALLS = "through_balls"
    STAT_BLOCKS = "blocks"
    STAT_TOUCHES = "touches"
    STAT_TOUCHES_ATT_PEN_AREA = "touches_att_pen_area"
    STAT_DRIBBLES = "dribbles"
    STAT_DRIBBLES_COMPLETED = "dribbles_completed"

    # Shot outcome markers for woodwork
    WOODWORK_OUTCOMES = ("post", "woodwork", "bar")

    # Official markers
    REFEREE_MARKER = "(Referee)"
    AR1_MARKER = "(AR1)"
    AR2_MARKER = "(AR2)"
    FOURTH_MARKER = "(4th)"
    VAR_MARKER = "(VAR)"

    # Regex patterns
    DATE_REGEX = r"([A-Za-z]+\s+[A-Za-z]+\s+\d{1,2},\s+\d{4})"
    VENUE_TIME_REGEX = r"(\d{1,2}:\d{2})\s*\(.*?venue time\)"
    START_TIME_REGEX = r"Start Time:\s*(\d{1,2}:\d{2})"
    VENUE_REGEX = r"Venue:\s*([^\n]+)"
    ATTENDANCE_REGEX = r"Attendance:\s*([\d,]+)"
    REFEREE_FALLBACK_REGEX = r"Officials:[^·]*?([A-Za-z\s]+)\s*\(Referee\)"
    MINUTE_REGEX = r"\d+(?:\+\d+)?'?"
    SAVES_REGEX = r"(\d+)\s*of"
    POSSESSION_PAIR_REGEX = r"(\d+)%\s*Possession\s*(\d+)%"
    POSSESSION_LOOSE_REGEX = r"Possession[\s\S]{0,50}?(\d+)%[\s\S]{0,30}?(\d+)%"
    XG_VALUE_REGEX = r"^\d+\.\d+$"

    # Date formats
    INPUT_DATE_FORMAT = "%A %B %d, %Y"
    OUTPUT_DATE_FORMAT = "%d %b %Y"

    # Text constants
    NBSP = "\u00a0"
    TYPOGRAPHIC_APOSTROPHE = "\u2019"
    DEFAULT_ZERO = "0"


class Side(Enum):
    HOME = "home"
    AWAY = "away"


class CardSeverity(Enum):
    YELLOW = "yellow"
    SECOND_YELLOW = "yellow_red"
    RED = "red"


@dataclass(frozen=True)
class GoalEvent:
    scorer: str
    minute: str
    side: Side
    assist: Optional[str] = None


@dataclass(frozen=True)
class CardEvent:
    player: str
    minute: str
    side: Side
    severity: CardSeverity = CardSeverity.YELLOW


@dataclass(frozen=True)
class SubstituteEntry:
    """A bench player; minute is None when the player never came on."""

    player: str
    minute: Optional[str] = None
