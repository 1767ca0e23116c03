# extractors/half_time.py
"""
Half-time score derived from the goal timeline.
"""

import re
from typing import Iterable, Optional

from logger import GoalEvent, Side

from .document import Document
from .extraction_config import ExtractionConfig
from .match_record import MatchRecord


def base_minute(minute: str) -> Optional[int]:
    """
    Minute without stoppage time: "45+2'" -> 45, "50'" -> 50.
    """
    digits = re.sub(ExtractionConfig.MINUTE_DIGITS_PATTERN, "", minute or "")
    base = digits.split("+", 1)[0]
    return int(base) if base.isdigit() else None


def compute_half_time_score(goals: Optional[Iterable[GoalEvent]]) -> str:
    """
    Count first-half goals per side.

    Stoppage time at the end of the first half ("45+2'") counts as first
    half. An unset timeline gives "0-0".

    Args:
        goals: Goal events, or None when the timeline was not read

    Returns:
        Score formatted "home-away"
    """
    home = away = 0
    for goal in goals or ():
        minute = base_minute(goal.minute)
        if minute is None or minute > ExtractionConfig.HALF_TIME_MINUTE:
            continue
        if goal.side is Side.HOME:
            home += 1
        else:
            away += 1
    return f"{home}-{away}"


class HalfTimeCalculator:
    """
    Pipeline stage that always overwrites ``half_time_score``.
    """

    name = "half_time"

    def run(self, document: Document, record: MatchRecord) -> MatchRecord:
        return record.with_fields(half_time_score=compute_half_time_score(record.goals))
