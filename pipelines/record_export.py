# pipelines/record_export.py
"""
Export boundary: finished match records packed into flat string rows,
a DataFrame and a CSV file for downstream renderers.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

import pandas as pd

from extractors import STAT_NAMES, MatchRecord
from logger import CardEvent, GoalEvent, Side, SubstituteEntry

SCALAR_COLUMNS = (
    "home_team",
    "away_team",
    "full_time_score",
    "half_time_score",
    "date_time",
    "venue",
    "attendance",
    "referee",
    "assistant_referees",
    "fourth_official",
    "var_official",
    "home_manager",
    "away_manager",
)

ROSTER_COLUMNS = (
    "home_starting_xi",
    "away_starting_xi",
    "home_substitutes",
    "away_substitutes",
)

EVENT_COLUMNS = ("home_goals", "away_goals", "home_cards", "away_cards")

STAT_COLUMNS = tuple(
    f"{side}_{name}" for name in STAT_NAMES for side in ("home", "away")
)

COLUMNS = SCALAR_COLUMNS + ROSTER_COLUMNS + EVENT_COLUMNS + STAT_COLUMNS + ("source_url",)


def pack_goals(goals: Optional[Sequence[GoalEvent]], side: Side) -> str:
    """Goals of one side as "scorer|minute|assist" joined by ";"."""
    return ";".join(
        f"{goal.scorer}|{goal.minute}|{goal.assist or ''}"
        for goal in goals or ()
        if goal.side is side
    )


def pack_cards(cards: Optional[Sequence[CardEvent]], side: Side) -> str:
    """Cards of one side as "player minute" joined by ", "."""
    return ", ".join(
        f"{card.player} {card.minute}".strip()
        for card in cards or ()
        if card.side is side
    )


def pack_substitutes(entries: Optional[Sequence[SubstituteEntry]]) -> str:
    return ", ".join(
        f"{entry.player} ({entry.minute})" if entry.minute else entry.player
        for entry in entries or ()
    )


def pack_assistant_referees(record: MatchRecord) -> str:
    names = [
        name
        for name in (record.assistant_referee_1, record.assistant_referee_2)
        if name
    ]
    return ", ".join(names)


def pack_record(record: MatchRecord) -> Dict[str, str]:
    """
    Flatten a record into one row of strings; unset values become "".

    Args:
        record: Finished match record

    Returns:
        Mapping of column name to value, in ``COLUMNS`` order
    """
    row: Dict[str, str] = {}

    for column in SCALAR_COLUMNS:
        if column == "assistant_referees":
            row[column] = pack_assistant_referees(record)
        else:
            row[column] = getattr(record, column) or ""

    row["home_starting_xi"] = ", ".join(record.home_starting_xi or ())
    row["away_starting_xi"] = ", ".join(record.away_starting_xi or ())
    row["home_substitutes"] = pack_substitutes(record.home_substitutes)
    row["away_substitutes"] = pack_substitutes(record.away_substitutes)

    row["home_goals"] = pack_goals(record.goals, Side.HOME)
    row["away_goals"] = pack_goals(record.goals, Side.AWAY)
    row["home_cards"] = pack_cards(record.cards, Side.HOME)
    row["away_cards"] = pack_cards(record.cards, Side.AWAY)

    for name in STAT_NAMES:
        pair = record.stat(name)
        row[f"home_{name}"] = pair.home if pair.is_set else ""
        row[f"away_{name}"] = pair.away if pair.is_set else ""

    row["source_url"] = record.source_url or ""
    return row


def records_to_dataframe(records: Iterable[MatchRecord]) -> pd.DataFrame:
    rows: List[Dict[str, str]] = [pack_record(record) for record in records]
    return pd.DataFrame(rows, columns=list(COLUMNS))


def export_records(
    records: Iterable[MatchRecord], output_file: Union[str, Path]
) -> Path:
    """
    Write records to a CSV file, creating parent directories.

    Returns:
        Path of the written file
    """
    path = Path(output_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    records_to_dataframe(records).to_csv(path, index=False, encoding="utf-8")
    return path
