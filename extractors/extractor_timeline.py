# extractors/extractor_timeline.py
"""
Goal and card events from the match timeline.
"""

import re
from typing import List, Optional

from bs4 import Tag

from exceptions import TableNotFoundError
from logger import CardEvent, CardSeverity, GoalEvent, MatchItems, Side

from .base_extractor import FieldExtractor, normalize_space
from .document import Document
from .match_record import MatchRecord

TIMELINE_EVENTS = f"#{MatchItems.EVENTS_WRAP_ID} .{MatchItems.EVENT_CLASS}"
ANY_EVENTS = f"{MatchItems.DIV}.{MatchItems.EVENT_CLASS}"
GOAL_ICON = f'[class*="{MatchItems.GOAL_MARKER}"]'
CARD_ICON = ", ".join(
    f".{cls}"
    for cls in (
        MatchItems.YELLOW_CARD_CLASS,
        MatchItems.YELLOW_RED_CARD_CLASS,
        MatchItems.RED_CARD_CLASS,
    )
)
TEXT_ALIGN_PATTERN = re.compile(
    rf"{MatchItems.TEXT_ALIGN_STYLE}\s*:\s*(left|right)", re.IGNORECASE
)


def timeline_events(document: Document) -> List[Tag]:
    """
    Timeline event blocks in document order; any ``div.event`` when the
    events wrapper is missing.
    """
    events = document.select(TIMELINE_EVENTS)
    if not events:
        events = document.select(ANY_EVENTS)
    return events


def event_side(event: Tag, index: int) -> Side:
    """
    Decide which team an event belongs to.

    Side classes on the event or an ancestor win; then an inline text-align
    style; then alternating position in the timeline.
    """
    for node in [event] + list(event.parents):
        classes = node.get("class") or []
        if MatchItems.HOME_SIDE_CLASS in classes:
            return Side.HOME
        if MatchItems.AWAY_SIDE_CLASS in classes:
            return Side.AWAY

    style = TEXT_ALIGN_PATTERN.search(event.get("style", ""))
    if style:
        return Side.HOME if style.group(1).lower() == "left" else Side.AWAY

    return Side.HOME if index % 2 == 0 else Side.AWAY


def event_minute(event: Tag) -> str:
    """
    Minute of an event with stoppage notation kept, e.g. "45+2'".
    """
    block = event.find(MatchItems.DIV)
    if not isinstance(block, Tag):
        return ""

    lines = [
        line.strip()
        for line in block.get_text("\n").split("\n")
        if line.strip()
    ]
    if not lines:
        return ""

    first = lines[0].replace(MatchItems.TYPOGRAPHIC_APOSTROPHE, "'")
    first = first.replace(MatchItems.NBSP, "").replace(" ", "")
    found = re.search(MatchItems.MINUTE_REGEX, first)
    return found.group(0) if found else ""


def _link_names(event: Tag) -> List[str]:
    names = []
    for link in event.find_all(MatchItems.LINK):
        name = normalize_space(link.get_text())
        if name:
            names.append(name)
    return names


class TimelineExtractor(FieldExtractor):
    """
    Goals (scorer, minute, assist) and cards (player, minute, severity).
    """

    name = "timeline"

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        events = timeline_events(document)
        if not events:
            raise TableNotFoundError("match timeline")

        goals: List[GoalEvent] = []
        cards: List[CardEvent] = []

        for index, event in enumerate(events):
            side = event_side(event, index)
            minute = event_minute(event)

            goal = self._goal(event, side, minute)
            if goal:
                goals.append(goal)

            card = self._card(event, side, minute)
            if card:
                cards.append(card)

        return record.with_fields(goals=tuple(goals), cards=tuple(cards))

    def _goal(self, event: Tag, side: Side, minute: str) -> Optional[GoalEvent]:
        if not event.select_one(GOAL_ICON):
            return None
        if MatchItems.PENALTY_MISS_TEXT in event.get_text(" "):
            return None

        names = _link_names(event)
        if not names:
            return None

        assist = names[1] if len(names) > 1 else None
        return GoalEvent(scorer=names[0], minute=minute, side=side, assist=assist)

    def _card(self, event: Tag, side: Side, minute: str) -> Optional[CardEvent]:
        icon = event.select_one(CARD_ICON)
        if icon is None:
            return None

        names = _link_names(event)
        if not names:
            return None

        classes = icon.get("class") or []
        if MatchItems.YELLOW_RED_CARD_CLASS in classes:
            severity = CardSeverity.SECOND_YELLOW
        elif MatchItems.RED_CARD_CLASS in classes:
            severity = CardSeverity.RED
        else:
            severity = CardSeverity.YELLOW

        return CardEvent(player=names[0], minute=minute, side=side, severity=severity)
