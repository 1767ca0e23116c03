# extractors/extractor_meta.py
"""
Kickoff date/time, venue, attendance and match officials from the
scorebox meta panel.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional
from zoneinfo import ZoneInfo

from configurations import FBrefConfig
from logger import MatchItems

from .base_extractor import FieldExtractor, normalize_space
from .document import Document
from .match_record import MatchRecord

META_PANEL = f"{MatchItems.DIV}.{MatchItems.SCOREBOX_META_CLASS}"

# record field -> marker text in the officials line
OFFICIAL_MARKERS: Dict[str, str] = {
    "referee": MatchItems.REFEREE_MARKER,
    "assistant_referee_1": MatchItems.AR1_MARKER,
    "assistant_referee_2": MatchItems.AR2_MARKER,
    "fourth_official": MatchItems.FOURTH_MARKER,
    "var_official": MatchItems.VAR_MARKER,
}


def parse_meta_date(text: str) -> Optional[date]:
    """
    Parse a long-form date such as "Friday August 16, 2024".

    Returns:
        The calendar date, or None when the text is not in that form
    """
    try:
        return datetime.strptime(text.strip(), MatchItems.INPUT_DATE_FORMAT).date()
    except ValueError:
        return None


def zone_label(
    day: date, zone: ZoneInfo, summer_label: str, standard_label: str
) -> str:
    """
    Label for the civil time in force at local midnight of ``day``.
    """
    midnight = datetime.combine(day, time.min, tzinfo=zone)
    offset = midnight.dst()
    return summer_label if offset and offset != timedelta(0) else standard_label


def format_kickoff(
    day: date,
    kickoff: Optional[str],
    zone: ZoneInfo,
    summer_label: str = "BST",
    standard_label: str = "GMT",
) -> str:
    """
    Format a kickoff as "16 Aug 2024 20:00 BST".

    Args:
        day: Match date
        kickoff: Local "HH:MM" kickoff, or None when the page has no time
        zone: Civil timezone the page reports in
        summer_label: Label while daylight saving is in force
        standard_label: Label otherwise

    Returns:
        Formatted string; without a kickoff the time part is omitted
    """
    parts = [day.strftime(MatchItems.OUTPUT_DATE_FORMAT)]
    if kickoff:
        parts.append(kickoff)
    parts.append(zone_label(day, zone, summer_label, standard_label))
    return " ".join(parts)


class MatchMetaExtractor(FieldExtractor):
    """
    Date/time, venue, attendance and the five officials.
    """

    name = "match_meta"

    def __init__(self, fbref_config: Optional[FBrefConfig] = None):
        super().__init__()
        self.fbref_config = fbref_config or FBrefConfig()
        self.zone = ZoneInfo(self.fbref_config.civil_timezone)

    def extract(self, document: Document, record: MatchRecord) -> MatchRecord:
        panel = self.require(document.select_one(META_PANEL), "scorebox meta panel")
        text = self.inner_text(panel)

        changes: Dict[str, Optional[str]] = {}

        date_time = self._date_time(text)
        if date_time:
            changes["date_time"] = date_time

        venue = re.search(MatchItems.VENUE_REGEX, text, re.IGNORECASE)
        if venue and venue.group(1).strip():
            changes["venue"] = venue.group(1).strip()

        attendance = re.search(MatchItems.ATTENDANCE_REGEX, text, re.IGNORECASE)
        if attendance:
            changes["attendance"] = attendance.group(1)

        changes.update(self._officials(panel))
        if "referee" not in changes:
            referee = re.search(
                MatchItems.REFEREE_FALLBACK_REGEX, text, re.IGNORECASE
            )
            if referee and referee.group(1).strip():
                changes["referee"] = normalize_space(referee.group(1))

        return record.with_fields(**changes)

    def _date_time(self, text: str) -> Optional[str]:
        found = re.search(MatchItems.DATE_REGEX, text)
        if not found:
            return None

        day = parse_meta_date(found.group(1))
        if day is None:
            return None

        kickoff = re.search(MatchItems.VENUE_TIME_REGEX, text, re.IGNORECASE)
        if not kickoff:
            kickoff = re.search(MatchItems.START_TIME_REGEX, text, re.IGNORECASE)

        return format_kickoff(
            day,
            kickoff.group(1) if kickoff else None,
            self.zone,
            self.fbref_config.summer_time_label,
            self.fbref_config.standard_time_label,
        )

    def _officials(self, panel) -> Dict[str, str]:
        officials: Dict[str, str] = {}
        for span in panel.find_all(MatchItems.SPAN):
            span_text = span.get_text()
            for field_name, marker in OFFICIAL_MARKERS.items():
                if field_name in officials or marker not in span_text:
                    continue
                name = normalize_space(span_text.replace(marker, ""))
                if name:
                    officials[field_name] = name
        return officials
