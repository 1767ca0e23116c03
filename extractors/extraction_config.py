# extractors/extraction_config.py
"""
Configuration module for match report extraction.
"""

from typing import Dict, Tuple

from logger import MatchItems


class ExtractionConfig:
    """
    Configuration class for data extraction settings.
    """

    # Regex Patterns
    FLOAT_PATTERN = r"(\d+\.?\d*)"
    N_OF_M_PATTERN = r"(\d+)\s*of\s*(\d+)"
    MINUTE_DIGITS_PATTERN = r"[^0-9+]"

    # Half-time boundary (base minute, stoppage time excluded)
    HALF_TIME_MINUTE = 45

    # Values treated as blank in tables
    BLANK_VALUES: Tuple[str, ...] = ("", "-", "—")

    # Error Messages
    ERROR_MESSAGES: Dict[str, str] = {
        "extractor_failed": "%s failed on %s: %s",
        "fallback_used": "%s: primary strategy failed (%s), using fallback",
        "invalid_cell": "Invalid cell structure provided",
    }


class StatSynonyms:
    """
    Label variants under which the advanced statistics panel reports a stat.
    Order matters: the first label found wins.
    """

    ADVANCED: Dict[str, Tuple[str, ...]] = {
        "tackles": ("Tackles",),
        "corners": ("Corners",),
        "fouls": ("Fouls",),
        "offsides": ("Offsides",),
        "big_chances": ("Big Chances", "SCA", "Shot-Creating Actions"),
        "woodwork": ("Woodwork", "Post", "Hit Woodwork", "Shots off Woodwork"),
        "crosses": ("Crosses", "Crs"),
        "clearances": ("Clearances", "Clr"),
        "interceptions": ("Interceptions", "Int"),
        "blocks": ("Blocks", "Blk"),
        "aerials_won": ("Aerials Won", "Aerial Duels", "Aerial Duels Won", "Aerials"),
        "long_balls": ("Long Balls", "Long", "Long Passes"),
        "through_balls": ("Through Balls", "Through", "ThrBalls"),
    }

    @classmethod
    def for_stat(cls, name: str) -> Tuple[str, ...]:
        return cls.ADVANCED[name]


class PhysicalColumns:
    """
    tfoot columns of the possession tables mapped to record statistics
    """

    MAPPING: Dict[str, str] = {
        MatchItems.STAT_TOUCHES: "touches",
        MatchItems.STAT_TOUCHES_ATT_PEN_AREA: "touches_opp_box",
        MatchItems.STAT_DRIBBLES: "dribbles",
        MatchItems.STAT_DRIBBLES_COMPLETED: "dribbles_completed",
    }
