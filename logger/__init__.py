from .constants_match import (
    CardEvent,
    CardSeverity,
    GoalEvent,
    MatchItems,
    Side,
    SubstituteEntry,
)
from .logger import (
    ColoredFormatter,
    configure_project_logging,
    setup_daily_rotating_logger,
    setup_session_based_logger,
    setup_smart_logger,
)

__all__ = [
    "MatchItems",
    "Side",
    "CardSeverity",
    "GoalEvent",
    "CardEvent",
    "SubstituteEntry",
    "ColoredFormatter",
    "configure_project_logging",
    "setup_daily_rotating_logger",
    "setup_session_based_logger",
    "setup_smart_logger",
]
