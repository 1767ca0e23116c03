# configurations/settings_orchestrator.py
"""
Main scraper configuration combining all components.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from exceptions import ConfigurationError


@dataclass
class FBrefConfig:
    """
    Source site configuration
    """

    base_url: str = "https://fbref.com"
    fixtures_url: str = (
        "https://fbref.com/en/comps/9/2024-2025/schedule/"
        "2024-2025-Premier-League-Scores-and-Fixtures"
    )
    match_path_keyword: str = "/matches/"

    # ***> Every kickoff is reported in this civil timezone <***
    civil_timezone: str = "Europe/London"
    summer_time_label: str = "BST"
    standard_time_label: str = "GMT"


@dataclass
class ReconciliationConfig:
    """
    Settings for the global reconciliation pass
    """

    big_chance_xg_threshold: float = 0.35
    team_prefix_length: int = 4
    similarity_threshold: float = 0.5

    # ***> "tri_state" or "legacy_zero" <***
    overwrite_policy: str = "tri_state"

    # ***> "prefix" or "similarity" <***
    team_matcher: str = "prefix"


OVERWRITE_POLICIES = ("tri_state", "legacy_zero")
TEAM_MATCHERS = ("prefix", "similarity")
FETCHERS = ("selenium", "requests")
LOG_STRATEGIES = ("session", "daily")


@dataclass
class ScraperConfig:
    """
    Combined configuration for fetching, extraction and export.
    """

    # Core configurations
    fbref: FBrefConfig = field(default_factory=FBrefConfig)
    reconciliation: ReconciliationConfig = field(default_factory=ReconciliationConfig)

    # Document source settings
    fetcher: str = "selenium"
    headless: bool = True
    page_load_timeout: float = 20.0
    max_retries: int = 3
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
    )

    # Pacing between documents (seconds)
    request_delay: float = 4.0
    request_min_jitter: float = 3.0
    request_max_jitter: float = 6.0

    # Collection settings
    max_matches: Optional[int] = None

    # Output settings
    output_file: str = "data/EPL_2024_2025_FBref.csv"

    # Logging settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    # ***> "session" (one file per run) or "daily" (rotated at midnight) <***
    log_strategy: str = "session"

    # Environment tracking
    _environment: Optional[str] = None

    def get_effective_delay(self) -> Tuple[float, float]:
        """
        Get the pause range between two documents.
        Returns: (min_delay, max_delay)
        """
        return (
            self.request_delay + self.request_min_jitter,
            self.request_delay + self.request_max_jitter,
        )

    def validate(self) -> bool:
        """
        Validate configuration settings
        """
        if self.page_load_timeout <= 0:
            raise ConfigurationError("page_load_timeout must be greater than 0")

        if self.max_retries <= 0:
            raise ConfigurationError("max_retries must be greater than 0")

        if self.request_delay < 0:
            raise ConfigurationError("request_delay cannot be negative")

        if self.request_min_jitter < 0:
            raise ConfigurationError("request_min_jitter cannot be negative")

        if self.request_max_jitter < self.request_min_jitter:
            raise ConfigurationError(
                "request_max_jitter must be >= request_min_jitter"
            )

        if self.max_matches is not None and self.max_matches <= 0:
            raise ConfigurationError("max_matches must be greater than 0")

        if self.fetcher not in FETCHERS:
            raise ConfigurationError(f"Unknown fetcher: {self.fetcher}")

        if self.log_strategy not in LOG_STRATEGIES:
            raise ConfigurationError(f"Unknown log strategy: {self.log_strategy}")

        reconciliation = self.reconciliation
        if reconciliation.overwrite_policy not in OVERWRITE_POLICIES:
            raise ConfigurationError(
                f"Unknown overwrite policy: {reconciliation.overwrite_policy}"
            )

        if reconciliation.team_matcher not in TEAM_MATCHERS:
            raise ConfigurationError(
                f"Unknown team matcher: {reconciliation.team_matcher}"
            )

        if not 0 < reconciliation.big_chance_xg_threshold <= 1:
            raise ConfigurationError("big_chance_xg_threshold must be in (0, 1]")

        if reconciliation.team_prefix_length <= 0:
            raise ConfigurationError("team_prefix_length must be greater than 0")

        return True
