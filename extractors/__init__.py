from .base_extractor import BaseDataExtractor, FieldExtractor
from .document import Document, uncomment_html
from .extraction_config import ExtractionConfig, StatSynonyms
from .extractor_identity import IdentityExtractor
from .extractor_lineups import LineupsExtractor
from .extractor_meta import MatchMetaExtractor, format_kickoff, parse_meta_date
from .extractor_physical import PhysicalStatsExtractor
from .extractor_stats import PrimaryStatsExtractor, SecondaryStatsExtractor
from .extractor_timeline import TimelineExtractor
from .half_time import HalfTimeCalculator, compute_half_time_score
from .label_lookup import StatLabelLookup
from .match_record import STAT_NAMES, FieldState, MatchRecord, StatPair
from .navigation import FixtureLinkCollector, NavigationConfig, URLParser
from .reconciliation import (
    GlobalReconciliationPass,
    LegacyZeroOverwritePolicy,
    OverwritePolicy,
    PrefixTeamMatcher,
    SimilarityTeamMatcher,
    TeamSideMatcher,
    TriStateOverwritePolicy,
    build_overwrite_policy,
    build_team_matcher,
)

__all__ = [
    "BaseDataExtractor",
    "FieldExtractor",
    "Document",
    "uncomment_html",
    "ExtractionConfig",
    "StatSynonyms",
    "MatchRecord",
    "StatPair",
    "FieldState",
    "STAT_NAMES",
    "IdentityExtractor",
    "MatchMetaExtractor",
    "format_kickoff",
    "parse_meta_date",
    "TimelineExtractor",
    "LineupsExtractor",
    "PrimaryStatsExtractor",
    "SecondaryStatsExtractor",
    "PhysicalStatsExtractor",
    "StatLabelLookup",
    "HalfTimeCalculator",
    "compute_half_time_score",
    "GlobalReconciliationPass",
    "OverwritePolicy",
    "TriStateOverwritePolicy",
    "LegacyZeroOverwritePolicy",
    "TeamSideMatcher",
    "PrefixTeamMatcher",
    "SimilarityTeamMatcher",
    "build_overwrite_policy",
    "build_team_matcher",
    "FixtureLinkCollector",
    "NavigationConfig",
    "URLParser",
]
