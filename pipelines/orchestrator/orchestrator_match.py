# pipelines/orchestrator/orchestrator_match.py
"""
Match report pipeline: one document in, one record (or nothing) out.
"""

import logging
from typing import Optional, Sequence

from configurations import ScraperConfig
from exceptions import DocumentUnavailableError
from extractors import (
    Document,
    GlobalReconciliationPass,
    HalfTimeCalculator,
    IdentityExtractor,
    LineupsExtractor,
    MatchMetaExtractor,
    MatchRecord,
    PrimaryStatsExtractor,
    SecondaryStatsExtractor,
    TimelineExtractor,
)

from .base_orchestrator import BaseOrchestrator
from .document_source import DocumentSource, create_document_source
from .orchestrator_config import OrchestratorConfig

logger = logging.getLogger(__name__)


class MatchPipeline(BaseOrchestrator):
    """
    Runs the extraction stages over a match report in a fixed order.

    Identity and score always run first; a document without a home team is
    not a match report and is discarded. The remaining stages run in order:
    meta, timeline, lineups, primary stats, secondary stats, half-time,
    reconciliation. Every stage is fault isolated.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        source: Optional[DocumentSource] = None,
        stages: Optional[Sequence] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Scraper configuration (uses development if None)
            source: Document source for ``process``; built from config on first use
            stages: Stages to run after identity; the standard order if None

        Raises:
            ConfigurationError: If configuration is invalid
        """
        super().__init__(config)

        self._source = source
        self.identity = IdentityExtractor()
        self.stages = list(stages) if stages is not None else self._default_stages()

    def _default_stages(self) -> list:
        return [
            MatchMetaExtractor(self.config.fbref),
            TimelineExtractor(),
            LineupsExtractor(),
            PrimaryStatsExtractor(),
            SecondaryStatsExtractor(),
            HalfTimeCalculator(),
            GlobalReconciliationPass(self.config.reconciliation),
        ]

    @property
    def source(self) -> DocumentSource:
        if self._source is None:
            self._source = create_document_source(self.config)
        return self._source

    def run(self, document: Document) -> Optional[MatchRecord]:
        """
        Extract one match record from a parsed report.

        Args:
            document: Parsed match report

        Returns:
            Finished record, or None if the document has no home team
        """
        record = MatchRecord(source_url=document.url or None)
        record = self.identity.run(document, record)

        if not record.home_team:
            logger.info("Discarding %s: no home team", self._display(document.url))
            return None

        for stage in self.stages:
            record = stage.run(document, record)

        logger.info(
            "Accepted %s vs %s (%s)",
            record.home_team,
            record.away_team,
            record.full_time_score or "no score",
        )
        return record

    def process(self, url: str) -> Optional[MatchRecord]:
        """
        Fetch and extract one match report.

        Returns:
            Finished record, or None if the page could not be loaded or
            is not a match report
        """
        try:
            document = self.source.fetch(url, OrchestratorConfig.MATCH_READY_SELECTOR)
        except DocumentUnavailableError as error:
            logger.warning("No record produced: %s", error)
            return None
        return self.run(document)

    def cleanup(self) -> None:
        if self._source is not None:
            self._source.close()

    @staticmethod
    def _display(url: Optional[str]) -> str:
        if not url:
            return "<document>"
        if len(url) > OrchestratorConfig.URL_DISPLAY_LENGTH:
            return url[: OrchestratorConfig.URL_DISPLAY_LENGTH] + OrchestratorConfig.URL_ELLIPSIS
        return url
