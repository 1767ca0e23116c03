# pipelines/run_match_collection.py
"""
Season match collection: fixtures page -> match reports -> CSV.

Usage:
    python -m pipelines.run_match_collection
    python -m pipelines.run_match_collection --test
    python -m pipelines.run_match_collection --test=20 --environment development
"""

import argparse
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from configurations import ConfigFactory, ScraperConfig, get_config
from exceptions import MatchScrapingError
from extractors import FixtureLinkCollector, MatchRecord
from logger import configure_project_logging

from .orchestrator import (
    DocumentSource,
    MatchPipeline,
    OrchestratorConfig,
    create_document_source,
)
from .record_export import export_records

logger = logging.getLogger(__name__)


@dataclass
class CollectionSummary:
    """Outcome of one collection run"""

    urls_found: int = 0
    attempted: int = 0
    records: List[MatchRecord] = field(default_factory=list)
    output_file: Optional[str] = None

    @property
    def accepted(self) -> int:
        return len(self.records)

    @property
    def skipped(self) -> int:
        return self.attempted - self.accepted


class MatchCollectionRunner:
    """
    Wires fixtures navigation, pacing, the pipeline and the export together.
    """

    def __init__(
        self,
        config: ScraperConfig,
        source: Optional[DocumentSource] = None,
        pipeline: Optional[MatchPipeline] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.source = source or create_document_source(config)
        # a pipeline built here closes the source itself
        self._closes_source = pipeline is not None
        self.pipeline = pipeline or MatchPipeline(config, source=self.source)
        self.links = FixtureLinkCollector(config.fbref)
        self._sleep = sleep
        self._rng = rng or random.Random()

    def collect_urls(self, limit: Optional[int] = None) -> List[str]:
        """
        Match report URLs from the configured fixtures page.

        Raises:
            DocumentUnavailableError: If the fixtures page cannot be loaded
            NavigationError: If it lists no match reports
        """
        fixtures = self.source.fetch(
            self.config.fbref.fixtures_url, OrchestratorConfig.FIXTURES_READY_SELECTOR
        )
        urls = self.links.require(fixtures)
        return urls[:limit] if limit else urls

    def pause(self) -> None:
        """Wait between two documents: base delay plus random jitter."""
        jitter = self._rng.uniform(
            self.config.request_min_jitter, self.config.request_max_jitter
        )
        delay = self.config.request_delay + jitter
        if delay > 0:
            self._sleep(delay)

    def run(self, limit: Optional[int] = None, export: bool = True) -> CollectionSummary:
        """
        Collect, extract and export.

        Args:
            limit: Maximum number of matches (config.max_matches if None)
            export: Write the CSV file when True

        Returns:
            Summary of the run
        """
        limit = limit or self.config.max_matches
        urls = self.collect_urls(limit)
        summary = CollectionSummary(urls_found=len(urls))
        logger.info("Found %d matches to scrape", len(urls))

        for index, url in enumerate(urls):
            if index > 0:
                self.pause()

            if index == 0 or (index + 1) % OrchestratorConfig.PROGRESS_EVERY == 0:
                logger.info("Processing %d/%d...", index + 1, len(urls))

            summary.attempted += 1
            record = self.pipeline.process(url)
            if record is not None:
                summary.records.append(record)

        if export:
            path = export_records(summary.records, self.config.output_file)
            summary.output_file = str(path)
            logger.info("Wrote %d matches to %s", summary.accepted, path)

        return summary

    def cleanup(self) -> None:
        self.pipeline.cleanup()
        if self._closes_source:
            self.source.close()


def build_summary_table(summary: CollectionSummary) -> Table:
    table = Table(title="Match Collection", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("Match reports found", str(summary.urls_found))
    table.add_row("Processed", str(summary.attempted))
    table.add_row("Accepted", f"[green]{summary.accepted}[/green]")
    table.add_row("Skipped", f"[yellow]{summary.skipped}[/yellow]")
    table.add_row("Output file", summary.output_file or "-")
    return table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Collect FBref match reports into a CSV file"
    )
    parser.add_argument(
        "--test",
        nargs="?",
        type=int,
        const=OrchestratorConfig.DEFAULT_TEST_LIMIT,
        default=None,
        metavar="N",
        help="Only scrape the first N matches (default 5)",
    )
    parser.add_argument(
        "--environment",
        choices=["development", "testing", "production"],
        default=None,
        help="Configuration profile (default: from .env, else production)",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--output", default=None, help="CSV output path")
    parser.add_argument(
        "--fetcher", choices=["selenium", "requests"], default=None
    )
    parser.add_argument(
        "--log-strategy",
        choices=["session", "daily"],
        default=None,
        help="One log file per run, or one rotated daily",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ScraperConfig:
    if args.environment:
        config = get_config(args.environment)
    else:
        config = ConfigFactory.from_environment(args.env_file)

    if args.output:
        config.output_file = args.output
    if args.fetcher:
        config.fetcher = args.fetcher
    if args.log_strategy:
        config.log_strategy = args.log_strategy
    if args.test:
        config.max_matches = args.test
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    console = Console()

    config = build_config(args)
    session_logger = configure_project_logging(
        OrchestratorConfig.SESSION_LOGGER_NAME,
        config.log_dir,
        config.log_level,
        console=console,
        strategy=config.log_strategy,
    )
    if args.test:
        session_logger.info("Test mode enabled - scraping only %d matches", args.test)

    runner = None
    try:
        runner = MatchCollectionRunner(config)
        summary = runner.run()
    except MatchScrapingError as error:
        session_logger.error("Collection failed: %s", error)
        return 1
    finally:
        if runner is not None:
            runner.cleanup()

    console.print(build_summary_table(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
