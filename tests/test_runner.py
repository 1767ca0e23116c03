"""Tests for the collection runner and its command line."""

import random

import pytest

from conftest import build_match_html, make_document
from exceptions import DocumentUnavailableError, NavigationError
from pipelines import MatchCollectionRunner
from pipelines.run_match_collection import build_config, build_summary_table, parse_args

MATCH_URLS = [
    "https://fbref.com/en/matches/cc5b4244/Manchester-United-Fulham",
    "https://fbref.com/en/matches/a1d0d529/Ipswich-Town-Liverpool",
    "https://fbref.com/en/matches/34ea8b6d/Arsenal-Wolves",
]


class FakeSource:
    def __init__(self, pages):
        self.pages = pages
        self.fetched = []
        self.closed = False
        self.close_calls = 0

    def fetch(self, url, ready_selector=None):
        self.fetched.append(url)
        if url not in self.pages:
            raise DocumentUnavailableError(url)
        return make_document(self.pages[url], url)

    def close(self):
        self.closed = True
        self.close_calls += 1


def fixtures_html(urls):
    rows = "".join(
        f'<tr><td data-stat="match_report"><a href="{url}">Match Report</a></td></tr>'
        for url in urls
    )
    return f"<html><body><table><tbody>{rows}</tbody></table></body></html>"


@pytest.fixture
def pages(testing_config):
    return {
        testing_config.fbref.fixtures_url: fixtures_html(MATCH_URLS),
        MATCH_URLS[0]: build_match_html(),
        MATCH_URLS[1]: build_match_html(omit=("scorebox",)),
    }


def make_runner(config, pages, sleeps):
    return MatchCollectionRunner(
        config,
        source=FakeSource(pages),
        sleep=sleeps.append,
        rng=random.Random(7),
    )


def test_run_collects_and_skips(testing_config, pages):
    sleeps = []
    testing_config.request_delay = 1.0
    runner = make_runner(testing_config, pages, sleeps)

    summary = runner.run(limit=3, export=False)

    assert summary.urls_found == 3
    assert summary.attempted == 3
    assert summary.accepted == 1
    assert summary.skipped == 2
    assert summary.records[0].home_team == "Manchester United"
    assert len(sleeps) == 2
    assert all(delay >= 1.0 for delay in sleeps)


def test_limit_caps_the_url_list(testing_config, pages):
    runner = make_runner(testing_config, pages, [])

    summary = runner.run(limit=1, export=False)

    assert summary.urls_found == 1
    assert runner.source.fetched == [testing_config.fbref.fixtures_url, MATCH_URLS[0]]


def test_config_limit_applies_without_argument(testing_config, pages):
    testing_config.max_matches = 2
    runner = make_runner(testing_config, pages, [])

    assert runner.run(export=False).urls_found == 2


def test_zero_delay_does_not_sleep(testing_config, pages):
    sleeps = []
    runner = make_runner(testing_config, pages, sleeps)

    runner.run(limit=3, export=False)

    assert sleeps == []


def test_export_writes_csv(testing_config, pages, tmp_path):
    testing_config.output_file = str(tmp_path / "matches.csv")
    runner = make_runner(testing_config, pages, [])

    summary = runner.run(limit=2)

    assert summary.output_file == str(tmp_path / "matches.csv")
    assert (tmp_path / "matches.csv").read_text(encoding="utf-8").startswith("home_team,")


def test_empty_fixtures_page(testing_config):
    pages = {testing_config.fbref.fixtures_url: "<html><body></body></html>"}
    runner = make_runner(testing_config, pages, [])

    with pytest.raises(NavigationError):
        runner.run(export=False)


def test_cleanup_closes_source(testing_config, pages):
    runner = make_runner(testing_config, pages, [])

    runner.cleanup()

    assert runner.source.closed
    assert runner.source.close_calls == 1


def test_summary_table(testing_config, pages):
    summary = make_runner(testing_config, pages, []).run(limit=2, export=False)

    table = build_summary_table(summary)

    assert table.row_count == 5


def test_test_flag_defaults_to_five():
    assert parse_args(["--test"]).test == 5
    assert parse_args(["--test=20"]).test == 20
    assert parse_args([]).test is None


def test_build_config_applies_overrides():
    args = parse_args(
        ["--environment", "testing", "--test=3", "--output", "x.csv", "--fetcher", "selenium"]
    )

    config = build_config(args)

    assert config.max_matches == 3
    assert config.output_file == "x.csv"
    assert config.fetcher == "selenium"


def test_log_strategy_from_command_line():
    config = build_config(parse_args(["--environment", "testing", "--log-strategy", "daily"]))

    assert config.log_strategy == "daily"
    assert config.validate()
