"""Tests for the primary and secondary team statistics extractors."""

from conftest import build_match_html, make_document, scorebox, team_stats, team_stats_extra
from extractors import (
    FieldState,
    MatchRecord,
    PrimaryStatsExtractor,
    SecondaryStatsExtractor,
    StatPair,
)


def run_primary(html):
    return PrimaryStatsExtractor().run(make_document(html), MatchRecord())


def run_secondary(html):
    return SecondaryStatsExtractor().run(make_document(html), MatchRecord())


def values(record, name):
    pair = record.stat(name)
    return pair.home, pair.away


def test_possession_and_shots(match_document):
    record = PrimaryStatsExtractor().run(match_document, MatchRecord())

    assert record.stat("possession") == StatPair("58%", "42%", FieldState.REPORTED)
    assert values(record, "shots_on_target") == ("6", "2")
    assert values(record, "total_shots") == ("14", "6")


def test_possession_from_page_text_without_stats_table():
    html = "<html><body><div><span>55%</span> Possession <span>45%</span></div></body></html>"

    record = run_primary(html)

    assert record.stat("possession") == StatPair("55%", "45%", FieldState.REPORTED)
    assert not record.stat("total_shots").is_set


def test_possession_loose_text_match():
    html = (
        "<html><body><h3>Possession</h3>"
        "<p>Arsenal 61%</p><p>Chelsea 39%</p></body></html>"
    )

    assert values(run_primary(html), "possession") == ("61%", "39%")


def test_shots_pair_is_atomic():
    """A side without "N of M" leaves both shot statistics unset."""
    html = build_match_html(team_stats=team_stats(shots=("6 of 14", "&#8212;")))

    record = run_primary(html)

    assert not record.stat("shots_on_target").is_set
    assert not record.stat("total_shots").is_set
    assert record.stat("possession").is_set


def test_possession_pair_is_atomic():
    html = (
        '<html><body><div id="team_stats"><table>'
        "<tr><th>Liverpool</th><th>Everton</th></tr>"
        '<tr><th colspan="2">Possession</th></tr>'
        "<tr><td><strong>58%</strong></td><td><strong></strong></td></tr>"
        "</table></div></body></html>"
    )

    record = run_primary(html)

    assert not record.stat("possession").is_set


def test_xg_passes_cards_and_saves(match_document):
    record = SecondaryStatsExtractor().run(match_document, MatchRecord())

    assert values(record, "xg") == ("2.4", "0.4")
    assert values(record, "passes") == ("450 of 530", "320 of 400")
    assert values(record, "yellow_cards") == ("1", "2")
    assert values(record, "red_cards") == ("0", "1")
    assert values(record, "saves") == ("1", "4")


def test_xg_from_scorebox_label():
    html = (
        '<html><body><div class="scorebox"><div>'
        "<div>xG</div><div>1.23</div><div>0.87</div>"
        "</div></div></body></html>"
    )

    assert values(run_secondary(html), "xg") == ("1.23", "0.87")


def test_advanced_stats_from_labels(match_document):
    record = SecondaryStatsExtractor().run(match_document, MatchRecord())

    assert record.stat("fouls") == StatPair("12", "10", FieldState.REPORTED)
    assert values(record, "corners") == ("7", "3")
    assert values(record, "interceptions") == ("9", "11")
    assert values(record, "aerials_won") == ("12", "16")
    assert values(record, "long_balls") == ("30", "45")


def test_missing_labels_default_to_zero(match_document):
    record = SecondaryStatsExtractor().run(match_document, MatchRecord())

    for name in ("big_chances", "woodwork", "blocks", "through_balls"):
        assert record.stat(name) == StatPair.defaulted()


def test_missing_advanced_panel_leaves_stats_unset():
    record = run_secondary(build_match_html(team_stats_extra=""))

    for name in ("tackles", "fouls", "big_chances", "through_balls"):
        assert record.stat(name) == StatPair.unset()
    assert record.stat("xg").state is FieldState.REPORTED


def test_reported_zero_is_distinct_from_default():
    html = build_match_html(team_stats_extra=team_stats_extra([("0", "Offsides", "0")]))

    record = run_secondary(html)

    assert record.stat("offsides") == StatPair("0", "0", FieldState.REPORTED)
    assert record.stat("fouls").state is FieldState.DEFAULTED


def test_missing_team_stats_table_keeps_other_values():
    html = build_match_html(omit=("team_stats",))

    record = run_secondary(html)

    assert not record.stat("passes").is_set
    assert not record.stat("saves").is_set
    assert values(record, "xg") == ("2.4", "0.4")
    assert values(record, "fouls") == ("12", "10")


def test_unset_xg_without_scorebox_values():
    html = build_match_html(scorebox=scorebox(xg=(None, None)))

    assert not run_secondary(html).stat("xg").is_set
