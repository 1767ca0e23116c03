"""Tests for synonym lookup in the advanced statistics panel."""

from conftest import make_document, team_stats_extra
from extractors import StatLabelLookup
from extractors.extraction_config import StatSynonyms


def lookup_for(entries):
    return StatLabelLookup(make_document(f"<html><body>{team_stats_extra(entries)}</body></html>"))


def test_secondary_synonym_resolves():
    lookup = lookup_for([("21", "SCA", "13")])

    assert lookup.find(StatSynonyms.for_stat("big_chances")) == ("21", "13")


def test_first_synonym_in_order_wins():
    lookup = lookup_for([("21", "SCA", "13"), ("4", "Big Chances", "1")])

    assert lookup.find(StatSynonyms.for_stat("big_chances")) == ("4", "1")


def test_labels_match_case_insensitively_on_whole_text():
    lookup = lookup_for([("18", "AERIAL DUELS", "22"), ("3", "Long Balls Attempted", "5")])

    assert lookup.find(StatSynonyms.for_stat("aerials_won")) == ("18", "22")
    assert lookup.find(("Long Balls",)) is None


def test_missing_panel():
    lookup = StatLabelLookup(make_document("<html><body></body></html>"))

    assert not lookup.available
    assert lookup.find(("Fouls",)) is None
