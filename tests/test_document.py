"""Tests for page parsing and commented-out tables."""

from extractors import Document, uncomment_html

HIDDEN_TABLE = (
    '<div id="all_defense"><!--\n'
    '<table id="stats_defense"><tr><td data-stat="blocks">4</td></tr></table>\n'
    "--></div>"
)


def test_commented_tables_are_exposed():
    document = Document.from_html(f"<html><body>{HIDDEN_TABLE}</body></html>")

    assert document.select_one("#stats_defense") is not None


def test_comments_can_be_kept():
    document = Document.from_html(
        f"<html><body>{HIDDEN_TABLE}</body></html>", unwrap_comments=False
    )

    assert document.select_one("#stats_defense") is None


def test_plain_comments_are_untouched():
    html = "<!-- generated by the build --><p>text</p>"

    assert uncomment_html(html) == html


def test_comment_with_trailing_text_does_not_hide_next_table():
    html = (
        "<html><body><!-- <div>promo</div> tracking -->"
        "<div id='keep'>kept</div>"
        "<!-- <table id='shots_all'><tr><td>1</td></tr></table> -->"
        "</body></html>"
    )

    document = Document.from_html(html)

    assert document.select_one("#keep").get_text() == "kept"
    assert document.select_one("#shots_all") is not None
    assert document.select_one("div:not(#keep)") is None


def test_body_text_joins_blocks():
    document = Document.from_html(
        "<html><body><div>55%</div><div>Possession</div><div>45%</div></body></html>",
        "https://fbref.com/en/matches/x",
    )

    assert document.body_text == "55% Possession 45%"
    assert document.url == "https://fbref.com/en/matches/x"
