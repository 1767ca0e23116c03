"""Tests for goal and card events read from the match timeline."""

from conftest import build_match_html, event, events_wrap, make_document, player
from extractors import MatchRecord, TimelineExtractor
from logger import CardEvent, CardSeverity, GoalEvent, Side


def run_timeline(html):
    return TimelineExtractor().run(make_document(html), MatchRecord())


def test_goals_in_document_order(match_document):
    record = TimelineExtractor().run(match_document, MatchRecord())

    assert record.goals == (
        GoalEvent("Bruno Fernandes", "12'", Side.HOME, "Marcus Rashford"),
        GoalEvent("Raúl Jiménez", "45+2'", Side.AWAY, None),
        GoalEvent("Marcus Rashford", "50'", Side.HOME, "Alejandro Garnacho"),
    )


def test_cards_with_severity(match_document):
    record = TimelineExtractor().run(match_document, MatchRecord())

    assert record.cards == (
        CardEvent("Calvin Bassey", "30'", Side.AWAY, CardSeverity.YELLOW),
        CardEvent("Calvin Bassey", "80'", Side.AWAY, CardSeverity.SECOND_YELLOW),
    )


def test_missed_penalty_is_not_a_goal():
    html = build_match_html(
        events=events_wrap(
            [
                event("a", "33", "goal", f"<div>{player('Bukayo Saka')}</div><small>Penalty miss</small>"),
                event("b", "71", "red_card", f"<div>{player('Moisés Caicedo')}</div>"),
            ]
        )
    )

    record = run_timeline(html)

    assert record.goals == ()
    assert record.cards == (CardEvent("Moisés Caicedo", "71'", Side.AWAY, CardSeverity.RED),)


def test_side_from_alignment_then_position():
    """Without side classes, inline alignment wins over alternation."""
    html = build_match_html(
        events=events_wrap(
            [
                event(None, "5", "goal", f"<div>{player('Erling Haaland')}</div>", style="text-align: right"),
                event(None, "20", "goal", f"<div>{player('Phil Foden')}</div>"),
                event(None, "60", "goal", f"<div>{player('Son Heung-min')}</div>"),
            ]
        )
    )

    goals = run_timeline(html).goals

    assert [goal.side for goal in goals] == [Side.AWAY, Side.AWAY, Side.HOME]


def test_events_outside_wrapper_are_found():
    html = (
        "<html><body>"
        + event("a", "9", "goal", f"<div>{player('Ollie Watkins')}</div>")
        + "</body></html>"
    )

    assert run_timeline(html).goals == (GoalEvent("Ollie Watkins", "9'", Side.HOME),)


def test_missing_timeline_leaves_events_unset():
    record = run_timeline(build_match_html(omit=("events",)))

    assert record.goals is None
    assert record.cards is None
