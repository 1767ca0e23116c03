"""Shared HTML builders and fixtures for match report tests."""

import pytest

from configurations import ConfigFactory
from extractors import Document

HOME_TEAM = "Manchester United"
AWAY_TEAM = "Fulham"

HOME_XI = [
    "André Onana",
    "Diogo Dalot",
    "Harry Maguire",
    "Lisandro Martínez",
    "Noussair Mazraoui",
    "Kobbie Mainoo",
    "Casemiro",
    "Bruno Fernandes",
    "Alejandro Garnacho",
    "Marcus Rashford",
    "Mason Mount",
]
AWAY_XI = [
    "Bernd Leno",
    "Kenny Tete",
    "Calvin Bassey",
    "Joachim Andersen",
    "Antonee Robinson",
    "Saša Lukić",
    "Andreas Pereira",
    "Alex Iwobi",
    "Emile Smith Rowe",
    "Raúl Jiménez",
    "Harrison Reed",
]
HOME_BENCH = ["Altay Bayındır", "Joshua Zirkzee", "Jonny Evans"]
AWAY_BENCH = ["Steven Benda", "Adama Traoré", "Harry Wilson"]


def player(name):
    return f'<a href="/en/players/{abs(hash(name)) % 10**8:08d}/{name.replace(" ", "-")}">{name}</a>'


def event(side, minute, icon, body, style=None):
    side_class = f" {side}" if side else ""
    style_attr = f' style="{style}"' if style else ""
    return (
        f'<div class="event{side_class}"{style_attr}>'
        f"<div>&#160;{minute}&#8217;<br/><small><span>score</span></small></div>"
        f'<div class="event_icon {icon}"></div>'
        f"<div>{body}</div>"
        "</div>"
    )


def scorebox(
    home=HOME_TEAM,
    away=AWAY_TEAM,
    scores=("2", "1"),
    xg=("2.4", "0.4"),
    managers=("Erik ten Hag", "Marco Silva"),
    meta=None,
):
    def panel(team, score, team_xg, manager):
        parts = [f'<div><strong><a href="/en/squads/x/{team}">{team}</a></strong></div>']
        parts.append('<div class="scores">')
        if score is not None:
            parts.append(f'<div class="score">{score}</div>')
        if team_xg is not None:
            parts.append(f'<div class="score_xg">{team_xg}</div>')
        parts.append("</div>")
        if manager:
            parts.append(f'<div class="datapoint"><strong>Manager</strong>: {manager}</div>')
        return "<div>" + "".join(parts) + "</div>"

    managers = managers or (None, None)
    return (
        '<div class="scorebox">'
        + panel(home, scores[0], xg[0], managers[0])
        + panel(away, scores[1], xg[1], managers[1])
        + (meta if meta is not None else scorebox_meta())
        + "</div>"
    )


def scorebox_meta(
    date_line="<strong>Friday August 16, 2024</strong>",
    time_line='<span class="venuetime">20:00</span> (20:00 venue time)',
    officials=True,
):
    lines = [f"<div>{date_line}</div>"]
    if time_line:
        lines.append(f"<div>{time_line}</div>")
    lines.append("<div><small><b>Attendance</b></small>: <small>73,297</small></div>")
    lines.append("<div><small><b>Venue</b></small>: <small>Old Trafford, Manchester</small></div>")
    if officials:
        lines.append(
            "<div><small><b>Officials</b></small>: <small>"
            "<span>Robert Jones&#160;(Referee)</span> · "
            "<span>Eddie Smart&#160;(AR1)</span> · "
            "<span>Tim Wood&#160;(AR2)</span> · "
            "<span>Tony Harrington&#160;(4th)</span> · "
            "<span>Stuart Attwell&#160;(VAR)</span>"
            "</small></div>"
        )
    return '<div class="scorebox_meta">' + "".join(lines) + "</div>"


def timeline_events():
    return [
        event("a", "12", "goal", f"<div>{player('Bruno Fernandes')}</div><small>Assist: {player('Marcus Rashford')}</small>"),
        event("b", "30", "yellow_card", f"<div>{player('Calvin Bassey')}</div>"),
        event("b", "45+2", "goal", f"<div>{player('Raúl Jiménez')}</div>"),
        event("a", "50", "goal", f"<div>{player('Marcus Rashford')}</div><small>Assist: {player('Alejandro Garnacho')}</small>"),
        event("a", "61", "substitute_in", f"<div>{player('Joshua Zirkzee')} for {player('Marcus Rashford')}</div>"),
        event("b", "70", "substitute_in", f"<div>{player('Adama Traoré')} for {player('Alex Iwobi')}</div>"),
        event("b", "80", "yellow_red_card", f"<div>{player('Calvin Bassey')}</div>"),
    ]


def events_wrap(events=None):
    events = timeline_events() if events is None else events
    return '<div id="events_wrap">' + "".join(events) + "</div>"


def lineup(side_id, team, starters, bench):
    rows = [f'<tr><th colspan="2">{team} (4-2-3-1)</th></tr>']
    rows += [f"<tr><td>{i}</td><td>{player(name)}</td></tr>" for i, name in enumerate(starters, 1)]
    rows.append('<tr><th colspan="2">Bench</th></tr>')
    rows += [f"<tr><td>{i}</td><td>{player(name)}</td></tr>" for i, name in enumerate(bench, 20)]
    return f'<div class="lineup" id="{side_id}"><table>{"".join(rows)}</table></div>'


def lineups():
    return (
        '<div id="field_wrap">'
        + lineup("a", HOME_TEAM, HOME_XI, HOME_BENCH)
        + lineup("b", AWAY_TEAM, AWAY_XI, AWAY_BENCH)
        + "</div>"
    )


def team_stats(
    possession=("58%", "42%"),
    shots=("6 of 14 &#8212; 43%", "33% &#8212; 2 of 6"),
    passes=("450 of 530 &#8212; <strong>85%</strong>", "<strong>80%</strong> &#8212; 320 of 400"),
    saves=("1 of 2 &#8212; 50%", "67% &#8212; 4 of 6"),
    cards=(
        '<span class="yellow_card"></span>',
        '<span class="yellow_card"></span><span class="yellow_card"></span><span class="red_card"></span>',
    ),
):
    rows = [
        f"<tr><th>{HOME_TEAM}</th><th>{AWAY_TEAM}</th></tr>",
        '<tr><th colspan="2">Possession</th></tr>',
        f"<tr><td><div><div><strong>{possession[0]}</strong></div></div></td>"
        f"<td><div><div><strong>{possession[1]}</strong></div></div></td></tr>",
        '<tr><th colspan="2">Passing Accuracy</th></tr>',
        f"<tr><td><div><div>{passes[0]}</div></div></td><td><div><div>{passes[1]}</div></div></td></tr>",
        '<tr><th colspan="2">Shots on Target</th></tr>',
        f"<tr><td>{shots[0]}</td><td>{shots[1]}</td></tr>",
        '<tr><th colspan="2">Saves</th></tr>',
        f"<tr><td>{saves[0]}</td><td>{saves[1]}</td></tr>",
        '<tr><th colspan="2">Cards</th></tr>',
        f'<tr><td><div class="cards">{cards[0]}</div></td><td><div class="cards">{cards[1]}</div></td></tr>',
    ]
    return f'<div id="team_stats"><table>{"".join(rows)}</table></div>'


DEFAULT_EXTRA = [
    ("12", "Fouls", "10"),
    ("7", "Corners", "3"),
    ("14", "Crosses", "9"),
    ("15", "Tackles", "18"),
    ("9", "Int", "11"),
    ("12", "Aerials Won", "16"),
    ("20", "Clearances", "25"),
    ("2", "Offsides", "1"),
    ("30", "Long Balls", "45"),
]


def team_stats_extra(entries=None):
    entries = DEFAULT_EXTRA if entries is None else entries
    header = f'<div class="th">{HOME_TEAM}</div><div class="th"></div><div class="th">{AWAY_TEAM}</div>'
    body = "".join(
        f"<div>{home}</div><div>{label}</div><div>{away}</div>" for home, label, away in entries
    )
    return f'<div id="team_stats_extra"><div>{header}{body}</div></div>'


def shots_table(rows=None, home_label="Manchester Utd", away_label=AWAY_TEAM):
    if rows is None:
        rows = [
            (home_label, "0.45", "Goal"),
            None,
            (away_label, "0.38", "Goal"),
            (home_label, "0.05", "Woodwork"),
            (away_label, "0.10", "Saved"),
            (home_label, "0.60", "Goal"),
        ]
    body = []
    for row in rows:
        if row is None:
            body.append('<tr class="spacer partial_table"><td colspan="4"></td></tr>')
            continue
        team, xg, outcome = row
        body.append(
            "<tr>"
            f'<th data-stat="minute">10</th>'
            f'<td data-stat="team"><a href="/en/squads/x">{team}</a></td>'
            f'<td data-stat="xg_shot">{xg}</td>'
            f'<td data-stat="outcome">{outcome}</td>'
            "</tr>"
        )
    return (
        '<div id="all_shots"><!-- <table id="shots_all"><thead><tr><th>Minute</th></tr></thead>'
        f"<tbody>{''.join(body)}</tbody></table> --></div>"
    )


def footer_table(table_id, values):
    cells = "".join(f'<td data-stat="{stat}">{value}</td>' for stat, value in values.items())
    return (
        f'<table id="{table_id}"><tbody><tr><td>row</td></tr></tbody>'
        f'<tfoot><tr><th data-stat="player">Squad Total</th>{cells}</tr></tfoot></table>'
    )


def possession_tables(home=("650", "30", "15", "8"), away=("480", "14", "10", "4")):
    columns = ("touches", "touches_att_pen_area", "dribbles", "dribbles_completed")
    return footer_table("stats_19538871_possession", dict(zip(columns, home))) + footer_table(
        "stats_fd962109_possession", dict(zip(columns, away))
    )


def passing_types_tables(home="5", away="2"):
    return footer_table("stats_19538871_passing_types", {"through_balls": home}) + footer_table(
        "stats_fd962109_passing_types", {"through_balls": away}
    )


def defense_tables(home="11", away="9"):
    return (
        "<!-- "
        + footer_table("stats_19538871_defense", {"blocks": home})
        + " -->"
        + "<!-- "
        + footer_table("stats_fd962109_defense", {"blocks": away})
        + " -->"
    )


SECTION_BUILDERS = {
    "scorebox": scorebox,
    "events": events_wrap,
    "lineups": lineups,
    "team_stats": team_stats,
    "team_stats_extra": team_stats_extra,
    "shots": shots_table,
    "possession": possession_tables,
    "passing_types": passing_types_tables,
    "defense": defense_tables,
}


def build_match_html(omit=(), **overrides):
    """Compose a match report page; sections can be dropped or replaced."""
    parts = []
    for name, builder in SECTION_BUILDERS.items():
        if name in omit:
            continue
        parts.append(overrides[name] if name in overrides else builder())
    return "<html><head><title>Match Report</title></head><body>" + "".join(parts) + "</body></html>"


def make_document(html, url="https://fbref.com/en/matches/cc5b4244/Manchester-United-Fulham-August-16-2024-Premier-League"):
    return Document.from_html(html, url)


@pytest.fixture
def match_html():
    return build_match_html()


@pytest.fixture
def match_document(match_html):
    return make_document(match_html)


@pytest.fixture
def testing_config():
    return ConfigFactory.testing()
