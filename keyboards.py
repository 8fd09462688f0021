"""
Button layouts.

A layout is a list of rows, each row a list of Buttons. Layouts are
transport-independent; bot.py turns them into discord.py views. They stay
within Discord's limits of 5 buttons per row, 5 rows, and unique custom_ids.
"""

from collections import namedtuple
from datetime import date
from typing import List

from navigation import build_token
from teams import AMERICAN_LEAGUE_ID, LEAGUE_NAMES, NATIONAL_LEAGUE_ID, league_of, league_teams
from time_utils import shift_date

Button = namedtuple("Button", ["label", "token"])
Layout = List[List[Button]]

BUTTONS_PER_ROW = 5


def _back_row(target: str) -> List[Button]:
    return [Button("⬅ Back", build_token("back", target))]


def _other_league(league_id: int) -> int:
    return NATIONAL_LEAGUE_ID if league_id == AMERICAN_LEAGUE_ID else AMERICAN_LEAGUE_ID


def start_keyboard() -> Layout:
    return [
        [Button("Get Today's Schedule", build_token("scores"))],
        [Button("Get Latest Standings", build_token("standings"))],
        [Button("Get Team Details", build_token("teams")), Button("Get Team Rosters", build_token("rosters"))],
    ]


def schedule_keyboard(day: date) -> Layout:
    """Yesterday / Today / Tomorrow, Refresh, Back."""
    return [
        [
            Button("⬅ Yesterday", build_token("games", shift_date(day, -1))),
            Button("Today", build_token("scores")),
            Button("Tomorrow ➡", build_token("games", shift_date(day, 1))),
        ],
        [Button("🔄 Refresh", build_token("refresh", day))],
        _back_row("start"),
    ]


def standings_keyboard() -> Layout:
    return [
        [
            Button(LEAGUE_NAMES[AMERICAN_LEAGUE_ID], build_token("standings", AMERICAN_LEAGUE_ID)),
            Button(LEAGUE_NAMES[NATIONAL_LEAGUE_ID], build_token("standings", NATIONAL_LEAGUE_ID)),
        ],
        _back_row("start"),
    ]


def franchise_keyboard(action: str, league_id: int = AMERICAN_LEAGUE_ID) -> Layout:
    """
    One league's teams as buttons for the given action ("team" or "roster").

    Discord caps a message at 25 buttons, so the 30 clubs are paged by league
    with a button to switch to the other one.
    """
    teams = league_teams(league_id)
    rows: Layout = [
        [Button(t.name, build_token(action, t.team_id)) for t in teams[i:i + BUTTONS_PER_ROW]]
        for i in range(0, len(teams), BUTTONS_PER_ROW)
    ]
    other = _other_league(league_id)
    rows.append([
        Button(f"➡ {LEAGUE_NAMES[other]}", build_token(f"{action}s", other)),
        Button("⬅ Back", build_token("back", "start")),
    ])
    return rows


def back_keyboard(target: str) -> Layout:
    return [_back_row(target)]


def picker_back_keyboard(action: str, team_id: int) -> Layout:
    """Back from a team view to the picker page of that team's league."""
    league_id = league_of(team_id)
    if league_id is None:
        return back_keyboard(f"{action}s")
    return [[Button("⬅ Back", build_token(f"{action}s", league_id))]]
