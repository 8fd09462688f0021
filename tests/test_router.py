"""Tests for button press routing, with a fake stats API and renderer."""

import asyncio
from datetime import date

import pytest
from conftest import api_game

from messages import ROSTER_PICKER_TEXT, TEAM_PICKER_TEXT, UPSTREAM_ERROR_TEXT, WELCOME_TEXT
from mlb_api import MLBStatsAPIError
from models import Game, Roster, RosterEntry, StandingsRecord, TeamDetails
from navigation import ACTION_TYPES, Unknown
from router import Router


class FakeAPI:
    def __init__(self, games=None, standings=None, roster=None, fail=False):
        self.games = games or []
        self.standings = standings or []
        self.roster = roster
        self.fail = fail
        self.calls = []

    def _check(self):
        if self.fail:
            raise MLBStatsAPIError("boom")

    async def get_schedule(self, day):
        self.calls.append(("schedule", day))
        self._check()
        return self.games

    async def get_standings(self, league_id, day=None):
        self.calls.append(("standings", league_id))
        self._check()
        return [r for r in self.standings if r.league_id == league_id]

    async def get_all_standings(self, day=None):
        self.calls.append(("all_standings", day))
        self._check()
        return self.standings

    async def get_team_details(self, team_id):
        self.calls.append(("team", team_id))
        self._check()
        return TeamDetails.find(self.standings, team_id)

    async def get_team_roster(self, team_id):
        self.calls.append(("roster", team_id))
        self._check()
        return self.roster or Roster(team_id)


class FakeRenderer:
    def __init__(self):
        self.rendered = []

    async def render(self, context, text, buttons):
        self.rendered.append((context, text, buttons))


def tokens(buttons):
    return [button.token for row in buttons for button in row]


def run(router, raw, context="ctx"):
    return asyncio.run(router.dispatch(raw, context))


@pytest.fixture
def renderer():
    return FakeRenderer()


def test_every_action_type_has_a_handler(renderer):
    router = Router(FakeAPI(), renderer)
    assert set(router.handlers) | {Unknown} == set(ACTION_TYPES)


def test_start_screen(renderer):
    text, buttons = Router(FakeAPI(), renderer).start_screen()
    assert text == WELCOME_TEXT
    assert "scores" in tokens(buttons)


def test_games_token_fetches_that_date(renderer):
    api = FakeAPI(games=[Game.from_api(api_game(
        "Chicago Cubs", "New York Mets", "Scheduled", "2024-05-01T00:05:00Z"))])
    router = Router(api, renderer, tz_name="America/Chicago")

    assert run(router, "games:2024-04-30", context=42) is True

    assert api.calls == [("schedule", date(2024, 4, 30))]
    context, text, buttons = renderer.rendered[0]
    assert context == 42
    assert "⚾ MLB Games for 2024-04-30" in text
    assert "CHC @ NYM — 7:05 PM" in text
    assert "refresh:2024-04-30" in tokens(buttons)


def test_refresh_reenters_schedule(renderer):
    api = FakeAPI()
    router = Router(api, renderer)
    run(router, "refresh:2024-12-25")
    assert api.calls == [("schedule", date(2024, 12, 25))]
    assert renderer.rendered[0][1] == "No MLB games scheduled for 2024-12-25."


def test_scores_uses_today(renderer, monkeypatch):
    monkeypatch.setattr("router.today", lambda tz_name: date(2024, 7, 4))
    api = FakeAPI()
    run(Router(api, renderer), "scores")
    assert api.calls == [("schedule", date(2024, 7, 4))]


def test_standings_both_leagues(renderer, al_east_payload):
    api = FakeAPI(standings=[StandingsRecord.from_api(al_east_payload)])
    run(Router(api, renderer), "standings")
    assert api.calls[0][0] == "all_standings"
    _, text, buttons = renderer.rendered[0]
    assert "🏆 American League East" in text
    assert tokens(buttons) == ["standings:103", "standings:104", "back:start"]


def test_standings_single_league(renderer, al_east_payload):
    api = FakeAPI(standings=[StandingsRecord.from_api(al_east_payload)])
    run(Router(api, renderer), "standings:104")
    assert api.calls == [("standings", 104)]
    assert renderer.rendered[0][1].startswith("No standings data available for ")


def test_team_list_and_detail(renderer, al_east_payload):
    api = FakeAPI(standings=[StandingsRecord.from_api(al_east_payload)])
    router = Router(api, renderer)

    run(router, "teams")
    text, buttons = renderer.rendered[-1][1:]
    assert text == TEAM_PICKER_TEXT
    assert "team:147" in tokens(buttons)
    assert api.calls == []

    run(router, "team:147")
    text, buttons = renderer.rendered[-1][1:]
    assert "📊 New York Yankees Stats" in text
    assert tokens(buttons) == ["teams:103"]


def test_unknown_team_is_a_valid_rendering(renderer):
    run(Router(FakeAPI(), renderer), "team:1")
    text, buttons = renderer.rendered[0][1:]
    assert text == "No data available for this team."
    assert tokens(buttons) == ["back:teams"]


def test_roster(renderer):
    roster = Roster(121, "active", (RosterEntry("20", "Pete Alonso", "1B", "Infielder"),))
    run(Router(FakeAPI(roster=roster), renderer), "roster:121")
    _, text, buttons = renderer.rendered[0]
    assert "📋 New York Mets — Active Roster" in text
    assert "#20 Pete Alonso (1B)" in text
    assert tokens(buttons) == ["rosters:104"]


def test_roster_list_pages(renderer):
    router = Router(FakeAPI(), renderer)
    run(router, "rosters:104")
    text, buttons = renderer.rendered[0][1:]
    assert text == ROSTER_PICKER_TEXT
    assert "roster:121" in tokens(buttons)
    assert "rosters:103" in tokens(buttons)


@pytest.mark.parametrize("raw, expected", [
    ("back:start", WELCOME_TEXT),
    ("back:teams", TEAM_PICKER_TEXT),
    ("back:rosters", ROSTER_PICKER_TEXT),
])
def test_back_targets(renderer, raw, expected):
    run(Router(FakeAPI(), renderer), raw)
    assert renderer.rendered[0][1] == expected


@pytest.mark.parametrize("raw", [
    "bogus", "team:abc", "back:nowhere", "", "team:²", "roster:¹²", "games:0001-01-01", "refresh:9999-12-31",
])
def test_unknown_tokens_are_ignored(renderer, raw):
    api = FakeAPI()
    assert run(Router(api, renderer), raw) is False
    assert renderer.rendered == []
    assert api.calls == []


def test_upstream_failure_renders_apology(renderer):
    router = Router(FakeAPI(fail=True), renderer)
    assert run(router, "team:147") is True
    _, text, buttons = renderer.rendered[0]
    assert text == UPSTREAM_ERROR_TEXT
    assert tokens(buttons) == ["back:start"]
