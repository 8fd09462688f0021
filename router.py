"""
Button press routing.

Router.dispatch parses a raw navigation token, fetches what the new view
needs from the MLB Stats API, formats it, and hands the text plus the next
set of buttons to a Renderer, which replaces the message currently shown.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Tuple

from config import TIMEZONE
from keyboards import (
    Layout,
    back_keyboard,
    franchise_keyboard,
    picker_back_keyboard,
    schedule_keyboard,
    standings_keyboard,
    start_keyboard,
)
from messages import (
    ROSTER_PICKER_TEXT,
    TEAM_PICKER_TEXT,
    UPSTREAM_ERROR_TEXT,
    WELCOME_TEXT,
    format_roster,
    format_schedule,
    format_standings,
    format_team_details,
)
from mlb_api import MLBStatsAPIError
from navigation import (
    Back,
    Games,
    Roster,
    Rosters,
    Scores,
    Standings,
    Team,
    Teams,
    Unknown,
    parse_action,
)
from teams import AMERICAN_LEAGUE_ID, LEAGUE_NAMES
from time_utils import today

logger = logging.getLogger(__name__)

Screen = Tuple[str, Layout]


class Renderer(Protocol):
    """Replaces the content shown for an interaction context."""

    async def render(self, context: Any, text: str, buttons: Layout) -> None:
        ...


def _league(league_id: Optional[int]) -> int:
    return league_id if league_id in LEAGUE_NAMES else AMERICAN_LEAGUE_ID


class Router:
    """Maps navigation tokens to views."""

    def __init__(self, api, renderer: Renderer, tz_name: str = TIMEZONE):
        self.api = api
        self.renderer = renderer
        self.tz_name = tz_name
        self.handlers: Dict[type, Callable[[Any], Awaitable[Screen]]] = {
            Scores: self._scores,
            Games: self._games,
            Standings: self._standings,
            Teams: self._teams,
            Team: self._team,
            Rosters: self._rosters,
            Roster: self._roster,
            Back: self._back,
        }

    def start_screen(self) -> Screen:
        return WELCOME_TEXT, start_keyboard()

    async def dispatch(self, raw: str, context: Any) -> bool:
        """
        Handle one button press. Returns False if the token was ignored.

        A failed fetch renders a fixed apology instead of the requested view;
        it never escapes to the transport.
        """
        action = parse_action(raw)
        if isinstance(action, Unknown):
            logger.debug("Ignoring unknown navigation token %r", raw)
            return False

        handler = self.handlers[type(action)]
        try:
            text, buttons = await handler(action)
        except MLBStatsAPIError:
            logger.exception("Upstream failure while handling %r", raw)
            text, buttons = UPSTREAM_ERROR_TEXT, back_keyboard("start")

        await self.renderer.render(context, text, buttons)
        return True

    async def _schedule(self, day) -> Screen:
        games = await self.api.get_schedule(day)
        return format_schedule(day.isoformat(), games, self.tz_name), schedule_keyboard(day)

    async def _scores(self, action: Scores) -> Screen:
        return await self._schedule(today(self.tz_name))

    async def _games(self, action: Games) -> Screen:
        return await self._schedule(action.day)

    async def _standings(self, action: Standings) -> Screen:
        day = today(self.tz_name)
        if action.league_id in LEAGUE_NAMES:
            records = await self.api.get_standings(action.league_id, day)
        else:
            records = await self.api.get_all_standings(day)
        return format_standings(records, day), standings_keyboard()

    async def _teams(self, action: Teams) -> Screen:
        return TEAM_PICKER_TEXT, franchise_keyboard("team", _league(action.league_id))

    async def _team(self, action: Team) -> Screen:
        details = await self.api.get_team_details(action.team_id)
        return format_team_details(details), picker_back_keyboard("team", action.team_id)

    async def _rosters(self, action: Rosters) -> Screen:
        return ROSTER_PICKER_TEXT, franchise_keyboard("roster", _league(action.league_id))

    async def _roster(self, action: Roster) -> Screen:
        roster = await self.api.get_team_roster(action.team_id)
        return format_roster(action.team_id, roster), picker_back_keyboard("roster", action.team_id)

    async def _back(self, action: Back) -> Screen:
        if action.target == "teams":
            return await self._teams(Teams())
        if action.target == "rosters":
            return await self._rosters(Rosters())
        return self.start_screen()
