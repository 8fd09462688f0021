"""
MLB Stats API Wrapper
Handles all interactions with the official MLB Stats API.
"""

import asyncio
import logging
from datetime import date
from typing import Dict, List, Optional

import aiohttp

from config import MLB_API_BASE_URL, MLB_SPORT_ID, REQUEST_TIMEOUT_SECONDS
from models import Game, Player, Roster, StandingsRecord, TeamDetails
from teams import LEAGUE_IDS
from time_utils import today

logger = logging.getLogger(__name__)


class MLBStatsAPIError(Exception):
    """Raised when the MLB Stats API can't be reached or answers with an error."""


class MLBStatsAPI:
    """Wrapper for MLB Stats API endpoints."""

    def __init__(self, base_url: str = MLB_API_BASE_URL, timeout: float = REQUEST_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session = None

    async def _get_session(self):
        """Get or create aiohttp session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self.session

    async def _request(self, endpoint: str, params: Optional[Dict] = None) -> Dict:
        """Make async request to MLB API."""
        session = await self._get_session()
        url = f"{self.base_url}{endpoint}"

        try:
            async with session.get(url, params=params) as response:
                response.raise_for_status()
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise MLBStatsAPIError(f"API request failed: {url} - {e}") from e

    async def get_schedule(self, day: date, sport_id: int = MLB_SPORT_ID) -> List[Game]:
        """Get all games for one calendar date."""
        params = {
            "sportId": sport_id,
            "date": day.isoformat(),
            "hydrate": "linescore",
        }

        data = await self._request("/schedule", params)
        dates = data.get("dates") or []

        if not dates:
            return []

        return [Game.from_api(g) for g in dates[0].get("games") or []]

    async def get_standings(self, league_id: int, day: Optional[date] = None) -> List[StandingsRecord]:
        """Get division standings for a league (103 = AL, 104 = NL)."""
        params = {"leagueId": league_id, "hydrate": "division"}
        if day:
            params["date"] = day.isoformat()

        data = await self._request("/standings", params)
        return [StandingsRecord.from_api(r) for r in data.get("records") or []]

    async def get_all_standings(self, day: Optional[date] = None) -> List[StandingsRecord]:
        """Get AL then NL standings, fetched concurrently."""
        al, nl = await asyncio.gather(
            self.get_standings(LEAGUE_IDS["AL"], day),
            self.get_standings(LEAGUE_IDS["NL"], day),
        )
        return al + nl

    async def get_team_details(self, team_id: int) -> Optional[TeamDetails]:
        """
        Find a team's standing record across both leagues.
        Returns None if the team isn't in either league's standings.
        """
        records = await self.get_all_standings()
        return TeamDetails.find(records, team_id)

    async def get_team_roster(self, team_id: int) -> Roster:
        """Get a team's active roster."""
        data = await self._request(f"/teams/{team_id}/roster")
        return Roster.from_api(team_id, data)

    async def get_person(self, player_id: int) -> Optional[Player]:
        """Get one player by id, or None if unknown."""
        data = await self._request(f"/people/{player_id}", {"hydrate": "currentTeam"})
        people = data.get("people") or []

        if not people:
            return None

        return Player.from_api(people[0])

    async def search_players(self, name: str, limit: int = 5, sport_id: int = MLB_SPORT_ID) -> List[Player]:
        """
        Search the current season's players by name.
        Returns up to `limit` matches, in API order.
        """
        endpoint = f"/sports/{sport_id}/players"
        params = {
            "season": today().year,
            "gameType": "R"  # Regular season
        }

        data = await self._request(endpoint, params)
        players = data.get("people", [])

        name_lower = name.strip().lower()
        matches = []
        for player in players:
            player_name = (player.get("fullName") or "").lower()
            if name_lower and name_lower in player_name:
                matches.append(Player.from_api(player))
                if len(matches) >= limit:
                    break

        return matches

    async def close(self):
        """Close the aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()
