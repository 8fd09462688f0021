"""
Domain models for MLB Stats API payloads.

Every model is parsed defensively: a field missing from the upstream payload
becomes None (or an empty collection) instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from teams import DIVISION_NAMES, LEAGUE_NAMES, team_name


def get_nested(obj: Any, path: List[str], default=None):
    """Safely access nested dict keys by path; return default if missing."""
    cur = obj
    for k in path:
        if not isinstance(cur, dict):
            return default
        cur = cur.get(k)
    return cur if cur is not None else default


def _first_present(*values):
    for value in values:
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class Game:
    """One game from a schedule response."""
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    status: str
    start_time: Optional[str]  # ISO-8601 gameDate

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Game":
        teams = data.get("teams") or {}
        linescore = data.get("linescore") or {}
        return cls(
            home_team=get_nested(teams, ["home", "team", "name"], "TBD"),
            away_team=get_nested(teams, ["away", "team", "name"], "TBD"),
            home_score=_first_present(
                get_nested(teams, ["home", "score"]),
                get_nested(linescore, ["teams", "home", "runs"]),
                0,
            ),
            away_score=_first_present(
                get_nested(teams, ["away", "score"]),
                get_nested(linescore, ["teams", "away", "runs"]),
                0,
            ),
            status=get_nested(data, ["status", "detailedState"], "Unknown"),
            start_time=data.get("gameDate"),
        )


@dataclass(frozen=True)
class SplitRecord:
    """Win-loss record restricted to a condition (home, away, last ten)."""
    wins: Optional[int]
    losses: Optional[int]


@dataclass(frozen=True)
class TeamRecord:
    team_id: Optional[int]
    team_name: str
    wins: Optional[int] = None
    losses: Optional[int] = None
    winning_percentage: Optional[str] = None
    games_back: Optional[str] = None
    wild_card_games_back: Optional[str] = None
    streak_code: Optional[str] = None
    division_rank: Optional[str] = None
    league_rank: Optional[str] = None
    run_differential: Optional[int] = None
    home: Optional[SplitRecord] = None
    away: Optional[SplitRecord] = None
    last_ten: Optional[SplitRecord] = None

    @staticmethod
    def _split(data: Dict[str, Any], split_type: str) -> Optional[SplitRecord]:
        """Find a split record by type in records.splitRecords."""
        for split in get_nested(data, ["records", "splitRecords"], []):
            if isinstance(split, dict) and split.get("type") == split_type:
                return SplitRecord(wins=split.get("wins"), losses=split.get("losses"))
        return None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TeamRecord":
        team_id = get_nested(data, ["team", "id"])
        return cls(
            team_id=team_id,
            team_name=get_nested(data, ["team", "name"]) or (team_name(team_id) if team_id else "Unknown Team"),
            wins=data.get("wins"),
            losses=data.get("losses"),
            winning_percentage=data.get("winningPercentage"),
            games_back=data.get("gamesBack"),
            wild_card_games_back=data.get("wildCardGamesBack"),
            streak_code=get_nested(data, ["streak", "streakCode"]),
            division_rank=data.get("divisionRank"),
            league_rank=data.get("leagueRank"),
            run_differential=data.get("runDifferential"),
            home=cls._split(data, "home"),
            away=cls._split(data, "away"),
            last_ten=cls._split(data, "lastTen"),
        )


@dataclass(frozen=True)
class StandingsRecord:
    """Standings of a single division."""
    division_id: Optional[int]
    division_name: str
    league_id: Optional[int]
    team_records: Tuple[TeamRecord, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StandingsRecord":
        division_id = get_nested(data, ["division", "id"])
        division_name = (
            get_nested(data, ["division", "name"])
            or DIVISION_NAMES.get(division_id)
            or (f"Division {division_id}" if division_id is not None else "Unknown Division")
        )
        return cls(
            division_id=division_id,
            division_name=division_name,
            league_id=get_nested(data, ["league", "id"]),
            team_records=tuple(
                TeamRecord.from_api(tr) for tr in data.get("teamRecords") or [] if isinstance(tr, dict)
            ),
        )


@dataclass(frozen=True)
class TeamDetails:
    """A single team's standing record plus where it sits."""
    record: TeamRecord
    division_name: str
    league_name: str

    @classmethod
    def find(cls, records: List[StandingsRecord], team_id: int) -> Optional["TeamDetails"]:
        for division in records:
            for team_record in division.team_records:
                if team_record.team_id == team_id:
                    return cls(
                        record=team_record,
                        division_name=division.division_name,
                        league_name=LEAGUE_NAMES.get(division.league_id, "N/A"),
                    )
        return None


@dataclass(frozen=True)
class RosterEntry:
    jersey_number: Optional[str]
    full_name: str
    position_abbreviation: str
    position_type: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RosterEntry":
        return cls(
            jersey_number=data.get("jerseyNumber") or None,
            full_name=get_nested(data, ["person", "fullName"], "Unknown Player"),
            position_abbreviation=get_nested(data, ["position", "abbreviation"], "N/A"),
            position_type=get_nested(data, ["position", "type"], "Other"),
        )


@dataclass(frozen=True)
class Roster:
    team_id: int
    roster_type: str = "active"
    entries: Tuple[RosterEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, team_id: int, data: Dict[str, Any]) -> "Roster":
        return cls(
            team_id=team_id,
            roster_type=data.get("rosterType") or "active",
            entries=tuple(RosterEntry.from_api(e) for e in data.get("roster") or [] if isinstance(e, dict)),
        )


@dataclass(frozen=True)
class Player:
    player_id: Optional[int]
    full_name: str
    primary_number: Optional[str] = None
    team_name: str = "N/A"
    position: str = "N/A"
    bats: Optional[str] = None
    throws: Optional[str] = None
    age: Optional[int] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Player":
        team_id = get_nested(data, ["currentTeam", "id"])
        return cls(
            player_id=data.get("id"),
            full_name=data.get("fullName") or "Unknown Player",
            primary_number=data.get("primaryNumber"),
            team_name=get_nested(data, ["currentTeam", "name"]) or (team_name(team_id) if team_id else "N/A"),
            position=get_nested(data, ["primaryPosition", "abbreviation"], "N/A"),
            bats=get_nested(data, ["batSide", "code"]),
            throws=get_nested(data, ["pitchHand", "code"]),
            age=data.get("currentAge"),
        )
