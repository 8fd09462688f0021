"""
Navigation tokens carried in button custom_ids.

Wire format is ``action`` or ``action:argument`` (ASCII, the argument itself
never contains a colon). ``parse_action`` turns a raw token into one of a
closed set of action types; anything malformed becomes ``Unknown``.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

BACK_TARGETS = ("start", "teams", "rosters")


@dataclass(frozen=True)
class NavigationToken:
    action: str
    argument: Optional[str] = None

    @classmethod
    def parse(cls, raw: str) -> "NavigationToken":
        action, sep, argument = raw.partition(":")
        return cls(action=action, argument=argument if sep else None)

    def __str__(self) -> str:
        if self.argument is None:
            return self.action
        return f"{self.action}:{self.argument}"


def build_token(action: str, argument=None) -> str:
    """Build a button payload, e.g. build_token("team", 147) -> "team:147"."""
    if argument is None:
        return str(NavigationToken(action))
    argument = argument.isoformat() if isinstance(argument, date) else str(argument)
    if ":" in action or ":" in argument:
        raise ValueError(f"Token parts may not contain ':' ({action!r}, {argument!r})")
    return str(NavigationToken(action, argument))


@dataclass(frozen=True)
class Scores:
    """Today's schedule."""


@dataclass(frozen=True)
class Games:
    day: date
    refresh: bool = False


@dataclass(frozen=True)
class Standings:
    league_id: Optional[int] = None  # None means both leagues


@dataclass(frozen=True)
class Teams:
    league_id: Optional[int] = None


@dataclass(frozen=True)
class Team:
    team_id: int


@dataclass(frozen=True)
class Rosters:
    league_id: Optional[int] = None


@dataclass(frozen=True)
class Roster:
    team_id: int


@dataclass(frozen=True)
class Back:
    target: str


@dataclass(frozen=True)
class Unknown:
    raw: str


Action = Union[Scores, Games, Standings, Teams, Team, Rosters, Roster, Back, Unknown]
ACTION_TYPES = (Scores, Games, Standings, Teams, Team, Rosters, Roster, Back, Unknown)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        day = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None
    # the schedule view links to the day before and after
    if day in (date.min, date.max):
        return None
    return day


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None or not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_action(raw: str) -> Action:
    """Parse a raw button payload into an action."""
    if not raw or raw.count(":") > 1:
        return Unknown(raw)

    token = NavigationToken.parse(raw)
    action, argument = token.action, token.argument

    if action == "scores" and argument is None:
        return Scores()

    if action in ("games", "refresh"):
        day = _parse_date(argument)
        if day is None:
            return Unknown(raw)
        return Games(day=day, refresh=action == "refresh")

    if action in ("standings", "teams", "rosters"):
        league_id = _parse_int(argument)
        if argument is not None and league_id is None:
            return Unknown(raw)
        return {"standings": Standings, "teams": Teams, "rosters": Rosters}[action](league_id)

    if action in ("team", "roster"):
        team_id = _parse_int(argument)
        if team_id is None:
            return Unknown(raw)
        return Team(team_id) if action == "team" else Roster(team_id)

    if action == "back" and argument in BACK_TARGETS:
        return Back(argument)

    return Unknown(raw)
