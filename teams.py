"""
Static MLB reference data: teams, leagues and divisions.
"""

from collections import namedtuple
from types import MappingProxyType
from typing import Tuple

Team = namedtuple("Team", ["name", "abbreviation", "team_id", "league_id", "division_id"])

AMERICAN_LEAGUE_ID = 103
NATIONAL_LEAGUE_ID = 104

TEAMS: Tuple[Team, ...] = (
    Team("Arizona Diamondbacks", "ARI", 109, NATIONAL_LEAGUE_ID, 203),
    Team("Athletics", "ATH", 133, AMERICAN_LEAGUE_ID, 200),
    Team("Atlanta Braves", "ATL", 144, NATIONAL_LEAGUE_ID, 204),
    Team("Baltimore Orioles", "BAL", 110, AMERICAN_LEAGUE_ID, 201),
    Team("Boston Red Sox", "BOS", 111, AMERICAN_LEAGUE_ID, 201),
    Team("Chicago Cubs", "CHC", 112, NATIONAL_LEAGUE_ID, 205),
    Team("Chicago White Sox", "CWS", 145, AMERICAN_LEAGUE_ID, 202),
    Team("Cincinnati Reds", "CIN", 113, NATIONAL_LEAGUE_ID, 205),
    Team("Cleveland Guardians", "CLE", 114, AMERICAN_LEAGUE_ID, 202),
    Team("Colorado Rockies", "COL", 115, NATIONAL_LEAGUE_ID, 203),
    Team("Detroit Tigers", "DET", 116, AMERICAN_LEAGUE_ID, 202),
    Team("Houston Astros", "HOU", 117, AMERICAN_LEAGUE_ID, 200),
    Team("Kansas City Royals", "KC", 118, AMERICAN_LEAGUE_ID, 202),
    Team("Los Angeles Angels", "LAA", 108, AMERICAN_LEAGUE_ID, 200),
    Team("Los Angeles Dodgers", "LAD", 119, NATIONAL_LEAGUE_ID, 203),
    Team("Miami Marlins", "MIA", 146, NATIONAL_LEAGUE_ID, 204),
    Team("Milwaukee Brewers", "MIL", 158, NATIONAL_LEAGUE_ID, 205),
    Team("Minnesota Twins", "MIN", 142, AMERICAN_LEAGUE_ID, 202),
    Team("New York Mets", "NYM", 121, NATIONAL_LEAGUE_ID, 204),
    Team("New York Yankees", "NYY", 147, AMERICAN_LEAGUE_ID, 201),
    Team("Philadelphia Phillies", "PHI", 143, NATIONAL_LEAGUE_ID, 204),
    Team("Pittsburgh Pirates", "PIT", 134, NATIONAL_LEAGUE_ID, 205),
    Team("San Diego Padres", "SD", 135, NATIONAL_LEAGUE_ID, 203),
    Team("San Francisco Giants", "SF", 137, NATIONAL_LEAGUE_ID, 203),
    Team("Seattle Mariners", "SEA", 136, AMERICAN_LEAGUE_ID, 200),
    Team("St. Louis Cardinals", "STL", 138, NATIONAL_LEAGUE_ID, 205),
    Team("Tampa Bay Rays", "TB", 139, AMERICAN_LEAGUE_ID, 201),
    Team("Texas Rangers", "TEX", 140, AMERICAN_LEAGUE_ID, 200),
    Team("Toronto Blue Jays", "TOR", 141, AMERICAN_LEAGUE_ID, 201),
    Team("Washington Nationals", "WSH", 120, NATIONAL_LEAGUE_ID, 204),
)

TEAM_ABBREVIATIONS = MappingProxyType({t.name: t.abbreviation for t in TEAMS})
TEAM_IDS = MappingProxyType({t.name: t.team_id for t in TEAMS})
TEAM_NAMES = MappingProxyType({t.team_id: t.name for t in TEAMS})

LEAGUE_IDS = MappingProxyType({"AL": AMERICAN_LEAGUE_ID, "NL": NATIONAL_LEAGUE_ID})
LEAGUE_NAMES = MappingProxyType({
    AMERICAN_LEAGUE_ID: "American League",
    NATIONAL_LEAGUE_ID: "National League",
})

DIVISION_NAMES = MappingProxyType({
    200: "American League West",
    201: "American League East",
    202: "American League Central",
    203: "National League West",
    204: "National League East",
    205: "National League Central",
})


def abbreviate(name: str) -> str:
    """Return the team's abbreviation, or the name unchanged if it isn't a known team."""
    return TEAM_ABBREVIATIONS.get(name, name)


def team_name(team_id: int) -> str:
    return TEAM_NAMES.get(team_id, f"Team {team_id}")


def league_teams(league_id: int) -> Tuple[Team, ...]:
    """Teams of one league in alphabetical order."""
    return tuple(t for t in TEAMS if t.league_id == league_id)


def league_of(team_id: int):
    for team in TEAMS:
        if team.team_id == team_id:
            return team.league_id
    return None
