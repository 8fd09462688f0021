"""
Message builders.

Each function turns already-fetched data into the text of one bot message.
Empty upstream data is not an error: every builder has a fixed sentence for it.
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from config import TIMEZONE, TIMEZONE_LABEL
from models import Game, Player, Roster, SplitRecord, StandingsRecord, TeamDetails
from teams import abbreviate, team_name
from time_utils import bucket_hour, exact_time, hour_bucket

logger = logging.getLogger(__name__)

NA = "N/A"
TBD_BUCKET = "TBD"

SCORE_STATES = {"Final", "Game Over", "Completed Early", "In Progress"}
SCHEDULED_STATES = {"Scheduled", "Pre-Game"}

WELCOME_TEXT = "Welcome to the MLB Statistics Bot! Choose an option to get started:"
TEAM_PICKER_TEXT = "Select a team to view detailed stats:"
ROSTER_PICKER_TEXT = "Select a team to view detailed roster information:"
STANDINGS_PICKER_TEXT = "Select a league to view its standings:"
UPSTREAM_ERROR_TEXT = "⚠️ Couldn't reach the MLB Stats API right now. Please try again in a moment."


def _value(value) -> str:
    return NA if value is None or value == "" else str(value)


def _split(split: Optional[SplitRecord]) -> str:
    if split is None:
        return NA
    return f"{_value(split.wins)}-{_value(split.losses)}"


def _date_str(day) -> str:
    return day.isoformat() if isinstance(day, date) else str(day)


def format_game_line(game: Game, tz_name: str = TIMEZONE) -> str:
    """Render one schedule line; the format depends on the game's status."""
    home = abbreviate(game.home_team)
    away = abbreviate(game.away_team)

    if game.status in SCORE_STATES:
        return f"`{away} {game.away_score} @ {home} {game.home_score} — {game.status}`"
    if game.status in SCHEDULED_STATES:
        try:
            start = exact_time(game.start_time, tz_name)
        except ValueError:
            start = "TBD"
        return f"`{away} @ {home} — {start}`"
    return f"`{away} @ {home} — {game.status}`"


def _bucket_sort_key(label: str) -> int:
    if label == TBD_BUCKET:
        return 24
    return bucket_hour(label)


def group_by_hour(games: Sequence[Game], tz_name: str = TIMEZONE) -> Dict[str, List[str]]:
    """Bucket rendered game lines by local start hour, keeping input order inside a bucket."""
    buckets: Dict[str, List[str]] = {}
    for game in games:
        try:
            bucket = hour_bucket(game.start_time, tz_name)
        except ValueError:
            logger.warning("Unparseable start time %r for %s @ %s", game.start_time, game.away_team, game.home_team)
            bucket = TBD_BUCKET
        buckets.setdefault(bucket, []).append(format_game_line(game, tz_name))
    return buckets


def sorted_buckets(labels) -> List[str]:
    """Order hour labels chronologically ("12 AM" first), not alphabetically."""
    return sorted(labels, key=_bucket_sort_key)


def format_schedule(date_str: str, games: Sequence[Game], tz_name: str = TIMEZONE,
                    tz_label: str = TIMEZONE_LABEL) -> str:
    """Build the day's schedule message grouped by start hour."""
    if not games:
        return f"No MLB games scheduled for {date_str}."

    buckets = group_by_hour(games, tz_name)

    message = f"⚾ MLB Games for {date_str}\n\n"
    for bucket in sorted_buckets(buckets):
        header = bucket if bucket == TBD_BUCKET else f"{bucket} {tz_label}"
        message += f"🕒 {header}\n"
        message += "\n".join(buckets[bucket]) + "\n\n"

    return message.strip()


def format_standings(records: Sequence[StandingsRecord], day: Optional[date] = None) -> str:
    """Build a division-by-division standings message, in the order given."""
    if not records:
        suffix = f" for {_date_str(day)}" if day else ""
        return f"No standings data available{suffix}."

    message = f"📊 Standings ({_date_str(day)})\n\n" if day else "📊 Standings\n\n"

    for record in records:
        message += f"🏆 {record.division_name}\n"
        for team in record.team_records:
            message += (
                f"   • {team.team_name}: {_value(team.wins)}-{_value(team.losses)} "
                f"({_value(team.winning_percentage)})\n"
            )
        message += "\n"

    return message.strip()


def format_team_details(details: Optional[TeamDetails]) -> str:
    """Build a stat card for one team."""
    if details is None:
        return "No data available for this team."

    record = details.record
    return "\n".join([
        f"📊 {record.team_name} Stats",
        f"🏆 League: {_value(details.league_name)}",
        f"📍 Division: {_value(details.division_name)}",
        "",
        f"💪 Record: {_value(record.wins)}-{_value(record.losses)} ({_value(record.winning_percentage)})",
        f"📊 Games Back: {_value(record.games_back)} | Wild Card GB: {_value(record.wild_card_games_back)}",
        f"🔥 Streak: {_value(record.streak_code)}",
        f"🏠 Home: {_split(record.home)}",
        f"✈️ Away: {_split(record.away)}",
        f"🏅 Division Rank: {_value(record.division_rank)}",
        f"🏆 League Rank: {_value(record.league_rank)}",
        f"⚡ Run Differential: {_value(record.run_differential)}",
        f"📅 Last 10: {_split(record.last_ten)}",
    ])


def format_roster(team_id: int, roster: Optional[Roster]) -> str:
    """Build a roster message grouped by position category, in first-seen category order."""
    name = team_name(team_id)
    if roster is None or not roster.entries:
        return f"No active roster found for {name}."

    groups: Dict[str, List[str]] = {}
    for entry in roster.entries:
        number = entry.jersey_number or "??"
        groups.setdefault(entry.position_type, []).append(
            f"#{number} {entry.full_name} ({entry.position_abbreviation})"
        )

    roster_type = roster.roster_type.replace("_", " ").title()
    message = f"📋 {name} — {roster_type} Roster\n\n"
    for category, lines in groups.items():
        message += f"🔹 {category}\n"
        message += "\n".join(f"   {line}" for line in lines) + "\n\n"

    return message.strip()


def format_players(query: str, players: Sequence[Player]) -> str:
    """Build the result list for a player name search."""
    if not players:
        return f'No players found matching "{query}".'

    lines = [f'🔎 Players matching "{query}"', ""]
    for player in players:
        number = f"#{player.primary_number} " if player.primary_number else ""
        line = f"• {number}{player.full_name} ({player.position}) — {player.team_name}"
        if player.bats or player.throws:
            line += f" | B/T: {_value(player.bats)}/{_value(player.throws)}"
        if player.age is not None:
            line += f" | Age {player.age}"
        lines.append(line)
    return "\n".join(lines)
