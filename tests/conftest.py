import pytest


def api_game(away, home, status, game_date, away_score=None, home_score=None):
    """Build a schedule game payload shaped like the MLB Stats API's."""
    game = {
        "gameDate": game_date,
        "status": {"detailedState": status},
        "teams": {
            "away": {"team": {"name": away}},
            "home": {"team": {"name": home}},
        },
    }
    if away_score is not None:
        game["teams"]["away"]["score"] = away_score
    if home_score is not None:
        game["teams"]["home"]["score"] = home_score
    return game


def api_team_record(team_id, name, wins, losses, pct, **extra):
    record = {
        "team": {"id": team_id, "name": name},
        "wins": wins,
        "losses": losses,
        "winningPercentage": pct,
    }
    record.update(extra)
    return record


@pytest.fixture
def yankees_record():
    return api_team_record(
        147, "New York Yankees", 94, 68, ".580",
        gamesBack="-",
        wildCardGamesBack="-",
        streak={"streakCode": "W3"},
        divisionRank="1",
        leagueRank="1",
        runDifferential=158,
        records={
            "splitRecords": [
                {"type": "home", "wins": 44, "losses": 37},
                {"type": "away", "wins": 50, "losses": 31},
                {"type": "lastTen", "wins": 7, "losses": 3},
            ]
        },
    )


@pytest.fixture
def al_east_payload(yankees_record):
    return {
        "division": {"id": 201},
        "league": {"id": 103},
        "teamRecords": [
            yankees_record,
            api_team_record(110, "Baltimore Orioles", 91, 71, ".562"),
        ],
    }
