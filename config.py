"""
Settings for the MLB standings and schedule bot, read from the environment (.env supported).
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, returning default on missing/invalid values."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Bot Settings
# The token itself is read in bot.main() so a missing value fails at startup
BOT_TOKEN_ENV = "DISCORD_BOT_TOKEN"
VIEW_TIMEOUT_SECONDS = _env_int("VIEW_TIMEOUT_SECONDS", 900)  # How long sent buttons stay registered
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# MLB API Settings
MLB_API_BASE_URL = os.getenv("MLB_API_BASE_URL", "https://statsapi.mlb.com/api/v1")
MLB_SPORT_ID = _env_int("MLB_SPORT_ID", 1)
REQUEST_TIMEOUT_SECONDS = _env_int("REQUEST_TIMEOUT_SECONDS", 10)

# Time Settings
TIMEZONE = os.getenv("TIMEZONE", "America/Chicago")  # CT for game times
TIMEZONE_LABEL = os.getenv("TIMEZONE_LABEL", "CT")
