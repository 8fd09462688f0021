"""
Game time helpers.

All labels are computed in a fixed display time zone (config.TIMEZONE), never
the host's local zone.
"""

from datetime import date, datetime, timedelta

from dateutil import parser, tz

from config import TIMEZONE


def _zone(tz_name: str):
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {tz_name}")
    return zone


def to_local(timestamp: str, tz_name: str = TIMEZONE) -> datetime:
    """
    Parse an ISO-8601 timestamp (e.g. "2024-05-01T23:05:00Z") into the display zone.

    Timestamps without an offset are treated as UTC. Raises ValueError if the
    timestamp can't be parsed.
    """
    if not isinstance(timestamp, str) or not timestamp:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")
    dt = parser.isoparse(timestamp)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    return dt.astimezone(_zone(tz_name))


def hour_bucket(timestamp: str, tz_name: str = TIMEZONE) -> str:
    """Hour label without minutes, e.g. "6 PM"."""
    return to_local(timestamp, tz_name).strftime("%I %p").lstrip("0")


def exact_time(timestamp: str, tz_name: str = TIMEZONE) -> str:
    """Start time with minutes, e.g. "6:35 PM"."""
    return to_local(timestamp, tz_name).strftime("%I:%M %p").lstrip("0")


def bucket_hour(label: str) -> int:
    """Convert an hour label ("12 AM", "6 PM") to its 24-hour value for sorting."""
    hour, ampm = label.split(" ")
    h = int(hour)
    if ampm == "PM" and h != 12:
        h += 12
    if ampm == "AM" and h == 12:
        h = 0
    return h


def today(tz_name: str = TIMEZONE) -> date:
    return datetime.now(_zone(tz_name)).date()


def shift_date(day: date, days: int) -> date:
    return day + timedelta(days=days)
