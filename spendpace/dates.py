"""Calendar helpers for the fixed time zone.

Dates travel through the system as ``YYYY-MM-DD`` strings that already
represent the local date in the fixed zone, so nothing here converts a
date string between zones. Only :func:`today` looks at a clock.
"""

from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from spendpace.config import TIMEZONE


def today(tz: str = TIMEZONE, now: Optional[datetime] = None) -> str:
    """Return the current local date in ``tz`` as ``YYYY-MM-DD``.

    ``now`` may be supplied for a fixed instant; naive values are read as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz)).strftime("%Y-%m-%d")


def month_key_of(date_str: str) -> str:
    return date_str[:7]


def month_key_from_datetime(dt: datetime, tz: str = TIMEZONE) -> str:
    return today(tz, now=dt)[:7]


def day_of_month(date_str: str) -> int:
    try:
        return int(date_str[8:10])
    except ValueError:
        return 0


@lru_cache(maxsize=None)
def last_day_of_month(month_key: str) -> int:
    """Days in the month, or 0 when the key cannot be parsed.

    Out-of-range months roll over, so ``"2024-13"`` is January 2025.
    """
    try:
        year, month = (int(part) for part in month_key.split("-")[:2])
        # day 0 of the next month is the last day of this one
        next_year, next_month = divmod(year * 12 + month, 12)
        first_of_next = date(next_year, next_month + 1, 1)
        return (first_of_next - timedelta(days=1)).day
    except (ValueError, OverflowError):
        return 0


def current_day_number(today_str: Optional[str] = None) -> int:
    return day_of_month(today_str or today())


def current_month_key(today_str: Optional[str] = None) -> str:
    return month_key_of(today_str or today())


def format_month_label(month_key: str) -> str:
    """``"2024-01"`` -> ``"Jan 2024"``; unparseable keys come back as given."""
    try:
        year, month = (int(part) for part in month_key.split("-")[:2])
        return date(year, month, 1).strftime("%b %Y")
    except ValueError:
        return month_key
