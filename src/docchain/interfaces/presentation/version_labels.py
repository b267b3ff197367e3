"""Human labels for version timestamps.

All functions are pure in ``(timestamp, now)``. Calendar days are taken in
``now``'s timezone; a naive value is read in the other value's timezone.
"""

import math
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

_MINUTES_IN_DAY = 1440
_MINUTES_IN_MONTH = 43200
_MINUTES_IN_TWO_MONTHS = 86400


def _align(timestamp: datetime, now: datetime) -> tuple[datetime, datetime]:
    if timestamp.tzinfo and now.tzinfo:
        return timestamp.astimezone(now.tzinfo), now
    if timestamp.tzinfo:
        return timestamp, now.replace(tzinfo=timestamp.tzinfo)
    if now.tzinfo:
        return timestamp.replace(tzinfo=now.tzinfo), now
    return timestamp, now


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _full_days(earlier: datetime, later: datetime) -> int:
    return int((later - earlier) / timedelta(days=1))


def format_version_label(timestamp: datetime, now: datetime) -> str:
    """Day label: "Today", "Yesterday", "Mon", "May 1" or "Jan 2023"."""
    timestamp, now = _align(timestamp, now)
    day = timestamp.date()
    today = now.date()
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"

    days = _full_days(timestamp, now)
    if days < 7:
        return f"{timestamp:%a}"
    if days < 60:
        return f"{timestamp:%b} {timestamp.day}"
    return f"{timestamp:%b %Y}"


def format_version_time(timestamp: datetime, now: datetime | None = None) -> str:
    """Time of day as "9:05 AM", read in ``now``'s timezone when given."""
    if now is not None:
        timestamp, _ = _align(timestamp, now)
    hour = timestamp.hour % 12 or 12
    meridiem = "AM" if timestamp.hour < 12 else "PM"
    return f"{hour}:{timestamp.minute:02d} {meridiem}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _distance_in_words(earlier: datetime, later: datetime) -> str:
    minutes = _round_half_up((later - earlier).total_seconds() / 60)

    if minutes < 2:
        return "less than a minute" if minutes == 0 else "1 minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if minutes < 90:
        return "about 1 hour"
    if minutes < _MINUTES_IN_DAY:
        return f"about {_plural(_round_half_up(minutes / 60), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < _MINUTES_IN_MONTH:
        return _plural(_round_half_up(minutes / _MINUTES_IN_DAY), "day")
    if minutes < _MINUTES_IN_TWO_MONTHS:
        return f"about {_plural(_round_half_up(minutes / _MINUTES_IN_MONTH), 'month')}"

    delta = relativedelta(later, earlier)
    months = delta.years * 12 + delta.months
    if months < 12:
        return _plural(_round_half_up(minutes / _MINUTES_IN_MONTH), "month")

    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def format_relative_time(timestamp: datetime, now: datetime) -> str:
    """Distance to ``now`` with a suffix: "3 hours ago", "in 2 days"."""
    timestamp, now = _align(timestamp, now)
    if timestamp > now:
        return f"in {_distance_in_words(now, timestamp)}"
    return f"{_distance_in_words(timestamp, now)} ago"
