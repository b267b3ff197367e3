"""Unit tests for version timestamp labels."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from docchain.interfaces.presentation import (
    format_relative_time,
    format_version_label,
    format_version_time,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("timestamp", "expected"),
    [
        (datetime(2024, 6, 15, 8, 0, tzinfo=UTC), "Today"),
        (datetime(2024, 6, 14, 20, 0, tzinfo=UTC), "Yesterday"),
        (datetime(2024, 6, 10, 9, 0, tzinfo=UTC), "Mon"),
        (datetime(2024, 6, 8, 13, 0, tzinfo=UTC), "Sat"),
        (datetime(2024, 6, 8, 12, 0, tzinfo=UTC), "Jun 8"),
        (datetime(2024, 5, 1, 9, 0, tzinfo=UTC), "May 1"),
        (datetime(2023, 1, 20, 9, 0, tzinfo=UTC), "Jan 2023"),
    ],
)
def test_format_version_label(timestamp: datetime, expected: str) -> None:
    assert format_version_label(timestamp, NOW) == expected


def test_label_uses_now_timezone() -> None:
    """Calendar days are counted in the viewer's timezone."""
    timestamp = datetime(2024, 6, 15, 1, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_version_label(timestamp, NOW) == "Yesterday"


def test_label_accepts_naive_timestamp() -> None:
    assert format_version_label(datetime(2024, 6, 15, 9, 0), NOW) == "Today"


@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [
        (9, 5, "9:05 AM"),
        (0, 30, "12:30 AM"),
        (12, 0, "12:00 PM"),
        (23, 59, "11:59 PM"),
    ],
)
def test_format_version_time(hour: int, minute: int, expected: str) -> None:
    assert format_version_time(datetime(2024, 6, 15, hour, minute)) == expected


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=20), "less than a minute ago"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=10), "10 minutes ago"),
        (timedelta(hours=1), "about 1 hour ago"),
        (timedelta(hours=3), "about 3 hours ago"),
        (timedelta(days=2), "2 days ago"),
        (timedelta(days=40), "about 1 month ago"),
    ],
)
def test_format_relative_time(delta: timedelta, expected: str) -> None:
    assert format_relative_time(NOW - delta, NOW) == expected


@pytest.mark.parametrize(
    ("timestamp", "expected"),
    [
        (datetime(2024, 3, 15, 12, 0, tzinfo=UTC), "3 months ago"),
        (datetime(2023, 6, 15, 12, 0, tzinfo=UTC), "about 1 year ago"),
        (datetime(2022, 12, 15, 12, 0, tzinfo=UTC), "over 1 year ago"),
        (datetime(2022, 7, 15, 12, 0, tzinfo=UTC), "almost 2 years ago"),
    ],
)
def test_format_relative_time_months_and_years(timestamp: datetime, expected: str) -> None:
    assert format_relative_time(timestamp, NOW) == expected


def test_future_timestamp_uses_in_prefix() -> None:
    assert format_relative_time(NOW + timedelta(days=2), NOW) == "in 2 days"


def test_version_time_follows_now_timezone() -> None:
    now = datetime(2024, 6, 15, 14, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert format_version_time(datetime(2024, 6, 15, 12, 0, tzinfo=UTC), now) == "7:00 AM"
