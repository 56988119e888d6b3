"""
Tests for date/time helpers.
"""

from datetime import datetime, timedelta, timezone

from freezegun import freeze_time

from fueltracker.utils.time_utils import (
    current_year_month,
    normalize_datetime,
    parse_datetime,
    utc_now,
)


class TestParseDatetime:
    """Tests for parse_datetime."""

    def test_date_only(self):
        assert parse_datetime("2024-01-15") == datetime(2024, 1, 15)

    def test_iso_with_offset_converted_to_utc(self):
        assert parse_datetime("2024-01-15T14:30:00+03:00") == datetime(2024, 1, 15, 11, 30)

    def test_unix_timestamp(self):
        assert parse_datetime("1705329000") == datetime(2024, 1, 15, 14, 30)

    def test_datetime_passthrough(self):
        aware = datetime(2024, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert parse_datetime(aware) == datetime(2024, 1, 15, 10, 0)

    def test_invalid_returns_default(self):
        assert parse_datetime("not a date") is None
        assert parse_datetime("", default=datetime(2000, 1, 1)) == datetime(2000, 1, 1)

    def test_non_string(self):
        assert parse_datetime(12.5) is None


class TestNow:
    """Tests for clock helpers."""

    @freeze_time("2024-07-04 12:00:00")
    def test_utc_now_is_naive(self):
        now = utc_now()
        assert now.tzinfo is None
        assert now == datetime(2024, 7, 4, 12, 0)

    @freeze_time("2024-07-04 12:00:00")
    def test_current_year_month(self):
        assert current_year_month() == (2024, 7)

    def test_normalize_naive_unchanged(self):
        naive = datetime(2024, 1, 1, 12, 0)
        assert normalize_datetime(naive) is naive

    def test_normalize_none(self):
        assert normalize_datetime(None) is None
