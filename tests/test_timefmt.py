"""Test timestamp and duration formatting."""

from datetime import datetime, timedelta, timezone

from ocm_describe.utils.timefmt import format_duration, format_rfc3339, round_to_second


class TestRoundToSecond:
    def test_rounds_down(self):
        value = datetime(2024, 1, 1, 12, 0, 0, 499999, tzinfo=timezone.utc)
        assert round_to_second(value) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_rounds_half_up(self):
        """Test that half a second rounds up, across minute boundaries."""
        value = datetime(2024, 1, 1, 12, 0, 59, 500000, tzinfo=timezone.utc)
        assert round_to_second(value) == datetime(2024, 1, 1, 12, 1, 0, tzinfo=timezone.utc)


class TestFormatRFC3339:
    def test_utc_uses_z(self):
        value = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert format_rfc3339(value) == "2024-01-01T12:00:00Z"

    def test_naive_is_utc(self):
        assert format_rfc3339(datetime(2024, 1, 1, 12, 0, 0)) == "2024-01-01T12:00:00Z"

    def test_offset(self):
        value = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
        assert format_rfc3339(value) == "2024-01-01T12:00:00-05:30"

    def test_drops_fraction(self):
        value = datetime(2024, 1, 1, 12, 0, 0, 750000, tzinfo=timezone.utc)
        assert format_rfc3339(value) == "2024-01-01T12:00:00Z"

    def test_missing_value(self):
        assert format_rfc3339(None) == ""
        assert format_rfc3339(None, default="N/A") == "N/A"


class TestFormatDuration:
    def test_minutes_only(self):
        assert format_duration(timedelta(minutes=30, seconds=59)) == "30m0s"

    def test_hours(self):
        assert format_duration(timedelta(hours=2)) == "2h0m0s"

    def test_days_count_as_hours(self):
        """Test that durations over a day stay in hours."""
        assert format_duration(timedelta(days=1, hours=2, minutes=5)) == "26h5m0s"

    def test_non_positive(self):
        """Test that durations below a minute or negative collapse to zero."""
        assert format_duration(timedelta(seconds=20)) == "0s"
        assert format_duration(timedelta(minutes=-5)) == "0s"
