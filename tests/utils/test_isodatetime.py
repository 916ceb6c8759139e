"""Tests for isodatetime module."""

from datetime import datetime, UTC

from thoughtbox.utils import isodatetime


class TestIsoDatetime:
    """Tests for timestamp conversion."""

    def test_now_ends_with_z(self):
        assert isodatetime.now().endswith("Z")

    def test_naive_datetime_treated_as_utc(self):
        assert isodatetime.to_timestamp(datetime(2026, 10, 17, 10, 30)) == "2026-10-17T10:30:00Z"

    def test_round_trip(self):
        dt = datetime(2026, 10, 17, 10, 30, 5, 123456, tzinfo=UTC)
        assert isodatetime.to_datetime(isodatetime.to_timestamp(dt)) == dt
