"""Unit tests for the UTC clock helpers."""

from datetime import datetime, timedelta, timezone

from rockmundo.core.timeutils import as_utc, utc_now


class TestUtcNow:
    def test_is_aware_utc(self):
        now = utc_now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestAsUtc:
    def test_naive_value_is_taken_as_utc(self):
        assert as_utc(datetime(2026, 7, 1, 10)) == datetime(2026, 7, 1, 10, tzinfo=timezone.utc)

    def test_offset_value_is_converted(self):
        plus_two = timezone(timedelta(hours=2))

        converted = as_utc(datetime(2026, 7, 1, 12, 30, tzinfo=plus_two))

        assert converted == datetime(2026, 7, 1, 10, 30, tzinfo=timezone.utc)
        assert converted.tzinfo is timezone.utc

    def test_none_passes_through(self):
        assert as_utc(None) is None
