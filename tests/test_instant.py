"""
Tests for Instant
Verifies UTC normalization, parsing, arithmetic and ordering
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from timemachine import Instant, InvalidTemporalValue


class TestInstant:
    """Test the Instant value type"""

    def test_naive_moment_is_read_as_utc(self):
        instant = Instant.of(datetime(2024, 1, 1, 11, 0))
        assert instant.moment == datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc)
        assert instant.moment.tzinfo is timezone.utc

    def test_aware_moment_is_converted_to_utc(self):
        instant = Instant.of(datetime(2024, 1, 1, 12, 0, tzinfo=ZoneInfo("Europe/Budapest")))
        assert instant.moment.tzinfo is timezone.utc
        assert instant.moment.hour == 11

    def test_parse_iso_timestamp(self):
        instant = Instant.parse("2024-01-01T11:00:00Z")
        assert instant == Instant.of(datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=1))))
        assert str(instant) == "2024-01-01T11:00:00Z"

    def test_parse_rejects_garbage(self):
        with pytest.raises(InvalidTemporalValue):
            Instant.parse("not a timestamp")

    def test_parse_rejects_epoch_seconds_text(self):
        with pytest.raises(InvalidTemporalValue):
            Instant.parse("1700000000")

    def test_parse_offset_timestamp(self):
        instant = Instant.parse("2024-01-01T12:00:00+01:00")
        assert instant.moment == datetime(2024, 1, 1, 11, 0, tzinfo=timezone.utc)

    def test_epoch_seconds_round_trip(self):
        instant = Instant.from_epoch_seconds(1_700_000_000)
        assert instant.epoch_seconds == 1_700_000_000
        assert instant.moment == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_epoch_seconds_out_of_range(self):
        with pytest.raises(InvalidTemporalValue):
            Instant.from_epoch_seconds(1e20)

    def test_arithmetic(self):
        start = Instant.parse("2024-01-01T00:00:00Z")
        later = start + timedelta(hours=1)
        assert later == Instant.parse("2024-01-01T01:00:00Z")
        assert later - start == timedelta(hours=1)
        assert later - timedelta(hours=1) == start

    def test_ordering(self):
        earlier = Instant.parse("2024-01-01T00:00:00Z")
        later = Instant.parse("2024-01-01T00:00:01Z")
        assert earlier < later
        assert later > earlier
        assert earlier <= earlier
        assert later >= earlier
        assert sorted([later, earlier]) == [earlier, later]

    def test_is_immutable_and_hashable(self):
        instant = Instant.parse("2024-01-01T00:00:00Z")
        with pytest.raises(ValidationError):
            instant.moment = datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert len({instant, Instant.parse("2024-01-01T00:00:00Z")}) == 1

    def test_to_datetime_in_zone(self):
        instant = Instant.parse("2024-07-01T10:00:00Z")
        local = instant.to_datetime(ZoneInfo("Europe/Budapest"))
        assert local.hour == 12
        assert local == instant.to_datetime()

    def test_now_tracks_system_clock(self):
        before = datetime.now(timezone.utc)
        instant = Instant.now()
        after = datetime.now(timezone.utc)
        assert before <= instant.moment <= after
