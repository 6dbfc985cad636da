"""
Tests for override value classification
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from timemachine import Instant, InvalidTemporalValue, OverrideKind, UnsupportedOverrideError, classify_override
from timemachine.overrides import fixed_offset_of, resolve_zone

BUDAPEST = ZoneInfo("Europe/Budapest")
PLUS_TWO = timezone(timedelta(hours=2))


@pytest.mark.parametrize("value,kind", [
    (Instant.parse("2024-01-01T00:00:00Z"), OverrideKind.INSTANT),
    (datetime(2024, 1, 1, 12, tzinfo=BUDAPEST), OverrideKind.ZONED_DATETIME),
    (datetime(2024, 1, 1, 12, tzinfo=PLUS_TWO), OverrideKind.OFFSET_DATETIME),
    (datetime(2024, 1, 1, 12, tzinfo=timezone.utc), OverrideKind.OFFSET_DATETIME),
    (time(12, 30, tzinfo=PLUS_TWO), OverrideKind.OFFSET_TIME),
    (datetime(2024, 1, 1, 12), OverrideKind.LOCAL_DATETIME),
    (date(2024, 1, 1), OverrideKind.LOCAL_DATE),
    (time(12, 30), OverrideKind.LOCAL_TIME),
    (BUDAPEST, OverrideKind.ZONE),
    (PLUS_TWO, OverrideKind.ZONE),
    ("Asia/Tokyo", OverrideKind.ZONE),
])
def test_classify_override(value, kind):
    assert classify_override(value) is kind


@pytest.mark.parametrize("value", [42, 1.5, None, timedelta(hours=1), [date(2024, 1, 1)]])
def test_classify_rejects_non_temporal_values(value):
    with pytest.raises(UnsupportedOverrideError):
        classify_override(value)


def test_unsupported_override_is_a_type_and_value_error():
    with pytest.raises(TypeError):
        classify_override(object())
    with pytest.raises(InvalidTemporalValue):
        classify_override(object())


class TestZoneResolution:
    """Test zone override resolution"""

    def test_tzinfo_is_passed_through(self):
        assert resolve_zone(PLUS_TWO) is PLUS_TWO

    def test_iana_key_is_loaded(self):
        assert resolve_zone("Europe/Budapest") == BUDAPEST

    @pytest.mark.parametrize("key", ["Mars/Olympus_Mons", "", "../etc/passwd"])
    def test_unknown_key_is_rejected(self, key):
        with pytest.raises(InvalidTemporalValue):
            resolve_zone(key)


class TestFixedOffset:
    """Test fixed offset extraction from aware times"""

    def test_timezone_is_kept(self):
        assert fixed_offset_of(time(8, tzinfo=PLUS_TWO)) is PLUS_TWO

    def test_region_zone_is_rejected(self):
        with pytest.raises(InvalidTemporalValue):
            fixed_offset_of(time(8, tzinfo=BUDAPEST))
