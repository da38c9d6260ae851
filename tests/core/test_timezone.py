"""
Tests for the timezone-aware clock.
"""

from datetime import datetime

import pytz

from video_transformer.core.timezone_utils import TimezoneManager


def test_now_is_timezone_aware():
    manager = TimezoneManager("America/New_York")

    now = manager.now()

    assert now.tzinfo is not None
    assert now.tzinfo.zone == "America/New_York"


def test_localize_and_convert():
    manager = TimezoneManager("America/New_York")

    local = manager.localize(datetime(2026, 7, 1, 8, 0, 0))
    converted = manager.to_local(datetime(2026, 7, 1, 12, 0, 0))

    assert local.utcoffset().total_seconds() == -4 * 3600
    assert converted == local
    assert manager.localize(local) is local


def test_filename_timestamp_has_no_separators():
    manager = TimezoneManager()

    stamp = manager.format_filename_timestamp(datetime(2026, 10, 19, 12, 30, 5, 123))

    assert stamp == "20261019_123005_000123"


def test_timestamps_round_trip_with_offset():
    manager = TimezoneManager("Europe/Berlin")
    original = manager.localize(datetime(2026, 1, 2, 3, 4, 5))

    parsed = manager.parse_timestamp(original.isoformat())

    assert parsed == original
    assert parsed.tzinfo is not None


def test_fixed_clock_advances(clock):
    assert clock.now() == pytz.UTC.localize(datetime(2026, 10, 19, 12, 0, 0))
    clock.advance(90)
    assert clock.now() == pytz.UTC.localize(datetime(2026, 10, 19, 12, 1, 30))
