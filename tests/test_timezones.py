from datetime import datetime, timezone

import pytest
import pytz

from smokesignal.http.timezones import combine_html_datetime, supported_timezones


def test_combine_html_datetime():
    result = combine_html_datetime("2025-05-06", "18:00", pytz.timezone("America/New_York"))
    assert result == datetime(2025, 5, 6, 22, 0, 0, tzinfo=timezone.utc)

    result = combine_html_datetime("2025-05-06", "18:00", pytz.timezone("UTC"))
    assert result == datetime(2025, 5, 6, 18, 0, 0, tzinfo=timezone.utc)

    result = combine_html_datetime("2025-05-06", "18:00", pytz.timezone("Asia/Tokyo"))
    assert result == datetime(2025, 5, 6, 9, 0, 0, tzinfo=timezone.utc)


def test_combine_html_datetime_accepts_zone_name():
    result = combine_html_datetime("2025-05-06", "18:00", "America/New_York")
    assert result == datetime(2025, 5, 6, 22, 0, 0, tzinfo=timezone.utc)


def test_combine_html_datetime_invalid_inputs():
    tz = pytz.timezone("America/New_York")
    with pytest.raises(ValueError):
        combine_html_datetime("05/06/2025", "18:00", tz)
    with pytest.raises(ValueError):
        combine_html_datetime("2025-05-06", "6:00 PM", tz)


def test_combine_html_datetime_edge_cases():
    with pytest.raises(ValueError):
        combine_html_datetime("2026-03-08", "02:30", pytz.timezone("US/Pacific"))

    result = combine_html_datetime("2025-05-06", "00:00", pytz.timezone("UTC"))
    assert result == datetime(2025, 5, 6, 0, 0, 0, tzinfo=timezone.utc)


def test_combine_html_datetime_unknown_zone():
    with pytest.raises(ValueError):
        combine_html_datetime("2025-05-06", "18:00", "Nowhere/Land")


def test_supported_timezones_default_is_utc():
    name, zones = supported_timezones(None)
    assert name == "UTC"
    assert "UTC" in zones
    assert zones == sorted(set(zones))


def test_supported_timezones_adds_handle_zone():
    name, zones = supported_timezones("Asia/Tokyo")
    assert name == "Asia/Tokyo"
    assert "Asia/Tokyo" in zones
    assert "America/New_York" in zones


def test_supported_timezones_deduplicates():
    _, zones = supported_timezones("Europe/London")
    assert zones.count("Europe/London") == 1
    _, default_zones = supported_timezones("UTC")
    assert len(zones) == len(default_zones) - 1


def test_supported_timezones_unknown_zone_falls_back():
    assert supported_timezones("Nowhere/Land") == supported_timezones(None)