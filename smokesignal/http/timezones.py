"""Time zone choices and HTML date/time input handling."""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional, Union

import pytz

_COMMON_TIMEZONES = (
    "America/Anchorage",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/New_York",
    "America/Phoenix",
    "America/Puerto_Rico",
    "Australia/Darwin",
    "Australia/Perth",
    "Australia/Sydney",
    "Canada/Atlantic",
    "Canada/Newfoundland",
    "CET",
    "EET",
    "Europe/London",
    "GMT",
    "Pacific/Auckland",
    "Pacific/Chatham",
    "Pacific/Guam",
    "Pacific/Honolulu",
    "US/Alaska",
    "US/Aleutian",
    "US/Samoa",
    "WET",
)


def supported_timezones(handle_tz: Optional[str] = None) -> tuple[str, list[str]]:
    """Return the user's zone (UTC if unknown) and the sorted zones to offer."""
    name = handle_tz if handle_tz in pytz.all_timezones_set else "UTC"
    return name, sorted({*_COMMON_TIMEZONES, name})


def combine_html_datetime(
    date_str: str, time_str: str, timezone: Union[str, tzinfo]
) -> datetime:
    """Combine ``YYYY-MM-DD`` and ``HH:MM`` in ``timezone`` into a UTC datetime."""
    try:
        naive = datetime.strptime(f"{date_str}T{time_str}", "%Y-%m-%dT%H:%M")
    except ValueError as exc:
        raise ValueError(f"Failed to parse date and time: {exc}") from exc

    if isinstance(timezone, str):
        try:
            zone = pytz.timezone(timezone)
        except pytz.exceptions.UnknownTimeZoneError as exc:
            raise ValueError(f"Unknown time zone: {timezone}") from exc
    else:
        zone = timezone

    if hasattr(zone, "localize"):
        try:
            local = zone.localize(naive, is_dst=None)
        except pytz.exceptions.InvalidTimeError as exc:
            raise ValueError("Ambiguous or non-existent local time") from exc
    else:
        early = naive.replace(tzinfo=zone, fold=0)
        late = naive.replace(tzinfo=zone, fold=1)
        if early.utcoffset() != late.utcoffset():
            raise ValueError("Ambiguous or non-existent local time")
        local = early

    return local.astimezone(dt_timezone.utc)