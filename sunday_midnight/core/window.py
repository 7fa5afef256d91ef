from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple

from sunday_midnight.core.calculator import next_sunday_midnight as next_sunday_midnight_instant
from sunday_midnight.core.calendar import load_zone
from sunday_midnight.core.models import Instant, MidnightPolicy


def _zone_name(now: datetime, tz_name: Optional[str]) -> str:
    if tz_name:
        return tz_name
    key = getattr(now.tzinfo, "key", None)
    if not key:
        raise ValueError("tz_name is required when now.tzinfo is not a ZoneInfo")
    return key


def next_sunday_midnight(
    now: datetime,
    tz_name: Optional[str] = None,
    *,
    policy: MidnightPolicy = MidnightPolicy.STRICT,
) -> datetime:
    """Next Sunday 00:00 in the zone (now's own zone unless tz_name is given), as an aware datetime."""
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    zone = _zone_name(now, tz_name)
    target = next_sunday_midnight_instant(Instant.from_datetime(now), zone, policy=policy)
    return target.to_datetime().astimezone(load_zone(zone))


def week_window_starting_sunday(now: datetime, tz_name: Optional[str] = None) -> Tuple[datetime, datetime]:
    """
    Return [start, end) where start is the next Sunday midnight and end the one after it.

    Both ends are resolved in the zone's civil calendar, so a week containing a DST
    change is 167 or 169 hours long rather than a fixed 7 * 24.
    """
    start = next_sunday_midnight(now, tz_name)
    end = next_sunday_midnight(start, tz_name)
    return start, end
