from __future__ import annotations

from functools import lru_cache
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sunday_midnight.core.models import CivilFields, Instant, Weekday


class InvalidZoneError(ValueError):
    """Raised when a zone identifier is not known to the time zone database."""

    def __init__(self, zone: str):
        super().__init__(f"Unknown time zone: {zone!r}")
        self.zone = zone


class CivilCalendar(Protocol):
    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        """Local calendar reading of `instant` in `zone`, at whole-second precision."""
        ...


def load_zone(zone: str) -> ZoneInfo:
    """
    Look up an IANA zone, translating every flavour of lookup failure into InvalidZoneError.

    zoneinfo raises ZoneInfoNotFoundError for unknown keys, ValueError for malformed
    keys (absolute paths, "..") and OSError when a key names a directory.
    """
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidZoneError(zone) from e


class ZoneInfoCalendar:
    """Civil calendar backed by the IANA tz database through the standard library."""

    def civil_fields(self, instant: Instant, zone: str) -> CivilFields:
        local = instant.to_datetime().astimezone(load_zone(zone))
        return CivilFields(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            weekday=Weekday.from_datetime(local),
        )


@lru_cache(maxsize=1)
def default_calendar() -> ZoneInfoCalendar:
    return ZoneInfoCalendar()
