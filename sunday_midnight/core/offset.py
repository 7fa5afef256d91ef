from __future__ import annotations

from typing import Optional

from sunday_midnight.core.calendar import CivilCalendar, default_calendar
from sunday_midnight.core.models import Instant, Offset


def resolve_offset(instant: Instant, zone: str, *, calendar: Optional[CivilCalendar] = None) -> Offset:
    """
    Return the UTC offset `zone` observes at `instant`.

    The zone's wall-clock reading of `instant` is rebuilt as if it were a UTC reading;
    the distance between that synthetic instant and the real one is the offset. No
    offset table is consulted, so anything that can format civil fields can serve as
    the calendar.

    Raises InvalidZoneError if `zone` is unknown.
    """
    calendar = calendar or default_calendar()
    instant = instant.truncate_to_second()
    civil = calendar.civil_fields(instant, zone)
    local_as_utc = Instant.from_civil_utc(
        civil.year,
        civil.month,
        civil.day,
        civil.hour,
        civil.minute,
        civil.second,
    )
    return Offset.between(local_as_utc, instant)
