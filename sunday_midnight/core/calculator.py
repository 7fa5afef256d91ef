from __future__ import annotations

from typing import List, Optional

from sunday_midnight.core.calendar import CivilCalendar, default_calendar
from sunday_midnight.core.models import (
    MS_PER_SECOND,
    SECONDS_PER_DAY,
    Instant,
    MidnightPolicy,
    Weekday,
)
from sunday_midnight.core.offset import resolve_offset


def local_midnights(year: int, month: int, day: int, zone: str, *, calendar: Optional[CivilCalendar] = None) -> List[Instant]:
    """
    Instants at which `zone` reads 00:00:00 on the given civil date, ascending.

    `day` may overflow the month (April 32 is May 2). Usually there is exactly one
    instant. A fall-back transition across midnight gives two; a spring-forward
    transition at midnight gives none.
    """
    calendar = calendar or default_calendar()
    provisional = Instant.from_civil_utc(year, month, day)
    target_date = provisional.utc_date()

    found: List[Instant] = []
    # The offset at the provisional instant is right unless a transition falls
    # between it and the real midnight; the neighbouring days cover that case.
    for probe in (provisional, provisional.plus_seconds(-SECONDS_PER_DAY), provisional.plus_seconds(SECONDS_PER_DAY)):
        candidate = provisional - resolve_offset(probe, zone, calendar=calendar)
        if candidate in found:
            continue
        civil = calendar.civil_fields(candidate, zone)
        if civil.is_midnight and civil.date() == target_date:
            found.append(candidate)
    return sorted(found)


def resolve_local_midnight(
    year: int,
    month: int,
    day: int,
    zone: str,
    *,
    calendar: Optional[CivilCalendar] = None,
) -> Instant:
    """
    The instant local midnight starts the given civil date in `zone`.

    A repeated midnight resolves to its first occurrence. A skipped midnight resolves
    to where the pre-transition clock would have read 00:00:00, the first instant of
    that local day.
    """
    calendar = calendar or default_calendar()
    found = local_midnights(year, month, day, zone, calendar=calendar)
    return found[0] if found else _skipped_midnight(year, month, day, zone, calendar)


def _skipped_midnight(year: int, month: int, day: int, zone: str, calendar: CivilCalendar) -> Instant:
    provisional = Instant.from_civil_utc(year, month, day)
    return provisional - resolve_offset(provisional.plus_seconds(-SECONDS_PER_DAY), zone, calendar=calendar)


def next_sunday_midnight(
    reference: Instant,
    zone: str,
    *,
    calendar: Optional[CivilCalendar] = None,
    policy: MidnightPolicy = MidnightPolicy.STRICT,
) -> Instant:
    """
    The next instant at which `zone` reads Sunday 00:00:00, seen from `reference`.

    With MidnightPolicy.STRICT the result is always later than `reference`; a
    reference already at Sunday midnight gets the following Sunday. With
    MidnightPolicy.INCLUSIVE a reference exactly at Sunday midnight is returned
    unchanged.

    Raises InvalidZoneError if `zone` is unknown.
    """
    calendar = calendar or default_calendar()
    policy = MidnightPolicy(policy)
    civil = calendar.civil_fields(reference, zone)

    days_until_sunday = (7 - civil.weekday) % 7
    if days_until_sunday == 0 and not (policy is MidnightPolicy.INCLUSIVE and civil.is_midnight):
        days_until_sunday = 7

    while True:
        day = civil.day + days_until_sunday
        candidates = local_midnights(civil.year, civil.month, day, zone, calendar=calendar)
        if not candidates:
            candidates = [_skipped_midnight(civil.year, civil.month, day, zone, calendar)]
        for target in candidates:
            if target > reference or (policy is MidnightPolicy.INCLUSIVE and target == reference):
                return target
        # Only reachable around a repeated midnight the reference has already passed.
        days_until_sunday += 7


def seconds_to_next_sunday_midnight(
    reference: Instant,
    zone: str,
    *,
    calendar: Optional[CivilCalendar] = None,
    policy: MidnightPolicy = MidnightPolicy.STRICT,
) -> int:
    """
    Whole seconds from `reference` until the next local Sunday 00:00:00 in `zone`.

    Exact Sunday midnight returns 604800 under MidnightPolicy.STRICT (the default)
    and 0 under MidnightPolicy.INCLUSIVE; one second later both return 604799.
    The result is never negative.

    Raises InvalidZoneError if `zone` is unknown.
    """
    target = next_sunday_midnight(reference, zone, calendar=calendar, policy=policy)
    return (target - reference) // MS_PER_SECOND


def is_sunday_midnight(instant: Instant, zone: str, *, calendar: Optional[CivilCalendar] = None) -> bool:
    civil = (calendar or default_calendar()).civil_fields(instant, zone)
    return civil.weekday == Weekday.SUNDAY and civil.is_midnight
