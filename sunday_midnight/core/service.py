from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Optional, Union

from sunday_midnight.config import MIDNIGHT_POLICY, TZ_NAME
from sunday_midnight.core.calculator import next_sunday_midnight
from sunday_midnight.core.calendar import CivilCalendar, load_zone
from sunday_midnight.core.models import MS_PER_SECOND, Countdown, Instant, MidnightPolicy


def parse_policy(value: Union[str, MidnightPolicy]) -> MidnightPolicy:
    try:
        return MidnightPolicy(value.strip().lower() if isinstance(value, str) else value)
    except ValueError as e:
        choices = ", ".join(p.value for p in MidnightPolicy)
        raise ValueError(f"Unknown midnight policy {value!r} (expected one of: {choices})") from e


@dataclass(frozen=True)
class CountdownOptions:
    tz_name: str = TZ_NAME
    policy: MidnightPolicy = parse_policy(MIDNIGHT_POLICY)


def override_options(options: CountdownOptions, /, **overrides) -> CountdownOptions:
    """
    Return a copy of `options` with specified fields overridden.

    Example:
      new_opts = override_options(opts, tz_name="Europe/Berlin")
    """
    valid_fields = {f.name for f in fields(CountdownOptions)}
    unknown = set(overrides) - valid_fields
    if unknown:
        raise ValueError(f"Unknown CountdownOptions field(s): {sorted(unknown)}")
    if "policy" in overrides:
        overrides["policy"] = parse_policy(overrides["policy"])
    return replace(options, **overrides)


def countdown(
    reference: Union[Instant, datetime],
    *,
    options: CountdownOptions,
    calendar: Optional[CivilCalendar] = None,
) -> Countdown:
    """
    Count down from `reference` to the next Sunday midnight in `options.tz_name`.

    Args:
        reference: The starting instant; an aware datetime is converted first.
        options: Zone and midnight policy.
        calendar: Civil calendar to read the zone through (defaults to the tz database).

    Returns:
        A Countdown carrying both instants and the whole seconds between them.

    Raises:
        InvalidZoneError: if `options.tz_name` is unknown.
        ValueError: if `reference` is a naive datetime.
    """
    if isinstance(reference, datetime):
        reference = Instant.from_datetime(reference)

    target = next_sunday_midnight(reference, options.tz_name, calendar=calendar, policy=options.policy)
    return Countdown(
        reference=reference,
        target=target,
        zone=options.tz_name,
        seconds=(target - reference) // MS_PER_SECOND,
        policy=options.policy,
    )


def countdown_payload(result: Countdown) -> dict:
    local_target = result.target.to_datetime().astimezone(load_zone(result.zone))
    return {
        "reference": result.reference.isoformat(),
        "target": result.target.isoformat(),
        "target_local": local_target.isoformat(),
        "tz": result.zone,
        "policy": result.policy.value,
        "seconds": result.seconds,
    }
