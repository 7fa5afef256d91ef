from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone

from sunday_midnight.config import MIDNIGHT_POLICY, TZ_NAME
from sunday_midnight.core.calendar import InvalidZoneError
from sunday_midnight.core.models import Instant, MidnightPolicy
from sunday_midnight.core.service import CountdownOptions, countdown, countdown_payload, parse_policy


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Seconds until the next local Sunday midnight in a time zone.")
    p.add_argument("--tz", default=TZ_NAME, help=f"IANA time zone (default: {TZ_NAME}).")
    p.add_argument(
        "--at",
        help="Reference instant, ISO-8601 with offset (e.g. 2024-12-22T02:48:00Z). If omitted, uses now.",
        default=None,
    )
    p.add_argument(
        "--policy",
        choices=[policy.value for policy in MidnightPolicy],
        default=MIDNIGHT_POLICY,
        help=f"What exact Sunday midnight counts down to (default: {MIDNIGHT_POLICY}).",
    )
    p.add_argument("--json", action="store_true", help="Print the result as JSON.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    if args.at:
        try:
            reference = Instant.from_iso(args.at)
        except ValueError as e:
            raise SystemExit(f"ERROR: --at must be ISO-8601 with an offset (got {args.at!r})") from e
    else:
        reference = Instant.from_datetime(datetime.now(tz=timezone.utc))

    try:
        options = CountdownOptions(tz_name=args.tz, policy=parse_policy(args.policy))
        payload = countdown_payload(countdown(reference, options=options))
    except (InvalidZoneError, ValueError) as e:
        raise SystemExit(f"ERROR: {e}") from e

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
        return

    print(f"Zone: {payload['tz']}  Policy: {payload['policy']}")
    print(f"Reference: {payload['reference']}")
    print(f"Target: {payload['target']} (local {payload['target_local']})")
    print(payload["seconds"])


if __name__ == "__main__":
    main()
