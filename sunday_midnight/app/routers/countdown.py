from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from sunday_midnight.app.deps import get_settings
from sunday_midnight.app.settings import AppSettings
from sunday_midnight.core.calendar import InvalidZoneError
from sunday_midnight.core.models import Instant
from sunday_midnight.core.service import countdown, countdown_payload, override_options


router = APIRouter()


def _reference(at: Optional[str]) -> Instant:
    if not at:
        return Instant.from_datetime(datetime.now(tz=timezone.utc))
    try:
        return Instant.from_iso(at)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"at must be ISO-8601 with an offset (got {at!r})") from e


def _generate_payload(*, reference: Instant, tz: Optional[str], policy: Optional[str], settings: AppSettings) -> dict:
    overrides = {}
    if tz:
        overrides["tz_name"] = tz
    if policy:
        overrides["policy"] = policy
    try:
        options = override_options(settings.options, **overrides)
        return countdown_payload(countdown(reference, options=options))
    except (InvalidZoneError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/api/next-sunday")
def next_sunday_api(
    tz: Optional[str] = Query(default=None),
    at: Optional[str] = Query(default=None),
    policy: Optional[str] = Query(default=None),
    settings: AppSettings = Depends(get_settings),
):
    return _generate_payload(reference=_reference(at), tz=tz, policy=policy, settings=settings)
