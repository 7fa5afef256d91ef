from __future__ import annotations

from dataclasses import dataclass

from sunday_midnight.config import MIDNIGHT_POLICY, TZ_NAME
from sunday_midnight.core.models import MidnightPolicy
from sunday_midnight.core.service import CountdownOptions, parse_policy


@dataclass(frozen=True)
class AppSettings:
    tz_name: str
    policy: MidnightPolicy

    @property
    def options(self) -> CountdownOptions:
        return CountdownOptions(tz_name=self.tz_name, policy=self.policy)


def load_settings() -> AppSettings:
    return AppSettings(
        tz_name=TZ_NAME,
        policy=parse_policy(MIDNIGHT_POLICY),
    )
