from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum, IntEnum
from typing import Union


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_ORDINAL = EPOCH.date().toordinal()

MS_PER_SECOND = 1000
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_datetime(cls, dt: Union[date, datetime]) -> "Weekday":
        # Python weekday: Mon=0 .. Sun=6
        return cls((dt.weekday() + 1) % 7)


class MidnightPolicy(str, Enum):
    """
    What "next" means when the reference already reads Sunday 00:00:00.

    STRICT: the answer is always in the future, so exact Sunday midnight gives one full week.
    INCLUSIVE: exact Sunday midnight is its own next midnight, so the answer is 0.
    """

    STRICT = "strict"
    INCLUSIVE = "inclusive"


@dataclass(frozen=True)
class Offset:
    """Amount a zone's local clock is ahead of UTC at one specific instant."""

    seconds: int

    @classmethod
    def from_minutes(cls, minutes: int) -> "Offset":
        return cls(seconds=minutes * 60)

    @classmethod
    def between(cls, local_as_utc: "Instant", instant: "Instant") -> "Offset":
        """Offset implied by a wall-clock reading (taken as UTC) and the instant it was read at."""
        return cls(seconds=(local_as_utc - instant) // MS_PER_SECOND)

    @property
    def minutes(self) -> int:
        # Whole minutes toward zero; pre-1900 local mean time offsets keep their seconds in `seconds`.
        return int(self.seconds / 60)

    @property
    def milliseconds(self) -> int:
        return self.seconds * MS_PER_SECOND

    def __neg__(self) -> "Offset":
        return Offset(seconds=-self.seconds)

    def __str__(self) -> str:
        sign = "-" if self.seconds < 0 else "+"
        hours, rem = divmod(abs(self.seconds), 3600)
        minutes, seconds = divmod(rem, 60)
        text = f"{sign}{hours:02d}:{minutes:02d}"
        return f"{text}:{seconds:02d}" if seconds else text


@dataclass(frozen=True, order=True)
class Instant:
    """Absolute point in time as integer milliseconds since 1970-01-01T00:00:00Z."""

    epoch_ms: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        if dt.tzinfo is None:
            raise ValueError("dt must be timezone-aware")
        delta = dt - EPOCH
        return cls(epoch_ms=(delta.days * SECONDS_PER_DAY + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1000)

    @classmethod
    def from_iso(cls, text: str) -> "Instant":
        """
        Parse an ISO-8601 timestamp carrying an explicit offset ("Z" accepted for UTC).

        Raises ValueError for unparsable text or a timestamp without an offset.
        """
        text = text.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
        if dt.tzinfo is None:
            raise ValueError(f"timestamp must carry a UTC offset (got {text!r})")
        return cls.from_datetime(dt)

    @classmethod
    def from_civil_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> "Instant":
        """
        Build the instant at which a UTC wall clock reads the given civil fields.

        Out-of-range fields roll over instead of failing: day 32 of April is May 2,
        month 13 is January of the following year, hour 24 is midnight of the next day.
        """
        year += (month - 1) // 12
        month = (month - 1) % 12 + 1
        days = date(year, month, 1).toordinal() - _EPOCH_ORDINAL + (day - 1)
        total_seconds = ((days * 24 + hour) * 60 + minute) * 60 + second
        return cls(epoch_ms=total_seconds * MS_PER_SECOND)

    def to_datetime(self) -> datetime:
        return EPOCH + timedelta(milliseconds=self.epoch_ms)

    def isoformat(self) -> str:
        return self.to_datetime().isoformat().replace("+00:00", "Z")

    def utc_date(self) -> date:
        return self.to_datetime().date()

    def truncate_to_second(self) -> "Instant":
        return Instant(epoch_ms=self.epoch_ms - self.epoch_ms % MS_PER_SECOND)

    def plus_seconds(self, seconds: int) -> "Instant":
        return Instant(epoch_ms=self.epoch_ms + seconds * MS_PER_SECOND)

    def __add__(self, other: Offset) -> "Instant":
        if isinstance(other, Offset):
            return Instant(epoch_ms=self.epoch_ms + other.milliseconds)
        return NotImplemented

    def __sub__(self, other):
        # Instant - Offset -> Instant; Instant - Instant -> signed milliseconds
        if isinstance(other, Offset):
            return Instant(epoch_ms=self.epoch_ms - other.milliseconds)
        if isinstance(other, Instant):
            return self.epoch_ms - other.epoch_ms
        return NotImplemented


@dataclass(frozen=True)
class CivilFields:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: Weekday

    @property
    def is_midnight(self) -> bool:
        return self.hour == 0 and self.minute == 0 and self.second == 0

    def date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class Countdown:
    reference: Instant
    target: Instant
    zone: str
    seconds: int
    policy: MidnightPolicy
