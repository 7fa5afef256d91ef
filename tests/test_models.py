from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from sunday_midnight.core.models import Instant, Offset, Weekday


class TestInstant(unittest.TestCase):
    def test_from_civil_utc_matches_datetime(self) -> None:
        inst = Instant.from_civil_utc(2024, 4, 23, 10, 0, 0)
        self.assertEqual(inst.to_datetime(), datetime(2024, 4, 23, 10, 0, tzinfo=timezone.utc))
        self.assertEqual(Instant.from_civil_utc(1970, 1, 1).epoch_ms, 0)

    def test_from_civil_utc_rolls_day_into_next_month(self) -> None:
        self.assertEqual(Instant.from_civil_utc(2024, 4, 32).utc_date(), date(2024, 5, 2))
        self.assertEqual(Instant.from_civil_utc(2024, 2, 30).utc_date(), date(2024, 3, 1))  # leap year
        self.assertEqual(Instant.from_civil_utc(2023, 2, 30).utc_date(), date(2023, 3, 2))

    def test_from_civil_utc_rolls_into_next_year(self) -> None:
        self.assertEqual(Instant.from_civil_utc(2024, 12, 33).utc_date(), date(2025, 1, 2))
        self.assertEqual(Instant.from_civil_utc(2024, 13, 1).utc_date(), date(2025, 1, 1))

    def test_from_civil_utc_rolls_backwards(self) -> None:
        self.assertEqual(Instant.from_civil_utc(2024, 3, 0).utc_date(), date(2024, 2, 29))
        self.assertEqual(Instant.from_civil_utc(2024, 1, 1, -1).to_datetime(), datetime(2023, 12, 31, 23, tzinfo=timezone.utc))

    def test_before_epoch(self) -> None:
        inst = Instant.from_civil_utc(1969, 12, 31, 23, 59, 59)
        self.assertEqual(inst.epoch_ms, -1000)
        self.assertEqual(Instant.from_datetime(inst.to_datetime()), inst)

    def test_from_datetime_requires_timezone(self) -> None:
        with self.assertRaises(ValueError):
            Instant.from_datetime(datetime(2024, 1, 1))

    def test_from_datetime_keeps_milliseconds(self) -> None:
        dt = datetime(2024, 1, 1, 0, 0, 0, 250_000, tzinfo=ZoneInfo("Europe/Berlin"))
        self.assertEqual(Instant.from_datetime(dt).epoch_ms % 1000, 250)

    def test_from_iso(self) -> None:
        self.assertEqual(Instant.from_iso("2024-12-22T02:48:00Z"), Instant.from_civil_utc(2024, 12, 22, 2, 48))
        self.assertEqual(Instant.from_iso("2024-04-23T10:00:00-04:00"), Instant.from_civil_utc(2024, 4, 23, 14))
        with self.assertRaises(ValueError):
            Instant.from_iso("2024-04-23T10:00:00")
        with self.assertRaises(ValueError):
            Instant.from_iso("next sunday")

    def test_isoformat(self) -> None:
        self.assertEqual(Instant.from_civil_utc(2025, 1, 5).isoformat(), "2025-01-05T00:00:00Z")

    def test_ordering_and_difference(self) -> None:
        a = Instant.from_civil_utc(2024, 1, 1)
        b = a.plus_seconds(90)
        self.assertLess(a, b)
        self.assertEqual(b - a, 90_000)
        self.assertEqual(a - b, -90_000)


class TestOffset(unittest.TestCase):
    def test_instant_arithmetic_uses_offset_units(self) -> None:
        inst = Instant.from_civil_utc(2024, 1, 1, 12)
        est = Offset.from_minutes(-300)
        self.assertEqual(est.seconds, -18000)
        self.assertEqual(est.milliseconds, -18_000_000)
        self.assertEqual((inst + est).to_datetime().hour, 7)
        self.assertEqual((inst - est).to_datetime().hour, 17)

    def test_between(self) -> None:
        instant = Instant.from_civil_utc(2024, 7, 1, 4)
        local_as_utc = Instant.from_civil_utc(2024, 7, 1, 9, 30)
        self.assertEqual(Offset.between(local_as_utc, instant).minutes, 330)

    def test_minutes_truncate_toward_zero(self) -> None:
        # Local mean time in New York: -4:56:02
        lmt = Offset(seconds=-(4 * 3600 + 56 * 60 + 2))
        self.assertEqual(lmt.minutes, -296)
        self.assertEqual(str(lmt), "-04:56:02")
        self.assertEqual(str(Offset.from_minutes(345)), "+05:45")


class TestWeekday(unittest.TestCase):
    def test_sunday_is_zero(self) -> None:
        self.assertEqual(Weekday.from_datetime(date(2024, 4, 28)), Weekday.SUNDAY)
        self.assertEqual(Weekday.from_datetime(date(2024, 4, 23)), Weekday.TUESDAY)
        self.assertEqual(Weekday.from_datetime(date(2024, 4, 27)), Weekday.SATURDAY)
        self.assertEqual(
            [Weekday.from_datetime(date(2024, 4, 28) + timedelta(days=i)) for i in range(7)],
            list(Weekday),
        )


if __name__ == "__main__":
    unittest.main()
