#!filepath: circlog/utils/clock.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class CalendarFields:
    """
    Calendar decomposition of one instant (local wall-clock time).

    Value typed: every decomposition returns a fresh record, nothing is
    shared between two computations.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def from_datetime(cls, dt_: datetime) -> "CalendarFields":
        return cls(dt_.year, dt_.month, dt_.day, dt_.hour, dt_.minute, dt_.second)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def shift(self, **delta: int) -> datetime:
        """
        Add a timedelta and let datetime normalize overflowing fields
        (minute 65 rolls into the next hour, hour 25 into the next day).
        """
        return self.to_datetime() + timedelta(**delta)

    def strftime(self, fmt: str) -> str:
        return self.to_datetime().strftime(fmt)


class Clock:
    """
    Time capability injected into CircularLogger.
    """

    def now(self) -> datetime:
        raise NotImplementedError

    def decompose(self, dt_: datetime) -> CalendarFields:
        return CalendarFields.from_datetime(dt_)


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now()
