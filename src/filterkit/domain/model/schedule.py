"""Schedule time value objects.

Time is the record evaluated by schedule predicates: a point in time
broken down into the calendar fields a schedule can test.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DayOfWeek(Enum):
    """Day of week, in calendar order starting Monday."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @classmethod
    def from_weekday(cls, weekday: int) -> DayOfWeek:
        """Map date.weekday() numbering (Monday=0) to DayOfWeek.

        Raises:
            ValueError: If weekday not in 0..6
        """
        if not 0 <= weekday <= 6:
            raise ValueError(f"weekday must be in 0..6, got {weekday}")
        return _DAYS_IN_ORDER[weekday]

    @property
    def ordinal(self) -> int:
        """Position in the week, Monday=0."""
        return _DAYS_IN_ORDER.index(self)


_DAYS_IN_ORDER: tuple[DayOfWeek, ...] = tuple(DayOfWeek)

MINUTE_RANGE = range(0, 60)
HOUR_RANGE = range(0, 24)
WEEK_OF_MONTH_RANGE = range(1, 6)
MONTH_RANGE = range(1, 13)


@dataclass(frozen=True, slots=True)
class Time:
    """Calendar breakdown of an instant.

    Attributes:
        minute_of_hour: 0..59
        hour_of_day: 0..23
        day_of_week: DayOfWeek
        week_of_month: 1..5
        month_of_year: 1..12
    """

    minute_of_hour: int
    hour_of_day: int
    day_of_week: DayOfWeek
    week_of_month: int
    month_of_year: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_range("minute_of_hour", self.minute_of_hour, MINUTE_RANGE)
        _check_range("hour_of_day", self.hour_of_day, HOUR_RANGE)
        if not isinstance(self.day_of_week, DayOfWeek):
            raise TypeError(f"day_of_week must be DayOfWeek, got {type(self.day_of_week).__name__}")
        _check_range("week_of_month", self.week_of_month, WEEK_OF_MONTH_RANGE)
        _check_range("month_of_year", self.month_of_year, MONTH_RANGE)

    @classmethod
    def from_datetime(cls, moment: datetime) -> Time:
        """Break a datetime down into schedule fields.

        Week of month counts 7-day blocks from the 1st: days 1-7 are week 1,
        days 29-31 are week 5.
        """
        if not isinstance(moment, datetime):
            raise TypeError(f"moment must be datetime, got {type(moment).__name__}")
        return cls(
            minute_of_hour=moment.minute,
            hour_of_day=moment.hour,
            day_of_week=DayOfWeek.from_weekday(moment.weekday()),
            week_of_month=(moment.day - 1) // 7 + 1,
            month_of_year=moment.month,
        )

    def __str__(self) -> str:
        """Format as 'WEDNESDAY 06:00 (week 2, month 3)'."""
        return (
            f"{self.day_of_week.value} {self.hour_of_day:02d}:{self.minute_of_hour:02d} "
            f"(week {self.week_of_month}, month {self.month_of_year})"
        )


def _check_range(name: str, value: int, allowed: range) -> None:
    # bool is an int subclass; True must not pass as minute 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value not in allowed:
        raise ValueError(f"{name} must be in {allowed.start}..{allowed.stop - 1}, got {value}")
