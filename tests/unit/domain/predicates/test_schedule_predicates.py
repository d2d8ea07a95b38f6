"""Tests for domain/predicates/schedule_predicates.py."""

from collections.abc import Callable

import pytest

from filterkit.domain.exceptions import PredicateConstructionError
from filterkit.domain.model.schedule import DayOfWeek
from filterkit.domain.predicates.algebra import and_, not_, or_
from filterkit.domain.predicates.kinds import RecordKind
from filterkit.domain.predicates.nodes import (
    DayOfWeekIn,
    HourOfDayIn,
    MinuteOfHourIn,
    MonthOfYearIn,
    Predicate,
    WeekOfMonthIn,
)
from filterkit.domain.predicates.schedule_predicates import (
    at,
    complement,
    days_of_the_week,
    hours_of_the_day,
    intersection,
    minutes_of_the_hour,
    months_of_the_year,
    union,
    weeks_of_the_month,
)


class TestAtomConstructors:
    """Tests for schedule atom constructors."""

    def test_minutes(self) -> None:
        """Varargs collected into frozenset."""
        assert minutes_of_the_hour(0, 30) == MinuteOfHourIn(frozenset({0, 30}))

    def test_hours_duplicates_collapse(self) -> None:
        """Duplicate values collapse."""
        assert hours_of_the_day(6, 6, 12) == HourOfDayIn(frozenset({6, 12}))

    def test_days(self) -> None:
        """Days collected into frozenset."""
        node = days_of_the_week(DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY)
        assert node == DayOfWeekIn(frozenset({DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY}))

    def test_weeks(self) -> None:
        """weeks_of_the_month builds WeekOfMonthIn."""
        assert weeks_of_the_month(1, 5) == WeekOfMonthIn(frozenset({1, 5}))

    def test_months(self) -> None:
        """months_of_the_year builds MonthOfYearIn."""
        assert months_of_the_year(12) == MonthOfYearIn(frozenset({12}))

    def test_subject_is_time(self) -> None:
        """Schedule atoms range over times."""
        assert hours_of_the_day(1).subject == RecordKind.TIME

    @pytest.mark.parametrize(
        "build",
        [
            minutes_of_the_hour,
            hours_of_the_day,
            days_of_the_week,
            weeks_of_the_month,
            months_of_the_year,
        ],
    )
    def test_no_values_raises(self, build: Callable[..., Predicate]) -> None:
        """At least one value is required."""
        with pytest.raises(PredicateConstructionError, match="at least one value"):
            build()

    def test_out_of_range_names_constructor(self) -> None:
        """Range errors carry the public constructor name."""
        with pytest.raises(PredicateConstructionError) as exc_info:
            hours_of_the_day(25)
        assert exc_info.value.constructor == "hours_of_the_day"
        assert "0..23" in exc_info.value.reason

    def test_unhashable_value_raises(self) -> None:
        """Unhashable values surface as construction errors."""
        with pytest.raises(PredicateConstructionError, match="hashable"):
            minutes_of_the_hour([0])  # type: ignore[arg-type]


class TestScheduleCombinators:
    """Tests for union / intersection / complement / at."""

    def test_union_is_or(self) -> None:
        """union = or_."""
        a, b = hours_of_the_day(6), hours_of_the_day(12)
        assert union(a, b) == or_(a, b)

    def test_intersection_is_and(self) -> None:
        """intersection = and_."""
        a, b = hours_of_the_day(6), minutes_of_the_hour(0)
        assert intersection(a, b) == and_(a, b)

    def test_complement_is_not(self) -> None:
        """complement = not_."""
        a = days_of_the_week(DayOfWeek.SUNDAY)
        assert complement(a) == not_(a)

    def test_at(self) -> None:
        """at(h, m) = hours_of_the_day(h) and minutes_of_the_hour(m)."""
        assert at(6, 0) == and_(hours_of_the_day(6), minutes_of_the_hour(0))
