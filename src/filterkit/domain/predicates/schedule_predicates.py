"""Schedule predicates: predicates over Time.

A schedule answers "is it time to fetch now?" for a given Time.
Atoms test one calendar field against a set of allowed values;
union, intersection and complement are the algebra's or_, and_, not_
under schedule names.

Example:
    fetch = union(
        days_of_the_week(DayOfWeek.WEDNESDAY),
        union(at(6, 0), at(12, 0)),
    )
"""

from __future__ import annotations

from collections.abc import Callable

from filterkit.domain.exceptions.construction import PredicateConstructionError
from filterkit.domain.model.schedule import DayOfWeek
from filterkit.domain.predicates.algebra import and_, not_, or_
from filterkit.domain.predicates.nodes import (
    DayOfWeekIn,
    HourOfDayIn,
    MinuteOfHourIn,
    MonthOfYearIn,
    Predicate,
    WeekOfMonthIn,
)


def minutes_of_the_hour(*minutes: int) -> Predicate:
    """Create schedule: fetch on specific minutes of the hour.

    Args:
        *minutes: Minutes, 0..59 (at least one)

    Raises:
        PredicateConstructionError: If empty or out of range
    """
    return _build("minutes_of_the_hour", MinuteOfHourIn, minutes)


def hours_of_the_day(*hours: int) -> Predicate:
    """Create schedule: fetch on specific hours of the day.

    Args:
        *hours: Hours, 0..23 (at least one)

    Raises:
        PredicateConstructionError: If empty or out of range
    """
    return _build("hours_of_the_day", HourOfDayIn, hours)


def days_of_the_week(*days: DayOfWeek) -> Predicate:
    """Create schedule: fetch on specific days of the week.

    Args:
        *days: DayOfWeek members (at least one)

    Raises:
        PredicateConstructionError: If empty or not DayOfWeek
    """
    return _build("days_of_the_week", DayOfWeekIn, days)


def weeks_of_the_month(*weeks: int) -> Predicate:
    """Create schedule: fetch on specific weeks of the month.

    Args:
        *weeks: Weeks, 1..5 (at least one)

    Raises:
        PredicateConstructionError: If empty or out of range
    """
    return _build("weeks_of_the_month", WeekOfMonthIn, weeks)


def months_of_the_year(*months: int) -> Predicate:
    """Create schedule: fetch in specific months.

    Args:
        *months: Months, 1..12 (at least one)

    Raises:
        PredicateConstructionError: If empty or out of range
    """
    return _build("months_of_the_year", MonthOfYearIn, months)


def at(hour: int, minute: int) -> Predicate:
    """Create schedule: fetch at hour:minute on any day."""
    return and_(hours_of_the_day(hour), minutes_of_the_hour(minute))


def union(a: Predicate, b: Predicate) -> Predicate:
    """Fetch when either schedule says so."""
    return or_(a, b)


def intersection(a: Predicate, b: Predicate) -> Predicate:
    """Fetch only when both schedules say so."""
    return and_(a, b)


def complement(a: Predicate) -> Predicate:
    """Fetch exactly when the schedule says not to."""
    return not_(a)


def _build[T](
    constructor: str,
    node: Callable[[frozenset[T]], Predicate],
    values: tuple[T, ...],
) -> Predicate:
    if not values:
        raise PredicateConstructionError(constructor, "at least one value required")
    try:
        allowed = frozenset(values)
    except TypeError as e:
        raise PredicateConstructionError(constructor, f"values must be hashable: {e}") from e
    try:
        return node(allowed)
    except PredicateConstructionError as e:
        raise PredicateConstructionError(constructor, e.reason) from e
