"""Evaluator: Predicate × Record → bool.

Single structural interpreter for the predicate union.
Walks the tree with an explicit work stack, not Python recursion:
left-nested folds of thousands of predicates evaluate without
hitting the recursion limit.

Pure, reentrant, thread-safe: reads the (immutable) tree and record only.
"""

from __future__ import annotations

from dataclasses import dataclass

from filterkit.domain.model.email import Email
from filterkit.domain.model.schedule import Time
from filterkit.domain.predicates.kinds import RecordKind
from filterkit.domain.predicates.nodes import (
    Always,
    And,
    BodyContains,
    DayOfWeekIn,
    HourOfDayIn,
    MinuteOfHourIn,
    MonthOfYearIn,
    Never,
    Not,
    Predicate,
    RecipientEquals,
    SenderEquals,
    SubjectContains,
    WeekOfMonthIn,
    is_predicate,
)

type Record = Email | Time

RECORD_TYPES: dict[RecordKind, type[Email] | type[Time]] = {
    RecordKind.EMAIL: Email,
    RecordKind.TIME: Time,
}


@dataclass(frozen=True, slots=True)
class _Visit:
    """Work item: evaluate node, push its result."""

    node: Predicate


@dataclass(frozen=True, slots=True)
class _Invert:
    """Work item: pop result, push its negation."""


@dataclass(frozen=True, slots=True)
class _ThenRight:
    """Work item: pop left result; if true, visit right, else keep False."""

    right: Predicate


_INVERT = _Invert()

type _Work = _Visit | _Invert | _ThenRight


def evaluate(predicate: Predicate, record: Record) -> bool:
    """Evaluate predicate against record.

    Args:
        predicate: Predicate tree
        record: Email or Time matching the predicate's subject

    Returns:
        True if record satisfies predicate

    Raises:
        TypeError: If predicate is not a predicate, or record type
            does not match predicate subject (caller misuse)
    """
    check_arguments(predicate, record)

    work: list[_Work] = [_Visit(predicate)]
    results: list[bool] = []

    while work:
        item = work.pop()
        match item:
            case _Visit(node=Always()):
                results.append(True)
            case _Visit(node=Never()):
                results.append(False)
            case _Visit(node=Not(operand=operand)):
                work.append(_INVERT)
                work.append(_Visit(operand))
            case _Visit(node=And(left=left, right=right)):
                work.append(_ThenRight(right))
                work.append(_Visit(left))
            case _Visit(node=node):
                results.append(match_atom(node, record))
            case _Invert():
                results.append(not results.pop())
            case _ThenRight(right=right):
                if results.pop():
                    work.append(_Visit(right))
                else:
                    results.append(False)

    return results.pop()


def match_atom(atom: Predicate, record: Record) -> bool:
    """Perform a single atom's field test.

    Raises:
        TypeError: If atom is not an atom, or record is of the wrong kind
    """
    match atom, record:
        case SenderEquals(address=address), Email(sender=sender):
            return sender == address
        case RecipientEquals(address=address), Email(to=to):
            return address in to
        case SubjectContains(phrase=phrase), Email(subject=subject):
            return phrase in subject
        case BodyContains(phrase=phrase), Email(body=body):
            return phrase in body
        case MinuteOfHourIn(minutes=minutes), Time(minute_of_hour=minute):
            return minute in minutes
        case HourOfDayIn(hours=hours), Time(hour_of_day=hour):
            return hour in hours
        case DayOfWeekIn(days=days), Time(day_of_week=day):
            return day in days
        case WeekOfMonthIn(weeks=weeks), Time(week_of_month=week):
            return week in weeks
        case MonthOfYearIn(months=months), Time(month_of_year=month):
            return month in months
    raise TypeError(f"cannot test {type(atom).__name__} against {type(record).__name__}")


def check_arguments(predicate: Predicate, record: Record) -> None:
    """Validate evaluate() arguments. FAIL-FIRST.

    Raises:
        TypeError: If predicate is not a predicate, record is not a
            known record type, or record type does not match subject
    """
    if not is_predicate(predicate):
        raise TypeError(f"predicate must be a predicate, got {type(predicate).__name__}")
    if not isinstance(record, (Email, Time)):
        raise TypeError(f"record must be Email or Time, got {type(record).__name__}")

    subject = predicate.subject
    if subject is not None and not isinstance(record, RECORD_TYPES[subject]):
        raise TypeError(
            f"predicate ranges over {subject.value} records, got {type(record).__name__}"
        )
