"""Predicate → human-readable text.

Deterministic output: set members sorted, days in calendar order.
The derived OR shape not(and(not a, not b)) is printed as "a OR b";
no other rewriting is done.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from filterkit.domain.model.schedule import DayOfWeek
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
)


@dataclass(frozen=True, slots=True)
class _Render:
    """Work item: render node, push its text. wrap = parenthesize if compound."""

    node: Predicate
    wrap: bool = False


@dataclass(frozen=True, slots=True)
class _Join:
    """Work item: pop arity texts, push template filled with them."""

    template: str
    arity: int


type _Work = _Render | _Join


def format_predicate(predicate: Predicate) -> str:
    """Render predicate as infix formula.

    Iterative, so folds of thousands of predicates render.

    Example:
        subject contains 'discount' AND NOT (recipient is john@doe.com)
    """
    work: list[_Work] = [_Render(predicate)]
    texts: list[str] = []

    while work:
        match work.pop():
            case _Render(node=Not(operand=And(left=Not(operand=a), right=Not(operand=b))), wrap=w):
                _push_binary(work, "OR", a, b, w)
            case _Render(node=Not(operand=Always() | Never() as constant)):
                texts.append(f"NOT {describe(constant)}")
            case _Render(node=Not(operand=operand)):
                work.append(_Join("NOT ({0})", 1))
                work.append(_Render(operand))
            case _Render(node=And(left=left, right=right), wrap=w):
                _push_binary(work, "AND", left, right, w)
            case _Render(node=node):
                texts.append(describe(node))
            case _Join(template=template, arity=arity):
                args = texts[-arity:]
                del texts[-arity:]
                texts.append(template.format(*args))

    return texts.pop()


def describe(predicate: Predicate) -> str:
    """One-line label for a single node, without operands.

    Used by reporters to label trace tree nodes.
    """
    match predicate:
        case Always():
            return "ALWAYS"
        case Never():
            return "NEVER"
        case Not():
            return "NOT"
        case And():
            return "AND"
        case SenderEquals(address=address):
            return f"sender is {address}"
        case RecipientEquals(address=address):
            return f"recipient is {address}"
        case SubjectContains(phrase=phrase):
            return f"subject contains {phrase!r}"
        case BodyContains(phrase=phrase):
            return f"body contains {phrase!r}"
        case MinuteOfHourIn(minutes=minutes):
            return f"minute of hour in {_format_ints(minutes)}"
        case HourOfDayIn(hours=hours):
            return f"hour of day in {_format_ints(hours)}"
        case DayOfWeekIn(days=days):
            return f"day of week in {_format_days(days)}"
        case WeekOfMonthIn(weeks=weeks):
            return f"week of month in {_format_ints(weeks)}"
        case MonthOfYearIn(months=months):
            return f"month of year in {_format_ints(months)}"
    raise TypeError(f"not a predicate: {type(predicate).__name__}")


def _push_binary(
    work: list[_Work],
    operator: str,
    left: Predicate,
    right: Predicate,
    wrap: bool,
) -> None:
    template = f"{{0}} {operator} {{1}}"
    work.append(_Join(f"({template})" if wrap else template, 2))
    work.append(_Render(right, wrap=True))
    work.append(_Render(left, wrap=True))


def _format_ints(values: Iterable[int]) -> str:
    return "{" + ", ".join(str(v) for v in sorted(values)) + "}"


def _format_days(days: Iterable[DayOfWeek]) -> str:
    return "{" + ", ".join(d.value for d in sorted(days, key=lambda d: d.ordinal)) + "}"
