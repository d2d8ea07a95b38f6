"""Domain predicates: variants, algebra and atom constructors."""

from filterkit.domain.predicates.algebra import (
    all_of,
    always,
    and_,
    any_of,
    never,
    none_of,
    not_,
    or_,
    xor,
)
from filterkit.domain.predicates.email_predicates import (
    body_contains,
    body_does_not_contain,
    recipient_in,
    recipient_is,
    recipient_is_not,
    sender_in,
    sender_is,
    sender_is_not,
    subject_contains,
    subject_does_not_contain,
)
from filterkit.domain.predicates.kinds import PredicateKind, RecordKind
from filterkit.domain.predicates.nodes import (
    Always,
    And,
    Atom,
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
    get_predicate_kind,
    is_predicate,
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

__all__ = [
    # Variants
    "Predicate",
    "Atom",
    "Always",
    "Never",
    "Not",
    "And",
    "SenderEquals",
    "RecipientEquals",
    "SubjectContains",
    "BodyContains",
    "MinuteOfHourIn",
    "HourOfDayIn",
    "DayOfWeekIn",
    "WeekOfMonthIn",
    "MonthOfYearIn",
    "PredicateKind",
    "RecordKind",
    "get_predicate_kind",
    "is_predicate",
    # Algebra
    "always",
    "never",
    "not_",
    "and_",
    "or_",
    "xor",
    "all_of",
    "any_of",
    "none_of",
    # Email
    "sender_is",
    "sender_is_not",
    "sender_in",
    "recipient_is",
    "recipient_is_not",
    "recipient_in",
    "subject_contains",
    "subject_does_not_contain",
    "body_contains",
    "body_does_not_contain",
    # Schedule
    "minutes_of_the_hour",
    "hours_of_the_day",
    "days_of_the_week",
    "weeks_of_the_month",
    "months_of_the_year",
    "at",
    "union",
    "intersection",
    "complement",
]
