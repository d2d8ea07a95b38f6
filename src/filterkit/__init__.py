"""filterkit - immutable, composable boolean predicates over records.

Example:
    from filterkit import Email, and_, not_, evaluate
    from filterkit import body_contains, recipient_is, subject_contains

    spam = and_(
        subject_contains("discount"),
        and_(body_contains("N95"), not_(recipient_is("john@doe.com"))),
    )
    evaluate(spam, Email.create("a@x.com", ["b@x.com"], "50% discount", "N95 masks"))
"""

__version__ = "0.1.0"

from filterkit.application.services import (
    Partition,
    Trace,
    count,
    evaluate,
    explain,
    first_match,
    partition,
    select,
)
from filterkit.domain.exceptions import (
    FilterKitError,
    PredicateConstructionError,
    ReportDepthError,
    SubjectMismatchError,
)
from filterkit.domain.model import Address, DayOfWeek, Email, Time
from filterkit.domain.predicates import (
    Predicate,
    all_of,
    always,
    and_,
    any_of,
    at,
    body_contains,
    body_does_not_contain,
    complement,
    days_of_the_week,
    hours_of_the_day,
    intersection,
    minutes_of_the_hour,
    months_of_the_year,
    never,
    none_of,
    not_,
    or_,
    recipient_in,
    recipient_is,
    recipient_is_not,
    sender_in,
    sender_is,
    sender_is_not,
    subject_contains,
    subject_does_not_contain,
    union,
    weeks_of_the_month,
    xor,
)

__all__ = [
    "__version__",
    # Records
    "Address",
    "DayOfWeek",
    "Email",
    "Time",
    # Algebra
    "Predicate",
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
    # Services
    "evaluate",
    "explain",
    "Trace",
    "select",
    "partition",
    "first_match",
    "count",
    "Partition",
    # Errors
    "FilterKitError",
    "PredicateConstructionError",
    "ReportDepthError",
    "SubjectMismatchError",
]
