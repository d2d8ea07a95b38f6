"""Predicate and record kind enums."""

from enum import Enum


class RecordKind(Enum):
    """Record type a predicate ranges over."""

    EMAIL = "EMAIL"
    TIME = "TIME"


class PredicateKind(Enum):
    """One tag per predicate variant.

    Closed set: there is deliberately no OR tag, disjunction is derived.
    """

    # Constants
    ALWAYS = "ALWAYS"
    NEVER = "NEVER"

    # Primitive combinators
    NOT = "NOT"
    AND = "AND"

    # Email atoms
    SENDER_EQUALS = "SENDER_EQUALS"
    RECIPIENT_EQUALS = "RECIPIENT_EQUALS"
    SUBJECT_CONTAINS = "SUBJECT_CONTAINS"
    BODY_CONTAINS = "BODY_CONTAINS"

    # Time atoms
    MINUTE_OF_HOUR_IN = "MINUTE_OF_HOUR_IN"
    HOUR_OF_DAY_IN = "HOUR_OF_DAY_IN"
    DAY_OF_WEEK_IN = "DAY_OF_WEEK_IN"
    WEEK_OF_MONTH_IN = "WEEK_OF_MONTH_IN"
    MONTH_OF_YEAR_IN = "MONTH_OF_YEAR_IN"
