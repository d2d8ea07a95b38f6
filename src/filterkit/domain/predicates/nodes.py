"""Predicate variants: closed tagged union of immutable nodes.

Every node is a frozen dataclass carrying only the fields its variant needs.
Nodes hold no behaviour beyond validation and structural equality;
interpretation lives in filterkit.application.services.evaluator.

Invariants:
- Nodes are immutable. Combinators build new nodes, never mutate.
- Every node knows its subject (RecordKind or None for constant-only trees).
- Ill-typed construction raises PredicateConstructionError immediately.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from filterkit.domain.exceptions.construction import (
    PredicateConstructionError,
    SubjectMismatchError,
)
from filterkit.domain.model.address import Address
from filterkit.domain.model.schedule import (
    HOUR_RANGE,
    MINUTE_RANGE,
    MONTH_RANGE,
    WEEK_OF_MONTH_RANGE,
    DayOfWeek,
)
from filterkit.domain.predicates.kinds import PredicateKind, RecordKind

# =============================================================================
# Constants
# =============================================================================


@dataclass(frozen=True, slots=True)
class Always:
    """Constant true. Identity of AND, absorbing element of OR."""

    @property
    def subject(self) -> RecordKind | None:
        """Constants range over any record."""
        return None


@dataclass(frozen=True, slots=True)
class Never:
    """Constant false. Identity of OR, absorbing element of AND."""

    @property
    def subject(self) -> RecordKind | None:
        """Constants range over any record."""
        return None


# =============================================================================
# Primitive combinators
# =============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class Not:
    """Negation of operand.

    Equality and hash are structural but iterative (see structurally_equal),
    so trees of any depth compare and hash.

    Attributes:
        operand: Predicate to negate
        subject: Inherited from operand (computed, not compared)
    """

    operand: Predicate
    subject: RecordKind | None = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate operand. FAIL-FIRST."""
        require_predicate("Not", "operand", self.operand)
        object.__setattr__(self, "subject", self.operand.subject)
        # Operand hashes are cached, so this is O(1) per node
        object.__setattr__(self, "_hash", hash((PredicateKind.NOT, self.operand)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Not):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return self._hash


@dataclass(frozen=True, slots=True, eq=False)
class And:
    """Conjunction of left and right. Evaluation short-circuits on left.

    Equality and hash behave as for Not.

    Attributes:
        left: Evaluated first
        right: Evaluated only if left holds
        subject: Common subject of both operands (computed, not compared)
    """

    left: Predicate
    right: Predicate
    subject: RecordKind | None = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate operands share one subject. FAIL-FIRST."""
        require_predicate("And", "left", self.left)
        require_predicate("And", "right", self.right)
        subject = common_subject("And", self.left.subject, self.right.subject)
        object.__setattr__(self, "subject", subject)
        object.__setattr__(self, "_hash", hash((PredicateKind.AND, self.left, self.right)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, And):
            return NotImplemented
        return structurally_equal(self, other)

    def __hash__(self) -> int:
        return self._hash


# =============================================================================
# Email atoms
# =============================================================================


@dataclass(frozen=True, slots=True)
class SenderEquals:
    """Email sender equals address."""

    address: Address

    def __post_init__(self) -> None:
        """Validate address. FAIL-FIRST."""
        _require_address("SenderEquals", self.address)

    @property
    def subject(self) -> RecordKind:
        """Ranges over emails."""
        return RecordKind.EMAIL


@dataclass(frozen=True, slots=True)
class RecipientEquals:
    """Email recipients contain address."""

    address: Address

    def __post_init__(self) -> None:
        """Validate address. FAIL-FIRST."""
        _require_address("RecipientEquals", self.address)

    @property
    def subject(self) -> RecordKind:
        """Ranges over emails."""
        return RecordKind.EMAIL


@dataclass(frozen=True, slots=True)
class SubjectContains:
    """Email subject contains phrase (case-sensitive)."""

    phrase: str

    def __post_init__(self) -> None:
        """Validate phrase. FAIL-FIRST."""
        _require_phrase("SubjectContains", self.phrase)

    @property
    def subject(self) -> RecordKind:
        """Ranges over emails."""
        return RecordKind.EMAIL


@dataclass(frozen=True, slots=True)
class BodyContains:
    """Email body contains phrase (case-sensitive)."""

    phrase: str

    def __post_init__(self) -> None:
        """Validate phrase. FAIL-FIRST."""
        _require_phrase("BodyContains", self.phrase)

    @property
    def subject(self) -> RecordKind:
        """Ranges over emails."""
        return RecordKind.EMAIL


# =============================================================================
# Time atoms
# =============================================================================


@dataclass(frozen=True, slots=True)
class MinuteOfHourIn:
    """Minute of hour is one of minutes."""

    minutes: frozenset[int]

    def __post_init__(self) -> None:
        """Validate minutes. FAIL-FIRST."""
        _require_int_set("MinuteOfHourIn", "minutes", self.minutes, MINUTE_RANGE)

    @property
    def subject(self) -> RecordKind:
        """Ranges over times."""
        return RecordKind.TIME


@dataclass(frozen=True, slots=True)
class HourOfDayIn:
    """Hour of day is one of hours."""

    hours: frozenset[int]

    def __post_init__(self) -> None:
        """Validate hours. FAIL-FIRST."""
        _require_int_set("HourOfDayIn", "hours", self.hours, HOUR_RANGE)

    @property
    def subject(self) -> RecordKind:
        """Ranges over times."""
        return RecordKind.TIME


@dataclass(frozen=True, slots=True)
class DayOfWeekIn:
    """Day of week is one of days."""

    days: frozenset[DayOfWeek]

    def __post_init__(self) -> None:
        """Validate days. FAIL-FIRST."""
        _require_frozenset("DayOfWeekIn", "days", self.days)
        for day in self.days:
            if not isinstance(day, DayOfWeek):
                raise PredicateConstructionError(
                    "DayOfWeekIn", f"days must be DayOfWeek, got {type(day).__name__}"
                )

    @property
    def subject(self) -> RecordKind:
        """Ranges over times."""
        return RecordKind.TIME


@dataclass(frozen=True, slots=True)
class WeekOfMonthIn:
    """Week of month is one of weeks."""

    weeks: frozenset[int]

    def __post_init__(self) -> None:
        """Validate weeks. FAIL-FIRST."""
        _require_int_set("WeekOfMonthIn", "weeks", self.weeks, WEEK_OF_MONTH_RANGE)

    @property
    def subject(self) -> RecordKind:
        """Ranges over times."""
        return RecordKind.TIME


@dataclass(frozen=True, slots=True)
class MonthOfYearIn:
    """Month of year is one of months."""

    months: frozenset[int]

    def __post_init__(self) -> None:
        """Validate months. FAIL-FIRST."""
        _require_int_set("MonthOfYearIn", "months", self.months, MONTH_RANGE)

    @property
    def subject(self) -> RecordKind:
        """Ranges over times."""
        return RecordKind.TIME


# =============================================================================
# Union
# =============================================================================

type EmailAtom = SenderEquals | RecipientEquals | SubjectContains | BodyContains
type TimeAtom = MinuteOfHourIn | HourOfDayIn | DayOfWeekIn | WeekOfMonthIn | MonthOfYearIn
type Atom = EmailAtom | TimeAtom
type Predicate = Always | Never | Not | And | Atom

EMAIL_ATOM_TYPES = (SenderEquals, RecipientEquals, SubjectContains, BodyContains)
TIME_ATOM_TYPES = (MinuteOfHourIn, HourOfDayIn, DayOfWeekIn, WeekOfMonthIn, MonthOfYearIn)
ATOM_TYPES = EMAIL_ATOM_TYPES + TIME_ATOM_TYPES
PREDICATE_TYPES = (Always, Never, Not, And, *ATOM_TYPES)


def get_predicate_kind(predicate: Predicate) -> PredicateKind:
    """Get PredicateKind for predicate.

    Exhaustive match on Predicate union.
    """
    match predicate:
        case Always():
            return PredicateKind.ALWAYS
        case Never():
            return PredicateKind.NEVER
        case Not():
            return PredicateKind.NOT
        case And():
            return PredicateKind.AND
        case SenderEquals():
            return PredicateKind.SENDER_EQUALS
        case RecipientEquals():
            return PredicateKind.RECIPIENT_EQUALS
        case SubjectContains():
            return PredicateKind.SUBJECT_CONTAINS
        case BodyContains():
            return PredicateKind.BODY_CONTAINS
        case MinuteOfHourIn():
            return PredicateKind.MINUTE_OF_HOUR_IN
        case HourOfDayIn():
            return PredicateKind.HOUR_OF_DAY_IN
        case DayOfWeekIn():
            return PredicateKind.DAY_OF_WEEK_IN
        case WeekOfMonthIn():
            return PredicateKind.WEEK_OF_MONTH_IN
        case MonthOfYearIn():
            return PredicateKind.MONTH_OF_YEAR_IN
    raise TypeError(f"not a predicate: {type(predicate).__name__}")


def is_predicate(value: object) -> bool:
    """Check value is one of the predicate variants."""
    return isinstance(value, PREDICATE_TYPES)


def structurally_equal(a: Predicate, b: Predicate) -> bool:
    """Compare two trees node by node with an explicit work stack.

    Backs Not.__eq__ and And.__eq__; atoms and constants compare by their
    generated dataclass equality. No normalization: not(not(p)) != p.
    """
    pairs: list[tuple[Predicate, Predicate]] = [(a, b)]
    while pairs:
        x, y = pairs.pop()
        if x is y:
            continue
        if type(x) is not type(y) or hash(x) != hash(y):
            return False
        match x, y:
            case Not(operand=x_operand), Not(operand=y_operand):
                pairs.append((x_operand, y_operand))
            case And(left=x_left, right=x_right), And(left=y_left, right=y_right):
                pairs.append((x_right, y_right))
                pairs.append((x_left, y_left))
            case _:
                if x != y:
                    return False
    return True


def require_predicate(constructor: str, name: str, value: object) -> None:
    """Raise PredicateConstructionError unless value is a predicate."""
    if not is_predicate(value):
        raise PredicateConstructionError(
            constructor, f"{name} must be a predicate, got {type(value).__name__}"
        )


def common_subject(
    constructor: str,
    left: RecordKind | None,
    right: RecordKind | None,
) -> RecordKind | None:
    """Subject shared by two operands.

    None (constant-only) unifies with anything.

    Raises:
        SubjectMismatchError: If operands range over different records
    """
    if left is None:
        return right
    if right is None or left == right:
        return left
    raise SubjectMismatchError(constructor, left, right)


# =============================================================================
# Validation helpers
# =============================================================================


def _require_address(constructor: str, value: object) -> None:
    if not isinstance(value, Address):
        raise PredicateConstructionError(
            constructor, f"address must be Address, got {type(value).__name__}"
        )


def _require_phrase(constructor: str, value: object) -> None:
    if not isinstance(value, str):
        raise PredicateConstructionError(
            constructor, f"phrase must be str, got {type(value).__name__}"
        )
    if not value:
        raise PredicateConstructionError(constructor, "phrase must not be empty")


def _require_frozenset(constructor: str, name: str, value: object) -> None:
    if not isinstance(value, frozenset):
        raise PredicateConstructionError(
            constructor, f"{name} must be frozenset, got {type(value).__name__}"
        )
    if not value:
        raise PredicateConstructionError(constructor, f"{name} must not be empty")


def _require_int_set(constructor: str, name: str, value: frozenset[int], allowed: range) -> None:
    _require_frozenset(constructor, name, value)
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            raise PredicateConstructionError(
                constructor, f"{name} must contain int, got {type(item).__name__}"
            )
        if item not in allowed:
            raise PredicateConstructionError(
                constructor,
                f"{name} must be in {allowed.start}..{allowed.stop - 1}, got {item}",
            )
