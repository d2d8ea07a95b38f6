"""Predicate algebra: primitive and derived combinators.

Primitives (cannot be expressed in terms of each other):
    always, never, not_, and_, plus the atom constructors

Derived (expressed only through primitives):
    or_       = not_(and_(not_(p), not_(q)))          De Morgan
    xor       = and_(or_(p, q), not_(and_(p, q)))
    all_of    = fold(predicates, always(), and_)
    any_of    = fold(predicates, never(), or_)
    none_of   = not_(any_of(predicates))

Trailing underscores follow the operator module (and_, or_, not_).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import reduce

from filterkit.domain.exceptions.construction import PredicateConstructionError
from filterkit.domain.predicates.nodes import (
    Always,
    And,
    Never,
    Not,
    Predicate,
    require_predicate,
)

_ALWAYS = Always()
_NEVER = Never()

# =============================================================================
# Primitives
# =============================================================================


def always() -> Predicate:
    """Predicate that holds for every record."""
    return _ALWAYS


def never() -> Predicate:
    """Predicate that holds for no record."""
    return _NEVER


def not_(p: Predicate) -> Predicate:
    """Negation.

    Raises:
        PredicateConstructionError: If p is not a predicate
    """
    return Not(p)


def and_(p: Predicate, q: Predicate) -> Predicate:
    """Conjunction. Evaluation short-circuits when p is false.

    Raises:
        PredicateConstructionError: If an operand is not a predicate
        SubjectMismatchError: If p and q range over different records
    """
    return And(p, q)


# =============================================================================
# Derived
# =============================================================================


def or_(p: Predicate, q: Predicate) -> Predicate:
    """Disjunction via De Morgan: not (not p and not q)."""
    return not_(and_(not_(p), not_(q)))


def xor(p: Predicate, q: Predicate) -> Predicate:
    """Exclusive or: (p or q) and not (p and q)."""
    return and_(or_(p, q), not_(and_(p, q)))


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    """Conjunction of all predicates. Empty = always()."""
    return _fold("all_of", predicates, always(), and_)


def any_of(predicates: Iterable[Predicate]) -> Predicate:
    """Disjunction of all predicates. Empty = never()."""
    return _fold("any_of", predicates, never(), or_)


def none_of(predicates: Iterable[Predicate]) -> Predicate:
    """Holds when no predicate holds. Empty = always() (logically)."""
    return not_(_fold("none_of", predicates, never(), or_))


def _fold(
    name: str,
    predicates: Iterable[Predicate],
    initial: Predicate,
    combine: Callable[[Predicate, Predicate], Predicate],
) -> Predicate:
    """Left fold, validating each element before combining.

    Raises:
        PredicateConstructionError: If predicates is not iterable, or an
            element is not a predicate
    """
    try:
        elements = iter(predicates)
    except TypeError as e:
        raise PredicateConstructionError(
            name, f"predicates must be iterable, got {type(predicates).__name__}"
        ) from e

    def step(acc: Predicate, p: Predicate) -> Predicate:
        require_predicate(name, "element", p)
        return combine(acc, p)

    return reduce(step, elements, initial)
