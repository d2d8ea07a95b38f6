"""Email predicates.

Atom constructors (primitive): sender_is, recipient_is, subject_contains,
body_contains. Everything else here is derived from them.
"""

from __future__ import annotations

from collections.abc import Iterable

from filterkit.domain.exceptions.construction import PredicateConstructionError
from filterkit.domain.model.address import Address
from filterkit.domain.model.email import as_address
from filterkit.domain.predicates.algebra import any_of, not_
from filterkit.domain.predicates.nodes import (
    BodyContains,
    Predicate,
    RecipientEquals,
    SenderEquals,
    SubjectContains,
)


def sender_is(address: Address | str) -> Predicate:
    """Create predicate: email sender equals address.

    Args:
        address: Address or raw "local@domain" string

    Returns:
        Predicate

    Raises:
        PredicateConstructionError: If address is not a valid address
    """
    return SenderEquals(_address("sender_is", address))


def recipient_is(address: Address | str) -> Predicate:
    """Create predicate: address is among email recipients.

    Args:
        address: Address or raw "local@domain" string

    Returns:
        Predicate

    Raises:
        PredicateConstructionError: If address is not a valid address
    """
    return RecipientEquals(_address("recipient_is", address))


def subject_contains(phrase: str) -> Predicate:
    """Create predicate: subject contains phrase (case-sensitive).

    Raises:
        PredicateConstructionError: If phrase is empty or not str
    """
    return SubjectContains(phrase)


def body_contains(phrase: str) -> Predicate:
    """Create predicate: body contains phrase (case-sensitive).

    Raises:
        PredicateConstructionError: If phrase is empty or not str
    """
    return BodyContains(phrase)


def sender_is_not(address: Address | str) -> Predicate:
    """Create predicate: sender differs from address."""
    return not_(sender_is(address))


def recipient_is_not(address: Address | str) -> Predicate:
    """Create predicate: address is not among recipients."""
    return not_(recipient_is(address))


def subject_does_not_contain(phrase: str) -> Predicate:
    """Create predicate: subject lacks phrase."""
    return not_(subject_contains(phrase))


def body_does_not_contain(phrase: str) -> Predicate:
    """Create predicate: body lacks phrase."""
    return not_(body_contains(phrase))


def sender_in(addresses: Iterable[Address | str]) -> Predicate:
    """Create predicate: sender is any of addresses. Empty = never."""
    return any_of(sender_is(a) for a in _address_list("sender_in", addresses))


def recipient_in(addresses: Iterable[Address | str]) -> Predicate:
    """Create predicate: any of addresses is a recipient. Empty = never."""
    return any_of(recipient_is(a) for a in _address_list("recipient_in", addresses))


def _address(constructor: str, value: Address | str) -> Address:
    try:
        return as_address(value)
    except (TypeError, ValueError) as e:
        raise PredicateConstructionError(constructor, str(e)) from e


def _address_list(constructor: str, values: Iterable[Address | str]) -> list[Address]:
    # A bare str would iterate as characters
    if isinstance(values, str):
        raise PredicateConstructionError(
            constructor, "addresses must be an iterable of addresses, not str"
        )
    # Dedupe while keeping first-seen order so the built tree is deterministic
    seen: dict[Address, None] = {}
    for value in values:
        seen.setdefault(_address(constructor, value), None)
    return list(seen)
