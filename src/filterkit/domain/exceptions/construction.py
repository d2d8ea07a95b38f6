"""Predicate construction exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit.domain.exceptions.base import FilterKitError

if TYPE_CHECKING:
    from filterkit.domain.predicates.kinds import RecordKind


class PredicateConstructionError(FilterKitError):
    """Error in predicate construction.

    Raised when a constructor or combinator receives an argument
    it cannot build a well-typed predicate from.
    FAIL-FIRST: raised at construction, never deferred to evaluation.

    Attributes:
        constructor: Name of the failing constructor (must not be empty)
        reason: Why construction failed (must not be empty)
    """

    def __init__(self, constructor: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not constructor:
            raise ValueError("constructor must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.constructor = constructor
        self.reason = reason
        super().__init__(f"Cannot build {constructor}: {reason}")


class SubjectMismatchError(PredicateConstructionError):
    """Operands range over different record types.

    Attributes:
        left: Record kind of the left operand
        right: Record kind of the right operand
    """

    def __init__(self, constructor: str, left: RecordKind, right: RecordKind) -> None:
        if left is None or right is None:
            raise TypeError("left and right record kinds must not be None")
        if left == right:
            raise ValueError(
                f"SubjectMismatchError requires distinct kinds, got {left.value} twice"
            )

        self.left = left
        self.right = right
        super().__init__(
            constructor,
            f"operands range over different records ({left.value} vs {right.value})",
        )
