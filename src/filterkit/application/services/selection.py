"""Selection helpers: apply a predicate to a sequence of records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from filterkit.application.services.evaluator import Record, evaluate
from filterkit.domain.predicates.nodes import Predicate


@dataclass(frozen=True, slots=True)
class Partition:
    """Records split by a predicate, original order preserved.

    Attributes:
        matched: Records the predicate holds for
        rejected: All other records
    """

    matched: tuple[Record, ...]
    rejected: tuple[Record, ...]

    @property
    def total(self) -> int:
        """Number of records partitioned."""
        return len(self.matched) + len(self.rejected)


def select[R](records: Iterable[R], predicate: Predicate) -> tuple[R, ...]:
    """Records matching predicate, in input order."""
    return tuple(r for r in records if evaluate(predicate, r))


def partition[R](records: Iterable[R], predicate: Predicate) -> Partition:
    """Split records into matched and rejected."""
    matched: list[R] = []
    rejected: list[R] = []
    for record in records:
        (matched if evaluate(predicate, record) else rejected).append(record)
    return Partition(matched=tuple(matched), rejected=tuple(rejected))


def first_match[R](records: Iterable[R], predicate: Predicate) -> R | None:
    """First record matching predicate, or None. Stops at first match."""
    for record in records:
        if evaluate(predicate, record):
            return record
    return None


def count[R](records: Iterable[R], predicate: Predicate) -> int:
    """Number of records matching predicate."""
    return sum(1 for r in records if evaluate(predicate, r))
