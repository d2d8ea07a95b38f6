"""Application services: evaluation, explanation, selection."""

from filterkit.application.services.evaluator import Record, evaluate
from filterkit.application.services.explainer import Trace, explain
from filterkit.application.services.selection import (
    Partition,
    count,
    first_match,
    partition,
    select,
)

__all__ = [
    "Partition",
    "Record",
    "Trace",
    "count",
    "evaluate",
    "explain",
    "first_match",
    "partition",
    "select",
]
