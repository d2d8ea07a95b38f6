"""Domain exceptions."""

from filterkit.domain.exceptions.base import FilterKitError
from filterkit.domain.exceptions.construction import (
    PredicateConstructionError,
    SubjectMismatchError,
)
from filterkit.domain.exceptions.reporting import ReportDepthError

__all__ = [
    "FilterKitError",
    "PredicateConstructionError",
    "ReportDepthError",
    "SubjectMismatchError",
]
