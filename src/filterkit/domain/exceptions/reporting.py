"""Reporting exceptions."""

from __future__ import annotations

from filterkit.domain.exceptions.base import FilterKitError


class ReportDepthError(FilterKitError):
    """Trace nests deeper than a reporter can render.

    Raised by reporters whose output format is itself nested
    (JSON) before any output is produced.

    Attributes:
        depth: Nesting depth of the trace (must exceed limit)
        limit: Deepest trace the reporter accepts (must be >= 1)
    """

    def __init__(self, depth: int, limit: int) -> None:
        # FAIL-FIRST validation
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        if depth <= limit:
            raise ValueError(f"depth {depth} does not exceed limit {limit}")

        self.depth = depth
        self.limit = limit
        super().__init__(f"Trace depth {depth} exceeds reporter limit {limit}")
