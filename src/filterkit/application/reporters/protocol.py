"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from filterkit.application.services.explainer import Trace


class ReporterProtocol(Protocol):
    """Protocol for evaluation trace reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, trace: Trace) -> str:
        """Format evaluation trace as string.

        Args:
            trace: Trace returned by explain().

        Returns:
            Formatted string representation.
        """
        ...
