"""Plain text reporter: Trace → indented outline.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit.application.formatting import describe, format_predicate

if TYPE_CHECKING:
    from filterkit.application.services.explainer import Trace

_RULE = "=" * 70


def status_marker(trace: Trace) -> str:
    """[PASS], [FAIL] or [SKIP] for a trace node."""
    if trace.result is None:
        return "[SKIP]"
    return "[PASS]" if trace.result else "[FAIL]"


class PlainTextReporter:
    """Plain text reporter.

    One line per visited node, indented by depth.
    """

    def __init__(self, *, indent: int = 2) -> None:
        """Initialize reporter.

        Args:
            indent: Spaces per nesting level (must be >= 0)
        """
        if indent < 0:
            raise ValueError(f"indent must be >= 0, got {indent}")
        self._indent = indent

    def report(self, trace: Trace) -> str:
        """Format trace as plain text.

        Args:
            trace: Trace returned by explain().

        Returns:
            Multi-line string ending with newline.
        """
        lines = [
            _RULE,
            "Evaluation Trace",
            _RULE,
            f"Formula: {format_predicate(trace.predicate)}",
            f"Result: {'MATCH' if trace.result else 'NO MATCH'}",
            "-" * 70,
        ]

        stack: list[tuple[Trace, int]] = [(trace, 0)]
        while stack:
            node, depth = stack.pop()
            pad = " " * (self._indent * depth)
            lines.append(f"{pad}{status_marker(node)} {describe(node.predicate)}")
            stack.extend((child, depth + 1) for child in reversed(node.children))

        lines.append(_RULE)
        return "\n".join(lines) + "\n"
