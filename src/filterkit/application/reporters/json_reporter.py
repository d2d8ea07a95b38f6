"""JSON reporter: Trace → JSON string.

Useful for CI integration, machine parsing by other tools,
or structured logging.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from filterkit.application.formatting import format_predicate
from filterkit.domain.exceptions.reporting import ReportDepthError
from filterkit.domain.predicates.nodes import (
    Always,
    And,
    BodyContains,
    DayOfWeekIn,
    HourOfDayIn,
    MinuteOfHourIn,
    MonthOfYearIn,
    Never,
    Not,
    RecipientEquals,
    SenderEquals,
    SubjectContains,
    WeekOfMonthIn,
    get_predicate_kind,
)

if TYPE_CHECKING:
    from filterkit.application.services.explainer import Trace
    from filterkit.domain.predicates.nodes import Predicate


DEFAULT_MAX_DEPTH = 100
# Each trace level nests a dict and a "children" list; json encodes
# nesting recursively, so stay well inside the interpreter limit.
MAX_DEPTH_CEILING = 300


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema mirrors the predicate union 1:1 with a summary added.
    Every node is {"kind": ..., fields...}; traces add "result"
    and "children".
    """

    def __init__(self, *, indent: int | None = 2, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
            max_depth: Deepest trace to render, 1..MAX_DEPTH_CEILING

        Raises:
            ValueError: If max_depth is out of range
        """
        if not 1 <= max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(f"max_depth must be in 1..{MAX_DEPTH_CEILING}, got {max_depth}")
        self._indent = indent
        self._max_depth = max_depth

    def report(self, trace: Trace) -> str:
        """Format trace as JSON string.

        Args:
            trace: Trace returned by explain().

        Returns:
            JSON string with formula, result, trace and summary.

        Raises:
            ReportDepthError: If trace nests deeper than max_depth
        """
        depth = trace_depth(trace)
        if depth > self._max_depth:
            raise ReportDepthError(depth, self._max_depth)
        data = {
            "formula": format_predicate(trace.predicate),
            "result": trace.result,
            "trace": trace_to_dict(trace),
            "summary": _build_summary(trace),
        }
        return json.dumps(data, indent=self._indent)


def _build_summary(trace: Trace) -> dict[str, object]:
    """Count visited and skipped nodes."""
    nodes = trace.walk()
    skipped = sum(1 for t in nodes if not t.evaluated)
    return {
        "nodes": len(nodes),
        "evaluated": len(nodes) - skipped,
        "skipped": skipped,
    }


def trace_depth(trace: Trace) -> int:
    """Number of trace levels on the longest root-to-leaf path."""
    deepest = 0
    stack: list[tuple[Trace, int]] = [(trace, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.children)
    return deepest


def trace_to_dict(trace: Trace) -> dict[str, object]:
    """Convert Trace to dict. Operands are nested under "children"."""
    stack: list[tuple[Trace, bool]] = [(trace, False)]
    built: list[dict[str, object]] = []
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))
            continue
        children = _pop_last(built, len(node.children))
        data = _node_dict(node.predicate)
        data["result"] = node.result
        data["children"] = children
        built.append(data)
    return built.pop()


def predicate_to_dict(predicate: Predicate) -> dict[str, object]:
    """Convert full Predicate tree to dict.

    Not nests its operand under "operand", And under "left" and "right".
    """
    stack: list[tuple[Predicate, bool]] = [(predicate, False)]
    built: list[dict[str, object]] = []
    while stack:
        node, expanded = stack.pop()
        operands = _operands(node)
        if not expanded:
            stack.append((node, True))
            stack.extend((operand, False) for _, operand in reversed(operands))
            continue
        data = _node_dict(node)
        values = _pop_last(built, len(operands))
        data.update((name, value) for (name, _), value in zip(operands, values, strict=True))
        built.append(data)
    return built.pop()


def _operands(predicate: Predicate) -> tuple[tuple[str, Predicate], ...]:
    match predicate:
        case Not(operand=operand):
            return (("operand", operand),)
        case And(left=left, right=right):
            return (("left", left), ("right", right))
    return ()


def _pop_last(built: list[dict[str, object]], count: int) -> list[dict[str, object]]:
    if count == 0:
        return []
    taken = built[-count:]
    del built[-count:]
    return taken


def _node_dict(predicate: Predicate) -> dict[str, object]:
    """Kind plus atom payload. Combinators and constants have no payload."""
    data: dict[str, object] = {"kind": get_predicate_kind(predicate).value}
    match predicate:
        case Always() | Never() | Not() | And():
            pass
        case SenderEquals(address=address) | RecipientEquals(address=address):
            data["address"] = str(address)
        case SubjectContains(phrase=phrase) | BodyContains(phrase=phrase):
            data["phrase"] = phrase
        case MinuteOfHourIn(minutes=values) | HourOfDayIn(hours=values):
            data["values"] = sorted(values)
        case WeekOfMonthIn(weeks=values) | MonthOfYearIn(months=values):
            data["values"] = sorted(values)
        case DayOfWeekIn(days=days):
            data["values"] = [d.value for d in sorted(days, key=lambda d: d.ordinal)]
    return data
