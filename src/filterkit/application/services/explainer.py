"""Explainer: evaluation with a trace of every visited node.

Diagnostics companion to evaluate(). Same semantics, same short-circuit;
additionally records which sub-predicates were visited and what they
returned, for reporters to render.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from filterkit.application.services.evaluator import Record, check_arguments, match_atom
from filterkit.domain.predicates.nodes import Always, And, Never, Not, Predicate


@dataclass(frozen=True, slots=True, eq=False)
class Trace:
    """Evaluation trace of one predicate node.

    Compares and hashes structurally without recursion, like Not and And.

    Attributes:
        predicate: Node that was (or was not) evaluated
        result: Node result. None = skipped by AND short-circuit.
        children: Traces of operands, in evaluation order
    """

    predicate: Predicate
    result: bool | None
    children: tuple[Trace, ...] = ()
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache structural hash; children hashes are already cached."""
        object.__setattr__(self, "_hash", hash((self.predicate, self.result, self.children)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trace):
            return NotImplemented
        pairs: list[tuple[Trace, Trace]] = [(self, other)]
        while pairs:
            x, y = pairs.pop()
            if x is y:
                continue
            if (
                x._hash != y._hash
                or x.result != y.result
                or len(x.children) != len(y.children)
            ):
                return False
            # Child traces cover the operands, so only leaves compare predicates
            if x.children:
                if type(x.predicate) is not type(y.predicate):
                    return False
            elif x.predicate != y.predicate:
                return False
            pairs.extend(zip(x.children, y.children, strict=True))
        return True

    def __hash__(self) -> int:
        return self._hash

    @property
    def evaluated(self) -> bool:
        """True unless skipped by short-circuit."""
        return self.result is not None

    def walk(self) -> tuple[Trace, ...]:
        """All traces in pre-order, self first."""
        out: list[Trace] = []
        stack: list[Trace] = [self]
        while stack:
            trace = stack.pop()
            out.append(trace)
            stack.extend(reversed(trace.children))
        return tuple(out)


@dataclass(frozen=True, slots=True)
class _Visit:
    """Work item: explain node, push its trace."""

    node: Predicate


@dataclass(frozen=True, slots=True)
class _Negate:
    """Work item: pop operand trace, push Not trace."""

    node: Not


@dataclass(frozen=True, slots=True)
class _AfterLeft:
    """Work item: pop left trace; visit right only if left holds."""

    node: And


@dataclass(frozen=True, slots=True)
class _Join:
    """Work item: pop right trace, push And trace over left and right."""

    node: And
    left: Trace


type _Work = _Visit | _Negate | _AfterLeft | _Join


def explain(predicate: Predicate, record: Record) -> Trace:
    """Evaluate predicate against record, recording a trace.

    Invariant: explain(p, r).result == evaluate(p, r).
    Walks the tree with an explicit work stack, like evaluate(),
    so any tree evaluate() accepts can be explained.

    Raises:
        TypeError: Same argument checks as evaluate()
    """
    check_arguments(predicate, record)

    work: list[_Work] = [_Visit(predicate)]
    traces: list[Trace] = []

    while work:
        match work.pop():
            case _Visit(node=Always() as node):
                traces.append(Trace(node, True))
            case _Visit(node=Never() as node):
                traces.append(Trace(node, False))
            case _Visit(node=Not(operand=operand) as node):
                work.append(_Negate(node))
                work.append(_Visit(operand))
            case _Visit(node=And(left=left) as node):
                work.append(_AfterLeft(node))
                work.append(_Visit(left))
            case _Visit(node=node):
                traces.append(Trace(node, match_atom(node, record)))
            case _Negate(node=node):
                inner = traces.pop()
                traces.append(Trace(node, not inner.result, (inner,)))
            case _AfterLeft(node=node):
                left_trace = traces.pop()
                if left_trace.result:
                    work.append(_Join(node, left_trace))
                    work.append(_Visit(node.right))
                else:
                    skipped = Trace(node.right, None)
                    traces.append(Trace(node, False, (left_trace, skipped)))
            case _Join(node=node, left=left_trace):
                right_trace = traces.pop()
                traces.append(Trace(node, right_trace.result, (left_trace, right_trace)))

    return traces.pop()
