"""Console reporter: Trace → rich formatted tree."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from filterkit.application.formatting import describe, format_predicate

if TYPE_CHECKING:
    from filterkit.application.services.explainer import Trace


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        show_skipped: Show operands skipped by AND short-circuit.
        width: Console width in columns (must be > 0).
        color: Emit ANSI styles. False = plain text with tree guides.
    """

    show_skipped: bool = True
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


_MARKERS = {
    True: "[green]✔ PASS[/green]",
    False: "[red]✘ FAIL[/red]",
    None: "[dim]… SKIP[/dim]",
}


class ConsoleReporter:
    """Console reporter: outputs rich formatted tree.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, trace: Trace) -> str:
        """Format trace as rich formatted string.

        Args:
            trace: Trace returned by explain().

        Returns:
            Formatted string with colors and tree guides.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            color_system="standard" if self._config.color else None,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, trace)
        console.print(self._build_tree(trace))
        return output.getvalue()

    def _render_header(self, console: Console, trace: Trace) -> None:
        """Render formula and overall result."""
        console.rule("[bold]EVALUATION TRACE[/bold]")
        console.print(f"[bold]Formula:[/bold] {escape(format_predicate(trace.predicate))}")
        verdict = "[green]MATCH[/green]" if trace.result else "[red]NO MATCH[/red]"
        console.print(f"[bold]Result:[/bold] {verdict}")
        console.print()

    def _build_tree(self, trace: Trace) -> Tree:
        """Build rich Tree without recursion."""
        root = Tree(self._label(trace))
        stack: list[tuple[Trace, Tree]] = [(trace, root)]
        while stack:
            node, branch = stack.pop()
            # children added in order; processing order does not affect layout
            for child in node.children:
                if not child.evaluated and not self._config.show_skipped:
                    continue
                stack.append((child, branch.add(self._label(child))))
        return root

    def _label(self, trace: Trace) -> str:
        return f"{_MARKERS[trace.result]} {escape(describe(trace.predicate))}"
