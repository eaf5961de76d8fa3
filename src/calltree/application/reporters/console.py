"""Console reporter: call tree trace → rich tree rendering."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from calltree.domain.model.call_graph import UNKNOWN_LINE
from calltree.domain.model.call_tree_node import CallTreeNode, parse_call_tree


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns.
        show_line_numbers: Show call-site line after each node.
        highlight_sinks: Mark sink nodes.
        exclude_list: Exclude prefixes the trace was produced with
            (printed nodes of excluded classes are sinks).
    """

    width: int = 120
    show_line_numbers: bool = True
    highlight_sinks: bool = True
    exclude_list: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders the trace as a rich tree.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, trace: str) -> str:
        """Format trace as rich formatted string.

        Args:
            trace: Text produced by the call tree walker

        Returns:
            Formatted string with colors and tree guides

        Raises:
            TraceFormatError: If trace is malformed
        """
        nodes = parse_call_tree(trace, self._config.exclude_list)

        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, nodes)
        console.print(self._build_tree(nodes))

        return output.getvalue()

    def _render_header(self, console: Console, nodes: tuple[CallTreeNode, ...]) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]CALL TREE[/bold]")
        console.print()

        sinks = sum(1 for node in nodes if node.is_sink)
        console.print(f"[bold]Nodes:[/bold] {len(nodes)}  [bold]Sinks:[/bold] {sinks}")
        console.print()

    def _build_tree(self, nodes: tuple[CallTreeNode, ...]) -> Tree:
        """Nest nodes by depth under one root."""
        root = Tree(Text("Call tree", style="bold"))
        parents: list[tuple[int, Tree]] = []

        for node in nodes:
            while parents and parents[-1][0] >= node.depth:
                parents.pop()
            parent = parents[-1][1] if parents else root
            parents.append((node.depth, parent.add(self._label(node))))

        return root

    def _label(self, node: CallTreeNode) -> Text:
        """Render one node label."""
        label = Text.assemble((node.signature, "bold"), " ", (node.class_name, "cyan"))
        if self._config.show_line_numbers and node.line != UNKNOWN_LINE:
            label.append(f" line {node.line}", style="dim")
        if self._config.highlight_sinks and node.is_sink:
            label.append(" SINK", style="bold red")
        return label
