"""Plain text reporter.

Stdlib-only reporter: summary block followed by the trace itself.
"""

from __future__ import annotations

from io import StringIO

from calltree.domain.model.call_tree_node import CallTreeNode, parse_call_tree


class PlainTextReporter:
    """Plain text reporter for call tree traces.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, exclude_list: tuple[str, ...] = ()) -> None:
        """Initialize reporter.

        Args:
            exclude_list: Exclude prefixes the trace was produced with.
                Printed nodes of excluded classes are counted as sinks.
        """
        self._exclude_list = exclude_list

    def report(self, trace: str) -> str:
        """Format trace with a summary header.

        Args:
            trace: Text produced by the call tree walker

        Returns:
            Summary and trace as plain text

        Raises:
            TraceFormatError: If trace is malformed
        """
        nodes = parse_call_tree(trace, self._exclude_list)
        output = StringIO()

        print("=" * 70, file=output)
        print("Call Tree Report", file=output)
        print("=" * 70, file=output)
        print(f"  Nodes: {len(nodes)}", file=output)
        print(f"  Sinks: {sum(1 for node in nodes if node.is_sink)}", file=output)
        print(f"  Max depth: {max((node.depth for node in nodes), default=0)}", file=output)
        print("-" * 70, file=output)

        for node in nodes:
            print(self._format(node), file=output)

        return output.getvalue()

    @staticmethod
    def _format(node: CallTreeNode) -> str:
        """Format node line, marking sinks."""
        line = node.format_line()
        return f"{line}  [SINK]" if node.is_sink else line
