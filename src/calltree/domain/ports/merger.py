"""Polymorphism merger protocol.

The merger decides which dispatch targets of one call site are aliases
of each other. The call tree walker consumes it as a black box.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from calltree.domain.model.call_graph import CallEdge, CallGraph
    from calltree.domain.model.edge_key import EdgeKey


class PolymorphismMergerProtocol(Protocol):
    """Contract for polymorphism mergers.

    Example:
        class NoMerge:
            def merge_class_name(self, names: Iterable[str]) -> str:
                return ":".join(sorted(set(names)))

            def merge_out_edges(self, graph, edges, include_list, exclude_list, edge_class_map):
                return iter(edges)
    """

    def merge_class_name(self, names: Iterable[str]) -> str:
        """Join alias class names into one display string.

        Must be deterministic and independent of input order.

        Args:
            names: Class names of one alias group

        Returns:
            Colon-joined display string ("" for no names)
        """
        ...

    def merge_out_edges(
        self,
        graph: CallGraph,
        edges: Iterable[CallEdge],
        include_list: tuple[str, ...],
        exclude_list: tuple[str, ...],
        edge_class_map: Mapping[EdgeKey, frozenset[str]],
    ) -> Iterator[CallEdge]:
        """Select the outgoing edges of one method to traverse.

        Args:
            graph: Graph the edges belong to
            edges: Raw outgoing edges of one method, in graph order
            include_list: Class-name prefixes to traverse
            exclude_list: Class-name prefixes hidden unless sinks
            edge_class_map: Known alias groups per call site

        Returns:
            Edges to traverse, in graph order
        """
        ...
