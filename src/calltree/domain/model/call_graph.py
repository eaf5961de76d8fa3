"""Static call graph: methods connected by call-site edges."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from calltree.domain.model.method import Method

UNKNOWN_LINE = -1


@dataclass(frozen=True, slots=True)
class CallEdge:
    """Call edge from a call site in source to a target method.

    Several edges may share (source, line) when the call is polymorphic:
    one edge per possible dispatch target.

    Attributes:
        source: Calling method
        target: Called method
        line: Call-site line number (1-based). None = no source attribution;
            zero or negative lines are stored as None.
    """

    source: Method
    target: Method
    line: int | None = None

    def __post_init__(self) -> None:
        """Normalize unattributed lines to None."""
        if self.line is not None and self.line < 1:
            object.__setattr__(self, "line", None)

    @property
    def line_number(self) -> int:
        """Call-site line, or -1 when unknown."""
        return UNKNOWN_LINE if self.line is None else self.line

    @property
    def is_self_call(self) -> bool:
        """Edge calls its own source method."""
        return self.source == self.target

    def __str__(self) -> str:
        """Format as source → target:line."""
        return f"{self.source} → {self.target}:{self.line_number}"


@dataclass(frozen=True, slots=True)
class CallGraph:
    """Immutable call graph with O(1) lookup of edges by method.

    Edge order is preserved: edges_out_of() returns edges in the order
    they were recorded, which fixes the order of the printed call tree.

    Attributes:
        edges: All edges in insertion order
        outgoing: Method → edges leaving it
        incoming: Method → edges entering it
    """

    edges: tuple[CallEdge, ...]
    outgoing: Mapping[Method, tuple[CallEdge, ...]]
    incoming: Mapping[Method, tuple[CallEdge, ...]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        out_count = sum(len(edges) for edges in self.outgoing.values())
        in_count = sum(len(edges) for edges in self.incoming.values())
        if out_count != len(self.edges) or in_count != len(self.edges):
            raise ValueError(
                f"index mismatch: {len(self.edges)} edges, "
                f"{out_count} outgoing, {in_count} incoming"
            )

    def edges_out_of(self, method: Method) -> tuple[CallEdge, ...]:
        """Get edges leaving method, in recorded order. O(1)."""
        return self.outgoing.get(method, ())

    def edges_into(self, method: Method) -> tuple[CallEdge, ...]:
        """Get edges entering method, in recorded order. O(1)."""
        return self.incoming.get(method, ())

    @property
    def methods(self) -> frozenset[Method]:
        """All methods appearing as source or target."""
        return frozenset(self.outgoing) | frozenset(self.incoming)

    @property
    def edge_count(self) -> int:
        """Number of edges."""
        return len(self.edges)

    @classmethod
    def from_edges(cls, edges: Iterable[CallEdge]) -> CallGraph:
        """Build graph from edge iterable, keeping iteration order.

        Args:
            edges: Edges (list, tuple, generator)

        Returns:
            CallGraph indexing all edges
        """
        builder = CallGraphBuilder()
        for edge in edges:
            builder.add_edge(edge)
        return builder.freeze()

    @classmethod
    def empty(cls) -> CallGraph:
        """Create empty call graph."""
        return cls(edges=(), outgoing=MappingProxyType({}), incoming=MappingProxyType({}))


@dataclass(slots=True)
class CallGraphBuilder:
    """Mutable call graph used while edges are being discovered.

    NOT frozen because it's a mutable collector.
    Call freeze() to get immutable graph.
    """

    _edges: list[CallEdge] = field(default_factory=list)
    _outgoing: dict[Method, list[CallEdge]] = field(default_factory=dict)
    _incoming: dict[Method, list[CallEdge]] = field(default_factory=dict)

    def add_edge(self, edge: CallEdge) -> None:
        """Record an edge.

        Args:
            edge: Edge to record (duplicates are kept)
        """
        self._edges.append(edge)
        self._outgoing.setdefault(edge.source, []).append(edge)
        self._incoming.setdefault(edge.target, []).append(edge)

    def add_call(self, source: Method, target: Method, line: int | None = None) -> CallEdge:
        """Record a call from source to target at line.

        Returns:
            The recorded edge
        """
        edge = CallEdge(source=source, target=target, line=line)
        self.add_edge(edge)
        return edge

    def freeze(self) -> CallGraph:
        """Create immutable snapshot.

        Returns:
            Immutable CallGraph
        """
        return CallGraph(
            edges=tuple(self._edges),
            outgoing=MappingProxyType({m: tuple(e) for m, e in self._outgoing.items()}),
            incoming=MappingProxyType({m: tuple(e) for m, e in self._incoming.items()}),
        )

    @property
    def edge_count(self) -> int:
        """Current number of edges."""
        return len(self._edges)
