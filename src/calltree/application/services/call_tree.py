"""Call tree walker: depth-first trace of a call graph.

Streams one line per printed node to a text sink, so memory use grows
with the depth of the tree, not its size.

Per node, in order:
    1. Method name excluded → nothing printed, subtree cut.
    2. Display class name resolved from the alias group of the call site.
       The merger is advisory: if the merged names lack the method's own
       declaring class, the declaring class is shown instead.
    3. Node line formatted.
    4. Class matches an exclude prefix → printed only if it is a sink of
       that class, and never expanded.
    5. Method already on the expansion path → printed, not expanded.
       Otherwise its merged out-edges are visited one level deeper.

Traversal uses an explicit stack, so deep graphs are not bounded by the
interpreter recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

import structlog

from calltree.application.services.merger import PolymorphismMerger
from calltree.domain.model.call_graph import UNKNOWN_LINE
from calltree.domain.model.call_tree_node import ALIAS_SEPARATOR, CALL_TREE_HEADER, CallTreeNode
from calltree.domain.model.configuration import CallTreeConfig
from calltree.domain.model.edge_key import EdgeKey
from calltree.domain.model.enums import ExpansionScope

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from calltree.domain.model.call_graph import CallEdge, CallGraph
    from calltree.domain.model.method import Method
    from calltree.domain.ports.merger import PolymorphismMergerProtocol

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CallTreeResult:
    """Summary of one call tree run.

    Attributes:
        lines_written: Node lines written (header excluded)
        reached_sinks: Sink methods printed, in trace order, duplicates kept
        deepest_level: Largest depth printed, -1 if nothing was printed
    """

    lines_written: int
    reached_sinks: tuple[Method, ...]
    deepest_level: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.lines_written < 0:
            raise ValueError(f"lines_written must be >= 0, got {self.lines_written}")
        if len(self.reached_sinks) > self.lines_written:
            raise ValueError("reached_sinks cannot exceed lines_written")


@dataclass(slots=True)
class _Frame:
    """Method being expanded and its remaining out-edges."""

    method: Method
    depth: int
    edges: Iterator[CallEdge]


@dataclass(slots=True)
class _Run:
    """Mutable state of one traversal. Never shared between runs."""

    sink: TextIO
    graph: CallGraph
    expanded: set[Method] = field(default_factory=set)
    lines_written: int = 0
    reached_sinks: list[Method] = field(default_factory=list)
    deepest_level: int = -1

    def emit(self, node: CallTreeNode) -> None:
        """Write node line. Write errors propagate unchanged."""
        self.sink.write(node.format_line() + "\n")
        self.lines_written += 1
        self.deepest_level = max(self.deepest_level, node.depth)

    def result(self) -> CallTreeResult:
        return CallTreeResult(
            lines_written=self.lines_written,
            reached_sinks=tuple(self.reached_sinks),
            deepest_level=self.deepest_level,
        )


class CallTreeWalker:
    """Extracts filtered call trees from call graphs.

    Holds only immutable configuration and a stateless merger, so one
    walker can run any number of traversals, including concurrently.
    """

    def __init__(
        self,
        config: CallTreeConfig | None = None,
        merger: PolymorphismMergerProtocol | None = None,
    ) -> None:
        """Initialize walker.

        Args:
            config: Filters, alias groups and sinks. None = no filtering.
            merger: Polymorphism merger. None = PolymorphismMerger().
        """
        self._config = config if config is not None else CallTreeConfig.empty()
        self._merger = merger if merger is not None else PolymorphismMerger()

    @property
    def config(self) -> CallTreeConfig:
        """Configuration used by every run."""
        return self._config

    def extract(
        self,
        sink: TextIO,
        graph: CallGraph,
        entry: Method,
        depth: int = 0,
        line: int | None = None,
    ) -> CallTreeResult:
        """Write the call tree of entry to sink.

        Args:
            sink: Text stream receiving the trace
            graph: Call graph to walk
            entry: Root method
            depth: Indentation level of the root
            line: Call-site line shown for the root. None = -1.

        Returns:
            Summary of the run

        Raises:
            ValueError: If depth is negative
            OSError: If writing to sink fails (propagated unchanged)
        """
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")

        run = _Run(sink=sink, graph=graph)
        logger.info("call_tree_started", entry=str(entry), edges=graph.edge_count)

        sink.write(CALL_TREE_HEADER + "\n")
        root_line = UNKNOWN_LINE if line is None else line
        if self._visit(run, entry, depth, root_line, caller_class=None):
            self._expand(run, entry, depth)

        result = run.result()
        logger.info(
            "call_tree_finished",
            entry=str(entry),
            lines=result.lines_written,
            sinks=len(result.reached_sinks),
        )
        return result

    def _expand(self, run: _Run, root: Method, depth: int) -> None:
        """Depth-first expansion below an already printed root."""
        stack: list[_Frame] = []
        self._push(run, stack, root, depth)

        while stack:
            frame = stack[-1]
            edge = next(frame.edges, None)
            if edge is None:
                stack.pop()
                if self._config.expansion is ExpansionScope.PATH:
                    run.expanded.discard(frame.method)
                continue

            if edge.is_self_call:
                continue

            child_depth = frame.depth + 1
            if self._visit(
                run,
                edge.target,
                child_depth,
                edge.line_number,
                caller_class=frame.method.declaring_class,
            ):
                self._push(run, stack, edge.target, child_depth)

    def _push(self, run: _Run, stack: list[_Frame], method: Method, depth: int) -> None:
        """Start expanding method unless the cycle guard or depth bound stops it."""
        if method in run.expanded:
            return

        max_depth = self._config.max_depth
        if max_depth is not None and depth >= max_depth:
            logger.debug("depth_limit_reached", method=str(method), depth=depth)
            return

        run.expanded.add(method)
        edges = self._merger.merge_out_edges(
            run.graph,
            run.graph.edges_out_of(method),
            self._config.include_list,
            self._config.exclude_list,
            self._config.edge_class_map,
        )
        stack.append(_Frame(method=method, depth=depth, edges=iter(edges)))

    def _visit(
        self,
        run: _Run,
        method: Method,
        depth: int,
        line: int,
        caller_class: str | None,
    ) -> bool:
        """Print method's node if it passes the filters.

        Returns:
            True if method's callees should be expanded
        """
        config = self._config
        if method.name in config.exclude_method_list:
            return False

        class_name = self._display_class_name(method, line, caller_class)

        for candidate in class_name.split(ALIAS_SEPARATOR):
            if not config.is_excluded_class(candidate):
                continue
            if config.is_sink(candidate, method.name):
                run.emit(self._node(method, class_name, depth, line, is_sink=True))
                run.reached_sinks.append(method)
            return False

        run.emit(self._node(method, class_name, depth, line, is_sink=False))
        return True

    def _display_class_name(self, method: Method, line: int, caller_class: str | None) -> str:
        """Resolve class name shown for method at this call site."""
        if caller_class is None:
            return method.declaring_class

        key = EdgeKey(caller_class=caller_class, method_name=method.name, line=line)
        merged = self._merger.merge_class_name(self._config.alias_group(key))
        if method.declaring_class in merged.split(ALIAS_SEPARATOR):
            return merged

        if merged:
            logger.debug(
                "alias_fallback",
                call_site=str(key),
                merged=merged,
                declaring_class=method.declaring_class,
            )
        return method.declaring_class

    @staticmethod
    def _node(
        method: Method,
        class_name: str,
        depth: int,
        line: int,
        *,
        is_sink: bool,
    ) -> CallTreeNode:
        return CallTreeNode(
            signature=method.signature,
            class_name=class_name,
            depth=depth,
            line=line,
            is_sink=is_sink,
        )


def extract_call_tree(
    sink: TextIO,
    graph: CallGraph,
    entry: Method,
    *,
    config: CallTreeConfig | None = None,
    merger: PolymorphismMergerProtocol | None = None,
    depth: int = 0,
    line: int | None = None,
) -> CallTreeResult:
    """Write the call tree of entry to sink.

    Convenience wrapper around CallTreeWalker for a single run.

    Args:
        sink: Text stream receiving the trace
        graph: Call graph to walk
        entry: Root method
        config: Filters, alias groups and sinks. None = no filtering.
        merger: Polymorphism merger. None = PolymorphismMerger().
        depth: Indentation level of the root
        line: Call-site line shown for the root. None = -1.

    Returns:
        Summary of the run
    """
    return CallTreeWalker(config, merger).extract(sink, graph, entry, depth, line)


def write_call_tree(
    path: Path,
    graph: CallGraph,
    entry: Method,
    *,
    config: CallTreeConfig | None = None,
    merger: PolymorphismMergerProtocol | None = None,
) -> CallTreeResult:
    """Write the call tree of entry to a file.

    The file is closed on every exit path, including write failures.

    Args:
        path: Output file (created or truncated)
        graph: Call graph to walk
        entry: Root method
        config: Filters, alias groups and sinks. None = no filtering.
        merger: Polymorphism merger. None = PolymorphismMerger().

    Returns:
        Summary of the run
    """
    with path.open("w", encoding="utf-8") as fw:
        return extract_call_tree(fw, graph, entry, config=config, merger=merger)
