"""Default polymorphism merger.

Collapses the dispatch targets of one call site that are known aliases
(per the alias map) into a single traversed edge, and joins alias class
names for display.

collect_alias_groups() derives the alias map from the graph itself:
every call site with two or more non-excluded target classes becomes
one alias group.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from calltree.domain.model.call_tree_node import ALIAS_SEPARATOR
from calltree.domain.model.configuration import matching_prefix
from calltree.domain.model.edge_key import EdgeKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from calltree.domain.model.call_graph import CallEdge, CallGraph

logger = structlog.get_logger(__name__)


class PolymorphismMerger:
    """Default PolymorphismMergerProtocol implementation.

    Stateless. One instance can serve any number of runs.
    """

    def merge_class_name(self, names: Iterable[str]) -> str:
        """Join unique class names, sorted, with ':'.

        Args:
            names: Class names of one alias group

        Returns:
            Display string, "" for no names
        """
        return ALIAS_SEPARATOR.join(sorted(set(names)))

    def merge_out_edges(
        self,
        graph: CallGraph,
        edges: Iterable[CallEdge],
        include_list: tuple[str, ...],
        exclude_list: tuple[str, ...],
        edge_class_map: Mapping[EdgeKey, frozenset[str]],
    ) -> Iterator[CallEdge]:
        """Select edges to traverse, one per known alias group.

        Rules, applied per edge in graph order:
            1. include_list non-empty and target class matches neither an
               include nor an exclude prefix → dropped. Excluded targets
               are kept so that sinks can still be reported.
            2. Target class in the alias group of its call site → only the
               first such edge of the group is kept.
            3. Otherwise the edge is kept as is.

        Args:
            graph: Graph the edges belong to (unused by this merger)
            edges: Raw outgoing edges of one method
            include_list: Class-name prefixes to traverse
            exclude_list: Class-name prefixes hidden unless sinks
            edge_class_map: Known alias groups per call site

        Yields:
            Edges to traverse
        """
        represented: set[EdgeKey] = set()

        for edge in edges:
            target_class = edge.target.declaring_class
            if not _is_traversed(target_class, include_list, exclude_list):
                continue

            key = EdgeKey.of_edge(edge)
            aliases = edge_class_map.get(key, frozenset())
            if target_class not in aliases:
                yield edge
                continue

            if key in represented:
                logger.debug("alias_edge_merged", call_site=str(key), target=str(edge.target))
                continue
            represented.add(key)
            yield edge


def collect_alias_groups(
    graph: CallGraph,
    exclude_list: Iterable[str] = (),
) -> Mapping[EdgeKey, frozenset[str]]:
    """Derive alias groups from polymorphic call sites of graph.

    A call site (caller class, callee name, line) reached by edges to two
    or more distinct non-excluded classes yields one group. Excluded
    target classes never join a group: they stay separate so the walker
    can still show them as sinks.

    Args:
        graph: Call graph
        exclude_list: Class-name prefixes left out of groups

    Returns:
        Read-only mapping usable as CallTreeConfig.edge_class_map
    """
    excludes = tuple(exclude_list)
    targets: dict[EdgeKey, set[str]] = {}

    for edge in graph.edges:
        target_class = edge.target.declaring_class
        if matching_prefix(target_class, excludes) is not None:
            continue
        targets.setdefault(EdgeKey.of_edge(edge), set()).add(target_class)

    groups = {key: frozenset(names) for key, names in targets.items() if len(names) > 1}
    logger.debug("alias_groups_collected", call_sites=len(targets), groups=len(groups))
    return MappingProxyType(groups)


def _is_traversed(
    class_name: str,
    include_list: tuple[str, ...],
    exclude_list: tuple[str, ...],
) -> bool:
    """Check if edges into class_name are traversed at all."""
    if not include_list:
        return True
    return (
        matching_prefix(class_name, include_list) is not None
        or matching_prefix(class_name, exclude_list) is not None
    )
