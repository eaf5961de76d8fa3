"""Tests for the default polymorphism merger.

Tests:
- merge_class_name: ordering, duplicates, empty input
- merge_out_edges: alias collapsing, non-alias targets, include filtering
- collect_alias_groups: polymorphic sites, excluded targets
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from calltree.application.services.merger import PolymorphismMerger, collect_alias_groups
from calltree.domain.model.edge_key import EdgeKey
from calltree.domain.ports.merger import PolymorphismMergerProtocol
from tests.factories import make_graph, make_method

if TYPE_CHECKING:
    from collections.abc import Mapping

    from calltree.domain.model.call_graph import CallEdge, CallGraph
    from calltree.domain.model.method import Method

_NO_ALIASES: MappingProxyType[EdgeKey, frozenset[str]] = MappingProxyType({})


def _merge(
    merger: PolymorphismMerger,
    graph: CallGraph,
    method: Method,
    include: tuple[str, ...] = (),
    exclude: tuple[str, ...] = (),
    aliases: Mapping[EdgeKey, frozenset[str]] = _NO_ALIASES,
) -> list[CallEdge]:
    """Run merge_out_edges on the out-edges of method."""
    return list(
        merger.merge_out_edges(graph, graph.edges_out_of(method), include, exclude, aliases)
    )


class TestMergeClassName:
    """Tests for merge_class_name()."""

    def test_sorted_and_joined(self) -> None:
        assert PolymorphismMerger().merge_class_name({"com.B", "com.A"}) == "com.A:com.B"

    def test_order_independent(self) -> None:
        merger = PolymorphismMerger()
        assert merger.merge_class_name(["x", "y"]) == merger.merge_class_name(["y", "x"])

    def test_duplicates_removed(self) -> None:
        assert PolymorphismMerger().merge_class_name(["A", "A"]) == "A"

    def test_empty(self) -> None:
        assert PolymorphismMerger().merge_class_name([]) == ""

    def test_satisfies_protocol(self) -> None:
        merger: PolymorphismMergerProtocol = PolymorphismMerger()
        assert merger.merge_class_name(["A"]) == "A"


class TestMergeOutEdges:
    """Tests for merge_out_edges()."""

    def test_no_aliases_keeps_all_edges(self) -> None:
        main = make_method("main", "Main")
        a, b = make_method("run", "A"), make_method("run", "B")
        graph = make_graph((main, a, 1), (main, b, 1))

        edges = _merge(PolymorphismMerger(), graph, main)

        assert [edge.target for edge in edges] == [a, b]

    def test_alias_group_keeps_first_member(self) -> None:
        main = make_method("main", "Main")
        a, b, c = make_method("run", "A"), make_method("run", "B"), make_method("run", "C")
        graph = make_graph((main, a, 1), (main, b, 1), (main, c, 1))
        aliases = MappingProxyType({EdgeKey("Main", "run", 1): frozenset({"A", "B", "C"})})

        edges = _merge(PolymorphismMerger(), graph, main, aliases=aliases)

        assert [edge.target for edge in edges] == [a]

    def test_non_alias_target_kept_separately(self) -> None:
        main = make_method("main", "Main")
        a, b, c = make_method("run", "A"), make_method("run", "B"), make_method("run", "C")
        graph = make_graph((main, a, 1), (main, b, 1), (main, c, 1))
        aliases = MappingProxyType({EdgeKey("Main", "run", 1): frozenset({"B", "C"})})

        edges = _merge(PolymorphismMerger(), graph, main, aliases=aliases)

        assert [edge.target for edge in edges] == [a, b]

    def test_same_targets_on_other_line_not_merged(self) -> None:
        main = make_method("main", "Main")
        a, b = make_method("run", "A"), make_method("run", "B")
        graph = make_graph((main, a, 1), (main, b, 1), (main, a, 2), (main, b, 2))
        aliases = MappingProxyType({EdgeKey("Main", "run", 1): frozenset({"A", "B"})})

        edges = _merge(PolymorphismMerger(), graph, main, aliases=aliases)

        assert [(edge.target, edge.line) for edge in edges] == [(a, 1), (a, 2), (b, 2)]

    def test_include_list_drops_unrelated_classes(self) -> None:
        main = make_method("main", "com.app.Main")
        app = make_method("run", "com.app.Service")
        lib = make_method("help", "org.lib.Util")
        jdk = make_method("exec", "java.lang.Runtime")
        graph = make_graph((main, app, 1), (main, lib, 2), (main, jdk, 3))

        edges = _merge(
            PolymorphismMerger(), graph, main, include=("com.app.*",), exclude=("java.*",)
        )

        assert [edge.target for edge in edges] == [app, jdk]

    def test_empty_include_list_keeps_everything(self) -> None:
        main = make_method("main", "com.app.Main")
        lib = make_method("help", "org.lib.Util")
        graph = make_graph((main, lib, 2))

        edges = _merge(PolymorphismMerger(), graph, main, exclude=("java.*",))

        assert [edge.target for edge in edges] == [lib]


class TestCollectAliasGroups:
    """Tests for collect_alias_groups()."""

    def test_polymorphic_site_grouped(self) -> None:
        main = make_method("main", "Main")
        graph = make_graph(
            (main, make_method("run", "A"), 4),
            (main, make_method("run", "B"), 4),
        )

        groups = collect_alias_groups(graph)

        assert dict(groups) == {EdgeKey("Main", "run", 4): frozenset({"A", "B"})}

    def test_monomorphic_site_not_grouped(self) -> None:
        main = make_method("main", "Main")
        graph = make_graph((main, make_method("run", "A"), 4), (main, make_method("run", "A"), 4))

        assert dict(collect_alias_groups(graph)) == {}

    def test_excluded_targets_left_out(self) -> None:
        main = make_method("main", "Main")
        graph = make_graph(
            (main, make_method("write", "com.Writer"), 4),
            (main, make_method("write", "com.Buffered"), 4),
            (main, make_method("write", "java.io.Writer"), 4),
        )

        groups = collect_alias_groups(graph, exclude_list=["java."])

        assert groups[EdgeKey("Main", "write", 4)] == frozenset({"com.Writer", "com.Buffered"})

    def test_single_non_excluded_target_not_grouped(self) -> None:
        main = make_method("main", "Main")
        graph = make_graph(
            (main, make_method("write", "com.Writer"), 4),
            (main, make_method("write", "java.io.Writer"), 4),
        )

        assert dict(collect_alias_groups(graph, exclude_list=["java."])) == {}

    def test_unknown_line_sites_grouped(self) -> None:
        main = make_method("main", "Main")
        graph = make_graph((main, make_method("run", "A")), (main, make_method("run", "B")))

        groups = collect_alias_groups(graph)

        assert EdgeKey("Main", "run", -1) in groups
