"""calltree - filtered call tree extraction from static call graphs."""

__version__ = "0.1.0"

from calltree.application.services.call_tree import (
    CallTreeResult,
    CallTreeWalker,
    extract_call_tree,
    write_call_tree,
)
from calltree.application.services.merger import PolymorphismMerger, collect_alias_groups
from calltree.application.services.metadata import add_constructors, add_sink_methods
from calltree.domain.model import (
    CallEdge,
    CallGraph,
    CallGraphBuilder,
    CallTreeConfig,
    DeclaredClass,
    EdgeKey,
    ExpansionScope,
    FunctionElement,
    FunctionElementList,
    Method,
)

__all__ = [
    "CallEdge",
    "CallGraph",
    "CallGraphBuilder",
    "CallTreeConfig",
    "CallTreeResult",
    "CallTreeWalker",
    "DeclaredClass",
    "EdgeKey",
    "ExpansionScope",
    "FunctionElement",
    "FunctionElementList",
    "Method",
    "PolymorphismMerger",
    "__version__",
    "add_constructors",
    "add_sink_methods",
    "collect_alias_groups",
    "extract_call_tree",
    "write_call_tree",
]
