"""Application services."""

from calltree.application.services.call_tree import (
    CallTreeResult,
    CallTreeWalker,
    extract_call_tree,
    write_call_tree,
)
from calltree.application.services.merger import PolymorphismMerger, collect_alias_groups
from calltree.application.services.metadata import add_constructors, add_sink_methods

__all__ = [
    "CallTreeResult",
    "CallTreeWalker",
    "PolymorphismMerger",
    "add_constructors",
    "add_sink_methods",
    "collect_alias_groups",
    "extract_call_tree",
    "write_call_tree",
]
