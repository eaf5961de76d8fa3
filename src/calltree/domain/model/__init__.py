"""Domain model entities."""

from calltree.domain.model.call_graph import UNKNOWN_LINE, CallEdge, CallGraph, CallGraphBuilder
from calltree.domain.model.call_tree_node import CALL_TREE_HEADER, CallTreeNode, parse_call_tree
from calltree.domain.model.configuration import CONSTRUCTOR_NAME, CallTreeConfig, matching_prefix
from calltree.domain.model.declared_class import DeclaredClass
from calltree.domain.model.edge_key import EdgeKey
from calltree.domain.model.enums import ExpansionScope
from calltree.domain.model.function_element import (
    ExtendedMethodInfo,
    FunctionElement,
    FunctionElementList,
)
from calltree.domain.model.method import Method

__all__ = [
    "CALL_TREE_HEADER",
    "CONSTRUCTOR_NAME",
    "UNKNOWN_LINE",
    "CallEdge",
    "CallGraph",
    "CallGraphBuilder",
    "CallTreeConfig",
    "CallTreeNode",
    "DeclaredClass",
    "EdgeKey",
    "ExpansionScope",
    "ExtendedMethodInfo",
    "FunctionElement",
    "FunctionElementList",
    "Method",
    "matching_prefix",
    "parse_call_tree",
]
