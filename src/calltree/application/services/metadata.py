"""Metadata collectors: project parts of a call graph into FunctionElements."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from calltree.domain.model.configuration import CallTreeConfig
from calltree.domain.model.function_element import FunctionElement

if TYPE_CHECKING:
    from collections.abc import Iterable

    from calltree.domain.model.declared_class import DeclaredClass
    from calltree.domain.model.function_element import FunctionElementList
    from calltree.domain.model.method import Method

logger = structlog.get_logger(__name__)


def add_constructors(
    function_list: FunctionElementList,
    declared_class: DeclaredClass,
    *,
    config: CallTreeConfig | None = None,
) -> None:
    """Append all constructors of declared_class to function_list.

    Constructors are the methods named config.constructor_name, taken in
    declaration order. Extended metadata is always attached.

    Args:
        function_list: Caller-owned output list
        declared_class: Class to scan
        config: Supplies the constructor naming convention. None = defaults.
    """
    config = config if config is not None else CallTreeConfig.empty()
    elements = [
        FunctionElement.from_method(method, extended=True)
        for method in declared_class.methods_named(config.constructor_name)
    ]
    function_list.add_function_elements(elements)
    logger.debug("constructors_added", class_name=declared_class.name, count=len(elements))


def add_sink_methods(
    function_list: FunctionElementList,
    reached_sinks: Iterable[Method],
    *,
    include_extended_info: bool,
) -> None:
    """Append one FunctionElement per reached sink method.

    No deduplication: a sink listed twice is recorded twice.

    Args:
        function_list: Caller-owned output list
        reached_sinks: Sink methods reached in the run
        include_extended_info: Attach extended metadata to each record
    """
    elements = [
        FunctionElement.from_method(method, extended=include_extended_info)
        for method in reached_sinks
    ]
    function_list.add_function_elements(elements)
    logger.debug("sink_methods_added", count=len(elements))
