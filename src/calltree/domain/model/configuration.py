"""Call tree configuration: class filters, alias groups and sink methods.

Built once per run and passed explicitly to the walker and collectors.
Empty collections mean no filtering, no merging and no sinks.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import structlog

from calltree.domain.exceptions.configuration import ConfigurationError
from calltree.domain.model.edge_key import EdgeKey
from calltree.domain.model.enums import ExpansionScope

WILDCARD = "*"
CONSTRUCTOR_NAME = "<init>"

logger = structlog.get_logger(__name__)


def strip_wildcard(prefix: str) -> str:
    """Remove wildcard markers from a class-name prefix."""
    return prefix.replace(WILDCARD, "")


def matching_prefix(class_name: str, prefixes: Iterable[str]) -> str | None:
    """Find first prefix matching class_name.

    Args:
        class_name: Fully qualified class name
        prefixes: Class-name prefixes, wildcard markers allowed

    Returns:
        The configured prefix (as written) or None if none matches
    """
    for prefix in prefixes:
        if class_name.startswith(strip_wildcard(prefix)):
            return prefix
    return None


@dataclass(frozen=True, slots=True)
class CallTreeConfig:
    """Configuration for one call tree run.

    Immutable. Construct directly with normalized collections or use
    from_mappings() to normalize arbitrary iterables and string keys.

    Attributes:
        include_list: Class-name prefixes to traverse. Empty = all classes.
        exclude_list: Class-name prefixes whose methods are hidden unless sinks.
        exclude_method_list: Method names cut from the tree with their subtree.
        edge_class_map: Call site → class names that are aliases at that site.
        sink_method_map: Class name → method names always shown.
        constructor_name: Name of initializer methods.
        max_depth: Deepest level that is expanded. None = unbounded.
        expansion: Scope of the cycle guard.
    """

    include_list: tuple[str, ...] = ()
    exclude_list: tuple[str, ...] = ()
    exclude_method_list: frozenset[str] = frozenset()
    edge_class_map: Mapping[EdgeKey, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    sink_method_map: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    constructor_name: str = CONSTRUCTOR_NAME
    max_depth: int | None = None
    expansion: ExpansionScope = ExpansionScope.PATH

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.constructor_name:
            raise ValueError("constructor_name must not be empty")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    def is_excluded_class(self, class_name: str) -> bool:
        """Check if class_name starts with an exclude prefix."""
        return matching_prefix(class_name, self.exclude_list) is not None

    def alias_group(self, key: EdgeKey) -> frozenset[str]:
        """Get alias class names at call site. Missing = empty set."""
        return self.edge_class_map.get(key, frozenset())

    def sink_methods_of(self, class_name: str) -> frozenset[str]:
        """Get sink method names of class. Missing = empty set."""
        return self.sink_method_map.get(class_name, frozenset())

    def is_sink(self, class_name: str, method_name: str) -> bool:
        """Check if method of class is a sink."""
        return method_name in self.sink_methods_of(class_name)

    @classmethod
    def empty(cls) -> CallTreeConfig:
        """Create configuration with no filters, aliases or sinks."""
        return cls()

    @classmethod
    def from_mappings(
        cls,
        *,
        include_list: Iterable[str] = (),
        exclude_list: Iterable[str] = (),
        exclude_method_list: Iterable[str] = (),
        edge_class_map: Mapping[str | EdgeKey, Iterable[str]] | None = None,
        sink_method_map: Mapping[str, Iterable[str]] | None = None,
        constructor_name: str = CONSTRUCTOR_NAME,
        max_depth: int | None = None,
        expansion: ExpansionScope = ExpansionScope.PATH,
    ) -> CallTreeConfig:
        """Build configuration from plain collections.

        Alias map keys may be EdgeKey objects or "callerClass:methodName:line"
        strings. String keys that do not parse never match a call site and
        are dropped.
        """
        aliases: dict[EdgeKey, frozenset[str]] = {}
        for key, names in (edge_class_map or {}).items():
            if not isinstance(key, EdgeKey):
                try:
                    key = EdgeKey.parse(key)
                except ConfigurationError as e:
                    logger.debug("alias_key_ignored", key=key, reason=e.reason)
                    continue
            aliases[key] = frozenset(names)
        sinks = {
            class_name: frozenset(methods)
            for class_name, methods in (sink_method_map or {}).items()
        }
        return cls(
            include_list=tuple(include_list),
            exclude_list=tuple(exclude_list),
            exclude_method_list=frozenset(exclude_method_list),
            edge_class_map=MappingProxyType(aliases),
            sink_method_map=MappingProxyType(sinks),
            constructor_name=constructor_name,
            max_depth=max_depth,
            expansion=expansion,
        )
