"""Composite key identifying a call site by caller class, callee name and line."""

from __future__ import annotations

from dataclasses import dataclass

from calltree.domain.exceptions.configuration import ConfigurationError
from calltree.domain.model.call_graph import UNKNOWN_LINE, CallEdge

_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class EdgeKey:
    """Call site key used by the polymorphism alias map.

    A tuple struct rather than a concatenated string, so keys cannot
    collide when a name contains the separator.

    Attributes:
        caller_class: Fully qualified name of the calling method's class
        method_name: Name of the called method
        line: Call-site line, -1 when unknown
    """

    caller_class: str
    method_name: str
    line: int = UNKNOWN_LINE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.caller_class:
            raise ValueError("caller_class must not be empty")
        if not self.method_name:
            raise ValueError("method_name must not be empty")

    @classmethod
    def of_edge(cls, edge: CallEdge) -> EdgeKey:
        """Key of the call site an edge belongs to."""
        return cls(
            caller_class=edge.source.declaring_class,
            method_name=edge.target.name,
            line=edge.line_number,
        )

    @classmethod
    def parse(cls, text: str) -> EdgeKey:
        """Parse callerClass:methodName:line.

        Args:
            text: Key in string form

        Returns:
            Parsed EdgeKey

        Raises:
            ConfigurationError: If text is not in callerClass:methodName:line form
        """
        parts = text.rsplit(_SEPARATOR, 2)
        if len(parts) != 3 or not parts[0] or not parts[1]:
            raise ConfigurationError(
                "edge_class_map", f"key {text!r} is not callerClass:methodName:line"
            )
        caller_class, method_name, line = parts
        try:
            line_number = int(line)
        except ValueError:
            raise ConfigurationError(
                "edge_class_map", f"key {text!r} has non-integer line {line!r}"
            ) from None
        return cls(caller_class=caller_class, method_name=method_name, line=line_number)

    def __str__(self) -> str:
        """Format as callerClass:methodName:line."""
        return _SEPARATOR.join((self.caller_class, self.method_name, str(self.line)))
