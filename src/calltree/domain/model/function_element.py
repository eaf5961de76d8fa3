"""Function metadata records produced for downstream reporting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from calltree.domain.model.call_graph import UNKNOWN_LINE
from calltree.domain.model.method import Method


@dataclass(frozen=True, slots=True)
class ExtendedMethodInfo:
    """Language-specific method metadata.

    Attributes:
        declaring_class: Fully qualified name of declaring class
        is_concrete: Method has a body
        is_public: Declared public
        is_static: Declared static
        exceptions: Declared thrown exception class names
    """

    declaring_class: str
    is_concrete: bool
    is_public: bool
    is_static: bool
    exceptions: tuple[str, ...] = ()

    @classmethod
    def from_method(cls, method: Method) -> ExtendedMethodInfo:
        """Copy extended metadata from method."""
        return cls(
            declaring_class=method.declaring_class,
            is_concrete=method.is_concrete,
            is_public=method.is_public,
            is_static=method.is_static,
            exceptions=method.exceptions,
        )


@dataclass(frozen=True, slots=True)
class FunctionElement:
    """Reporting record for one method.

    Attributes:
        function_name: Display name, [ClassName].signature
        source_file: Declaring class name (source unit of the method)
        line_number: First source line, -1 when unknown
        return_type: Return type name
        arg_types: Parameter type names
        extended: Extended metadata. None = not collected.
    """

    function_name: str
    source_file: str
    line_number: int
    return_type: str
    arg_types: tuple[str, ...] = ()
    extended: ExtendedMethodInfo | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.function_name:
            raise ValueError("function_name must not be empty")
        if self.line_number < UNKNOWN_LINE or self.line_number == 0:
            raise ValueError(f"line_number must be >= 1 or -1, got {self.line_number}")

    @property
    def arg_count(self) -> int:
        """Number of parameters."""
        return len(self.arg_types)

    @classmethod
    def from_method(cls, method: Method, *, extended: bool) -> FunctionElement:
        """Build record from method.

        Args:
            method: Method to describe
            extended: Attach ExtendedMethodInfo

        Returns:
            FunctionElement named [ClassName].signature
        """
        return cls(
            function_name=method.display_name,
            source_file=method.declaring_class,
            line_number=UNKNOWN_LINE if method.source_line is None else method.source_line,
            return_type=method.return_type,
            arg_types=method.parameter_types,
            extended=ExtendedMethodInfo.from_method(method) if extended else None,
        )


@dataclass(slots=True)
class FunctionElementList:
    """Append-only list of FunctionElement records owned by the caller.

    NOT frozen: collectors append to it across a run.
    """

    _elements: list[FunctionElement] = field(default_factory=list)

    def add_function_elements(self, elements: Iterable[FunctionElement]) -> None:
        """Append elements, keeping their order."""
        self._elements.extend(elements)

    @property
    def elements(self) -> tuple[FunctionElement, ...]:
        """Snapshot of all elements in insertion order."""
        return tuple(self._elements)

    @property
    def function_names(self) -> tuple[str, ...]:
        """Display names of all elements in insertion order."""
        return tuple(e.function_name for e in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[FunctionElement]:
        return iter(tuple(self._elements))
