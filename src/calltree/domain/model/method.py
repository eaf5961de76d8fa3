"""Method value object: a node of the call graph."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Method:
    """Method declared by a class.

    Immutable value object with FAIL-FIRST validation.
    Identity is structural: two Methods with equal fields are the same node.

    Attributes:
        name: Method name (initializers use the "<init>" convention)
        declaring_class: Fully qualified name of declaring class
        return_type: Return type name ("void" when nothing is returned)
        parameter_types: Parameter type names in declaration order
        source_line: First source line of the method body. None = unknown.
        is_public: Declared public
        is_static: Declared static
        is_abstract: Declared abstract (no body)
        exceptions: Declared thrown exception class names
    """

    name: str
    declaring_class: str
    return_type: str = "void"
    parameter_types: tuple[str, ...] = ()
    source_line: int | None = None
    is_public: bool = True
    is_static: bool = False
    is_abstract: bool = False
    exceptions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.declaring_class:
            raise ValueError("declaring_class must not be empty")
        if not self.return_type:
            raise ValueError("return_type must not be empty")
        if self.source_line is not None and self.source_line < 1:
            raise ValueError(f"source_line must be >= 1, got {self.source_line}")

    @property
    def signature(self) -> str:
        """Short signature fragment used for display: name(t1,t2)."""
        return f"{self.name}({','.join(self.parameter_types)})"

    @property
    def sub_signature(self) -> str:
        """Return type followed by the short signature."""
        return f"{self.return_type} {self.signature}"

    @property
    def display_name(self) -> str:
        """Qualified display name: [ClassName].signature."""
        return f"[{self.declaring_class}].{self.signature}"

    @property
    def is_concrete(self) -> bool:
        """Method has a body."""
        return not self.is_abstract

    def __str__(self) -> str:
        """Format as [ClassName].signature."""
        return self.display_name
