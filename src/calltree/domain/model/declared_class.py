"""Declared class: a class name and the methods it declares."""

from dataclasses import dataclass

from calltree.domain.model.method import Method


@dataclass(frozen=True, slots=True)
class DeclaredClass:
    """Class with its declared methods.

    Attributes:
        name: Fully qualified class name
        methods: Declared methods in declaration order
    """

    name: str
    methods: tuple[Method, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        foreign = [m.signature for m in self.methods if m.declaring_class != self.name]
        if foreign:
            raise ValueError(f"methods not declared by {self.name}: {foreign}")

    def methods_named(self, name: str) -> tuple[Method, ...]:
        """Get declared methods with given name, in declaration order."""
        return tuple(m for m in self.methods if m.name == name)
