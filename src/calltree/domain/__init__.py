"""Domain layer: immutable value objects, ports and exceptions."""
