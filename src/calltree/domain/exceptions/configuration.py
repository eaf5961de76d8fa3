"""Configuration exceptions."""

from calltree.domain.exceptions.base import CallTreeError


class ConfigurationError(CallTreeError):
    """Error in call tree configuration.

    Raised when a configuration value cannot be interpreted.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        field: Name of invalid field (must not be empty)
        reason: Why value is invalid (must not be empty)
    """

    def __init__(self, field: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")
