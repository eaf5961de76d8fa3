"""Trace parsing exceptions."""

from calltree.domain.exceptions.base import CallTreeError


class TraceFormatError(CallTreeError):
    """Line of a call tree trace cannot be parsed.

    Attributes:
        line_no: 1-based line number within the trace
        line: Offending line text
        reason: Why line is invalid
    """

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if line_no < 1:
            raise ValueError(f"line_no must be >= 1, got {line_no}")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed trace line {line_no} ({line!r}): {reason}")
