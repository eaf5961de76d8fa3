"""Reporter protocol for call tree output formatting."""

from __future__ import annotations

from typing import Protocol


class ReporterProtocol(Protocol):
    """Contract for call tree reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, trace: str) -> str:
        """Format a call tree trace.

        Args:
            trace: Text produced by the call tree walker

        Returns:
            Formatted string representation.
        """
        ...
