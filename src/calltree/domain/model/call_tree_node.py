"""One line of a call tree trace, and the parser for the trace format.

Format:
    Call tree
    <2*depth spaces><signature> <class[:alias...]> linenumber=<line>
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from calltree.domain.exceptions.trace import TraceFormatError
from calltree.domain.model.call_graph import UNKNOWN_LINE
from calltree.domain.model.configuration import matching_prefix

CALL_TREE_HEADER = "Call tree"
ALIAS_SEPARATOR = ":"
INDENT = "  "
_LINE_MARKER = " linenumber="


@dataclass(frozen=True, slots=True)
class CallTreeNode:
    """Printed call tree node.

    Attributes:
        signature: Short signature fragment of the method
        class_name: Declaring class, or colon-joined alias group
        depth: Nesting level (root = 0)
        line: Call-site line, -1 when unknown
        is_sink: Method shown only because it is a sink of an excluded class
    """

    signature: str
    class_name: str
    depth: int
    line: int = UNKNOWN_LINE
    is_sink: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.signature:
            raise ValueError("signature must not be empty")
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")

    @property
    def class_names(self) -> tuple[str, ...]:
        """Alias candidates of the display class name."""
        return tuple(self.class_name.split(ALIAS_SEPARATOR))

    def format_line(self) -> str:
        """Render as trace line (without newline)."""
        return f"{INDENT * self.depth}{self.signature} {self.class_name}{_LINE_MARKER}{self.line}"

    def __str__(self) -> str:
        return self.format_line()


def parse_call_tree(text: str, exclude_list: Iterable[str] = ()) -> tuple[CallTreeNode, ...]:
    """Parse a call tree trace into nodes.

    A printed node whose class matches an exclude prefix can only be a sink,
    so nodes matching exclude_list are marked is_sink.

    Args:
        text: Trace starting with the "Call tree" header
        exclude_list: Exclude prefixes the trace was produced with

    Returns:
        Nodes in trace order

    Raises:
        TraceFormatError: If header is missing or a line is malformed
    """
    lines = text.splitlines()
    if not lines or lines[0] != CALL_TREE_HEADER:
        first = lines[0] if lines else ""
        raise TraceFormatError(1, first, f"expected header {CALL_TREE_HEADER!r}")

    excludes = tuple(exclude_list)
    nodes: list[CallTreeNode] = []
    for line_no, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        nodes.append(_parse_line(line_no, line, excludes))
    return tuple(nodes)


def _parse_line(line_no: int, line: str, excludes: tuple[str, ...]) -> CallTreeNode:
    """Parse one node line."""
    body = line.lstrip(" ")
    indent = len(line) - len(body)
    if indent % len(INDENT):
        raise TraceFormatError(line_no, line, f"odd indentation of {indent} spaces")

    head, marker, line_text = body.rpartition(_LINE_MARKER)
    if not marker:
        raise TraceFormatError(line_no, line, f"missing {_LINE_MARKER.strip()!r}")
    try:
        call_line = int(line_text)
    except ValueError:
        raise TraceFormatError(line_no, line, f"non-integer line {line_text!r}") from None

    parts = head.split(" ")
    if len(parts) != 2 or not all(parts):
        raise TraceFormatError(line_no, line, "expected '<signature> <class>'")
    signature, class_name = parts

    is_sink = any(
        matching_prefix(name, excludes) is not None
        for name in class_name.split(ALIAS_SEPARATOR)
    )
    return CallTreeNode(
        signature=signature,
        class_name=class_name,
        depth=indent // len(INDENT),
        line=call_line,
        is_sink=is_sink,
    )
