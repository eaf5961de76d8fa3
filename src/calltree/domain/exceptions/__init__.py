"""Domain exceptions."""

from calltree.domain.exceptions.base import CallTreeError
from calltree.domain.exceptions.configuration import ConfigurationError
from calltree.domain.exceptions.trace import TraceFormatError

__all__ = [
    "CallTreeError",
    "ConfigurationError",
    "TraceFormatError",
]
