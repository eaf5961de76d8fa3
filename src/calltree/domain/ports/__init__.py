"""Domain ports: contracts implemented outside the domain."""

from calltree.domain.ports.merger import PolymorphismMergerProtocol
from calltree.domain.ports.reporter import ReporterProtocol

__all__ = ["PolymorphismMergerProtocol", "ReporterProtocol"]
