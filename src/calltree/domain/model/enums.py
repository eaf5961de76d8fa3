"""Domain enumerations."""

from enum import Enum, auto


class ExpansionScope(Enum):
    """How long an expanded method stays marked as expanded."""

    PATH = auto()  # until its subtree is finished (diamonds expand twice)
    GLOBAL = auto()  # for the whole run (each subtree expanded once)
