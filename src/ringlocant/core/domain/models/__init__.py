"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .fragment import Fragment
from .ring import Ring
from .ring_system import RingSystem
from .connectivity_table import ConnectivityTable, RingConnection
from .quadrant import Quadrant, CornerCandidate
from .numbering_result import NumberingResult, Topology

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "Fragment",
    "Ring",
    "RingSystem",
    "ConnectivityTable",
    "RingConnection",
    "Quadrant",
    "CornerCandidate",
    "NumberingResult",
    "Topology",
]
