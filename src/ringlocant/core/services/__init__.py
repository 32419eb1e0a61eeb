"""Core business logic services."""

from .numbering_service import FusedRingNumberer, number_fused_ring
from .sequence_comparator import SequenceComparator
from .sssr_finder import find_sssr
from .topology_classifier import classify_topology

__all__ = [
    "FusedRingNumberer",
    "number_fused_ring",
    "SequenceComparator",
    "find_sssr",
    "classify_topology",
]
