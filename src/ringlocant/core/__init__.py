"""Core domain models, strategies and services for fused ring numbering."""

from .domain.models.fragment import Fragment
from .domain.models.ring import Ring
from .domain.models.ring_system import RingSystem
from .domain.models.numbering_result import NumberingResult, Topology
from .domain.interfaces.numbering_strategy import NumberingStrategy
from .exceptions import NumberingError
from .services.numbering_service import FusedRingNumberer, number_fused_ring

__all__ = [
    "Fragment",
    "Ring",
    "RingSystem",
    "NumberingResult",
    "Topology",
    "NumberingStrategy",
    "NumberingError",
    "FusedRingNumberer",
    "number_fused_ring",
]
