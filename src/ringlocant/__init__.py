"""IUPAC locant numbering for fused ring systems."""

from .core.domain.models.fragment import Fragment
from .core.domain.models.numbering_result import NumberingResult, Topology
from .core.exceptions import NumberingError
from .core.services.numbering_service import FusedRingNumberer, number_fused_ring

__version__ = "0.1.0"

__all__ = [
    "Fragment",
    "NumberingResult",
    "Topology",
    "NumberingError",
    "FusedRingNumberer",
    "number_fused_ring",
]
