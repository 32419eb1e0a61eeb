"""Domain model for fused ring numbering results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Topology(Enum):
    """Ring-system classes with their own numbering strategy."""

    BICYCLIC = "bicyclic"
    CHAIN = "chain"
    GRID = "grid"
    FALLBACK = "fallback"


@dataclass
class NumberingResult:
    """Contains the outcome of numbering one fused ring system."""

    topology: Topology
    locants: Dict[int, str]
    candidates: List[List[int]] = field(default_factory=list)
    preferred: Optional[List[int]] = None

    @property
    def is_placeholder(self) -> bool:
        return self.preferred is None

    def locant_sequence(self) -> List[str]:
        """Locants in the preferred (or fragment) order."""
        if self.preferred is None:
            return list(self.locants.values())
        return [self.locants[atom_id] for atom_id in self.preferred]
