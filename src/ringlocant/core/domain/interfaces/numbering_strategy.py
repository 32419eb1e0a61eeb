"""Interface for fused ring numbering strategies."""

from abc import ABC, abstractmethod
from typing import List

from ..models.ring_system import RingSystem


class NumberingStrategy(ABC):
    """Abstract base class for candidate numbering generators."""

    @abstractmethod
    def candidate_sequences(self, system: RingSystem) -> List[List[int]]:
        """
        Propose numberings of a ring system.

        Args:
            system: Fragment and rings with fusion bookkeeping filled in

        Returns:
            Candidate atom id sequences, in generation order

        Raises:
            NumberingError: If the ring data is inconsistent
        """
        pass
