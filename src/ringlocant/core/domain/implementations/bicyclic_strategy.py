"""Numbering candidates for two fused rings."""

import logging
from typing import List

from ...config import FUSION_VALENCY
from ...exceptions import NumberingError
from ..interfaces.numbering_strategy import NumberingStrategy
from ..models.ring_system import RingSystem

logger = logging.getLogger(__name__)


class BicyclicStrategy(NumberingStrategy):
    """Walks the periphery from each bridgehead.

    With a single fusion bond no orientation geometry is needed: every
    (bridgehead, non-bridgehead neighbour) pair gives one sequence that
    starts at the neighbour, follows unvisited atoms around the system and
    ends with the bridgehead.
    """

    def candidate_sequences(self, system: RingSystem) -> List[List[int]]:
        fragment = system.fragment
        bridgeheads = [
            atom_id
            for atom_id in fragment.get_atom_ids()
            if len(fragment.get_atom_neighbours(atom_id)) == FUSION_VALENCY
        ]

        sequences = []
        for bridgehead in bridgeheads:
            for neighbour in fragment.get_atom_neighbours(bridgehead):
                if neighbour in bridgeheads:
                    continue
                visited = [bridgehead]
                next_atom = neighbour
                while next_atom is not None:
                    visited.append(next_atom)
                    candidates = [
                        n for n in fragment.get_atom_neighbours(next_atom) if n not in visited
                    ]
                    next_atom = candidates[-1] if candidates else None
                visited.remove(bridgehead)
                visited.append(bridgehead)
                sequences.append(visited)

        if not sequences:
            raise NumberingError("No bridgehead atoms found in bicyclic ring system")

        logger.debug("Bicyclic path produced %d candidates", len(sequences))
        return sequences
