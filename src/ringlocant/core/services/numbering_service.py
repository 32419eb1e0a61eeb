"""Service assigning IUPAC locants to fused ring systems."""

from typing import Callable, Dict, List, Optional
import logging

from ..config import PLACEHOLDER_PREFIX
from ..domain.interfaces.numbering_strategy import NumberingStrategy
from ..domain.models.fragment import Fragment
from ..domain.models.numbering_result import NumberingResult, Topology
from ..domain.models.ring import Ring
from ..domain.models.ring_system import RingSystem
from ..utils.fragment_tools import assign_placeholder_locants, relabel_fused_ring_system
from .sequence_comparator import SequenceComparator
from .sssr_finder import find_sssr
from .topology_classifier import classify_topology

logger = logging.getLogger(__name__)

RingFinder = Callable[[Fragment], List[Ring]]


class FusedRingNumberer:
    """Service for numbering the atoms of one fused ring system."""

    def __init__(
        self,
        ring_finder: Optional[RingFinder] = None,
        placeholder_prefix: str = PLACEHOLDER_PREFIX,
    ):
        """Initialize service with a ring perception function."""
        from ..domain.implementations.bicyclic_strategy import BicyclicStrategy
        from ..domain.implementations.chain_strategy import ChainStrategy
        from ..domain.implementations.grid_strategy import GridStrategy

        self._ring_finder = ring_finder or find_sssr
        self._placeholder_prefix = placeholder_prefix
        self._strategies: Dict[Topology, NumberingStrategy] = {
            Topology.BICYCLIC: BicyclicStrategy(),
            Topology.CHAIN: ChainStrategy(),
            Topology.GRID: GridStrategy(),
        }

    def number(self, fragment: Fragment, rings: Optional[List[Ring]] = None) -> NumberingResult:
        """
        Number a fused ring fragment in place.

        On success every atom carries its locant, the fragment's atoms are
        reordered to follow the preferred sequence and its default attachment
        atom is the first atom of that sequence. Unsupported ring systems get
        placeholder locants instead.

        Args:
            fragment: Fragment holding exactly one fused ring system
            rings: Smallest set of smallest rings; perceived when omitted

        Returns:
            NumberingResult with the topology, sorted candidates and locants

        Raises:
            NumberingError: If the ring data cannot be numbered consistently
        """
        if rings is None:
            rings = self._ring_finder(fragment)
        system = RingSystem(fragment, rings)
        topology = classify_topology(system)

        if topology == Topology.FALLBACK:
            logger.info("Unsupported ring system with %d rings, using placeholder locants", len(rings))
            return self._placeholder_result(fragment, topology)

        candidates = self._strategies[topology].candidate_sequences(system)
        if not candidates:
            # only the grid embedder can come back empty handed
            logger.warning("No numbering path found for %s ring system", topology.value)
            return self._placeholder_result(fragment, topology)

        atom_ids = fragment.get_atom_ids()
        for candidate in candidates:
            missing = [a for a in atom_ids if a not in candidate]
            candidate.extend(missing)

        candidates = SequenceComparator(fragment).sort(candidates)
        preferred = candidates[0]
        logger.debug("%d candidates for %s ring system", len(candidates), topology.value)

        fragment.default_in_atom_id = preferred[0]
        relabel_fused_ring_system(fragment, preferred)
        fragment.reorder_atom_collection(preferred)

        return NumberingResult(
            topology=topology,
            locants={atom.atom_id: atom.locant for atom in fragment.atoms},
            candidates=candidates,
            preferred=list(preferred),
        )

    def _placeholder_result(self, fragment: Fragment, topology: Topology) -> NumberingResult:
        assign_placeholder_locants(fragment, self._placeholder_prefix)
        return NumberingResult(
            topology=topology,
            locants={atom.atom_id: atom.locant for atom in fragment.atoms},
        )


def number_fused_ring(fragment: Fragment) -> NumberingResult:
    """Number a fused ring fragment with the default ring perception."""
    return FusedRingNumberer().number(fragment)
