# src/ringlocant/core/services/topology_classifier.py

"""Chooses the numbering strategy for a ring system."""

import logging

from ..config import GRID_RING_SIZE, MAX_CHAIN_RING_SIZE
from ..domain.models.numbering_result import Topology
from ..domain.models.ring_system import RingSystem

logger = logging.getLogger(__name__)


def classify_topology(system: RingSystem) -> Topology:
    """
    Classify a ring system.

    Args:
        system: Rings of the fragment with fusion bookkeeping filled in

    Returns:
        BICYCLIC for two rings, CHAIN for ortho-fused chains, GRID for other
        all-six-membered systems, FALLBACK for everything else
    """
    if len(system) == 2:
        topology = Topology.BICYCLIC
    elif len(system) < 2:
        topology = Topology.FALLBACK
    elif rings_are_in_chain(system):
        topology = Topology.CHAIN
    elif all(ring.size == GRID_RING_SIZE for ring in system.rings):
        topology = Topology.GRID
    else:
        topology = Topology.FALLBACK

    logger.debug("Classified %d-ring system as %s", len(system), topology.value)
    return topology


def rings_are_in_chain(system: RingSystem) -> bool:
    """True if no ring has more than two fusion bonds or more than nine members
    and no atom touches more than two fusion bonds."""
    for ring in system.rings:
        if ring.number_of_fused_bonds > 2 or ring.size > MAX_CHAIN_RING_SIZE:
            return False

    for atom_id in system.fragment.get_atom_ids():
        if len(system.fragment.get_atom_bonds(atom_id)) > 2:
            if system.fused_bond_count(atom_id) > 2:
                return False
    return True
