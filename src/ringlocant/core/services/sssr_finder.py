# src/ringlocant/core/services/sssr_finder.py

"""Smallest set of smallest rings for a fused ring fragment."""

import logging
from typing import List

import networkx as nx

from ..domain.models.fragment import Fragment
from ..domain.models.ring import Ring
from ..exceptions import NumberingError

logger = logging.getLogger(__name__)


def find_sssr(fragment: Fragment) -> List[Ring]:
    """
    Find the smallest set of smallest rings covering a fragment.

    Uses the minimum cycle basis of the fragment graph. Each ring is walked
    into cyclic order starting from its lowest atom id towards the lower of
    that atom's two ring neighbours, with ``bond_ids[k]`` joining
    ``atom_ids[k]`` and ``atom_ids[k + 1]``. Rings are sorted by their sorted
    atom ids so repeated calls give identical rings.

    Args:
        fragment: Fragment holding one fused ring system

    Returns:
        Rings with ``ring_id`` equal to their position in the list
    """
    G = fragment.to_networkx()
    cycles = sorted(sorted(cycle) for cycle in nx.minimum_cycle_basis(G))

    rings = []
    for ring_id, members in enumerate(cycles):
        atom_ids, bond_ids = _walk_cycle(G, members)
        rings.append(Ring(ring_id=ring_id, atom_ids=atom_ids, bond_ids=bond_ids))

    logger.debug("Found %d rings: %s", len(rings), [ring.size for ring in rings])
    return rings


def _walk_cycle(G: nx.Graph, members: List[int]):
    member_set = set(members)
    start = members[0]
    ring_neighbours = sorted(n for n in G.neighbors(start) if n in member_set)
    if len(ring_neighbours) != 2:
        raise NumberingError(f"Ring through atom {start} is not a simple cycle")

    atom_ids = [start]
    previous, current = start, ring_neighbours[0]
    while current != start:
        if len(atom_ids) > len(members):
            raise NumberingError(f"Ring through atom {start} does not close")
        atom_ids.append(current)
        following = [n for n in G.neighbors(current) if n in member_set and n != previous]
        if len(following) != 1:
            raise NumberingError(f"Ring through atom {start} is not a simple cycle")
        previous, current = current, following[0]

    if len(atom_ids) != len(members):
        raise NumberingError(f"Ring through atom {start} does not visit all of its atoms")

    bond_ids = [
        G.edges[atom_ids[k], atom_ids[(k + 1) % len(atom_ids)]]["index"]
        for k in range(len(atom_ids))
    ]
    return atom_ids, bond_ids
