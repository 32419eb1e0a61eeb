#!/usr/bin/env python3
# src/ringlocant/core/domain/models/ring_system.py

"""
A fragment together with its rings and the fusion bookkeeping between them.
"""

from typing import Dict, List, Optional

from ...exceptions import NumberingError
from .fragment import Fragment
from .ring import Ring


class RingSystem:
    """Rings of one fragment plus the bond-to-ring fusion relation.

    The relation lives here rather than on the bonds so that nothing
    outlives a single numbering call.
    """

    def __init__(self, fragment: Fragment, rings: List[Ring]):
        self.fragment = fragment
        self.rings = rings
        self._bond_rings: Dict[int, List[int]] = {}
        for index, ring in enumerate(rings):
            if ring.ring_id != index:
                raise NumberingError(f"Ring id {ring.ring_id} does not match its position {index}")
            ring.cyclic_atoms = None
            ring.cyclic_bonds = None
            ring.fused_bond_ids = []
            ring.neighbours = []
        self.set_fused_rings()

    def set_fused_rings(self) -> None:
        """Record which rings share each bond and link neighbouring rings."""
        for current in self.rings:
            for bond_id in current.bond_ids:
                if len(self._bond_rings.get(bond_id, [])) >= 2:
                    continue
                for ring in self.rings:
                    if ring is current or bond_id not in ring.bond_ids:
                        continue
                    self._add_fused_ring(bond_id, ring.ring_id)
                    self._add_fused_ring(bond_id, current.ring_id)
                    if current.ring_id not in ring.neighbours:
                        ring.neighbours.append(current.ring_id)
                    if ring.ring_id not in current.neighbours:
                        current.neighbours.append(ring.ring_id)

        for ring in self.rings:
            ring.fused_bond_ids = [b for b in ring.bond_ids if self.is_fused(b)]

    def _add_fused_ring(self, bond_id: int, ring_id: int) -> None:
        rings = self._bond_rings.setdefault(bond_id, [])
        if ring_id not in rings:
            rings.append(ring_id)

    def ring(self, ring_id: int) -> Ring:
        return self.rings[ring_id]

    def fused_rings(self, bond_id: int) -> List[int]:
        return list(self._bond_rings.get(bond_id, []))

    def is_fused(self, bond_id: int) -> bool:
        return len(self._bond_rings.get(bond_id, [])) >= 2

    def other_ring(self, bond_id: int, ring_id: int) -> int:
        """The ring on the other side of a fusion bond."""
        rings = self._bond_rings.get(bond_id, [])
        if len(rings) < 2:
            raise NumberingError(f"Bond {bond_id} is not a fusion bond")
        return rings[0] if rings[0] != ring_id else rings[1]

    def find_fusion_bond(self, ring1_id: int, ring2_id: int) -> Optional[int]:
        other_bonds = self.rings[ring2_id].bond_ids
        for bond_id in self.rings[ring1_id].bond_ids:
            if bond_id in other_bonds:
                return bond_id
        return None

    def non_fused_bond(self, ring_id: int) -> Optional[int]:
        for bond_id in self.rings[ring_id].bond_ids:
            if not self._bond_rings.get(bond_id):
                return bond_id
        return None

    def terminal_rings(self) -> List[Ring]:
        """Rings with the fewest fusion bonds."""
        if not self.rings:
            return []
        fewest = min(ring.number_of_fused_bonds for ring in self.rings)
        return [ring for ring in self.rings if ring.number_of_fused_bonds == fewest]

    def fused_bond_count(self, atom_id: int) -> int:
        """Number of fusion bonds touching an atom."""
        return sum(1 for b in self.fragment.get_atom_bonds(atom_id) if self.is_fused(b))

    @property
    def atom_count(self) -> int:
        return len(self.fragment)

    def __len__(self) -> int:
        return len(self.rings)
