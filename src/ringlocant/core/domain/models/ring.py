#!/usr/bin/env python3
# src/ringlocant/core/domain/models/ring.py

"""
Domain model representing one ring of the smallest set of smallest rings.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ...exceptions import NumberingError
from .fragment import Fragment


@dataclass
class Ring:
    """A ring of a fused system, held as handles into its fragment.

    ``atom_ids`` and ``bond_ids`` keep the order delivered by the ring finder.
    ``cyclic_atoms`` and ``cyclic_bonds`` are only available once
    :meth:`make_cyclic` has fixed a start bond and direction.
    """

    ring_id: int
    atom_ids: List[int]
    bond_ids: List[int]
    cyclic_atoms: Optional[List[int]] = None
    cyclic_bonds: Optional[List[int]] = None
    fused_bond_ids: List[int] = field(default_factory=list)
    neighbours: List[int] = field(default_factory=list)

    def __post_init__(self):
        if len(self.atom_ids) != len(self.bond_ids):
            raise NumberingError(
                f"Ring {self.ring_id} has {len(self.atom_ids)} atoms but {len(self.bond_ids)} bonds"
            )

    @property
    def size(self) -> int:
        return len(self.atom_ids)

    @property
    def number_of_fused_bonds(self) -> int:
        return len(self.fused_bond_ids)

    def is_cyclic(self) -> bool:
        return self.cyclic_bonds is not None

    def make_cyclic(self, fragment: Fragment, start_bond: int, start_atom: int) -> None:
        """Order atoms and bonds cyclically.

        ``cyclic_bonds[0]`` is ``start_bond`` and ``cyclic_atoms[0]`` is
        ``start_atom``; afterwards ``cyclic_bonds[i]`` joins
        ``cyclic_atoms[i - 1]`` and ``cyclic_atoms[i]``.
        """
        if start_bond not in self.bond_ids:
            raise NumberingError(f"Bond {start_bond} does not belong to ring {self.ring_id}")
        if not fragment.bonds[start_bond].contains(start_atom):
            raise NumberingError(f"Atom {start_atom} is not on bond {start_bond}")

        bonds = [start_bond]
        atoms = [start_atom]
        atom = start_atom
        for _ in range(self.size - 1):
            for bond_id in self.bond_ids:
                if bond_id in bonds:
                    continue
                bond = fragment.bonds[bond_id]
                if bond.contains(atom):
                    bonds.append(bond_id)
                    atom = bond.other_atom(atom)
                    atoms.append(atom)
                    break
            else:
                raise NumberingError(f"Ring {self.ring_id} is not a closed cycle")

        self.cyclic_bonds = bonds
        self.cyclic_atoms = atoms

    def bond_number(self, bond_id: int) -> int:
        """Position of a bond in the cyclic bond order."""
        if self.cyclic_bonds is None:
            raise NumberingError(f"Atoms in ring {self.ring_id} are not ordered")
        try:
            return self.cyclic_bonds.index(bond_id)
        except ValueError:
            raise NumberingError(f"Bond {bond_id} does not belong to ring {self.ring_id}")

    def atom_before_bond(self, bond_id: int) -> int:
        """The endpoint of ``bond_id`` that comes first in cyclic order."""
        index = self.bond_number(bond_id)
        return self.cyclic_atoms[(index - 1 + self.size) % self.size]
