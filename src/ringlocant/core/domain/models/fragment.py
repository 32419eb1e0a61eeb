#!/usr/bin/env python3
# src/ringlocant/core/domain/models/fragment.py

"""
Domain model representing one fused ring system as an atom/bond graph.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from .atom import Atom
from .bond import Bond, BondType


class Fragment:
    """Arena of atoms and bonds addressed by stable handles.

    Atoms are addressed by ``atom_id`` and bonds by their index in
    ``bonds``. Rings and candidate sequences only ever hold these handles.
    """

    def __init__(self, atoms: Optional[List[Atom]] = None, bonds: Optional[List[Bond]] = None):
        """
        Initialize a Fragment.

        Args:
            atoms: Atoms in their canonical order
            bonds: Bonds between those atoms
        """
        self.atoms: List[Atom] = []
        self.bonds: List[Bond] = []
        self.default_in_atom_id: Optional[int] = None
        self._atoms_by_id: Dict[int, Atom] = {}
        self._atom_bonds: Dict[int, List[int]] = {}

        for atom in atoms or []:
            self._register_atom(atom)
        for bond in bonds or []:
            self._register_bond(bond)

    @classmethod
    def from_edges(
        cls, elements: Sequence[str], edges: Iterable[Tuple[int, int]]
    ) -> "Fragment":
        """Build a fragment whose atom ids are the positions in ``elements``."""
        fragment = cls()
        for element in elements:
            fragment.add_atom(element)
        for atom1_id, atom2_id in edges:
            fragment.add_bond(atom1_id, atom2_id)
        return fragment

    def _register_atom(self, atom: Atom) -> None:
        if atom.atom_id in self._atoms_by_id:
            raise ValueError(f"Duplicate atom id {atom.atom_id}")
        # valency counts only the bonds of this fragment
        atom.incoming_valency = 0
        self.atoms.append(atom)
        self._atoms_by_id[atom.atom_id] = atom
        self._atom_bonds[atom.atom_id] = []

    def _register_bond(self, bond: Bond) -> int:
        for atom_id in (bond.atom1_id, bond.atom2_id):
            if atom_id not in self._atoms_by_id:
                raise ValueError(f"Bond refers to unknown atom {atom_id}")
        index = len(self.bonds)
        self.bonds.append(bond)
        self._atom_bonds[bond.atom1_id].append(index)
        self._atom_bonds[bond.atom2_id].append(index)
        for atom_id in (bond.atom1_id, bond.atom2_id):
            self._atoms_by_id[atom_id].incoming_valency = len(self._atom_bonds[atom_id])
        return index

    def add_atom(self, element: str, atom_id: Optional[int] = None) -> int:
        """Add an atom and return its id (next free integer by default)."""
        if atom_id is None:
            atom_id = max(self._atoms_by_id, default=-1) + 1
        self._register_atom(Atom(atom_id=atom_id, element=element))
        return atom_id

    def add_bond(
        self, atom1_id: int, atom2_id: int, bond_type: BondType = BondType.SINGLE
    ) -> int:
        """Add a bond and return its index."""
        return self._register_bond(Bond(atom1_id, atom2_id, bond_type=bond_type))

    def get_atom(self, atom_id: int) -> Atom:
        return self._atoms_by_id[atom_id]

    def get_atom_ids(self) -> List[int]:
        return [atom.atom_id for atom in self.atoms]

    def get_atom_bonds(self, atom_id: int) -> List[int]:
        """Bond indices touching an atom, in insertion order."""
        return list(self._atom_bonds[atom_id])

    def get_atom_neighbours(self, atom_id: int) -> List[int]:
        return [self.bonds[b].other_atom(atom_id) for b in self._atom_bonds[atom_id]]

    def bond_between(self, atom1_id: int, atom2_id: int) -> Optional[int]:
        for index in self._atom_bonds[atom1_id]:
            if self.bonds[index].contains(atom2_id):
                return index
        return None

    def reorder_atom_collection(self, atom_ids: Sequence[int]) -> None:
        """Reorder the canonical atom list to follow ``atom_ids``."""
        if sorted(atom_ids) != sorted(self._atoms_by_id):
            raise ValueError("New atom order must contain every atom exactly once")
        self.atoms = [self._atoms_by_id[atom_id] for atom_id in atom_ids]

    def get_locants(self) -> Dict[int, Optional[str]]:
        return {atom.atom_id: atom.locant for atom in self.atoms}

    def to_networkx(self) -> nx.Graph:
        """Convert the fragment to a NetworkX graph keyed by atom id."""
        G = nx.Graph()
        for atom in self.atoms:
            G.add_node(atom.atom_id, element=atom.element)
        for index, bond in enumerate(self.bonds):
            G.add_edge(bond.atom1_id, bond.atom2_id, index=index)
        return G

    def __len__(self) -> int:
        return len(self.atoms)
