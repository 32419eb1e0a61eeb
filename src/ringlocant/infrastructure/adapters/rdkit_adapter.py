"""Adapter building fused ring fragments from RDKit molecules."""

import logging
from typing import Dict, List

import networkx as nx
from rdkit import Chem

from ...core.domain.models.bond import BondType
from ...core.domain.models.fragment import Fragment

logger = logging.getLogger(__name__)

_BOND_TYPES: Dict[Chem.BondType, BondType] = {
    Chem.BondType.SINGLE: BondType.SINGLE,
    Chem.BondType.DOUBLE: BondType.DOUBLE,
    Chem.BondType.TRIPLE: BondType.TRIPLE,
    Chem.BondType.AROMATIC: BondType.AROMATIC,
}


class RDKitAdapter:
    """Adapter extracting fused ring systems from RDKit molecules."""

    def from_smiles(self, smiles: str) -> List[Fragment]:
        """
        Parse a SMILES string and return its fused ring systems.

        Args:
            smiles: SMILES string of the molecule

        Returns:
            One fragment per ring system, see :meth:`ring_systems`

        Raises:
            ValueError: If RDKit cannot parse the SMILES string
        """
        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            raise ValueError(f"Failed to parse SMILES: {smiles}")
        return self.ring_systems(mol)

    def ring_systems(self, mol: Chem.Mol) -> List[Fragment]:
        """
        Split a molecule into fused ring systems.

        Rings sharing at least one bond belong to the same system; rings that
        only share an atom (spiro) stay separate. Atom ids of each fragment
        are the RDKit atom indices, and only ring bonds of the system are kept.

        Args:
            mol: RDKit molecule

        Returns:
            Fragments ordered by their lowest atom index
        """
        bond_rings = [set(ring) for ring in mol.GetRingInfo().BondRings()]

        G = nx.Graph()
        G.add_nodes_from(range(len(bond_rings)))
        for i in range(len(bond_rings)):
            for j in range(i + 1, len(bond_rings)):
                if bond_rings[i] & bond_rings[j]:
                    G.add_edge(i, j)

        fragments = []
        for component in nx.connected_components(G):
            bond_indices = sorted(set().union(*(bond_rings[i] for i in component)))
            fragments.append(self._build_fragment(mol, bond_indices))

        fragments.sort(key=lambda fragment: min(fragment.get_atom_ids()))
        logger.debug("Found %d ring systems in %d rings", len(fragments), len(bond_rings))
        return fragments

    def _build_fragment(self, mol: Chem.Mol, bond_indices: List[int]) -> Fragment:
        atom_indices = set()
        for index in bond_indices:
            bond = mol.GetBondWithIdx(index)
            atom_indices.update((bond.GetBeginAtomIdx(), bond.GetEndAtomIdx()))

        fragment = Fragment()
        for index in sorted(atom_indices):
            fragment.add_atom(mol.GetAtomWithIdx(index).GetSymbol(), atom_id=index)
        for index in bond_indices:
            bond = mol.GetBondWithIdx(index)
            fragment.add_bond(
                bond.GetBeginAtomIdx(),
                bond.GetEndAtomIdx(),
                _BOND_TYPES.get(bond.GetBondType(), BondType.UNKNOWN),
            )
        return fragment
