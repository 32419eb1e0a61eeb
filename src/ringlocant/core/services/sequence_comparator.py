# src/ringlocant/core/services/sequence_comparator.py

"""Preference order between candidate numberings of a fused ring system."""

from functools import cmp_to_key
from typing import List, Sequence

from ..config import hetero_atom_value
from ..domain.models.atom import Atom
from ..domain.models.fragment import Fragment
from ..exceptions import NumberingError


class SequenceComparator:
    """Sorts candidate atom sequences by the IUPAC fused-ring numbering rules.

    The most preferred sequence sorts to position 0:

    1. low locants to heteroatoms as a set
    2. low locants to heteroatoms in the order O, S, Se, Te, N, P, As, Sb,
       Bi, Si, Ge, Sn, Pb, B, Hg
    3. low locants to fusion carbon atoms
    4. low locants to fusion atoms rather than non-fusion atoms

    Fusion carbons never receive a number of their own, so the first two
    passes step over them independently in each sequence.
    """

    def __init__(self, fragment: Fragment):
        self._fragment = fragment

    def sort(self, sequences: List[List[int]]) -> List[List[int]]:
        """Return the sequences sorted most preferred first (stable)."""
        return sorted(sequences, key=cmp_to_key(self.compare))

    def compare(self, sequence_a: Sequence[int], sequence_b: Sequence[int]) -> int:
        if len(sequence_a) != len(sequence_b):
            raise NumberingError(
                f"Candidate sequences differ in length ({len(sequence_a)} != {len(sequence_b)})"
            )
        atoms_a = [self._fragment.get_atom(atom_id) for atom_id in sequence_a]
        atoms_b = [self._fragment.get_atom(atom_id) for atom_id in sequence_b]

        for rule in (
            self._compare_heteroatoms,
            self._compare_heteroatom_priority,
            self._compare_fusion_carbons,
            self._compare_fusion_atoms,
        ):
            result = rule(atoms_a, atoms_b)
            if result:
                return result
        return 0

    @staticmethod
    def _numbered_pairs(atoms_a: List[Atom], atoms_b: List[Atom]):
        """Pairs of atoms that would receive the same number."""
        i = j = 0
        while i < len(atoms_a) and j < len(atoms_b):
            if atoms_a[i].is_fusion_carbon:
                i += 1
                continue
            if atoms_b[j].is_fusion_carbon:
                j += 1
                continue
            yield atoms_a[i], atoms_b[j]
            i += 1
            j += 1

    def _compare_heteroatoms(self, atoms_a: List[Atom], atoms_b: List[Atom]) -> int:
        for atom_a, atom_b in self._numbered_pairs(atoms_a, atoms_b):
            if atom_a.is_heteroatom and not atom_b.is_heteroatom:
                return -1
            if atom_b.is_heteroatom and not atom_a.is_heteroatom:
                return 1
        return 0

    def _compare_heteroatom_priority(self, atoms_a: List[Atom], atoms_b: List[Atom]) -> int:
        for atom_a, atom_b in self._numbered_pairs(atoms_a, atoms_b):
            value_a = hetero_atom_value(atom_a.element)
            value_b = hetero_atom_value(atom_b.element)
            if value_a > value_b:
                return -1
            if value_a < value_b:
                return 1
        return 0

    @staticmethod
    def _compare_fusion_carbons(atoms_a: List[Atom], atoms_b: List[Atom]) -> int:
        for atom_a, atom_b in zip(atoms_a, atoms_b):
            if atom_a.is_fusion_carbon and not atom_b.is_fusion_carbon:
                return -1
            if atom_b.is_fusion_carbon and not atom_a.is_fusion_carbon:
                return 1
        return 0

    @staticmethod
    def _compare_fusion_atoms(atoms_a: List[Atom], atoms_b: List[Atom]) -> int:
        # Sequences reaching this pass have fusion carbons in the same places.
        for atom_a, atom_b in zip(atoms_a, atoms_b):
            if atom_a.is_fusion_atom and not atom_b.is_fusion_atom:
                return -1
            if atom_b.is_fusion_atom and not atom_a.is_fusion_atom:
                return 1
        return 0
