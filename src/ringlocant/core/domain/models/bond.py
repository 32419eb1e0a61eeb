#!/usr/bin/env python3
# src/ringlocant/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum, auto


class BondType(Enum):
    """Enumeration of possible bond types."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    AROMATIC = auto()
    UNKNOWN = auto()


@dataclass
class Bond:
    """Represents a chemical bond between two atoms.

    ``atom1_id`` is the "from" atom and ``atom2_id`` the "to" atom; the
    direction only matters for choosing where a ring walk starts.
    """

    atom1_id: int
    atom2_id: int
    bond_type: BondType = BondType.SINGLE

    def other_atom(self, atom_id: int) -> int:
        if atom_id == self.atom1_id:
            return self.atom2_id
        if atom_id == self.atom2_id:
            return self.atom1_id
        raise ValueError(f"Atom {atom_id} is not part of bond {self}")

    def contains(self, atom_id: int) -> bool:
        return atom_id in (self.atom1_id, self.atom2_id)
