# src/ringlocant/core/utils/fragment_tools.py

"""Locant assignment helpers for fused ring fragments."""

import string
from typing import Sequence

from ..config import PLACEHOLDER_PREFIX
from ..domain.models.fragment import Fragment


def relabel_fused_ring_system(fragment: Fragment, atom_ids: Sequence[int]) -> None:
    """
    Assign locants following a preferred atom sequence.

    Fusion carbons take the locant of the preceding atom plus a letter
    (4a, 4b, ...); every other atom takes the next integer.

    Args:
        fragment: Fragment whose atoms are relabelled in place
        atom_ids: Preferred numbering order
    """
    for atom in fragment.atoms:
        atom.locant = None

    value = 0
    letter = 0
    for atom_id in atom_ids:
        atom = fragment.get_atom(atom_id)
        if atom.is_fusion_carbon:
            atom.locant = f"{value}{_letter(letter)}"
            letter += 1
        else:
            value += 1
            letter = 0
            atom.locant = str(value)


def _letter(index: int) -> str:
    letters = string.ascii_lowercase
    if index < len(letters):
        return letters[index]
    return letters[index // len(letters) - 1] + letters[index % len(letters)]


def assign_placeholder_locants(fragment: Fragment, prefix: str = PLACEHOLDER_PREFIX) -> None:
    """Label atoms X1..Xn in their current fragment order."""
    for position, atom in enumerate(fragment.atoms, start=1):
        atom.locant = f"{prefix}{position}"
