"""Emitting ring atoms between two fusion bonds."""

from typing import List

from ..domain.models.ring import Ring


def emit_ring_atoms(ring: Ring, start: int, end: int, inverse: bool, atom_path: List[int]) -> bool:
    """
    Append the atoms of ``ring`` lying between two fusion bonds.

    The walk starts after the bond at cyclic position ``start`` and stops at
    the bond at position ``end``, clockwise or (``inverse``) anticlockwise.
    The fusion atom shared with the previous ring is skipped because it was
    emitted already. Adjacent fusion bonds contribute nothing.

    Args:
        ring: Ring with cyclic atom and bond order
        start: Cyclic index of the bond the walk entered by
        end: Cyclic index of the bond the walk leaves by
        inverse: Walk against the cyclic order
        atom_path: Atom ids emitted so far, extended in place

    Returns:
        True once an atom already on the path is reached (the loop closed)
    """
    size = ring.size
    atoms = ring.cyclic_atoms

    if not inverse:
        if (end - start + size) % size == 1:
            return False
        start = (start + 1) % size
        end = (end - 1 + size) % size
        if start > end:
            end += size
        positions = range(start, end + 1)
    else:
        if (start - end + size) % size == 1:
            return False
        start = (start - 2 + size) % size
        end = end % size
        if start < end:
            start += size
        positions = range(start, end - 1, -1)

    for j in positions:
        atom_id = atoms[j % size]
        if atom_id in atom_path:
            return True
        atom_path.append(atom_id)
    return False
