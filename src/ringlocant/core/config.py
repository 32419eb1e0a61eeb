# src/ringlocant/core/config.py

"""Read-only configuration shared by the numbering strategies."""

from types import MappingProxyType

# Low locants go to heteroatoms in this order; unknown elements and carbon rank 0.
HETERO_ATOM_PRIORITY = MappingProxyType(
    {
        "O": 17,
        "S": 16,
        "Se": 15,
        "Te": 14,
        "N": 13,
        "P": 12,
        "As": 10,
        "Sb": 9,
        "Bi": 8,
        "Si": 7,
        "Ge": 6,
        "Sn": 5,
        "Pb": 4,
        "B": 3,
        "Hg": 2,
    }
)

CARBON = "C"

# An atom with this many bonds inside the ring system is a fusion atom.
FUSION_VALENCY = 3

# Largest ring the direction calculus understands.
MAX_DIRECTION_RING_SIZE = 10

# Largest ring accepted by the ortho-fused chain path.
MAX_CHAIN_RING_SIZE = 9

# The grid embedder only lays out rings of this size.
GRID_RING_SIZE = 6

PLACEHOLDER_PREFIX = "X"


def hetero_atom_value(element: str) -> int:
    """Priority of an element when assigning low locants to heteroatoms."""
    return HETERO_ATOM_PRIORITY.get(element, 0)
