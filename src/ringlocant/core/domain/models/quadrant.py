"""Quadrants around a principal chain and the corner candidates they produce."""

from dataclasses import dataclass
from enum import IntEnum


class Quadrant(IntEnum):
    """Quadrants counted counter-clockwise from the upper right."""

    UPPER_RIGHT = 0
    UPPER_LEFT = 1
    LOWER_LEFT = 2
    LOWER_RIGHT = 3

    @property
    def diagonal(self) -> "Quadrant":
        return Quadrant((self + 2) % 4)

    @property
    def same_row(self) -> "Quadrant":
        """The horizontally adjacent quadrant."""
        return Quadrant(self + 1 if self % 2 == 0 else self - 1)

    @property
    def inverts_atom_order(self) -> bool:
        """Mirroring this quadrant onto the upper right reverses the walk."""
        return self in (Quadrant.UPPER_LEFT, Quadrant.LOWER_RIGHT)

    @property
    def reverses_rings(self) -> bool:
        """Mirroring this quadrant onto the upper right reverses the chain."""
        return self in (Quadrant.UPPER_LEFT, Quadrant.LOWER_LEFT)


@dataclass(frozen=True)
class CornerCandidate:
    """A principal chain and the quadrant proposed as its upper-right corner."""

    chain_index: int
    quadrant: Quadrant
