#!/usr/bin/env python3
# src/ringlocant/core/domain/models/atom.py

"""
Domain model representing an atom of a fused ring fragment.
"""

from dataclasses import dataclass
from typing import Optional

from ...config import CARBON, FUSION_VALENCY


@dataclass
class Atom:
    """Represents an atom in a fused ring system."""

    atom_id: int
    element: str
    locant: Optional[str] = None
    incoming_valency: int = 0

    @property
    def is_heteroatom(self) -> bool:
        return self.element != CARBON

    @property
    def is_fusion_atom(self) -> bool:
        """True for atoms shared by three or more ring bonds."""
        return self.incoming_valency >= FUSION_VALENCY

    @property
    def is_fusion_carbon(self) -> bool:
        return self.element == CARBON and self.is_fusion_atom
