"""Core domain models and interfaces."""

from .models.fragment import Fragment
from .models.ring import Ring
from .models.ring_system import RingSystem
from .interfaces.numbering_strategy import NumberingStrategy

__all__ = [
    "Fragment",
    "Ring",
    "RingSystem",
    "NumberingStrategy",
]
