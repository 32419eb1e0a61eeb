"""Candidate numbering strategies, one per ring-system topology."""

from .bicyclic_strategy import BicyclicStrategy
from .chain_strategy import ChainStrategy
from .grid_strategy import GridStrategy

__all__ = [
    "BicyclicStrategy",
    "ChainStrategy",
    "GridStrategy",
]
