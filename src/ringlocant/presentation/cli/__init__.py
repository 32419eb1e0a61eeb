"""Command-line interface modules."""

from .number_rings import main as number_rings_main

__all__ = [
    "number_rings_main",
]
