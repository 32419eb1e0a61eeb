"""Adapters for external libraries and services."""

from .rdkit_adapter import RDKitAdapter

__all__ = [
    "RDKitAdapter",
]
