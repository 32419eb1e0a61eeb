"""Domain interfaces."""

from .numbering_strategy import NumberingStrategy

__all__ = ["NumberingStrategy"]
