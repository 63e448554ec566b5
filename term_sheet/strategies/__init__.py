"""Competing extraction strategies over reconstructed term-sheet text."""

from .base import ExtractionStrategy, LineStrategy, StrategyName
from .pattern import PatternStrategy
from .structural import StructuralStrategy
from .table import TableStrategy

__all__ = [
    "ExtractionStrategy",
    "LineStrategy",
    "PatternStrategy",
    "StrategyName",
    "StructuralStrategy",
    "TableStrategy",
]
