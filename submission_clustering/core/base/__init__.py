"""Base classes for the clustering engine.

This module provides abstract base classes that define the interfaces
for the pluggable components of the engine.
"""

from .algorithm import BaseClusteringAlgorithm
from .preprocessor import BasePreprocessor

__all__ = [
    "BaseClusteringAlgorithm",
    "BasePreprocessor",
]
