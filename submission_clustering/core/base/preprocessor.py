"""Base class for similarity preprocessors.

Preprocessors are pure matrix-to-matrix transforms applied before an
algorithm sees the similarities.
"""

from abc import ABC, abstractmethod

import numpy as np


class BasePreprocessor(ABC):
    """Base interface for similarity preprocessors.

    Subclasses must implement:
    - process(): Return a transformed copy of the matrix

    Attributes:
        name: Registry name of the preprocessor.
    """

    name = "base"

    @abstractmethod
    def process(self, similarity: np.ndarray) -> np.ndarray:
        """Transform a similarity matrix.

        Args:
            similarity: Symmetric (n, n) matrix. Must not be modified.

        Returns:
            New symmetric (n, n) matrix.
        """
        pass

    @staticmethod
    def _off_diagonal_values(similarity: np.ndarray) -> np.ndarray:
        """Upper-triangle entries (each unordered pair exactly once)."""
        rows, cols = np.triu_indices(similarity.shape[0], k=1)
        return similarity[rows, cols]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
