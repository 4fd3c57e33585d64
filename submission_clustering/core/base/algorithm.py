"""Base class for clustering algorithms.

Algorithms turn a similarity matrix into a partition: one non-negative
label per submission row.
"""

from abc import ABC, abstractmethod

import numpy as np


class BaseClusteringAlgorithm(ABC):
    """Base interface for clustering algorithms.

    Every algorithm (plain or wrapped by a preprocessor) honors the same
    contract, so callers never need to know which one they hold.

    Subclasses must implement:
    - cluster(): Partition the rows of a similarity matrix

    Attributes:
        name: Registry name of the algorithm.
    """

    name = "base"

    @abstractmethod
    def cluster(self, similarity: np.ndarray) -> np.ndarray:
        """Partition the submissions of a similarity matrix.

        Args:
            similarity: Symmetric (n, n) matrix. Must not be modified.

        Returns:
            Integer array of shape (n,). Entry i is the cluster label of
            submission i. Labels are non-negative, not necessarily contiguous.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
