"""Agglomerative (bottom-up hierarchical) clustering.

Every submission starts as a singleton. The two most similar clusters are
merged until no pair of clusters is more similar than the threshold.

Linkage rules (similarity between two clusters):
- min: Smallest pairwise similarity (complete linkage)
- max: Largest pairwise similarity (single linkage)
- average: Mean over all member pairs (average linkage)
"""

import logging
from typing import Callable, Dict

import numpy as np

from ..core.base import BaseClusteringAlgorithm
from ..core.errors import ClusteringConfigurationError

logger = logging.getLogger(__name__)


def _min_linkage(row_a, row_b, size_a, size_b):
    return np.minimum(row_a, row_b)


def _max_linkage(row_a, row_b, size_a, size_b):
    return np.maximum(row_a, row_b)


def _average_linkage(row_a, row_b, size_a, size_b):
    return (size_a * row_a + size_b * row_b) / (size_a + size_b)


# Lance-Williams style updates: similarity of the merged cluster to the others
LINKAGE_REGISTRY: Dict[str, Callable] = {
    "min": _min_linkage,
    "max": _max_linkage,
    "average": _average_linkage,
}


class AgglomerativeAlgorithm(BaseClusteringAlgorithm):
    """Hierarchical bottom-up clustering with a similarity threshold.

    Clusters live in the slot of their smallest member, so comparing slot
    numbers orders clusters by their smallest member. Ties between equally
    similar pairs go to the lowest (row, col) slot pair, which makes the
    result deterministic.

    Attributes:
        threshold: Pairs with similarity <= threshold are never merged.
        linkage: One of "min", "max", "average".
    """

    name = "agglomerative"

    def __init__(self, threshold: float = 0.2, linkage: str = "average"):
        """Initialize the algorithm.

        Args:
            threshold: Merge stop criterion, in [0, 1].
            linkage: Linkage rule name.

        Raises:
            ClusteringConfigurationError: Invalid threshold or linkage.
        """
        if not 0.0 <= threshold <= 1.0:
            raise ClusteringConfigurationError(
                f"agglomerative threshold must be in [0, 1], got {threshold}"
            )
        key = str(linkage).lower()
        if key not in LINKAGE_REGISTRY:
            raise ClusteringConfigurationError(
                f"Unknown linkage '{linkage}'. Available: {list(LINKAGE_REGISTRY.keys())}"
            )
        self.threshold = threshold
        self.linkage = key
        self._update = LINKAGE_REGISTRY[key]

    def cluster(self, similarity: np.ndarray) -> np.ndarray:
        n = similarity.shape[0]
        labels = np.arange(n)
        if n < 2:
            return labels

        scores = np.array(similarity, dtype=np.float64, copy=True)
        np.fill_diagonal(scores, -np.inf)
        sizes = np.ones(n)
        lower = np.tril(np.ones((n, n), dtype=bool))

        merges = 0
        while True:
            candidates = np.where(lower, -np.inf, scores)
            flat = int(np.argmax(candidates))
            i, j = divmod(flat, n)
            best = candidates[i, j]
            if not best > self.threshold:
                break

            # Merge slot j into slot i (i < j keeps the smallest member in i)
            merged = self._update(scores[i], scores[j], sizes[i], sizes[j])
            scores[i, :] = merged
            scores[:, i] = merged
            scores[j, :] = -np.inf
            scores[:, j] = -np.inf
            scores[i, i] = -np.inf
            sizes[i] += sizes[j]
            sizes[j] = 0
            labels[labels == j] = i
            merges += 1

        logger.debug(
            "Agglomerative clustering (%s, threshold=%.3f): %d merges, %d clusters",
            self.linkage, self.threshold, merges, n - merges,
        )
        _, contiguous = np.unique(labels, return_inverse=True)
        return contiguous.reshape(-1)

    def __repr__(self) -> str:
        return f"AgglomerativeAlgorithm(threshold={self.threshold}, linkage={self.linkage!r})"
