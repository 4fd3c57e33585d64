"""Composition of a preprocessor in front of a clustering algorithm."""

import logging

import numpy as np

from ..core.base import BaseClusteringAlgorithm, BasePreprocessor

logger = logging.getLogger(__name__)


class PreprocessedAlgorithm(BaseClusteringAlgorithm):
    """Applies a preprocessor, then delegates to the wrapped algorithm.

    Submissions whose similarities all become 0 after preprocessing have no
    peers left. They are removed before the wrapped algorithm runs and each
    one receives its own singleton label, so the partition still covers
    every row of the original matrix.

    Attributes:
        algorithm: The algorithm that clusters the preprocessed matrix.
        preprocessor: The transform applied first.
    """

    def __init__(self, algorithm: BaseClusteringAlgorithm, preprocessor: BasePreprocessor):
        self.algorithm = algorithm
        self.preprocessor = preprocessor

    @property
    def name(self) -> str:
        return self.algorithm.name

    def cluster(self, similarity: np.ndarray) -> np.ndarray:
        processed = self.preprocessor.process(similarity)
        n = processed.shape[0]

        adjacency = processed.copy()
        np.fill_diagonal(adjacency, 0.0)
        connected = np.flatnonzero((adjacency != 0).any(axis=1))

        labels = np.empty(n, dtype=np.int64)
        next_label = 0
        if connected.size > 0:
            reduced = processed[np.ix_(connected, connected)]
            inner = np.asarray(self.algorithm.cluster(reduced), dtype=np.int64)
            labels[connected] = inner
            next_label = int(inner.max()) + 1

        isolated = np.setdiff1d(np.arange(n), connected)
        labels[isolated] = next_label + np.arange(isolated.size)

        if isolated.size:
            logger.debug(
                "%s left %d of %d submissions without similar peers",
                self.preprocessor.name, isolated.size, n,
            )
        return labels

    def __repr__(self) -> str:
        return f"PreprocessedAlgorithm(algorithm={self.algorithm!r}, preprocessor={self.preprocessor!r})"
