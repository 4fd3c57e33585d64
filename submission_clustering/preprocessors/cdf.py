"""Cumulative distribution function preprocessor.

Spectral embeddings react strongly to a long tail of small spurious
similarities. Weighting every similarity by its own empirical CDF value
shrinks low similarities much more than high ones.
"""

import numpy as np

from ..core.base import BasePreprocessor


class CumulativeDistributionPreprocessor(BasePreprocessor):
    """Replaces every similarity s by s * F(s).

    F is the empirical (rank-based) cumulative distribution of all
    off-diagonal similarities: the fraction of submission pairs whose
    similarity is <= s. Since F(s) <= 1, no non-negative entry grows.
    """

    name = "cdf"

    def estimate_cdf(self, values: np.ndarray, points: np.ndarray) -> np.ndarray:
        """Evaluate the empirical CDF of ``values`` at ``points``.

        Args:
            values: Sample of similarities (1-D).
            points: Array of any shape to evaluate at.

        Returns:
            Array shaped like ``points`` with values in [0, 1].
        """
        ordered = np.sort(values)
        ranks = np.searchsorted(ordered, points, side="right")
        return ranks / len(ordered)

    def process(self, similarity: np.ndarray) -> np.ndarray:
        similarity = np.asarray(similarity, dtype=np.float64)
        values = self._off_diagonal_values(similarity)
        if values.size == 0:
            return similarity.copy()
        return similarity * self.estimate_cdf(values, similarity)
