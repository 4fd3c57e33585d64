import numpy as np

from ..core.base import BasePreprocessor
from ..core.errors import ClusteringConfigurationError


class PercentilePreprocessor(BasePreprocessor):
    """Zeroes every similarity below a percentile of all similarities.

    Attributes:
        percentile: Fraction in [0, 1]. 0.5 keeps the upper half of the
            submission pairs.
    """

    name = "percentile"

    def __init__(self, percentile: float = 0.5):
        if not 0.0 <= percentile <= 1.0:
            raise ClusteringConfigurationError(
                f"percentile must be in [0, 1], got {percentile}"
            )
        self.percentile = percentile

    def process(self, similarity: np.ndarray) -> np.ndarray:
        similarity = np.asarray(similarity, dtype=np.float64)
        values = self._off_diagonal_values(similarity)
        if values.size == 0:
            return similarity.copy()
        cutoff = np.quantile(values, self.percentile)
        return np.where(similarity < cutoff, 0.0, similarity)

    def __repr__(self) -> str:
        return f"PercentilePreprocessor(percentile={self.percentile})"
