import numpy as np

from ..core.base import BasePreprocessor


class ThresholdPreprocessor(BasePreprocessor):
    """Zeroes every similarity below a fixed threshold.

    Attributes:
        threshold: Similarities strictly below this value become 0.
    """

    name = "threshold"

    def __init__(self, threshold: float = 0.2):
        self.threshold = threshold

    def process(self, similarity: np.ndarray) -> np.ndarray:
        similarity = np.asarray(similarity, dtype=np.float64)
        return np.where(similarity < self.threshold, 0.0, similarity)

    def __repr__(self) -> str:
        return f"ThresholdPreprocessor(threshold={self.threshold})"
