import numpy as np

from ..core.base import BasePreprocessor


class NoPreprocessor(BasePreprocessor):
    """Identity transform. Returns an equal copy of the matrix."""

    name = "none"

    def process(self, similarity: np.ndarray) -> np.ndarray:
        return np.array(similarity, dtype=np.float64, copy=True)
