"""Gaussian process surrogate over the number of clusters.

Thin wrapper around scikit-learn's GaussianProcessRegressor with the
hyperparameters held fixed:
- bandwidth: RBF length scale. How far a result at one k is believed to
  carry over to nearby k (small = exploit locally, large = explore).
- noise: Variance added to the kernel diagonal. Models the run-to-run
  variance of k-means at the same k.
"""

from typing import Sequence, Tuple

import numpy as np
from scipy.stats import norm
from sklearn.gaussian_process import GaussianProcessRegressor
from sklearn.gaussian_process.kernels import RBF


class GaussianProcessSurrogate:
    """Posterior estimate of clustering quality as a function of k.

    Attributes:
        bandwidth: Kernel length scale (> 0).
        noise: Observation noise variance (>= 0).
    """

    def __init__(self, bandwidth: float, noise: float):
        self.bandwidth = bandwidth
        self.noise = noise
        self._model = None

    def fit(self, ks: Sequence[float], qualities: Sequence[float]) -> "GaussianProcessSurrogate":
        """Condition the process on observed (k, quality) pairs.

        Raises:
            numpy.linalg.LinAlgError: If the kernel matrix is singular
                (e.g. repeated k with zero noise).
        """
        model = GaussianProcessRegressor(
            kernel=RBF(length_scale=self.bandwidth, length_scale_bounds="fixed"),
            alpha=self.noise,
            optimizer=None,
            normalize_y=True,
        )
        model.fit(np.asarray(ks, dtype=np.float64).reshape(-1, 1), np.asarray(qualities, dtype=np.float64))
        self._model = model
        return self

    def predict(self, ks) -> Tuple[np.ndarray, np.ndarray]:
        """Posterior mean and standard deviation at the given k values."""
        if self._model is None:
            raise RuntimeError("GaussianProcessSurrogate.fit() must be called before predict().")
        points = np.asarray(ks, dtype=np.float64).reshape(-1, 1)
        mean, std = self._model.predict(points, return_std=True)
        return mean, std

    def expected_improvement(self, ks, best: float, xi: float = 0.0) -> np.ndarray:
        """Expected improvement over the best observed quality.

        EI(k) = (mu - best - xi) * Phi(z) + sigma * phi(z),
        z = (mu - best - xi) / sigma

        Args:
            ks: Points to evaluate.
            best: Best quality observed so far.
            xi: Exploration margin.

        Returns:
            Non-negative EI per point (0 where sigma is 0 and mu <= best).
        """
        mean, std = self.predict(ks)
        improvement = mean - best - xi
        with np.errstate(divide="ignore", invalid="ignore"):
            z = np.where(std > 0, improvement / std, 0.0)
        ei = improvement * norm.cdf(z) + std * norm.pdf(z)
        return np.where(std > 0, ei, np.maximum(improvement, 0.0))
