"""Bayesian optimization of the number of clusters.

The search state is an ObservationLog owned by the caller. Every step
fits a fresh GaussianProcessSurrogate on the log and maximizes expected
improvement with L-BFGS-B from several starting points.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from scipy.optimize import minimize

from .gaussian_process import GaussianProcessSurrogate


@dataclass
class Observation:
    """One evaluated k-means run."""
    k: int
    quality: float
    labels: np.ndarray

    def __repr__(self) -> str:
        return f"Observation(k={self.k}, quality={self.quality:.4f})"


@dataclass
class ObservationLog:
    """Accumulated (k, quality) observations of one search.

    Attributes:
        observations: Runs in evaluation order.
    """
    observations: List[Observation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.observations)

    def add(self, observation: Observation) -> None:
        self.observations.append(observation)

    @property
    def ks(self) -> np.ndarray:
        return np.array([o.k for o in self.observations], dtype=np.float64)

    @property
    def qualities(self) -> np.ndarray:
        return np.array([o.quality for o in self.observations], dtype=np.float64)

    def best(self) -> Optional[Observation]:
        """Highest-quality run (earliest one on ties), or None if empty."""
        if not self.observations:
            return None
        return self.observations[int(np.argmax(self.qualities))]


def initial_candidates(k_max: int, count: int) -> List[int]:
    """Exploratory k values evenly spread over [1, k_max].

    Values repeat when ``count`` exceeds the number of distinct k.
    """
    return [int(k) for k in np.rint(np.linspace(1, k_max, count))]


def propose_next_k(
    log: ObservationLog,
    surrogate: GaussianProcessSurrogate,
    k_max: int,
    rng: np.random.Generator,
    restarts: int = 5,
    max_iterations: int = 100,
) -> Tuple[int, float]:
    """Pick the next k by maximizing expected improvement.

    Args:
        log: Observations so far (at least one).
        surrogate: Surrogate to fit on the log.
        k_max: Upper bound of the search space.
        rng: Generator for the random restart points.
        restarts: Number of random L-BFGS-B starting points. The best
            observed k is always used as an extra starting point.
        max_iterations: Iteration cap for each L-BFGS-B run.

    Returns:
        Tuple of (next k, its expected improvement).

    Raises:
        numpy.linalg.LinAlgError: Singular kernel matrix.
        ValueError: No restart produced a finite optimum.
    """
    surrogate.fit(log.ks, log.qualities)
    best_quality = float(log.qualities.max())
    bounds = [(1.0, float(k_max))]

    def negative_ei(x):
        return -float(surrogate.expected_improvement(x, best_quality)[0])

    starts = list(rng.uniform(1.0, k_max, size=restarts))
    starts.append(float(log.best().k))

    best_x, best_value = None, np.inf
    for start in starts:
        result = minimize(
            negative_ei,
            x0=np.array([start]),
            method="L-BFGS-B",
            bounds=bounds,
            options={"maxiter": max_iterations},
        )
        if np.isfinite(result.fun) and np.all(np.isfinite(result.x)) and result.fun < best_value:
            best_x, best_value = float(result.x[0]), float(result.fun)

    if best_x is None:
        raise ValueError("Acquisition optimization did not produce a finite optimum.")

    k = int(np.clip(np.rint(best_x), 1, k_max))
    return k, -best_value
