"""Spectral clustering with a Bayesian search for the number of clusters.

The similarity matrix is treated as a weighted graph. For a candidate k the
rows of the spectral embedding are clustered with k-means and the resulting
partition is scored by its modularity on the graph. The number of clusters
is unknown, so k is searched with Bayesian optimization:

1. min_runs exploratory runs at k spread over [1, n] (run in parallel)
2. Until max_runs: fit the GP on all runs, maximize expected improvement,
   run k-means at the proposed k
3. Return the partition of the best run

If the surrogate or the acquisition optimizer fails numerically, the
search stops and the best run so far is returned.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from ...core.base import BaseClusteringAlgorithm
from ...core.errors import ClusteringConfigurationError
from ...core.metrics import compute_modularity
from .gaussian_process import GaussianProcessSurrogate
from .kmeans import run_kmeans
from .laplacian import SpectralEmbedding
from .optimization import Observation, ObservationLog, initial_candidates, propose_next_k

logger = logging.getLogger(__name__)


class SpectralAlgorithm(BaseClusteringAlgorithm):
    """Spectral clustering whose k is chosen by Bayesian optimization.

    Attributes:
        bandwidth: GP length scale over k (> 0).
        noise: GP observation noise variance (>= 0).
        min_runs: Exploratory runs seeding the GP (>= 1).
        max_runs: Total run budget (>= min_runs).
        kmeans_iterations: Lloyd iteration cap per run (>= 1).
        seed: Base seed. Run t uses seed + t.
        workers: Threads evaluating k-means runs (>= 1).
        restarts: Random L-BFGS-B starting points per proposal.
    """

    name = "spectral"

    def __init__(
        self,
        bandwidth: float = 20.0,
        noise: float = 0.05 ** 2,
        min_runs: int = 5,
        max_runs: int = 50,
        kmeans_iterations: int = 200,
        seed: int = 42,
        workers: int = 1,
        restarts: int = 5,
    ):
        """Initialize the algorithm.

        Raises:
            ClusteringConfigurationError: If a parameter is out of range.
        """
        if bandwidth <= 0:
            raise ClusteringConfigurationError(f"spectral bandwidth must be > 0, got {bandwidth}")
        if noise < 0:
            raise ClusteringConfigurationError(f"spectral noise must be >= 0, got {noise}")
        if min_runs < 1:
            raise ClusteringConfigurationError(f"spectral min_runs must be >= 1, got {min_runs}")
        if max_runs < min_runs:
            raise ClusteringConfigurationError(
                f"spectral max_runs ({max_runs}) must be >= min_runs ({min_runs})"
            )
        if kmeans_iterations < 1:
            raise ClusteringConfigurationError(
                f"spectral kmeans_iterations must be >= 1, got {kmeans_iterations}"
            )
        if workers < 1:
            raise ClusteringConfigurationError(f"spectral workers must be >= 1, got {workers}")

        self.bandwidth = bandwidth
        self.noise = noise
        self.min_runs = min_runs
        self.max_runs = max_runs
        self.kmeans_iterations = kmeans_iterations
        self.seed = seed
        self.workers = workers
        self.restarts = restarts

    def _evaluate(self, similarity, embedding, k, run):
        labels = run_kmeans(embedding.embed(k), k, self.kmeans_iterations, self.seed + run)
        quality = compute_modularity(similarity, labels)
        logger.debug("Spectral run %d: k=%d modularity=%.4f", run, k, quality)
        return Observation(k=k, quality=quality, labels=labels)

    def cluster(self, similarity: np.ndarray) -> np.ndarray:
        """Cluster the rows of a similarity matrix.

        Rows with no similarity to any other row have zero degree. Their
        embedding is the zero vector and modularity ignores them, so they are
        kept out of the search and each receives its own singleton label.
        """
        n = similarity.shape[0]
        adjacency = similarity.copy()
        np.fill_diagonal(adjacency, 0.0)
        connected = np.flatnonzero((adjacency != 0).any(axis=1))

        labels = np.empty(n, dtype=np.int64)
        next_label = 0
        if connected.size > 0:
            inner = self._search(similarity[np.ix_(connected, connected)])
            labels[connected] = inner
            next_label = int(inner.max()) + 1

        isolated = np.setdiff1d(np.arange(n), connected)
        labels[isolated] = next_label + np.arange(isolated.size)
        if isolated.size:
            logger.debug("Spectral: %d of %d submissions have no similar peers", isolated.size, n)
        return labels

    def _search(self, similarity: np.ndarray) -> np.ndarray:
        n = similarity.shape[0]
        if n < 2:
            return np.arange(n)

        embedding = SpectralEmbedding(similarity)
        log = ObservationLog()
        rng = np.random.default_rng(self.seed)

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                executor.submit(self._evaluate, similarity, embedding, k, run)
                for run, k in enumerate(initial_candidates(n, self.min_runs))
            ]
            # Collected in submission order, independent of thread timing
            for future in futures:
                log.add(future.result())

            surrogate = GaussianProcessSurrogate(self.bandwidth, self.noise)
            while len(log) < self.max_runs:
                try:
                    k, ei = propose_next_k(log, surrogate, n, rng, restarts=self.restarts)
                except (np.linalg.LinAlgError, ValueError) as e:
                    logger.warning(
                        "Spectral k search stopped after %d runs, using best run so far: %s",
                        len(log), e,
                    )
                    break
                run = len(log)
                logger.debug("Proposed k=%d (expected improvement %.4g)", k, ei)
                log.add(executor.submit(self._evaluate, similarity, embedding, k, run).result())

        best = log.best()
        logger.info(
            "Spectral clustering: %d runs, best k=%d (modularity=%.4f)",
            len(log), best.k, best.quality,
        )
        return best.labels

    def __repr__(self) -> str:
        return (
            f"SpectralAlgorithm(bandwidth={self.bandwidth}, noise={self.noise}, "
            f"min_runs={self.min_runs}, max_runs={self.max_runs}, "
            f"kmeans_iterations={self.kmeans_iterations}, seed={self.seed})"
        )
