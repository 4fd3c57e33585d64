"""Clustering algorithms.

Provides:
- ALGORITHM_REGISTRY: Mapping of algorithm names to classes
- create_algorithm(): Build the configured algorithm, wrapped by its
  preprocessor when one is selected
"""

from typing import Dict, Type

from ..core.base import BaseClusteringAlgorithm
from ..core.errors import ClusteringConfigurationError
from ..preprocessors import PreprocessedAlgorithm, create_preprocessor
from .agglomerative import AgglomerativeAlgorithm
from .spectral import SpectralAlgorithm


ALGORITHM_REGISTRY: Dict[str, Type[BaseClusteringAlgorithm]] = {
    "agglomerative": AgglomerativeAlgorithm,
    "spectral": SpectralAlgorithm,
}


def create_algorithm(options) -> BaseClusteringAlgorithm:
    """Create the algorithm described by a ClusteringOptions instance.

    Args:
        options: ClusteringOptions with algorithm and preprocessor settings.

    Returns:
        Configured algorithm. When the preprocessor is not "none", the
        algorithm is wrapped in a PreprocessedAlgorithm.

    Raises:
        ClusteringConfigurationError: If the algorithm is unknown.
    """
    algorithm_type = str(options.algorithm).lower()
    if algorithm_type not in ALGORITHM_REGISTRY:
        raise ClusteringConfigurationError(
            f"Unknown algorithm: {options.algorithm}. "
            f"Available: {list(ALGORITHM_REGISTRY.keys())}"
        )

    if algorithm_type == "agglomerative":
        algorithm = AgglomerativeAlgorithm(
            threshold=options.agglomerative_threshold,
            linkage=options.agglomerative_linkage,
        )
    else:
        algorithm = SpectralAlgorithm(
            bandwidth=options.spectral_bandwidth,
            noise=options.spectral_noise,
            min_runs=options.spectral_min_runs,
            max_runs=options.spectral_max_runs,
            kmeans_iterations=options.spectral_kmeans_iterations,
            seed=options.random_seed,
            workers=options.spectral_workers,
        )

    if str(options.preprocessor).lower() == "none":
        return algorithm

    preprocessor = create_preprocessor(
        options.preprocessor,
        percentile=options.preprocessor_percentile,
        threshold=options.preprocessor_threshold,
    )
    return PreprocessedAlgorithm(algorithm, preprocessor)


__all__ = [
    "BaseClusteringAlgorithm",
    "AgglomerativeAlgorithm",
    "SpectralAlgorithm",
    "ALGORITHM_REGISTRY",
    "create_algorithm",
]
