"""Similarity-matrix clustering of analyzed submissions.

This package groups submissions into clusters of mutually similar items:
- core: Shared base classes, types, metrics and errors
- similarity: Similarity matrix construction
- preprocessors: Matrix transforms applied before clustering
- algorithms: Agglomerative and spectral clustering
- scoring: Cluster strength and result assembly
- orchestrator: clusterize() entry point

Example usage:
    from submission_clustering import ClusteringOptions, SubmissionComparison, clusterize

    result = clusterize(comparisons, ClusteringOptions(algorithm="agglomerative"))
    for cluster in result:
        print(sorted(cluster.members), cluster.strength)
"""

from .config import ClusteringOptions, PRESETS, get_preset
from .core import (
    SubmissionComparison,
    SubmissionIndex,
    Cluster,
    ClusteringResult,
    ClusteringError,
    ClusteringConfigurationError,
    InconsistentSimilarityError,
)
from .orchestrator import clusterize

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "clusterize",
    # Configuration
    "ClusteringOptions",
    "PRESETS",
    "get_preset",
    # Types
    "SubmissionComparison",
    "SubmissionIndex",
    "Cluster",
    "ClusteringResult",
    # Errors
    "ClusteringError",
    "ClusteringConfigurationError",
    "InconsistentSimilarityError",
]
