"""Core module: Shared base classes, types, metrics and errors.

This module provides foundational components used across the codebase:
- Base classes (BaseClusteringAlgorithm, BasePreprocessor)
- Shared types (SubmissionComparison, SubmissionIndex, Cluster, ClusteringResult)
- Core metrics (similarity metrics, modularity)
- Errors (ClusteringConfigurationError, InconsistentSimilarityError)

Example usage:
    from submission_clustering.core.base import BaseClusteringAlgorithm
    from submission_clustering.core.types import SubmissionComparison
    from submission_clustering.core.metrics import compute_similarity
"""

# Base classes
from .base import (
    BaseClusteringAlgorithm,
    BasePreprocessor,
)

# Types
from .types import (
    SubmissionComparison,
    SubmissionIndex,
    Cluster,
    ClusteringResult,
)

# Metrics
from .metrics import (
    METRIC_REGISTRY,
    compute_similarity,
    compute_modularity,
)

# Errors
from .errors import (
    ClusteringError,
    ClusteringConfigurationError,
    InconsistentSimilarityError,
)

__all__ = [
    # Base classes
    "BaseClusteringAlgorithm",
    "BasePreprocessor",
    # Types
    "SubmissionComparison",
    "SubmissionIndex",
    "Cluster",
    "ClusteringResult",
    # Metrics
    "METRIC_REGISTRY",
    "compute_similarity",
    "compute_modularity",
    # Errors
    "ClusteringError",
    "ClusteringConfigurationError",
    "InconsistentSimilarityError",
]
