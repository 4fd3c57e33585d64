"""Core metrics for submission similarity and partition quality.

This module contains:
- Similarity metrics (avg, max, min, intersection) over token set sizes
- compute_similarity(): Metric lookup and evaluation
- compute_modularity(): Community strength of a partition on a weighted graph
"""

from typing import Callable, Dict

import numpy as np

from .errors import ClusteringConfigurationError


def average_similarity(first_size: int, second_size: int, matched_size: int) -> float:
    """AVG = 2 * |A n B| / (|A| + |B|)."""
    total = first_size + second_size
    if total == 0:
        raise ClusteringConfigurationError(
            "Average similarity is undefined for two empty submissions."
        )
    return 2.0 * matched_size / total


def maximum_similarity(first_size: int, second_size: int, matched_size: int) -> float:
    """MAX = |A n B| / min(|A|, |B|)."""
    smaller = min(first_size, second_size)
    if smaller == 0:
        raise ClusteringConfigurationError(
            "Maximum similarity is undefined when a submission is empty."
        )
    return matched_size / smaller


def minimum_similarity(first_size: int, second_size: int, matched_size: int) -> float:
    """MIN = |A n B| / max(|A|, |B|)."""
    larger = max(first_size, second_size)
    if min(first_size, second_size) == 0:
        raise ClusteringConfigurationError(
            "Minimum similarity is undefined when a submission is empty."
        )
    return matched_size / larger


def intersection_similarity(first_size: int, second_size: int, matched_size: int) -> float:
    """INTERSECTION = |A n B|. Not bounded to [0, 1]."""
    return float(matched_size)


# Registry of available similarity metrics
METRIC_REGISTRY: Dict[str, Callable[[int, int, int], float]] = {
    "avg": average_similarity,
    "max": maximum_similarity,
    "min": minimum_similarity,
    "intersection": intersection_similarity,
}


def get_metric(name: str) -> Callable[[int, int, int], float]:
    """Look up a similarity metric by name (case-insensitive).

    Raises:
        ClusteringConfigurationError: If the metric is unknown.
    """
    key = str(name).lower()
    if key not in METRIC_REGISTRY:
        raise ClusteringConfigurationError(
            f"Unknown metric '{name}'. Available: {list(METRIC_REGISTRY.keys())}"
        )
    return METRIC_REGISTRY[key]


def compute_similarity(
    metric: str,
    first_size: int,
    second_size: int,
    matched_size: int,
) -> float:
    """Evaluate a similarity metric for one submission pair.

    Args:
        metric: Metric name (avg, max, min, intersection).
        first_size: Token count of the first submission.
        second_size: Token count of the second submission.
        matched_size: Token count of their matched intersection.

    Returns:
        Similarity value. In [0, 1] for avg/max/min on sane inputs.

    Raises:
        ClusteringConfigurationError: Unknown metric, or a denominator of 0.
    """
    return get_metric(metric)(first_size, second_size, matched_size)


def compute_modularity(similarity: np.ndarray, labels: np.ndarray) -> float:
    """Compute the modularity (community strength) of a partition.

    Q = sum_c [ W_cc / 2m - (d_c / 2m)^2 ]

    where W_cc is the total edge weight inside community c (both directions),
    d_c the summed degree of its members and 2m the total weight of the
    graph. The diagonal of the matrix is ignored.

    Args:
        similarity: Symmetric (n, n) weight matrix.
        labels: Community label for each row.

    Returns:
        Modularity in [-0.5, 1]. 0.0 for a graph without edges.
    """
    weights = np.array(similarity, dtype=np.float64)
    np.fill_diagonal(weights, 0.0)
    total = weights.sum()
    if total <= 0:
        return 0.0

    degrees = weights.sum(axis=1)
    modularity = 0.0
    for label in np.unique(labels):
        members = np.flatnonzero(labels == label)
        inner = weights[np.ix_(members, members)].sum()
        modularity += inner / total - (degrees[members].sum() / total) ** 2
    return float(modularity)
