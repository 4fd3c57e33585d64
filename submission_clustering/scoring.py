"""Cluster strength scoring and result assembly.

Strength of a cluster C on the original similarity matrix S:

    strength(C) = mean(S[i, j] for i != j in C) - mean(S[i, o] for i in C, o not in C)

The second term is 0 when C contains every submission. Scores are always
computed on the unpreprocessed matrix, so they compare across algorithm
and preprocessor choices.
"""

from typing import Optional

import numpy as np

from .core.metrics import compute_modularity
from .core.types import Cluster, ClusteringResult, SubmissionIndex


def cluster_strength(similarity: np.ndarray, members: np.ndarray) -> float:
    """Mean intra-cluster similarity minus mean similarity to non-members.

    Args:
        similarity: Original (n, n) similarity matrix.
        members: Row indices of the cluster (at least two).

    Returns:
        Strength score. Higher means more suspicious.
    """
    return average_intra_similarity(similarity, members) - average_boundary_similarity(similarity, members)


def average_intra_similarity(similarity: np.ndarray, members: np.ndarray) -> float:
    """Mean similarity over all ordered member pairs, diagonal excluded."""
    size = len(members)
    if size < 2:
        return 0.0
    block = similarity[np.ix_(members, members)]
    return float((block.sum() - np.trace(block)) / (size * (size - 1)))


def average_boundary_similarity(similarity: np.ndarray, members: np.ndarray) -> float:
    """Mean similarity between members and every non-member."""
    outsiders = np.setdiff1d(np.arange(similarity.shape[0]), members)
    if outsiders.size == 0:
        return 0.0
    return float(similarity[np.ix_(members, outsiders)].mean())


def assemble_result(
    labels: np.ndarray,
    similarity: np.ndarray,
    index: SubmissionIndex,
    algorithm: Optional[str] = None,
    preprocessor: Optional[str] = None,
) -> ClusteringResult:
    """Turn a partition into a scored, ordered ClusteringResult.

    Singleton clusters and clusters whose members share no similarity are
    dropped. The remaining clusters are sorted by descending strength (ties
    by smallest member row).

    Args:
        labels: Cluster label per submission row.
        similarity: Original (unpreprocessed) similarity matrix.
        index: Row to submission id mapping.
        algorithm: Name recorded in the result.
        preprocessor: Name recorded in the result.

    Returns:
        ClusteringResult.
    """
    labels = np.asarray(labels)
    clusters = []
    for label in np.unique(labels):
        members = np.flatnonzero(labels == label)
        if members.size < 2:
            continue
        intra = average_intra_similarity(similarity, members)
        if intra <= 0:
            continue
        strength = intra - average_boundary_similarity(similarity, members)
        clusters.append(
            (
                -strength,
                int(members[0]),
                Cluster(
                    members=frozenset(index.id_of(i) for i in members),
                    indices=frozenset(int(i) for i in members),
                    strength=float(strength),
                    average_similarity=intra,
                ),
            )
        )

    clusters.sort(key=lambda entry: (entry[0], entry[1]))
    return ClusteringResult(
        clusters=tuple(cluster for _, _, cluster in clusters),
        community_strength=compute_modularity(similarity, labels) if clusters else 0.0,
        algorithm=algorithm,
        preprocessor=preprocessor,
    )
