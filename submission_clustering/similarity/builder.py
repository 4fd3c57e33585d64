"""Similarity matrix construction from pairwise comparisons.

Converts the comparison records of the upstream comparison stage into a
dense symmetric matrix plus the SubmissionIndex that names its rows.
"""

import logging
from typing import Iterable, Tuple

import numpy as np

from ..core.errors import InconsistentSimilarityError
from ..core.metrics import compute_similarity, get_metric
from ..core.types import SubmissionComparison, SubmissionIndex

logger = logging.getLogger(__name__)


def _score(comparison: SubmissionComparison, metric: str) -> float:
    if comparison.similarity is not None:
        return float(comparison.similarity)
    return compute_similarity(
        metric,
        comparison.first_size,
        comparison.second_size,
        comparison.matched_size,
    )


def build_similarity_matrix(
    comparisons: Iterable[SubmissionComparison],
    metric: str = "avg",
) -> Tuple[np.ndarray, SubmissionIndex]:
    """Build the similarity matrix for a set of comparisons.

    Submissions are indexed in the order they are first seen. Pairs without
    a comparison record keep similarity 0. The diagonal is 0 and
    self-comparisons are ignored.

    Args:
        comparisons: Comparison records, one per analyzed pair.
        metric: Similarity metric used for records without a pre-scored value.

    Returns:
        similarity: (n, n) symmetric float64 matrix.
        index: SubmissionIndex mapping row numbers to submission ids.

    Raises:
        ClusteringConfigurationError: Unknown metric or empty submissions.
        InconsistentSimilarityError: A pair scored twice with different
            values.
    """
    get_metric(metric)

    records = list(comparisons)
    index = SubmissionIndex(
        dict.fromkeys(
            submission
            for comparison in records
            for submission in (comparison.first, comparison.second)
        )
    )
    n = len(index)
    similarity = np.zeros((n, n), dtype=np.float64)
    written = np.zeros((n, n), dtype=bool)

    for comparison in records:
        i = index.index_of(comparison.first)
        j = index.index_of(comparison.second)
        if i == j:
            logger.debug("Ignoring self-comparison of %r", comparison.first)
            continue

        value = _score(comparison, metric)
        if written[i, j]:
            if not np.isclose(similarity[i, j], value):
                raise InconsistentSimilarityError(
                    comparison.first, comparison.second, similarity[i, j], value
                )
            continue

        similarity[i, j] = similarity[j, i] = value
        written[i, j] = written[j, i] = True

    logger.debug(
        "Built %dx%d similarity matrix from %d comparisons (metric=%s)",
        n, n, len(records), metric,
    )
    return similarity, index
