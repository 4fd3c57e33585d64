"""Single entry point of the clustering engine.

clusterize() wires the pipeline:
    comparisons -> similarity matrix -> (preprocessor ->) algorithm -> partition
    -> strength scoring -> ClusteringResult
"""

import logging
from typing import Iterable, Optional

import numpy as np

from .algorithms import create_algorithm
from .config import ClusteringOptions
from .core.types import ClusteringResult, SubmissionComparison
from .scoring import assemble_result
from .similarity import build_similarity_matrix

logger = logging.getLogger(__name__)


def is_degenerate(similarity: np.ndarray) -> bool:
    """True when nothing can be clustered: fewer than 2 rows or no similarity."""
    if similarity.shape[0] < 2:
        return True
    off_diagonal = similarity[~np.eye(similarity.shape[0], dtype=bool)]
    return not np.any(off_diagonal != 0)


def clusterize(
    comparisons: Iterable[SubmissionComparison],
    options: Optional[ClusteringOptions] = None,
) -> ClusteringResult:
    """Cluster submissions by their pairwise similarities.

    Args:
        comparisons: Comparison records from the comparison stage.
        options: Clustering configuration. Defaults to ClusteringOptions().

    Returns:
        ClusteringResult, empty when clustering is disabled or the input is
        degenerate.

    Raises:
        ClusteringConfigurationError: Invalid options or unusable metric input.
        InconsistentSimilarityError: Conflicting similarities for one pair.
    """
    if options is None:
        options = ClusteringOptions()
    if not options.enabled:
        logger.debug("Clustering disabled, returning empty result")
        return ClusteringResult.empty()

    algorithm = create_algorithm(options)
    similarity, index = build_similarity_matrix(comparisons, options.metric)
    if is_degenerate(similarity):
        logger.info("Nothing to cluster among %d submissions", len(index))
        return ClusteringResult.empty()

    labels = algorithm.cluster(similarity)
    result = assemble_result(
        labels,
        similarity,
        index,
        algorithm=options.algorithm,
        preprocessor=options.preprocessor,
    )
    logger.info(
        "Clustered %d submissions into %d clusters (%s, preprocessor=%s)",
        len(index), len(result), options.algorithm, options.preprocessor,
    )
    return result
