"""Helpers shared by the test modules."""

from submission_clustering import SubmissionComparison


def comparisons_from_matrix(similarity, names=None):
    """Pre-scored comparison records for every upper-triangle pair."""
    n = similarity.shape[0]
    names = names or [f"s{i}" for i in range(n)]
    return [
        SubmissionComparison(names[i], names[j], 100, 100, 0, similarity=float(similarity[i, j]))
        for i in range(n)
        for j in range(i + 1, n)
    ]
