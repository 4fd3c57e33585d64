"""
Tests for similarity matrix construction.
"""

import numpy as np
import pytest

from submission_clustering import SubmissionComparison, SubmissionIndex
from submission_clustering.core.errors import (
    ClusteringConfigurationError,
    InconsistentSimilarityError,
)
from submission_clustering.similarity import build_similarity_matrix


class TestBuildSimilarityMatrix:
    """Test matrix and index construction."""

    def test_first_seen_order_and_symmetry(self):
        comparisons = [
            SubmissionComparison("b", "a", 10, 10, 5),
            SubmissionComparison("a", "c", 10, 30, 10),
        ]
        similarity, index = build_similarity_matrix(comparisons, "avg")

        assert index.ids == ("b", "a", "c")
        assert similarity.shape == (3, 3)
        np.testing.assert_array_equal(similarity, similarity.T)
        assert similarity[index.index_of("a"), index.index_of("b")] == pytest.approx(0.5)
        assert similarity[index.index_of("a"), index.index_of("c")] == pytest.approx(0.5)

    def test_missing_pairs_are_zero(self):
        comparisons = [
            SubmissionComparison("a", "b", 10, 10, 8),
            SubmissionComparison("c", "d", 10, 10, 8),
        ]
        similarity, index = build_similarity_matrix(comparisons, "max")

        assert similarity[index.index_of("a"), index.index_of("c")] == 0.0
        assert similarity[index.index_of("b"), index.index_of("d")] == 0.0
        np.testing.assert_array_equal(np.diag(similarity), np.zeros(4))

    def test_metric_selection(self):
        comparisons = [SubmissionComparison("a", "b", 100, 50, 30)]
        for metric, expected in [("avg", 0.4), ("max", 0.6), ("min", 0.3), ("intersection", 30.0)]:
            similarity, _ = build_similarity_matrix(comparisons, metric)
            assert similarity[0, 1] == pytest.approx(expected)

    def test_pre_scored_similarity_wins(self):
        comparisons = [SubmissionComparison("a", "b", 100, 50, 30, similarity=0.77)]
        similarity, _ = build_similarity_matrix(comparisons, "avg")
        assert similarity[0, 1] == pytest.approx(0.77)

    def test_identical_duplicate_accepted(self):
        comparisons = [
            SubmissionComparison("a", "b", 10, 10, 5),
            SubmissionComparison("b", "a", 10, 10, 5),
        ]
        similarity, _ = build_similarity_matrix(comparisons, "avg")
        assert similarity[0, 1] == pytest.approx(0.5)

    def test_conflicting_duplicate_is_fatal(self):
        comparisons = [
            SubmissionComparison("a", "b", 10, 10, 5),
            SubmissionComparison("b", "a", 10, 10, 9),
        ]
        with pytest.raises(InconsistentSimilarityError) as excinfo:
            build_similarity_matrix(comparisons, "avg")
        assert excinfo.value.existing == pytest.approx(0.5)
        assert excinfo.value.conflicting == pytest.approx(0.9)

    def test_self_comparison_ignored(self):
        similarity, index = build_similarity_matrix(
            [
                SubmissionComparison("a", "a", 10, 10, 10),
                SubmissionComparison("a", "b", 10, 10, 5),
            ],
            "avg",
        )
        assert index.ids == ("a", "b")
        np.testing.assert_allclose(similarity, [[0.0, 0.5], [0.5, 0.0]])

    def test_empty_submission_rejected(self):
        with pytest.raises(ClusteringConfigurationError):
            build_similarity_matrix([SubmissionComparison("a", "b", 0, 10, 0)], "max")

    def test_unknown_metric_rejected_before_work(self):
        with pytest.raises(ClusteringConfigurationError):
            build_similarity_matrix([], "cosine")

    def test_no_comparisons(self):
        similarity, index = build_similarity_matrix([], "avg")
        assert similarity.shape == (0, 0)
        assert len(index) == 0


class TestSubmissionIndex:
    """Test the id/row bijection."""

    def test_lookup_both_ways(self):
        index = SubmissionIndex(["x", "y", "z"])
        assert index.index_of("y") == 1
        assert index.id_of(2) == "z"
        assert "x" in index
        assert list(index) == ["x", "y", "z"]

    def test_unknown_submission(self):
        with pytest.raises(KeyError):
            SubmissionIndex(["x"]).index_of("missing")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            SubmissionIndex(["x", "x"])

    def test_immutable(self):
        index = SubmissionIndex(["x"])
        with pytest.raises(AttributeError):
            index.foo = 1
