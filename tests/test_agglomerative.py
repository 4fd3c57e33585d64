"""
Tests for agglomerative clustering.
"""

import numpy as np
import pytest

from submission_clustering.algorithms import AgglomerativeAlgorithm
from submission_clustering.core.errors import ClusteringConfigurationError


def _groups(labels):
    return sorted(sorted(np.flatnonzero(labels == label).tolist()) for label in np.unique(labels))


class TestAgglomerativeClustering:
    """Test merge behavior."""

    def test_two_pairs_average_linkage(self, two_pairs_matrix):
        labels = AgglomerativeAlgorithm(threshold=0.5, linkage="average").cluster(two_pairs_matrix)
        assert _groups(labels) == [[0, 1], [2, 3]]

    def test_low_threshold_merges_everything(self, two_pairs_matrix):
        labels = AgglomerativeAlgorithm(threshold=0.0, linkage="max").cluster(two_pairs_matrix)
        assert _groups(labels) == [[0, 1, 2, 3]]

    def test_threshold_one_keeps_singletons(self, two_pairs_matrix):
        labels = AgglomerativeAlgorithm(threshold=1.0).cluster(two_pairs_matrix)
        assert _groups(labels) == [[0], [1], [2], [3]]

    def test_similarity_equal_to_threshold_not_merged(self):
        similarity = np.array([[0.0, 0.5], [0.5, 0.0]])
        labels = AgglomerativeAlgorithm(threshold=0.5).cluster(similarity)
        assert _groups(labels) == [[0], [1]]

    @pytest.mark.parametrize(
        "linkage, expected",
        [
            ("min", [[0, 1], [2]]),
            ("max", [[0, 1, 2]]),
            ("average", [[0, 1], [2]]),
        ],
    )
    def test_linkage_rules(self, linkage, expected):
        similarity = np.array([
            [0.0, 0.9, 0.6],
            [0.9, 0.0, 0.2],
            [0.6, 0.2, 0.0],
        ])
        labels = AgglomerativeAlgorithm(threshold=0.5, linkage=linkage).cluster(similarity)
        assert _groups(labels) == expected

    def test_average_linkage_weights_by_size(self):
        # {0, 1, 2} vs 3: mean of 0.9, 0.9, 0.0 = 0.6 (not the 0.45 of a pairwise mean)
        similarity = np.array([
            [0.0, 1.0, 1.0, 0.9],
            [1.0, 0.0, 1.0, 0.9],
            [1.0, 1.0, 0.0, 0.0],
            [0.9, 0.9, 0.0, 0.0],
        ])
        labels = AgglomerativeAlgorithm(threshold=0.55, linkage="average").cluster(similarity)
        assert _groups(labels) == [[0, 1, 2, 3]]

    def test_tie_broken_by_lowest_pair(self):
        similarity = np.array([
            [0.0, 0.8, 0.0],
            [0.8, 0.0, 0.8],
            [0.0, 0.8, 0.0],
        ])
        labels = AgglomerativeAlgorithm(threshold=0.5, linkage="min").cluster(similarity)
        assert _groups(labels) == [[0, 1], [2]]

    def test_deterministic(self, random_matrix):
        algorithm = AgglomerativeAlgorithm(threshold=0.4, linkage="average")
        np.testing.assert_array_equal(algorithm.cluster(random_matrix), algorithm.cluster(random_matrix))

    @pytest.mark.parametrize("linkage", ["min", "max", "average"])
    def test_raising_threshold_refines_partition(self, linkage, random_matrix):
        previous = None
        for threshold in np.linspace(0.0, 1.0, 11):
            labels = AgglomerativeAlgorithm(threshold=threshold, linkage=linkage).cluster(random_matrix)
            groups = _groups(labels)
            if previous is not None:
                assert len(groups) >= len(previous)
                for group in groups:
                    assert any(set(group) <= set(parent) for parent in previous)
            previous = groups

    def test_input_not_mutated(self, random_matrix):
        original = random_matrix.copy()
        AgglomerativeAlgorithm(threshold=0.3).cluster(random_matrix)
        np.testing.assert_array_equal(random_matrix, original)

    def test_labels_cover_every_submission(self, block_matrix):
        labels = AgglomerativeAlgorithm(threshold=0.5).cluster(block_matrix)
        assert labels.shape == (block_matrix.shape[0],)
        assert labels.min() >= 0

    def test_single_submission(self):
        labels = AgglomerativeAlgorithm().cluster(np.zeros((1, 1)))
        np.testing.assert_array_equal(labels, [0])


class TestAgglomerativeConfiguration:
    """Test parameter validation."""

    @pytest.mark.parametrize("threshold", [-0.01, 1.01])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(ClusteringConfigurationError):
            AgglomerativeAlgorithm(threshold=threshold)

    def test_unknown_linkage(self):
        with pytest.raises(ClusteringConfigurationError, match="Unknown linkage"):
            AgglomerativeAlgorithm(linkage="ward")

    def test_linkage_case_insensitive(self):
        assert AgglomerativeAlgorithm(linkage="AVERAGE").linkage == "average"
