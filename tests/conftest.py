"""Shared fixtures for the clustering tests."""

import numpy as np
import pytest


@pytest.fixture
def two_pairs_matrix():
    """Submissions {0, 1} and {2, 3} are near-copies of each other."""
    similarity = np.zeros((4, 4))
    for (i, j), value in {
        (0, 1): 0.9,
        (0, 2): 0.1,
        (0, 3): 0.05,
        (1, 2): 0.1,
        (1, 3): 0.05,
        (2, 3): 0.9,
    }.items():
        similarity[i, j] = similarity[j, i] = value
    return similarity


@pytest.fixture
def block_matrix():
    """Three dense groups of four plus three unrelated submissions."""
    rng = np.random.default_rng(7)
    n = 15
    similarity = rng.uniform(0.0, 0.1, size=(n, n))
    for start in (0, 4, 8):
        block = slice(start, start + 4)
        similarity[block, block] = rng.uniform(0.8, 0.95, size=(4, 4))
    similarity = (similarity + similarity.T) / 2
    np.fill_diagonal(similarity, 0.0)
    return similarity


@pytest.fixture
def random_matrix():
    rng = np.random.default_rng(3)
    similarity = rng.uniform(0.0, 1.0, size=(12, 12))
    similarity = (similarity + similarity.T) / 2
    np.fill_diagonal(similarity, 0.0)
    return similarity
