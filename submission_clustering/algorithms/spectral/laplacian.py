"""Spectral embedding of a similarity graph.

The embedding for k clusters is made of the eigenvectors belonging to the
k smallest eigenvalues of the symmetric normalized Laplacian

    L = I - D^(-1/2) W D^(-1/2)

with each row scaled to unit length (Ng, Jordan & Weiss, 2001).
"""

import numpy as np


class SpectralEmbedding:
    """Eigendecomposition of a graph Laplacian, computed once per matrix.

    Embeddings for any number of clusters are slices of the same
    eigenvector basis, so the search over k never repeats the
    decomposition.

    Attributes:
        eigenvalues: Laplacian eigenvalues in ascending order.
        eigenvectors: Matching eigenvectors as columns.
    """

    def __init__(self, similarity: np.ndarray):
        weights = np.array(similarity, dtype=np.float64, copy=True)
        np.fill_diagonal(weights, 0.0)
        weights = np.clip(weights, 0.0, None)

        degrees = weights.sum(axis=1)
        # Isolated nodes keep an identity row in L
        inv_sqrt = np.zeros_like(degrees)
        connected = degrees > 0
        inv_sqrt[connected] = 1.0 / np.sqrt(degrees[connected])

        laplacian = np.eye(len(degrees)) - inv_sqrt[:, None] * weights * inv_sqrt[None, :]
        self.eigenvalues, self.eigenvectors = np.linalg.eigh(laplacian)

    def embed(self, k: int) -> np.ndarray:
        """Row-normalized embedding in k dimensions.

        Args:
            k: Number of eigenvectors, 1 <= k <= n.

        Returns:
            (n, k) array. Rows with zero norm stay zero.
        """
        vectors = self.eigenvectors[:, :k]
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        return np.divide(vectors, norms, out=np.zeros_like(vectors), where=norms > 0)
