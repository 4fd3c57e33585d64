"""k-means on spectral embeddings.

Uses scikit-learn's KMeans restricted to Lloyd's iterations with a single
initialization, so the iteration cap and the seed fully determine a run.
"""

import numpy as np
from sklearn.cluster import KMeans


def run_kmeans(points: np.ndarray, k: int, max_iterations: int, seed: int) -> np.ndarray:
    """Cluster points into k groups.

    Args:
        points: (n, d) embedded rows.
        k: Number of clusters, 1 <= k <= n.
        max_iterations: Cap on Lloyd iterations.
        seed: Random state of the k-means++ initialization.

    Returns:
        Integer label per row.
    """
    if k <= 1:
        return np.zeros(points.shape[0], dtype=np.int64)

    kmeans = KMeans(
        n_clusters=k,
        init="k-means++",
        n_init=1,
        max_iter=max_iterations,
        algorithm="lloyd",
        random_state=seed,
    )
    return kmeans.fit_predict(points).astype(np.int64)
