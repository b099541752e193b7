"""
K-means clustering models.
The variants differ only in how the initial labelling is generated.
"""

import numpy as np

from .base import BaseKMeans
from .engine import euclidean_distances, nearest_centroid


class KMeans(BaseKMeans):
    """
    K-means clustering started from a uniformly random labelling.

    Example:
        >>> km = KMeans(n_clusters=4, max_iter=50, random_state=0)
        >>> labels = km.fit(X)
        >>> km.predict(X_new)
    """

    def _init_labels(self, X: np.ndarray, rng: np.random.RandomState) -> np.ndarray:
        """Draw every label independently and uniformly from [0, n_clusters)."""
        return rng.randint(0, self.n_clusters, size=X.shape[0])


class KMeansPlusPlus(BaseKMeans):
    """
    K-means clustering started from k-means++ seeds.

    The seeds only serve to build the initial labelling (each sample takes
    the label of its nearest seed); the Lloyd iteration then proceeds as
    for ``KMeans``.
    """

    def _init_labels(self, X: np.ndarray, rng: np.random.RandomState) -> np.ndarray:
        seeds = self._kmeans_plus_plus_seeds(X, rng)
        return nearest_centroid(euclidean_distances(X, seeds))

    def _kmeans_plus_plus_seeds(self, X: np.ndarray, rng: np.random.RandomState) -> np.ndarray:
        """Pick n_clusters rows, each with probability proportional to D(x)^2."""
        n_samples, n_features = X.shape
        seeds = np.zeros((self.n_clusters, n_features))

        # Choose first seed randomly
        seeds[0] = X[rng.randint(n_samples)]

        for c_id in range(1, self.n_clusters):
            distances = euclidean_distances(X, seeds[:c_id])  # (c_id, n_samples)
            min_distances_squared = np.min(distances, axis=0) ** 2
            total = min_distances_squared.sum()

            if total == 0:
                # Every sample coincides with a seed
                seeds[c_id] = X[rng.randint(n_samples)]
                continue

            cumulative_probs = np.cumsum(min_distances_squared / total)
            next_idx = np.searchsorted(cumulative_probs, rng.rand())
            seeds[c_id] = X[min(next_idx, n_samples - 1)]

        return seeds
