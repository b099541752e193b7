"""
Model interface shared by the k-means variants.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np
from sklearn.utils import check_array, check_random_state

from .engine import compute_inertia, euclidean_distances, fit_clusters, nearest_centroid
from .exceptions import DimensionMismatchError, PredictShapeError, ShapeMismatchError

logger = logging.getLogger(__name__)


class ClusterModel(ABC):
    """What a trained clustering model offers to its callers."""

    @abstractmethod
    def fit(self, X) -> np.ndarray:
        """Train on X and return one cluster label per row."""

    @abstractmethod
    def predict(self, X) -> np.ndarray:
        """Return the cluster label of every row of X."""

    @property
    @abstractmethod
    def dim(self) -> int:
        """Number of features seen by the last fit, 0 if never fitted."""

    @property
    @abstractmethod
    def centroids(self) -> np.ndarray:
        """Copy of the trained centroid matrix."""


class BaseKMeans(ClusterModel):
    """
    K-means model running Lloyd's algorithm from a generated initial labelling.

    Subclasses only decide how the initial labels are drawn by implementing
    ``_init_labels``. Clusters that end up empty during fitting are dropped
    from the centroid matrix, so ``centroids`` may have fewer than
    ``n_clusters`` rows and labels always index into ``centroids``.

    A model instance is not safe to share between threads without locking.
    """

    def __init__(
        self,
        n_clusters: int,
        max_iter: int,
        random_state: Optional[Union[int, np.random.RandomState]] = None,
    ):
        """
        Initialize the model.

        Args:
            n_clusters: Number of clusters
            max_iter: Maximum number of Lloyd iterations per fit
            random_state: Seed or RandomState for the initial labelling,
                None to use numpy's global generator
        """
        if not isinstance(n_clusters, (int, np.integer)) or n_clusters < 1:
            raise ValueError(f"n_clusters must be a positive integer, got {n_clusters!r}")
        if not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
            raise ValueError(f"max_iter must be a positive integer, got {max_iter!r}")

        self._n_clusters = int(n_clusters)
        self._max_iter = int(max_iter)
        self.random_state = random_state

        self._n_features = 0
        self._centroids = np.zeros((0, 0))

        # Results
        self.labels_ = None
        self.inertia_ = None
        self.n_iter_ = None

    @property
    def n_clusters(self) -> int:
        return self._n_clusters

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @property
    def dim(self) -> int:
        return self._n_features

    def get_dim(self) -> int:
        """Number of features seen by the last fit."""
        return self._n_features

    @property
    def centroids(self) -> np.ndarray:
        return self._centroids.copy()

    @abstractmethod
    def _init_labels(self, X: np.ndarray, rng: np.random.RandomState) -> np.ndarray:
        """Starting cluster index in [0, n_clusters) for every row of X."""

    def fit(self, X) -> np.ndarray:
        """
        Fit the model to the data.

        Args:
            X: Input data of shape (n_samples, n_features)

        Returns:
            Cluster label of every sample
        """
        X = check_array(X, dtype=np.float64)
        rng = check_random_state(self.random_state)

        logger.info(
            "Fitting %s with %d clusters on %d samples of %d features",
            type(self).__name__, self._n_clusters, X.shape[0], X.shape[1],
        )

        initial_labels = self._init_labels(X, rng)
        labels, centroids, n_iter = fit_clusters(
            X, initial_labels, self._n_clusters, self._max_iter, return_n_iter=True
        )
        inertia = compute_inertia(X, labels, centroids)

        # Trained state only changes once the whole fit has succeeded
        self._n_features = X.shape[1]
        self._centroids = centroids
        self.labels_ = labels
        self.inertia_ = inertia
        self.n_iter_ = n_iter

        if len(centroids) < self._n_clusters:
            logger.warning(
                "Fit ended with %d non-empty clusters out of %d requested",
                len(centroids), self._n_clusters,
            )
        logger.info("Finished after %d iterations, inertia %.4f", n_iter, self.inertia_)

        return labels

    def fit_predict(self, X) -> np.ndarray:
        """Fit the model and return the training labels."""
        return self.fit(X)

    def predict(self, X) -> np.ndarray:
        """
        Predict cluster labels for new data.

        Args:
            X: Input data of shape (n_samples, n_features)

        Returns:
            Index of the nearest trained centroid for every sample
        """
        X = check_array(X, dtype=np.float64, ensure_min_samples=0)
        if X.shape[1] != self._n_features:
            raise DimensionMismatchError(X.shape[1], self._n_features)

        try:
            return nearest_centroid(euclidean_distances(X, self._centroids))
        except ShapeMismatchError as e:
            raise PredictShapeError(str(e)) from e

    def get_cluster_info(self) -> dict:
        """Get information about the clustering results."""
        if self.labels_ is None:
            raise ValueError("Model must be fitted first")

        cluster_sizes = np.bincount(self.labels_, minlength=len(self._centroids))

        return {
            'n_clusters': self._n_clusters,
            'n_centroids': len(self._centroids),
            'inertia': self.inertia_,
            'n_iterations': self.n_iter_,
            'cluster_sizes': dict(enumerate(cluster_sizes.tolist())),
            'avg_cluster_size': float(np.mean(cluster_sizes)),
            'std_cluster_size': float(np.std(cluster_sizes)),
            'min_cluster_size': int(np.min(cluster_sizes)),
            'max_cluster_size': int(np.max(cluster_sizes)),
        }
